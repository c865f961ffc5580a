from __future__ import annotations
from dataclasses import dataclass
from typing import Optional
import os
import random

from dotenv import load_dotenv


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class EngineConfig:
    language: str = "en"
    stream_chunk_size: int = 5
    stream_delay: float = 0.0  # seconds between streamed slices; 0 = no pacing
    placeholder_distractor: str = "variable"
    seed: Optional[int] = None
    log_level: str = "WARNING"

    def __post_init__(self):
        if self.stream_chunk_size < 1:
            raise ConfigError("stream_chunk_size must be >= 1")
        if self.stream_delay < 0:
            raise ConfigError("stream_delay must be >= 0")

    def rng(self) -> random.Random:
        """Seeded source when a seed is set, otherwise system-seeded."""
        return random.Random(self.seed)

    @classmethod
    def from_env(cls, dotenv: bool = True) -> "EngineConfig":
        if dotenv:
            load_dotenv()
        seed = _env("STUDYKIT_SEED", int, None)
        return cls(
            language=os.environ.get("STUDYKIT_LANGUAGE", cls.language),
            stream_chunk_size=_env("STUDYKIT_STREAM_CHUNK_SIZE", int, cls.stream_chunk_size),
            stream_delay=_env("STUDYKIT_STREAM_DELAY", float, cls.stream_delay),
            placeholder_distractor=os.environ.get(
                "STUDYKIT_PLACEHOLDER", cls.placeholder_distractor
            ),
            seed=seed,
            log_level=os.environ.get("STUDYKIT_LOG_LEVEL", cls.log_level).upper(),
        )


def _env(name: str, cast, default):
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return cast(raw)
    except ValueError as e:
        raise ConfigError(f"{name}={raw!r} is not a valid {cast.__name__}") from e
