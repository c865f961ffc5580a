from __future__ import annotations
from types import MappingProxyType
from typing import Iterator, List, Optional
import re
import time

import structlog

from .config import EngineConfig
from .frequency import analyze, score_sentence
from .lexicon import LanguageProfile, get_profile
from .models import Document, Match
from .text import fmt, normalize, tokenize

log = structlog.get_logger(__name__)

SUBSTRING_BONUS = 0.5
TOP_MATCHES = 2

_GREETING = re.compile(r"\b(hello|hi|hey|hola|bonjour|salut|hallo|olá|oi)\b|你好", re.IGNORECASE)
_SUMMARY = re.compile(
    r"summary|summarize|explain|resumen|resumir|résumé|résumer|zusammenfassung|resumo|摘要|总结",
    re.IGNORECASE,
)


def stream_chunks(text: str, size: int = 5, delay: float = 0.0) -> Iterator[str]:
    """
    Yield `text` in fixed-size slices, in order; "".join() of the slices is `text`.
    `delay` seconds are slept before each slice. Closing the generator stops it.
    """
    if size < 1:
        raise ValueError("size must be >= 1")
    for i in range(0, len(text), size):
        if delay:
            time.sleep(delay)
        yield text[i : i + size]


def jaccard(a: frozenset, b: frozenset) -> float:
    union = len(a | b)
    return len(a & b) / union if union else 0.0


class ChatEngine:
    """
    Retrieval "chat" over one document.

    Sentences, their token sets and the frequency map are computed once in the
    constructor and never mutated, so one instance can serve concurrent queries.
    For a new document or language, build a new engine.
    """

    def __init__(
        self,
        text: str,
        lang: str | LanguageProfile = "en",
        config: Optional[EngineConfig] = None,
    ):
        self.profile = get_profile(lang)
        self.config = config or EngineConfig()
        self.document = Document(text=text, language=self.profile.tag)

        analysis = analyze(text, self.profile)
        self._sentences = analysis.sentences
        self._freq = MappingProxyType(dict(analysis.freq))
        self._token_sets = tuple(
            frozenset(tokenize(s, self.profile)) for s in self._sentences
        )
        log.debug("chat_engine_ready", language=self.profile.tag, sentences=len(self._sentences))

    @property
    def sentences(self):
        return self._sentences

    @property
    def welcome(self) -> str:
        return self.profile.t("chat_intro")

    def matches(self, query: str) -> List[Match]:
        """Sentences with a positive score, best first (ties keep document order)."""
        q_tokens = frozenset(tokenize(query, self.profile))
        needle = normalize(query).strip().lower()
        found = []
        for sentence, tokens in zip(self._sentences, self._token_sets):
            score = jaccard(tokens, q_tokens)
            if needle and needle in sentence.lower():
                score += SUBSTRING_BONUS
            if score > 0:
                found.append(Match(sentence=sentence, score=score))
        return sorted(found, key=lambda m: m.score, reverse=True)

    def _key_sentence(self) -> str:
        return max(
            self._sentences,
            key=lambda s: score_sentence(s, self._freq, self.profile),
            default="",
        )

    def reply(self, query: str) -> str:
        """The full answer for `query`; never empty, never raises."""
        t = self.profile.t
        if not tokenize(query, self.profile):
            return t("chat_catch")

        best = self.matches(query)
        if best:
            return fmt(t("chat_ref"), " ".join(m.sentence for m in best[:TOP_MATCHES]))

        if _GREETING.search(query):
            return t("chat_intro")
        if _SUMMARY.search(query):
            key = self._key_sentence()
            if key:
                return fmt(t("chat_suggest"), key)
        return t("chat_no_ref")

    def respond(self, query: str) -> Iterator[str]:
        """Stream reply(query) in config.stream_chunk_size slices."""
        return stream_chunks(
            self.reply(query),
            size=self.config.stream_chunk_size,
            delay=self.config.stream_delay,
        )


def create_chat_engine(
    text: str,
    lang: str | LanguageProfile = "en",
    config: Optional[EngineConfig] = None,
) -> ChatEngine:
    return ChatEngine(text, lang, config)
