from __future__ import annotations
from math import ceil
from typing import List, Optional, Sequence
import random

import structlog

from .frequency import frequencies, score_sentence, top_keywords
from .lexicon import LanguageProfile, get_profile
from .models import Priority, StudyPlan, StudyPlanItem
from .segment import segment
from .text import capitalize

log = structlog.get_logger(__name__)

WEEKS = 4
TOPIC_KEYWORDS = 5
DESCRIPTION_LEN = 100
HOURS = (2, 5)
PRIORITIES = (Priority.HIGH, Priority.MEDIUM, Priority.HIGH, Priority.LOW)


def chunk_sentences(sentences: Sequence[str], parts: int = WEEKS) -> List[List[str]]:
    """Contiguous chunks of ceil(n/parts) sentences; the last chunk takes the rest."""
    chunks: List[List[str]] = [[] for _ in range(parts)]
    if not sentences:
        return chunks
    size = ceil(len(sentences) / parts)
    for i, s in enumerate(sentences):
        chunks[min(i // size, parts - 1)].append(s)
    return chunks


def _truncate(s: str, limit: int = DESCRIPTION_LEN) -> str:
    return s if len(s) <= limit else s[: limit - 3] + "..."


def _plan_item(
    idx: int, chunk: List[str], profile: LanguageProfile, rng: random.Random
) -> StudyPlanItem:
    chunk_text = " ".join(chunk)
    freq = frequencies(chunk_text, profile)
    keywords = top_keywords(freq, TOPIC_KEYWORDS)
    topic = capitalize(keywords[0]) if keywords else f"Section {idx + 1}"

    best = max(chunk, key=lambda s: score_sentence(s, freq, profile), default="")
    return StudyPlanItem(
        week=idx + 1,
        topic=topic,
        description=_truncate(best) if best else profile.t("plan_fallback"),
        estimated_hours=rng.randint(*HOURS),
        priority=PRIORITIES[idx % len(PRIORITIES)],
    )


def generate_study_plan(
    text: str,
    lang: str | LanguageProfile = "en",
    rng: Optional[random.Random] = None,
) -> StudyPlan:
    """
    Four weekly items, one per quarter of the document.

    Hours are random (2-5) and priorities follow a fixed High/Medium/High/Low
    pattern; neither looks at the content. Always returns exactly four items.
    """
    rng = rng or random.Random()
    profile = get_profile(lang)
    sentences = segment(text, profile)
    items = [
        _plan_item(i, chunk, profile, rng)
        for i, chunk in enumerate(chunk_sentences(sentences))
    ]
    log.debug("plan_generated", language=profile.tag, sentences=len(sentences))
    return StudyPlan(
        title=profile.t("plan_title"), goal=profile.t("plan_goal"), items=items
    )
