from __future__ import annotations
from collections import Counter
from dataclasses import dataclass
from typing import Dict, List, Mapping, Sequence, Tuple

from .lexicon import LanguageProfile, get_profile
from .segment import segment
from .text import tokenize

FrequencyMap = Dict[str, int]


def frequencies(text: str, lang: str | LanguageProfile = "en") -> FrequencyMap:
    # Counter keeps first-seen insertion order, which top_keywords relies on for ties
    return dict(Counter(tokenize(text, lang)))


def top_keywords(freq: Mapping[str, int], n: int = 20) -> List[str]:
    """The n most frequent tokens; ties keep first-seen order (sorted() is stable)."""
    if n <= 0:
        return []
    ranked = sorted(freq.items(), key=lambda kv: kv[1], reverse=True)
    return [w for w, _ in ranked[:n]]


def score_sentence(
    sentence: str, freq: Mapping[str, int], lang: str | LanguageProfile = "en"
) -> float:
    """Density: mean document frequency of the sentence's tokens (0.0 if it has none)."""
    tokens = tokenize(sentence, lang)
    if not tokens:
        return 0.0
    return sum(freq.get(t, 0) for t in tokens) / len(tokens)


def rank_sentences(
    sentences: Sequence[str], freq: Mapping[str, int], lang: str | LanguageProfile = "en"
) -> List[Tuple[int, str, float]]:
    """(original_index, sentence, score), best first; equal scores keep document order."""
    scored = [(i, s, score_sentence(s, freq, lang)) for i, s in enumerate(sentences)]
    return sorted(scored, key=lambda item: item[2], reverse=True)


@dataclass(frozen=True)
class Analysis:
    """Per-call intermediates shared by every generator: built once, read-only."""

    profile: LanguageProfile
    sentences: Tuple[str, ...]
    freq: Mapping[str, int]

    def keywords(self, n: int) -> List[str]:
        return top_keywords(self.freq, n)

    def ranked(self) -> List[Tuple[int, str, float]]:
        return rank_sentences(self.sentences, self.freq, self.profile)

    def tokens(self, sentence: str) -> List[str]:
        return tokenize(sentence, self.profile)


def analyze(text: str, lang: str | LanguageProfile = "en") -> Analysis:
    profile = get_profile(lang)
    return Analysis(
        profile=profile,
        sentences=tuple(segment(text, profile)),
        freq=frequencies(text, profile),
    )
