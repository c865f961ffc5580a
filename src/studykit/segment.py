from __future__ import annotations
from typing import List
import re

from .lexicon import LanguageProfile, get_profile
from .text import normalize

MIN_SENTENCE = 20
MAX_SENTENCE = 500
MIN_SENTENCE_LOGOGRAPHIC = 5

_SPLIT = "\x00"
_LATIN_END = re.compile(r"([.!?])\s*(?=(\w))")
_LATIN_TERMINALS = re.compile(r"[.!?]")
_CJK_END = re.compile(r"([。！？])\s*")
_CJK_TERMINALS = re.compile(r"[。！？]")


def _mark_latin(m: re.Match) -> str:
    # only break when the next word starts with an uppercase letter
    if m.group(2).isupper():
        return m.group(1) + _SPLIT
    return m.group(0)


def segment(text: str, lang: str | LanguageProfile = "en") -> List[str]:
    """
    Split text into candidate sentences, in document order.

    Latin scripts break after . ! ? when the next letter is uppercase and keep
    sentences of MIN_SENTENCE..MAX_SENTENCE-1 characters. Chinese breaks after
    。！？ and keeps anything longer than MIN_SENTENCE_LOGOGRAPHIC characters.
    Text without any terminal punctuation yields no sentences.
    """
    profile = get_profile(lang)
    text = normalize(text)

    if profile.logographic:
        if not _CJK_TERMINALS.search(text):
            return []
        parts = _CJK_END.sub(r"\1" + _SPLIT, text).split(_SPLIT)
        return [p.strip() for p in parts if len(p.strip()) > MIN_SENTENCE_LOGOGRAPHIC]

    if not _LATIN_TERMINALS.search(text):
        return []
    parts = _LATIN_END.sub(_mark_latin, text).split(_SPLIT)
    out = []
    for p in parts:
        s = p.strip()
        if MIN_SENTENCE <= len(s) < MAX_SENTENCE:
            out.append(s)
    return out
