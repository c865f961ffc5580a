from __future__ import annotations
from typing import List
import re
import unicodedata

from .lexicon import LanguageProfile, get_profile

# letters, digits, whitespace and hyphens survive; everything else (incl. "_") becomes a space
_NON_WORD = re.compile(r"[^\w\s-]|_")
_CJK_TOKEN = re.compile(r"[一-龥a-zA-Z0-9]")
_PLACEHOLDER = re.compile(r"\{(\d+)\}")


def normalize(text: str) -> str:
    return unicodedata.normalize("NFC", text or "")


def tokenize(text: str, lang: str | LanguageProfile = "en") -> List[str]:
    """
    Lowercased, NFC-normalized tokens with stop words removed.
    - zh: one token per CJK ideograph / ASCII letter / digit.
    - everything else: words longer than 2 characters.
    Duplicates are kept; callers count them.
    """
    profile = get_profile(lang)
    stop = profile.stop_words
    lowered = normalize(text).lower()

    if profile.logographic:
        return [ch for ch in lowered if _CJK_TOKEN.match(ch) and ch not in stop]

    cleaned = _NON_WORD.sub(" ", lowered)
    return [w for w in cleaned.split() if len(w) > 2 and w not in stop]


def capitalize(s: str) -> str:
    return s[:1].upper() + s[1:]


def fmt(template: str, *args: str) -> str:
    """Fill {0}, {1}, ... from args; unknown indices are left as-is."""

    def _sub(m: re.Match) -> str:
        i = int(m.group(1))
        return args[i] if i < len(args) else m.group(0)

    return _PLACEHOLDER.sub(_sub, template)
