from __future__ import annotations
from typing import List

import structlog

from .frequency import Analysis, analyze
from .lexicon import LanguageProfile

log = structlog.get_logger(__name__)

TAKEAWAYS = 5
BULLET = "• "


def key_sentences(analysis: Analysis, k: int = TAKEAWAYS) -> List[str]:
    """Top-k sentences by density, put back in document order."""
    top = analysis.ranked()[:k]
    return [s for _, s, _ in sorted(top, key=lambda item: item[0])]


def simplify(text: str, lang: str | LanguageProfile = "en") -> str:
    """Markdown-ish digest: localized header, then one bullet per key sentence."""
    analysis = analyze(text, lang)
    body = "\n\n".join(BULLET + s for s in key_sentences(analysis))
    log.debug("summary_generated", language=analysis.profile.tag, sentences=len(analysis.sentences))
    return f"{analysis.profile.t('key_takeaways')}\n\n{body}"
