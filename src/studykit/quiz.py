from __future__ import annotations
from typing import List, Optional, Sequence
import random
import re

import structlog

from .frequency import Analysis, analyze
from .lexicon import LanguageProfile
from .models import QuizItem
from .text import fmt

log = structlog.get_logger(__name__)

BLANK = "_______"
KEYWORD_POOL = 50
DISTRACTORS = 3
PLACEHOLDER = "variable"

# a letter that is not a digit or underscore
_LETTER = r"[^\W\d_]"


def _replace_term(sentence: str, term: str, profile: LanguageProfile, repl) -> str:
    esc = re.escape(term)
    if profile.logographic:
        return re.sub(esc, repl, sentence, flags=re.IGNORECASE)
    return re.sub(rf"(?<!{_LETTER}){esc}(?!{_LETTER})", repl, sentence, flags=re.IGNORECASE)


def blank_term(sentence: str, term: str, profile: LanguageProfile) -> str:
    """
    Replace every case-insensitive occurrence of `term` with BLANK.
    Latin scripts only match where the term is not glued to another letter
    ("cell" blanks "Cell," but not "cellular"); Chinese has no word boundaries.
    """
    return _replace_term(sentence, term, profile, BLANK)


def cloze_text(sentence: str, term: str, profile: LanguageProfile) -> str:
    """Same matching as blank_term, but marks Anki cloze deletions ({{c1::...}})."""
    return _replace_term(
        sentence, term, profile, lambda m: "{{c1::" + m.group(0) + "}}"
    )


def pick_distractors(
    target: str,
    keywords: Sequence[str],
    rng: random.Random,
    placeholder: str = PLACEHOLDER,
) -> List[str]:
    """Exactly three wrong answers: same-initial keywords first, then any keyword, then padding."""
    others = [k for k in keywords if k != target]
    similar = [k for k in others if k[:1] == target[:1]]

    chosen = rng.sample(similar, min(DISTRACTORS, len(similar)))
    if len(chosen) < DISTRACTORS:
        rest = [k for k in others if k not in chosen]
        chosen += rng.sample(rest, min(DISTRACTORS - len(chosen), len(rest)))
    while len(chosen) < DISTRACTORS:
        chosen.append(placeholder)
    return chosen


def _pick_target(tokens: List[str], keywords: set) -> str:
    hits = [t for t in tokens if t in keywords]
    if hits:
        return max(hits, key=len)  # first longest in scan order
    return tokens[0]


def _build_item(
    sentence: str,
    analysis: Analysis,
    keywords: List[str],
    rng: random.Random,
    placeholder: str,
) -> QuizItem:
    profile = analysis.profile
    target = _pick_target(analysis.tokens(sentence), set(keywords))
    question = blank_term(sentence, target, profile)

    options = [target] + pick_distractors(target, keywords, rng, placeholder)
    rng.shuffle(options)
    return QuizItem(
        question=fmt(profile.t("fill_blank"), question),
        options=options,
        correct_answer_index=options.index(target),
        explanation=sentence,
    )


def generate_quiz(
    text: str,
    lang: str | LanguageProfile = "en",
    n: int = 5,
    rng: Optional[random.Random] = None,
    placeholder: str = PLACEHOLDER,
) -> List[QuizItem]:
    """
    Cloze questions from the densest sentences.

    The 3*n highest-scoring sentences form a pool and n of them are drawn at
    random, so repeated calls give different quizzes unless `rng` is seeded.
    An empty list means the text had no usable sentences.
    """
    rng = rng or random.Random()
    analysis = analyze(text, lang)
    if n <= 0 or not analysis.sentences:
        return []

    keywords = analysis.keywords(KEYWORD_POOL)
    # sentences made only of stop words have nothing to blank
    pool = [s for _, s, _ in analysis.ranked()[: 3 * n] if analysis.tokens(s)]
    selected = rng.sample(pool, min(n, len(pool)))

    items = [_build_item(s, analysis, keywords, rng, placeholder) for s in selected]
    log.debug(
        "quiz_generated",
        language=analysis.profile.tag,
        sentences=len(analysis.sentences),
        items=len(items),
    )
    return items
