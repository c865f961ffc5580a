from __future__ import annotations
from pathlib import Path
from typing import List, Optional, Sequence, Set
import csv
import hashlib
import json

import structlog

from .frequency import Analysis, analyze
from .lexicon import LanguageProfile, get_profile
from .models import Flashcard, QuizItem
from .quiz import cloze_text
from .text import capitalize

try:
    import genanki  # optional

    GENANKI = True
except Exception:
    GENANKI = False

log = structlog.get_logger(__name__)

CONTEXT_KEYWORDS = 30
MAX_TERM_WORDS = 6
_TERMINAL = (".", "!", "?", "。", "！", "？")


# ---------- Generate ----------


def _definition_cards(
    analysis: Analysis, count: int, used: Set[str]
) -> List[Flashcard]:
    """Pass 1: sentences shaped like "<Term> is <definition>"."""
    profile = analysis.profile
    cards: List[Flashcard] = []
    for s in analysis.sentences:
        if len(cards) >= count:
            break
        m = profile.definition_pattern.match(s)
        if not m:
            continue
        term = m.group(1).strip()
        key = term.lower()
        if key in used or key in profile.stop_words or len(term.split()) > MAX_TERM_WORDS:
            continue
        definition = m.group(3).strip()
        if definition.endswith(_TERMINAL):
            definition = definition[:-1].rstrip()
        if not definition:
            continue
        cards.append(
            Flashcard(
                front=term,
                back=capitalize(definition),
                category=profile.t("definition_category"),
            )
        )
        used.add(key)
    return cards


def _context_cards(
    analysis: Analysis, count: int, used: Set[str]
) -> List[Flashcard]:
    """Pass 2: the longest top keyword of each dense sentence, backed by the sentence."""
    profile = analysis.profile
    keywords = set(analysis.keywords(CONTEXT_KEYWORDS))
    cards: List[Flashcard] = []
    for _, sentence, _score in analysis.ranked():
        if len(cards) >= count:
            break
        hits = [t for t in analysis.tokens(sentence) if t in keywords]
        if not hits:
            continue
        term = max(hits, key=len)
        if term in used:
            continue
        cards.append(
            Flashcard(
                front=capitalize(term),
                back=sentence,
                category=profile.t("context_category"),
            )
        )
        used.add(term)
    return cards


def generate_flashcards(
    text: str, lang: str | LanguageProfile = "en", n: int = 10
) -> List[Flashcard]:
    """Definition cards first, topped up with context cards; each term used once."""
    analysis = analyze(text, lang)
    if n <= 0 or not analysis.sentences:
        return []

    used: Set[str] = set()
    cards = _definition_cards(analysis, n, used)
    if len(cards) < n:
        cards += _context_cards(analysis, n - len(cards), used)

    log.debug(
        "flashcards_generated",
        language=analysis.profile.tag,
        sentences=len(analysis.sentences),
        cards=len(cards),
    )
    return cards


# ---------- I/O ----------


def write_cards_json(cards: Sequence[Flashcard], out_path: Path) -> Path:
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(
        json.dumps([c.to_dict() for c in cards], ensure_ascii=False, indent=2),
        encoding="utf-8",
    )
    return out_path


def quiz_clozes(
    quiz: Sequence[QuizItem], lang: str | LanguageProfile = "en"
) -> List[str]:
    """Turn quiz items back into cloze strings ({{c1::answer}}) over the original sentence."""
    profile = get_profile(lang)
    out = []
    for item in quiz:
        c = cloze_text(item.explanation, item.answer, profile)
        if "{{c1::" in c:
            out.append(c)
    return out


# ---------- CSV ----------


def write_deck_csv(cards: Sequence[Flashcard], out_csv: Path) -> Path:
    """
    Write a single CSV with Basic cards. Columns: Front, Back, Category.
    (Cloze are used only for APKG; not written here.)
    """
    out_csv.parent.mkdir(parents=True, exist_ok=True)
    with out_csv.open("w", newline="", encoding="utf-8") as f:
        w = csv.writer(f)
        w.writerow(["Front", "Back", "Category"])
        w.writerows([c.front, c.back, c.category or ""] for c in cards)
    return out_csv


# ---------- APKG (optional) ----------


def build_apkg(
    cards: Sequence[Flashcard],
    out_apkg: Path,
    deck_name: str = "StudyKit",
    clozes: Optional[Sequence[str]] = None,
) -> Path:
    """
    Create an Anki .apkg with Basic + Cloze notes if genanki is available.
    - Basic model: one note per flashcard, category as a tag.
    - Cloze model: each cloze string becomes a cloze note.
    """
    if not GENANKI:
        raise RuntimeError(
            "genanki is not installed; install studykit[anki] to enable APKG export."
        )

    deck_id = int(hashlib.sha256(deck_name.encode("utf-8")).hexdigest()[:8], 16)
    deck = genanki.Deck(deck_id, deck_name)

    basic_model = genanki.Model(
        1607392320,
        "StudyKit Basic",
        fields=[{"name": "Front"}, {"name": "Back"}],
        templates=[
            {
                "name": "Card 1",
                "qfmt": "{{Front}}",
                "afmt": "{{Front}}<hr id=answer>{{Back}}",
            }
        ],
    )

    cloze_model = genanki.Model(
        998877662,
        "StudyKit Cloze",
        fields=[{"name": "Text"}],
        templates=[
            {"name": "Cloze", "qfmt": "{{cloze:Text}}", "afmt": "{{cloze:Text}}"}
        ],
        model_type=genanki.Model.CLOZE,
    )

    for c in cards:
        tags = [c.category.replace(" ", "_")] if c.category else []
        deck.add_note(genanki.Note(model=basic_model, fields=[c.front, c.back], tags=tags))
    for txt in clozes or []:
        deck.add_note(genanki.Note(model=cloze_model, fields=[txt]))

    pkg = genanki.Package(deck)
    out_apkg.parent.mkdir(parents=True, exist_ok=True)
    pkg.write_to_file(str(out_apkg))
    return out_apkg
