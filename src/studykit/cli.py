from typing import Optional
from pathlib import Path
from dataclasses import replace
import json
import random
import typer

from . import __version__
from .cards import build_apkg, generate_flashcards, quiz_clozes, write_cards_json, write_deck_csv
from .chat import create_chat_engine
from .config import EngineConfig
from .lexicon import is_supported
from .log import configure_logging
from .plan import generate_study_plan
from .quiz import generate_quiz
from .summary import simplify

app = typer.Typer(help="StudyKit: plain text → quizzes, flashcards, study plans (offline).")

LangOpt = typer.Option(None, "--lang", "-l", help="Language tag: en, es, fr, de, pt, zh")


def _config() -> EngineConfig:
    return EngineConfig.from_env()


def _read(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def _lang(lang: Optional[str], cfg: EngineConfig) -> str:
    tag = lang or cfg.language
    if not is_supported(tag):
        typer.echo(f"⚠️  Unsupported language '{tag}', using English rules.", err=True)
    return tag


def _rng(seed: Optional[int], cfg: EngineConfig) -> random.Random:
    return random.Random(seed) if seed is not None else cfg.rng()


def _emit(payload, out: Optional[Path]):
    text = json.dumps(payload, ensure_ascii=False, indent=2)
    if out is None:
        typer.echo(text)
        return
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(text, encoding="utf-8")
    typer.echo(f"✅ Wrote {out}")


@app.callback(invoke_without_command=True)
def main(
    version: Optional[bool] = typer.Option(
        None, "--version", help="Show version and exit", is_eager=True
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
    if version:
        typer.echo(f"studykit {__version__}")
        raise typer.Exit()
    configure_logging("DEBUG" if verbose else _config().log_level)


@app.command()
def version():
    """Show version."""
    typer.echo(f"studykit {__version__}")


@app.command()
def quiz(
    text_file: Path = typer.Argument(..., exists=True, readable=True, help="UTF-8 text file"),
    lang: Optional[str] = LangOpt,
    num: int = typer.Option(5, "--num", "-n", min=0, help="Number of questions"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Fix the random draw"),
    out: Optional[Path] = typer.Option(None, "--out", "-o", help="Write JSON here"),
):
    """Cloze quiz (4 options per question) → JSON."""
    cfg = _config()
    items = generate_quiz(
        _read(text_file),
        _lang(lang, cfg),
        num,
        rng=_rng(seed, cfg),
        placeholder=cfg.placeholder_distractor,
    )
    _emit([i.to_dict() for i in items], out)


@app.command()
def cards(
    text_file: Path = typer.Argument(..., exists=True, readable=True, help="UTF-8 text file"),
    lang: Optional[str] = LangOpt,
    num: int = typer.Option(10, "--num", "-n", min=0, help="Number of flashcards"),
    outdir: Path = typer.Option(Path("outputs"), "--outdir", "-o"),
    deck_name: str = typer.Option("StudyKit", "--deck-name"),
    csv_only: bool = typer.Option(
        False, "--csv-only", help="Skip .apkg build, write CSV only"
    ),
):
    """Flashcards → flashcards.json + deck.csv (+ deck.apkg unless --csv-only)."""
    cfg = _config()
    text = _read(text_file)
    tag = _lang(lang, cfg)
    deck = generate_flashcards(text, tag, num)
    outdir.mkdir(parents=True, exist_ok=True)

    json_path = write_cards_json(deck, outdir / "flashcards.json")
    typer.echo(f"📝 Wrote {json_path} ({len(deck)} cards)")
    csv_path = write_deck_csv(deck, outdir / "deck.csv")
    typer.echo(f"📝 Wrote {csv_path}")

    if not csv_only:
        clozes = quiz_clozes(generate_quiz(text, tag, num, rng=cfg.rng()), tag)
        try:
            pkg_path = build_apkg(deck, outdir / "deck.apkg", deck_name=deck_name, clozes=clozes)
            typer.echo(f"📦 Wrote {pkg_path}")
        except RuntimeError as e:
            typer.echo(f"⚠️  APKG skipped: {e}", err=True)


@app.command()
def plan(
    text_file: Path = typer.Argument(..., exists=True, readable=True, help="UTF-8 text file"),
    lang: Optional[str] = LangOpt,
    seed: Optional[int] = typer.Option(None, "--seed"),
    out: Optional[Path] = typer.Option(None, "--out", "-o", help="Write JSON here"),
):
    """Four-week study plan → JSON."""
    cfg = _config()
    study_plan = generate_study_plan(_read(text_file), _lang(lang, cfg), rng=_rng(seed, cfg))
    _emit(study_plan.to_dict(), out)


@app.command(name="simplify")
def simplify_cmd(
    text_file: Path = typer.Argument(..., exists=True, readable=True, help="UTF-8 text file"),
    lang: Optional[str] = LangOpt,
):
    """Print the key-takeaways digest."""
    cfg = _config()
    typer.echo(simplify(_read(text_file), _lang(lang, cfg)))


@app.command()
def ask(
    text_file: Path = typer.Argument(..., exists=True, readable=True, help="UTF-8 text file"),
    question: str = typer.Argument(..., help="What to look up in the notes"),
    lang: Optional[str] = LangOpt,
    delay: Optional[float] = typer.Option(
        None, "--delay", min=0.0, help="Seconds between streamed chunks"
    ),
):
    """Answer a question from the notes, streamed in small chunks."""
    cfg = _config()
    if delay is not None:
        cfg = replace(cfg, stream_delay=delay)
    engine = create_chat_engine(_read(text_file), _lang(lang, cfg), cfg)
    for piece in engine.respond(question):
        typer.echo(piece, nl=False)
    typer.echo()
