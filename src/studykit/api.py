from typing import List, Optional
import random

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import StreamingResponse
from pydantic import BaseModel, Field
import structlog

from . import __version__
from .cards import generate_flashcards
from .chat import create_chat_engine
from .config import EngineConfig
from .log import configure_logging
from .plan import generate_study_plan
from .quiz import generate_quiz
from .summary import simplify

log = structlog.get_logger(__name__)

config = EngineConfig.from_env()
configure_logging(config.log_level)

app = FastAPI(title="StudyKit", version=__version__)
app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])


class TextReq(BaseModel):
    text: str
    language: str = Field(default_factory=lambda: config.language)


class QuizReq(TextReq):
    count: int = Field(5, ge=0, le=100)
    seed: Optional[int] = None


class CardsReq(TextReq):
    count: int = Field(10, ge=0, le=100)


class PlanReq(TextReq):
    seed: Optional[int] = None


class ChatReq(TextReq):
    message: str = Field(..., min_length=1)


def _rng(seed: Optional[int]) -> random.Random:
    return random.Random(seed) if seed is not None else config.rng()


@app.get("/health")
def health():
    return {"status": "ok", "version": __version__}


@app.post("/quiz")
def quiz(body: QuizReq) -> List[dict]:
    items = generate_quiz(
        body.text,
        body.language,
        body.count,
        rng=_rng(body.seed),
        placeholder=config.placeholder_distractor,
    )
    log.info("api_quiz", language=body.language, items=len(items))
    return [i.to_dict() for i in items]


@app.post("/flashcards")
def flashcards(body: CardsReq) -> List[dict]:
    cards = generate_flashcards(body.text, body.language, body.count)
    log.info("api_flashcards", language=body.language, cards=len(cards))
    return [c.to_dict() for c in cards]


@app.post("/plan")
def plan(body: PlanReq) -> dict:
    return generate_study_plan(body.text, body.language, rng=_rng(body.seed)).to_dict()


@app.post("/simplify")
def simplify_text(body: TextReq) -> dict:
    return {"summary": simplify(body.text, body.language)}


@app.post("/chat")
def chat(body: ChatReq):
    """Stream the answer as plain text; engines are per request, nothing is kept server-side."""
    engine = create_chat_engine(body.text, body.language, config)
    return StreamingResponse(engine.respond(body.message), media_type="text/plain; charset=utf-8")
