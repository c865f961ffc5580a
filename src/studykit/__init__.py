__version__ = "0.1.0"

from .log import configure_default_logging

configure_default_logging()

from .cards import generate_flashcards
from .chat import ChatEngine, create_chat_engine
from .config import EngineConfig
from .lexicon import SUPPORTED_LANGUAGES
from .plan import generate_study_plan
from .quiz import generate_quiz
from .summary import simplify

__all__ = [
    "ChatEngine",
    "EngineConfig",
    "SUPPORTED_LANGUAGES",
    "create_chat_engine",
    "generate_flashcards",
    "generate_quiz",
    "generate_study_plan",
    "simplify",
]
