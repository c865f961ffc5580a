from __future__ import annotations
from dataclasses import dataclass, asdict, field
from enum import Enum
from typing import List, Optional


@dataclass(frozen=True)
class Document:
    text: str
    language: str = "en"


@dataclass
class QuizItem:
    question: str
    options: List[str]
    correct_answer_index: int
    explanation: str

    @property
    def answer(self) -> str:
        return self.options[self.correct_answer_index]

    def to_dict(self) -> dict:
        return {
            "question": self.question,
            "options": list(self.options),
            "correctAnswerIndex": self.correct_answer_index,
            "explanation": self.explanation,
        }


@dataclass
class Flashcard:
    front: str
    back: str
    category: Optional[str] = None

    def to_dict(self) -> dict:
        d = asdict(self)
        if self.category is None:
            d.pop("category")
        return d


class Priority(str, Enum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


@dataclass
class StudyPlanItem:
    week: int
    topic: str
    description: str
    estimated_hours: int
    priority: Priority

    def to_dict(self) -> dict:
        return {
            "week": self.week,
            "topic": self.topic,
            "description": self.description,
            "estimatedHours": self.estimated_hours,
            "priority": self.priority.value,
        }


@dataclass
class StudyPlan:
    title: str
    goal: str
    items: List[StudyPlanItem] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "goal": self.goal,
            "items": [i.to_dict() for i in self.items],
        }


@dataclass(frozen=True)
class Match:
    sentence: str
    score: float
