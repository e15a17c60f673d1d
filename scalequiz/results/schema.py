from __future__ import annotations

"""Schema constants and Pydantic models for quiz results."""

from pydantic import BaseModel, Field, field_validator

from ..catalogue.difficulty import Difficulty

CORRECT = "CORRECT"
INCORRECT = "INCORRECT"
OUTCOMES = {CORRECT, INCORRECT}

COLUMNS = ["question", "difficulty", "outcome"]

DTYPES = {
    "question": "string",
    "difficulty": "UInt8",
    "outcome": "string",
}


class QuestionResult(BaseModel):
    """Outcome of one answered question."""

    root: str = Field(min_length=1)
    scale_name: str = Field(min_length=1)
    difficulty: Difficulty
    correct: bool

    @field_validator("difficulty", mode="before")
    @classmethod
    def _coerce_difficulty(cls, v):
        return Difficulty.coerce(v)

    @property
    def label(self) -> str:
        return f"{self.root} {self.scale_name}"

    @property
    def outcome(self) -> str:
        return CORRECT if self.correct else INCORRECT

    def to_row(self) -> dict:
        return {"question": self.label, "difficulty": int(self.difficulty), "outcome": self.outcome}
