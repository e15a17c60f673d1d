from __future__ import annotations

from enum import IntEnum
from typing import Dict


class Difficulty(IntEnum):
    """Question difficulty; sampling at a difficulty covers it and every easier one."""

    EASY = 0
    MEDIUM = 1
    HARD = 2

    @property
    def label(self) -> str:
        return _LABELS[self]

    @classmethod
    def from_label(cls, label: str) -> "Difficulty":
        """Exact, case-sensitive label lookup ("Easy", "Medium", "Hard")."""
        return _BY_LABEL[label]

    @classmethod
    def coerce(cls, value: "Difficulty | int | str") -> "Difficulty":
        """Accept a Difficulty, a label, or an integer (values above 2 clamp to HARD)."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            v = value.strip()
            if v in _BY_LABEL:
                return _BY_LABEL[v]
            for d in cls:
                if d.label.lower() == v.lower():
                    return d
            if not v.lstrip("-").isdigit():
                raise ValueError(f"Unknown difficulty: {value!r}")
            value = int(v)
        iv = int(value)
        if iv < 0:
            raise ValueError(f"Difficulty must be >= 0, got {iv}")
        return cls(min(iv, int(cls.HARD)))


_LABELS: Dict[Difficulty, str] = {
    Difficulty.EASY: "Easy",
    Difficulty.MEDIUM: "Medium",
    Difficulty.HARD: "Hard",
}
_BY_LABEL: Dict[str, Difficulty] = {v: k for k, v in _LABELS.items()}
