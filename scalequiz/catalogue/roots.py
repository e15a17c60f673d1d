from __future__ import annotations

"""Root notes offered to the quiz and how often each appears per difficulty.

Only the common spelling of each key is used (no Fb major, E major exists).
Roots with more accidentals or less exposure only show up at higher
difficulties.
"""

from typing import Dict, List, Tuple

import numpy as np

from ..theory.note import Note
from .difficulty import Difficulty

_MIDDLE_C = Note()

# (scale degree above middle C, accidental)
_ROOT_DEGREES: Tuple[Tuple[int, int], ...] = (
    (1, 0),   # C
    (2, -1),  # Db
    (2, 0),   # D
    (3, -1),  # Eb
    (3, 0),   # E
    (4, 0),   # F
    (4, 1),   # F#
    (5, -1),  # Gb
    (5, 0),   # G
    (6, -1),  # Ab
    (6, 0),   # A
    (7, -1),  # Bb
    (7, 0),   # B
)

POSSIBLE_ROOTS: Tuple[Note, ...] = tuple(Note.from_degree(_MIDDLE_C, d, a) for d, a in _ROOT_DEGREES)

ROOT_WEIGHTS: Dict[Difficulty, Tuple[float, ...]] = {
    Difficulty.EASY: (1, 0, 1, 1, 0, 1, 0, 0, 1, 0, 1, 1, 0),
    Difficulty.MEDIUM: (1, 0, 1, 1, 1, 1, 0, 0, 1, 1, 1, 1, 0),
    Difficulty.HARD: (2, 1, 2, 2, 2, 2, 1, 1, 2, 1, 2, 2, 1),
}


def _check_weights(weights: Dict[Difficulty, Tuple[float, ...]]) -> None:
    for d, w in weights.items():
        if len(w) != len(POSSIBLE_ROOTS):
            raise ValueError(f"{d.label} root weights need {len(POSSIBLE_ROOTS)} entries, got {len(w)}")
        if any(x < 0 for x in w) or sum(w) <= 0:
            raise ValueError(f"{d.label} root weights must be non-negative with a positive total")


_check_weights(ROOT_WEIGHTS)


def root_probabilities(difficulty: Difficulty) -> np.ndarray:
    """Normalised sampling distribution over POSSIBLE_ROOTS."""
    w = np.asarray(ROOT_WEIGHTS[difficulty], dtype=float)
    return w / w.sum()


def roots_in_play(difficulty: Difficulty) -> List[Note]:
    """Roots with non-zero weight at `difficulty`."""
    return [n for n, w in zip(POSSIBLE_ROOTS, ROOT_WEIGHTS[difficulty]) if w > 0]
