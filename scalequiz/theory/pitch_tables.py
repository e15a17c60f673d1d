from __future__ import annotations

"""Fixed 12-TET lookup tables.

Letters are 0-based indices into the 7-letter alphabet (0 = C). Offsets are
semitones above C within one octave.
"""

from dataclasses import dataclass
from typing import Dict, Tuple


MIDDLE_C = 60
MIDDLE_C_OCTAVE = 4
NOTES_PER_OCTAVE = 12
LETTERS_PER_OCTAVE = 7

# 0-based diatonic degree -> semitones above the tonic
DIATONIC_STEPS: Tuple[int, ...] = (0, 2, 4, 5, 7, 9, 11)


@dataclass(frozen=True)
class Spelling:
    """A letter plus accidentals, e.g. Spelling(1, -1) is Db."""

    letter: int
    accidental: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.letter < LETTERS_PER_OCTAVE:
            raise ValueError(f"Letter index must be 0..6, got {self.letter}")

    @property
    def offset_from_c(self) -> int:
        """Semitones above C of this spelling, before octave wrapping."""
        return DIATONIC_STEPS[self.letter] + self.accidental


# Sharp spelling first on black keys.
OFFSET_SPELLINGS: Dict[int, Tuple[Tuple[int, int], ...]] = {
    0: ((0, 0),),
    1: ((0, 1), (1, -1)),
    2: ((1, 0),),
    3: ((1, 1), (2, -1)),
    4: ((2, 0),),
    5: ((3, 0),),
    6: ((3, 1), (4, -1)),
    7: ((4, 0),),
    8: ((4, 1), (5, -1)),
    9: ((5, 0),),
    10: ((5, 1), (6, -1)),
    11: ((6, 0),),
}


def pitch_class_offset(pitch: int) -> int:
    """Semitones above the nearest C at or below `pitch` (0..11)."""
    return (pitch - MIDDLE_C) % NOTES_PER_OCTAVE


def spellings_for_pitch(pitch: int) -> Tuple[Spelling, ...]:
    """All single-accidental spellings of `pitch` (one or two)."""
    return tuple(Spelling(letter, acc) for letter, acc in OFFSET_SPELLINGS[pitch_class_offset(pitch)])


def octave_for_pitch(pitch: int) -> int:
    """Octave number with middle C in octave 4 (C4 = 60, B3 = 59)."""
    return MIDDLE_C_OCTAVE + (pitch - MIDDLE_C) // NOTES_PER_OCTAVE


def spelled_octave(pitch: int, spelling: Spelling) -> int:
    """Octave a spelling is written in: that of its unaltered letter.

    Pitch 59 spelled Cb is Cb4, pitch 60 spelled B# is B#3.
    """
    return octave_for_pitch(pitch - spelling.accidental)


def pitch_from_spelling(spelling: Spelling, octave: int) -> int:
    return MIDDLE_C + (octave - MIDDLE_C_OCTAVE) * NOTES_PER_OCTAVE + spelling.offset_from_c


def degree_semitones(degree_index: int) -> int:
    """Semitones spanned by a 0-based diatonic degree, octaves included."""
    octaves, step = divmod(degree_index, LETTERS_PER_OCTAVE)
    return DIATONIC_STEPS[step] + NOTES_PER_OCTAVE * octaves
