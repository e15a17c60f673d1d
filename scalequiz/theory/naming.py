from __future__ import annotations

"""Note-name alphabets.

The active alphabet is picked once at import from the SCALEQUIZ_NAMING
environment variable ("english", "german" or "french") and never changes
for the life of the process.
"""

import os
import re
from dataclasses import dataclass, field
from typing import Dict, Optional, Pattern, Tuple

from ..errors import ConflictingAccidentalsError, InvalidNoteNameError
from .pitch_tables import LETTERS_PER_OCTAVE, Spelling


@dataclass(frozen=True)
class ParsedName:
    spelling: Spelling
    octave: Optional[int]


@dataclass(frozen=True)
class NamingStyle:
    """Letters and accidental glyphs used to read and write note names.

    `flat_alias` is the German B: a one-word name for letter 6 lowered by
    one semitone (the natural letter 6 is then written H).
    """

    id: str
    letters: Tuple[str, ...]
    flat: str = "b"
    sharp: str = "#"
    flat_alias: Optional[str] = None
    _pattern: Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if len(self.letters) != LETTERS_PER_OCTAVE:
            raise ValueError(f"Alphabet '{self.id}' needs {LETTERS_PER_OCTAVE} letters, got {len(self.letters)}")
        names = list(self.letters)
        if self.flat_alias:
            names.append(self.flat_alias)
        # longest first so "Sol" is not read as "S" + junk
        alternation = "|".join(re.escape(n) for n in sorted(names, key=len, reverse=True))
        glyphs = f"{re.escape(self.flat)}|{re.escape(self.sharp)}"
        pattern = re.compile(
            rf"(?P<letter>{alternation})(?P<accidentals>(?:{glyphs})*)(?P<octave>[+-]?\d+)?"
        )
        object.__setattr__(self, "_pattern", pattern)

    def format_spelling(self, spelling: Spelling) -> str:
        letter, acc = spelling.letter, spelling.accidental
        if self.flat_alias and letter == LETTERS_PER_OCTAVE - 1 and acc < 0:
            return self.flat_alias + self.flat * (-acc - 1)
        glyph = self.flat if acc < 0 else self.sharp
        return self.letters[letter] + glyph * abs(acc)

    def parse(self, text: str) -> ParsedName:
        """Parse `<letter><flats|sharps><optional signed octave>`.

        Raises:
            InvalidNoteNameError: unknown letter or trailing junk.
            ConflictingAccidentalsError: both flats and sharps present.
        """
        m = self._pattern.fullmatch(text.strip())
        if m is None:
            raise InvalidNoteNameError(text)

        accidentals = m.group("accidentals")
        flats = accidentals.count(self.flat)
        sharps = accidentals.count(self.sharp)
        if flats and sharps:
            raise ConflictingAccidentalsError(text)

        letter_text = m.group("letter")
        if self.flat_alias and letter_text == self.flat_alias:
            letter, acc = LETTERS_PER_OCTAVE - 1, -1
        else:
            letter, acc = self.letters.index(letter_text), 0
        acc += sharps - flats

        octave_text = m.group("octave")
        octave = int(octave_text) if octave_text is not None else None
        return ParsedName(spelling=Spelling(letter, acc), octave=octave)


ENGLISH = NamingStyle(id="english", letters=("C", "D", "E", "F", "G", "A", "B"))
GERMAN = NamingStyle(id="german", letters=("C", "D", "E", "F", "G", "A", "H"), flat_alias="B")
FRENCH = NamingStyle(
    id="french",
    letters=("Do", "Re", "Mi", "Fa", "Sol", "La", "Si"),
    flat=" bemol",
    sharp=" diese",
)

STYLES: Dict[str, NamingStyle] = {s.id: s for s in (ENGLISH, GERMAN, FRENCH)}


def _select_style() -> NamingStyle:
    name = os.environ.get("SCALEQUIZ_NAMING", "english").strip().lower()
    if name not in STYLES:
        raise ValueError(f"Unsupported SCALEQUIZ_NAMING '{name}', expected one of {sorted(STYLES)}")
    return STYLES[name]


ACTIVE: NamingStyle = _select_style()
