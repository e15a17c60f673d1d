from __future__ import annotations

"""Note: a pitch, a name, or both.

A Note may be known only as an absolute pitch (MIDI 61), only as a name
("C", no octave) or as both ("Db4", 61). Pitch and spellings are two
independent optional fields rather than a class per combination; at least
one is always present.

A pitch-derived name can be ambiguous (61 is C# or Db). Deriving a new
note from a root and a scale degree needs a single spelling to decide the
new letter, so ambiguous pitchless roots cannot be used for that.
"""

from typing import Optional, Sequence, Tuple

from ..errors import (
    NoNameInformationError,
    NoNoteInformationError,
    NoPitchInformationError,
    UnderspecifiedRootError,
    ZeroDegreeError,
)
from . import naming
from .pitch_tables import (
    DIATONIC_STEPS,
    LETTERS_PER_OCTAVE,
    MIDDLE_C,
    NOTES_PER_OCTAVE,
    Spelling,
    degree_semitones,
    octave_for_pitch,
    pitch_from_spelling,
    spellings_for_pitch,
    spelled_octave,
)

NOTE_PRINT_SEPARATOR = "/"


class Note:
    """A musical note holding an optional pitch and optional spellings.

    Build with one of:
        Note()                          -> middle C, pitch and name
        Note.from_pitch(61)             -> pitch 61, names C#/Db
        Note.from_text("Db4")           -> Db, pitch 61
        Note.from_degree(root, 3, -1)   -> flat third above root

    The matching set_* methods replace the whole state of an existing Note.
    """

    __slots__ = ("_pitch", "_octave", "_spellings", "_name_cache", "_full_cache")

    def __init__(self) -> None:
        self._assign(MIDDLE_C, None, (Spelling(0, 0),))

    # ---- state ----

    def _assign(self, pitch: Optional[int], octave: Optional[int], spellings: Sequence[Spelling]) -> None:
        if pitch is None and not spellings:
            raise NoNoteInformationError("A Note needs a pitch or at least one name")
        self._pitch = pitch
        if pitch is not None and octave is None:
            # written octave of the letter when the spelling is unique (B#3 is 60)
            if len(spellings) == 1:
                octave = spelled_octave(pitch, spellings[0])
            else:
                octave = octave_for_pitch(pitch)
        self._octave = octave if pitch is not None else None
        self._spellings: Tuple[Spelling, ...] = tuple(spellings)
        self._name_cache: Optional[str] = None
        self._full_cache: Optional[str] = None

    # ---- construction ----

    @classmethod
    def from_pitch(cls, pitch: int, generate_names: bool = True) -> "Note":
        note = cls.__new__(cls)
        note.set_pitch(pitch, generate_names)
        return note

    @classmethod
    def from_text(cls, text: str) -> "Note":
        note = cls.__new__(cls)
        note.set_text(text)
        return note

    @classmethod
    def from_degree(cls, root: "Note", degree: int, accidental: int = 0) -> "Note":
        note = cls.__new__(cls)
        note.set_degree(root, degree, accidental)
        return note

    def set_pitch(self, pitch: int, generate_names: bool = True) -> None:
        """Represent `pitch`; names are all single-accidental spellings of it."""
        spellings = spellings_for_pitch(pitch) if generate_names else ()
        self._assign(int(pitch), None, spellings)

    def set_text(self, text: str) -> None:
        """Represent a written name such as "C", "F#" or "Db4".

        A pitch is only derived when an octave number is written; the
        octave is kept as written (B#3 is pitch 60 in octave 3).
        """
        parsed = naming.ACTIVE.parse(text)
        pitch = None
        if parsed.octave is not None:
            pitch = pitch_from_spelling(parsed.spelling, parsed.octave)
        self._assign(pitch, parsed.octave, (parsed.spelling,))

    def set_degree(self, root: "Note", degree: int, accidental: int = 0) -> None:
        """Represent scale degree `degree` (1-based) above `root`.

        The pitch is derived when the root has one; a name is derived when
        the root has exactly one spelling.
        """
        pitch, spelling = derive_from_degree(root, degree, accidental)
        self._assign(pitch, None, (spelling,) if spelling is not None else ())

    # ---- information ----

    @property
    def has_pitch(self) -> bool:
        return self._pitch is not None

    @property
    def has_name(self) -> bool:
        return len(self._spellings) > 0

    @property
    def is_ambiguous(self) -> bool:
        return len(self._spellings) > 1

    @property
    def spellings(self) -> Tuple[Spelling, ...]:
        return self._spellings

    @property
    def unique_spelling(self) -> Optional[Spelling]:
        return self._spellings[0] if len(self._spellings) == 1 else None

    def pitch(self) -> int:
        if self._pitch is None:
            raise NoPitchInformationError()
        return self._pitch

    def octave(self) -> int:
        """Octave as written: that of the letter for a unique spelling, else of the pitch."""
        if self._octave is None:
            raise NoPitchInformationError()
        return self._octave

    def name(self) -> str:
        """Name without octave, e.g. "F#" or "C#/Db" when ambiguous."""
        if not self._spellings:
            raise NoNameInformationError()
        if self._name_cache is None:
            style = naming.ACTIVE
            self._name_cache = NOTE_PRINT_SEPARATOR.join(style.format_spelling(s) for s in self._spellings)
        return self._name_cache

    def name_and_pitch(self) -> str:
        """Name, octave and pitch, e.g. "Db4 (61)" or "C#4/Db4 (61)"."""
        if self._pitch is None or not self._spellings:
            raise NoNoteInformationError("Trying to get the name and pitch of a Note without both.")
        if self._full_cache is None:
            style = naming.ACTIVE
            parts = [f"{style.format_spelling(s)}{spelled_octave(self._pitch, s)}" for s in self._spellings]
            self._full_cache = f"{NOTE_PRINT_SEPARATOR.join(parts)} ({self._pitch})"
        return self._full_cache

    # ---- dunder ----

    def __str__(self) -> str:
        if self.has_pitch and self.has_name:
            return self.name_and_pitch()
        if self.has_pitch:
            return str(self._pitch)
        if self.has_name:
            return self.name()
        raise NoNoteInformationError()

    def __repr__(self) -> str:
        return f"Note(pitch={self._pitch!r}, octave={self._octave!r}, spellings={list(self._spellings)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Note):
            return NotImplemented
        return (self._pitch, self._octave, self._spellings) == (other._pitch, other._octave, other._spellings)

    __hash__ = None  # type: ignore[assignment]

    def __copy__(self) -> "Note":
        clone = Note.__new__(Note)
        clone._assign(self._pitch, self._octave, self._spellings)
        return clone


def derive_from_degree(root: Note, degree: int, accidental: int = 0) -> Tuple[Optional[int], Optional[Spelling]]:
    """Pitch and spelling of scale degree `degree` above `root`.

    Args:
        root: Note the degree is counted from.
        degree: 1-based degree; 8 is the octave, 10 the compound third.
        accidental: Semitone alteration relative to the major-scale degree.

    Returns:
        (pitch or None, spelling or None); never both None.

    Raises:
        ZeroDegreeError: degree < 1.
        UnderspecifiedRootError: root has no pitch and no unique spelling.
    """
    if degree < 1:
        raise ZeroDegreeError(degree)
    d = degree - 1

    pitch = None
    if root.has_pitch:
        pitch = root.pitch() + degree_semitones(d) + accidental

    spelling = None
    root_spelling = root.unique_spelling
    if root_spelling is not None:
        new_letter = (root_spelling.letter + d) % LETTERS_PER_OCTAVE
        # plain new letter measured from the root as spelled, within one octave
        letter_span = (DIATONIC_STEPS[new_letter] - DIATONIC_STEPS[root_spelling.letter]) % NOTES_PER_OCTAVE
        unaccidented_diff = letter_span - root_spelling.accidental
        expected_diff = DIATONIC_STEPS[d % LETTERS_PER_OCTAVE] + accidental
        spelling = Spelling(new_letter, expected_diff - unaccidented_diff)

    if pitch is None and spelling is None:
        raise UnderspecifiedRootError()
    return pitch, spelling
