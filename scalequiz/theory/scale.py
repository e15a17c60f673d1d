from __future__ import annotations

"""Scale templates: ordered scale degrees relative to an unspecified tonic.

A scale is written as comma-separated degree tokens, each an optional run
of flats or sharps followed by a 1-based degree number:

    Major           1,2,3,4,5,6,7
    Natural minor   1,2,b3,4,5,b6,b7
    Lydian          1,2,3,#4,5,6,7

Degrees above 7 are compound (9 is the second an octave up). For a scale
at a concrete tonic see RealisedScale.
"""

import re
from dataclasses import dataclass
from typing import Iterable, Iterator, List, overload

from ..errors import (
    ConflictingAccidentalsError,
    MalformedDegreeError,
    MissingDegreeError,
    ZeroDegreeError,
)

SCALE_DEGREE_SEPARATOR = ","
FLAT = "b"
SHARP = "#"

_DEGREE_RE = re.compile(r"(?P<accidentals>[b#]*)(?P<degree>\d*)")


@dataclass(frozen=True)
class ScaleDegree:
    degree: int
    accidental: int = 0

    def __post_init__(self) -> None:
        if self.degree < 1:
            raise ZeroDegreeError(self.degree)

    def __str__(self) -> str:
        glyph = FLAT if self.accidental < 0 else SHARP
        return f"{glyph * abs(self.accidental)}{self.degree}"


def parse_scale_degree(token: str) -> ScaleDegree:
    """Parse one token such as "b3", "#11" or "5"."""
    text = token.strip()
    m = _DEGREE_RE.fullmatch(text)
    if m is None:
        raise MalformedDegreeError(token)
    accidentals = m.group("accidentals")
    flats = accidentals.count(FLAT)
    sharps = accidentals.count(SHARP)
    if flats and sharps:
        raise ConflictingAccidentalsError(token)
    if not m.group("degree"):
        raise MissingDegreeError(token)
    return ScaleDegree(int(m.group("degree")), sharps - flats)


class Scale:
    """An ordered list of ScaleDegree tokens.

    Supports len(), iteration, indexing and item assignment like the list it
    wraps; parse() and format() convert to and from text.
    """

    def __init__(self, degrees: Iterable[ScaleDegree] = ()) -> None:
        self._degrees: List[ScaleDegree] = list(degrees)

    @classmethod
    def parse(cls, text: str, separator: str = SCALE_DEGREE_SEPARATOR) -> "Scale":
        """Build a Scale from text like "1,2,b3,4,5,b6,b7".

        Empty text gives an empty scale. Tokens may carry surrounding
        whitespace, so the output of format() parses back.
        """
        if not text.strip():
            return cls()
        return cls(parse_scale_degree(tok) for tok in text.split(separator))

    def format(self, separator: str = SCALE_DEGREE_SEPARATOR) -> str:
        return f"{separator} ".join(str(sd) for sd in self._degrees)

    def append(self, degree: ScaleDegree) -> None:
        self._degrees.append(degree)

    def clear(self) -> None:
        self._degrees.clear()

    @property
    def degrees(self) -> List[ScaleDegree]:
        return list(self._degrees)

    def __len__(self) -> int:
        return len(self._degrees)

    def __iter__(self) -> Iterator[ScaleDegree]:
        return iter(self._degrees)

    @overload
    def __getitem__(self, index: int) -> ScaleDegree: ...

    @overload
    def __getitem__(self, index: slice) -> List[ScaleDegree]: ...

    def __getitem__(self, index):
        return self._degrees[index]

    def __setitem__(self, index: int, value: ScaleDegree) -> None:
        self._degrees[index] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Scale):
            return NotImplemented
        return self._degrees == other._degrees

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"Scale.parse({self.format()!r})"
