from __future__ import annotations

"""A Scale instantiated at a concrete root, e.g. D major."""

import copy
from typing import Iterator, List

from ..errors import MissingTonicError
from .note import Note
from .scale import SCALE_DEGREE_SEPARATOR, Scale


def realise_scale(root: Note, scale: Scale) -> List[Note]:
    """Notes of `scale` built on `root`, in scale order.

    Degree 1 is a copy of the root itself, so an ambiguous root keeps all
    its spellings; every other degree is derived from the root.
    """
    notes: List[Note] = []
    for sd in scale:
        if sd.degree == 1:
            notes.append(copy.copy(root))
        else:
            notes.append(Note.from_degree(root, sd.degree, sd.accidental))
    return notes


class RealisedScale:
    """Concrete notes of a scale template at a root note.

    The scale must start with an unaltered degree 1 so that notes[0] is the
    root; anything else raises MissingTonicError.
    """

    def __init__(self, root: Note, scale: Scale) -> None:
        if len(scale) == 0 or scale[0].degree != 1 or scale[0].accidental != 0:
            raise MissingTonicError(scale.format())
        self._notes = realise_scale(root, scale)

    @property
    def root(self) -> Note:
        return self._notes[0]

    @property
    def notes(self) -> List[Note]:
        return list(self._notes)

    def root_name(self) -> str:
        return self.root.name()

    def display_string(self) -> str:
        return f"{SCALE_DEGREE_SEPARATOR} ".join(n.name() for n in self._notes)

    def __len__(self) -> int:
        return len(self._notes)

    def __iter__(self) -> Iterator[Note]:
        return iter(self._notes)

    def __getitem__(self, index: int) -> Note:
        return self._notes[index]

    def __str__(self) -> str:
        return self.display_string()

    def __repr__(self) -> str:
        return f"RealisedScale([{self.display_string()}])"
