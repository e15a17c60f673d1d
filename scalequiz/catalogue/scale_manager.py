from __future__ import annotations

"""Scale catalogue and difficulty-weighted sampling.

The catalogue is a ';'-separated text table with a header row:

    Name;Difficulty;Scale
    Major;Easy;1,2,3,4,5,6,7
    Dorian;Medium;1,2,b3,4,5,6,b7

Entries live in one append-only list; the per-difficulty index holds
positions into that list.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Optional

import numpy as np

from ..app.explain import enabled as explaining
from ..app.explain import trace as xtrace
from ..errors import (
    CatalogueFileError,
    MalformedRowError,
    NoScalesLoadedError,
    ParseError,
    PreconditionError,
    ScaleParseFailedError,
    TooManySamplesError,
    UnknownDifficultyError,
)
from ..theory.note import Note
from ..theory.realised_scale import RealisedScale
from ..theory.scale import Scale
from ..util.randomness import make_rng
from .difficulty import Difficulty
from .roots import POSSIBLE_ROOTS, root_probabilities

CSV_SEPARATOR = ";"
COLUMNS = 3
DIFFICULTY_COLUMN = 1


@dataclass(frozen=True)
class ScaleEntry:
    name: str
    difficulty: Difficulty
    scale: Scale


@dataclass(frozen=True)
class RealisedScaleEntry:
    name: str
    difficulty: Difficulty
    realised: RealisedScale

    @property
    def root_name(self) -> str:
        return self.realised.root_name()

    @property
    def label(self) -> str:
        """Full scale name, e.g. "D Major"."""
        return f"{self.root_name} {self.name}"


def parse_row(line: str, row: int) -> ScaleEntry:
    """Parse one data row of the catalogue; `row` is only used for errors."""
    fields = [f.strip() for f in line.split(CSV_SEPARATOR)]
    if len(fields) != COLUMNS or not all(fields):
        raise MalformedRowError(row, sum(1 for f in fields if f))
    name, label, scale_text = fields

    try:
        difficulty = Difficulty.from_label(label)
    except KeyError:
        raise UnknownDifficultyError(row, DIFFICULTY_COLUMN, label) from None

    try:
        scale = Scale.parse(scale_text)
    except (ParseError, PreconditionError) as e:
        raise ScaleParseFailedError(row, str(e)) from e
    return ScaleEntry(name=name, difficulty=difficulty, scale=scale)


class ScaleManager:
    """Loads scale templates and samples realised scales for a session.

    Args:
        rng: Generator used for every draw. When None, one is built once
            with util.randomness.make_rng(), so SEED fixes the whole run
            without repeating batches.
    """

    def __init__(self, rng: Optional[np.random.Generator] = None) -> None:
        self._rng = rng if rng is not None else make_rng()
        self._entries: List[ScaleEntry] = []
        self._by_difficulty: Dict[Difficulty, List[int]] = {d: [] for d in Difficulty}

    # ---- loading ----

    def load(self, path: str | Path) -> None:
        """Load a catalogue file; a bad row aborts the whole load."""
        p = Path(path)
        try:
            with p.open("r", encoding="utf-8") as f:
                text = f.read()
        except OSError as e:
            raise CatalogueFileError(str(p)) from e
        self.load_lines(text.splitlines())
        xtrace("catalogue_loaded", {"path": str(p), "entries": len(self._entries)})

    load_scales_from_file = load

    def load_lines(self, lines: Iterable[str]) -> None:
        """Load catalogue rows (header first) from any iterable of lines.

        Row 0 is the header; data rows are numbered from 1 in errors.
        """
        staged: List[ScaleEntry] = []
        for row, line in enumerate(lines):
            if row == 0:
                continue
            staged.append(parse_row(line.rstrip("\r\n"), row))

        for entry in staged:
            self._by_difficulty[entry.difficulty].append(len(self._entries))
            self._entries.append(entry)

    # ---- catalogue access ----

    @property
    def entries(self) -> List[ScaleEntry]:
        return list(self._entries)

    @property
    def scale_names(self) -> List[str]:
        return [e.name for e in self._entries]

    def count(self, difficulty: Difficulty) -> int:
        return len(self._by_difficulty[difficulty])

    def entries_for(self, difficulty: Difficulty) -> List[ScaleEntry]:
        return [self._entries[i] for i in self._by_difficulty[difficulty]]

    def __len__(self) -> int:
        return len(self._entries)

    # ---- sampling ----

    @property
    def rng(self) -> np.random.Generator:
        return self._rng

    @staticmethod
    def _check_count(n: int) -> None:
        if n < 0:
            raise ValueError(f"Number of samples must be >= 0, got {n}")

    def sample_scales(self, n: int) -> List[ScaleEntry]:
        """`n` distinct entries, ignoring difficulty."""
        self._check_count(n)
        if not self._entries:
            raise NoScalesLoadedError()
        if n > len(self._entries):
            raise TooManySamplesError(n, len(self._entries))
        rng = self._rng
        picks = rng.choice(len(self._entries), size=n, replace=False)
        return [self._entries[int(i)] for i in picks]

    def sample_scales_by_difficulty(self, n: int, max_difficulty: Difficulty) -> List[ScaleEntry]:
        """`n` entries at or below `max_difficulty`.

        Each draw first picks a difficulty uniformly from EASY..max_difficulty,
        re-drawing difficulties that have no scales, then picks a scale
        uniformly within it. Draws are independent, so repeats can happen.
        """
        self._check_count(n)
        max_difficulty = Difficulty.coerce(max_difficulty)
        if not self._entries:
            raise NoScalesLoadedError()
        in_range = [d for d in Difficulty if d <= max_difficulty]
        if not any(self._by_difficulty[d] for d in in_range):
            raise NoScalesLoadedError(f"No scales loaded at or below difficulty {max_difficulty.label}")

        rng = self._rng
        sampled_difficulties: List[Difficulty] = []
        for _ in range(n):
            while True:
                d = Difficulty(int(rng.integers(0, len(in_range))))
                if self._by_difficulty[d]:
                    break
            sampled_difficulties.append(d)

        sampled: List[ScaleEntry] = []
        for d in sampled_difficulties:
            bucket = self._by_difficulty[d]
            sampled.append(self._entries[bucket[int(rng.integers(0, len(bucket)))]])

        if explaining():
            xtrace("scales_sampled", {"n": n, "max": max_difficulty.label, "names": [e.name for e in sampled]})
        return sampled

    def sample_roots_by_difficulty(self, n: int, difficulty: Difficulty) -> List[Note]:
        """`n` roots drawn with the difficulty's weights (with replacement).

        The returned Notes are the shared entries of POSSIBLE_ROOTS.
        """
        self._check_count(n)
        difficulty = Difficulty.coerce(difficulty)
        rng = self._rng
        picks = rng.choice(len(POSSIBLE_ROOTS), size=n, p=root_probabilities(difficulty))
        roots = [POSSIBLE_ROOTS[int(i)] for i in picks]
        if explaining():
            xtrace("roots_sampled", {"n": n, "difficulty": difficulty.label, "roots": [r.name() for r in roots]})
        return roots

    def generate_realised_scales_by_difficulty(self, n: int, difficulty: Difficulty) -> List[RealisedScaleEntry]:
        """Sample `n` scales and `n` roots and pair them up by position."""
        difficulty = Difficulty.coerce(difficulty)
        scales = self.sample_scales_by_difficulty(n, difficulty)
        roots = self.sample_roots_by_difficulty(n, difficulty)
        return [
            RealisedScaleEntry(name=entry.name, difficulty=entry.difficulty, realised=RealisedScale(root, entry.scale))
            for entry, root in zip(scales, roots)
        ]

    generate = generate_realised_scales_by_difficulty
