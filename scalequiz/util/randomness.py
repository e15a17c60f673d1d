from __future__ import annotations

"""Randomness helpers: SEED handling and generator construction."""

import os
from typing import Optional

import numpy as np


def env_seed() -> Optional[int]:
    """Seed from the SEED env var, or None when unset or not an integer."""
    seed = os.environ.get("SEED")
    if seed is None:
        return None
    try:
        return int(seed)
    except ValueError:
        return None


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """New generator: explicit seed, else SEED env var, else OS entropy.

    Build one per run and keep drawing from it; a second generator from the
    same SEED replays the same stream.
    """
    if seed is None:
        seed = env_seed()
    return np.random.default_rng(seed)
