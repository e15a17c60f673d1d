"""scalequiz: spell, realise and quiz on musical scales.

The core model lives in `scalequiz.theory` (Note, Scale, RealisedScale) and
`scalequiz.catalogue` (ScaleManager and difficulty-weighted sampling).
"""

from __future__ import annotations

__version__ = "0.1.0"

__all__ = ["__version__"]
