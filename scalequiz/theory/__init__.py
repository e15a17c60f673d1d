"""Note and scale model: pitches, spellings, scale templates and realised scales."""

from .pitch_tables import Spelling  # noqa: F401
from .note import Note  # noqa: F401
from .scale import Scale, ScaleDegree  # noqa: F401
from .realised_scale import RealisedScale  # noqa: F401
