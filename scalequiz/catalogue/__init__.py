from .difficulty import Difficulty
from .roots import POSSIBLE_ROOTS, ROOT_WEIGHTS
from .scale_manager import RealisedScaleEntry, ScaleEntry, ScaleManager

__all__ = [
    "Difficulty",
    "POSSIBLE_ROOTS",
    "ROOT_WEIGHTS",
    "RealisedScaleEntry",
    "ScaleEntry",
    "ScaleManager",
]
