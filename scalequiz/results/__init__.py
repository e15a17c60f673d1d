from .schema import CORRECT, INCORRECT, COLUMNS, DTYPES, QuestionResult
from .persist import save_session_results, load_session_results, results_frame

__all__ = [
    "CORRECT",
    "INCORRECT",
    "COLUMNS",
    "DTYPES",
    "QuestionResult",
    "save_session_results",
    "load_session_results",
    "results_frame",
]
