from __future__ import annotations

"""Session results file: one row per question.

CSV output keeps the plain layout other tools expect, no header and ';'
between columns:

    D Major;0;CORRECT
    Eb Dorian;1;INCORRECT

Paths ending in .parquet are written with pyarrow instead.
"""

from pathlib import Path
from typing import Sequence

import pandas as pd

from ..app.explain import trace as xtrace
from ..errors import ResultsFileError
from .schema import COLUMNS, DTYPES, QuestionResult

CSV_SEPARATOR = ";"


def _is_parquet(path: Path) -> bool:
    return path.suffix.lower() == ".parquet"


def results_frame(results: Sequence[QuestionResult]) -> pd.DataFrame:
    """Validate results and return a DataFrame with proper dtypes."""
    rows = [QuestionResult.model_validate(r).to_row() for r in results]
    df = pd.DataFrame(rows, columns=COLUMNS)
    return df.astype(DTYPES)


def save_session_results(results: Sequence[QuestionResult], path: str | Path) -> Path:
    """Write session results, replacing any existing file."""
    p = Path(path)
    df = results_frame(results)
    try:
        if _is_parquet(p):
            df.to_parquet(p, engine="pyarrow", compression="zstd", index=False)
        else:
            df.to_csv(p, sep=CSV_SEPARATOR, header=False, index=False)
    except OSError as e:
        raise ResultsFileError(str(p)) from e
    xtrace("results_saved", path=p, rows=len(df))
    return p


def load_session_results(path: str | Path) -> pd.DataFrame:
    """Read a results file written by save_session_results."""
    p = Path(path)
    if _is_parquet(p):
        df = pd.read_parquet(p, engine="pyarrow")
    else:
        try:
            df = pd.read_csv(p, sep=CSV_SEPARATOR, header=None, names=COLUMNS, dtype=str, keep_default_na=False)
        except pd.errors.EmptyDataError:
            df = pd.DataFrame(columns=COLUMNS)
        df["difficulty"] = pd.to_numeric(df["difficulty"])
    return df.astype(DTYPES)[COLUMNS]
