from __future__ import annotations

"""Explain mode: one-line JSON traces of what the quiz is doing.

Turned on by `run --explain` or by setting SCALEQUIZ_EXPLAIN=1. Each
milestone (catalogue loaded, scales and roots sampled, answer graded,
results saved) prints

    [EXPLAIN] answer_graded :: {"index":1,"answer":2,"truth":2,"correct":true}
"""

import json
import os
from typing import Any, Dict, Optional

PREFIX = "[EXPLAIN]"

_ENABLED = os.environ.get("SCALEQUIZ_EXPLAIN", "").strip().lower() in {"1", "true", "yes", "on"}


def enable(flag: bool = True) -> None:
    global _ENABLED
    _ENABLED = bool(flag)


def enabled() -> bool:
    return _ENABLED


def trace(event: str, payload: Optional[Dict[str, Any]] = None, **fields: Any) -> None:
    """Print `event` with `payload` and any keyword fields merged into it."""
    if not _ENABLED:
        return
    data = dict(payload or {})
    data.update(fields)
    # Notes and paths go through str()
    print(f"{PREFIX} {event} :: {json.dumps(data, separators=(',', ':'), default=str)}")
