from __future__ import annotations

"""Configuration loading and validation for scalequiz.

This module loads YAML configuration, applies defaults, and validates
that difficulty, counts and paths are sane for the CLI.
"""

from pathlib import Path
from typing import Any, Dict, Optional

import sys

import yaml

from ..catalogue.difficulty import Difficulty


DEFAULT_QUESTIONS = 5
DEFAULT_CHOICES = 4
DEFAULT_DIFFICULTY = "Medium"
DEFAULT_OUTPUT_PATH = "./results.csv"


def default_catalogue_path() -> Path:
    return Path(__file__).resolve().parents[1] / "resources" / "scales.csv"


def _load_yaml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except FileNotFoundError:
        print(f"ERROR: Config file not found: {path}", file=sys.stderr)
        sys.exit(1)


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """Load configuration from YAML or defaults.

    Args:
        path: Optional path to a YAML config. If None, use package defaults.

    Returns:
        A dictionary with configuration values.
    """
    if path:
        cfg = _load_yaml(Path(path))
    else:
        default_path = Path(__file__).with_name("defaults.yml")
        cfg = _load_yaml(default_path)
    return cfg


def _positive_int(section: Dict[str, Any], key: str, default: int) -> None:
    value = section.get(key)
    try:
        iv = int(value)
    except (TypeError, ValueError):
        iv = 0
    if iv < 1:
        print(f"WARNING: '{key}' must be a positive integer, got {value!r}; using {default}.")
        iv = default
    section[key] = iv


def validate_config(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """Apply defaults and validate configuration values.

    Difficulty may be a label ("Easy"/"Medium"/"Hard") or 0..2; larger
    numbers clamp to Hard. It is normalised to its label.

    Args:
        cfg: The raw configuration dictionary.

    Returns:
        The validated and merged configuration dictionary.
    """
    cfg.setdefault("catalogue", {})
    cfg.setdefault("session", {})
    cfg.setdefault("results", {})

    catalogue = cfg["catalogue"]
    session = cfg["session"]
    results = cfg["results"]

    if not catalogue.get("path"):
        catalogue["path"] = str(default_catalogue_path())

    session.setdefault("questions", DEFAULT_QUESTIONS)
    session.setdefault("difficulty", DEFAULT_DIFFICULTY)
    session.setdefault("choices", DEFAULT_CHOICES)

    results.setdefault("output_path", DEFAULT_OUTPUT_PATH)

    _positive_int(session, "questions", DEFAULT_QUESTIONS)
    _positive_int(session, "choices", DEFAULT_CHOICES)

    difficulty = session.get("difficulty")
    try:
        session["difficulty"] = Difficulty.coerce(difficulty).label
    except (TypeError, ValueError):
        print(f"WARNING: Unsupported difficulty '{difficulty}', using '{DEFAULT_DIFFICULTY}'.")
        session["difficulty"] = DEFAULT_DIFFICULTY

    return cfg
