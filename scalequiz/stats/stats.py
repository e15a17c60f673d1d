from __future__ import annotations

"""Basic session stats: aggregation by difficulty and formatting."""

from typing import Dict, Sequence

from ..results.schema import QuestionResult


def new_session_stats() -> Dict:
    """Create a new, empty stats structure."""
    return {"total": 0, "correct": 0, "per_difficulty": {}}


def update_stats(stats: Dict, difficulty: str, correct: bool) -> None:
    """Update stats for a single question outcome."""
    stats["total"] = int(stats.get("total", 0)) + 1
    if correct:
        stats["correct"] = int(stats.get("correct", 0)) + 1
    per = stats.setdefault("per_difficulty", {})
    bucket = per.setdefault(difficulty, {"asked": 0, "correct": 0})
    bucket["asked"] += 1
    bucket["correct"] += 1 if correct else 0


def stats_from_results(results: Sequence[QuestionResult]) -> Dict:
    stats = new_session_stats()
    for r in results:
        update_stats(stats, r.difficulty.label, r.correct)
    return stats


def success_percentage(stats: Dict) -> int:
    total = int(stats.get("total", 0))
    if total == 0:
        return 0
    return int(int(stats.get("correct", 0)) * 100 / total)


def format_summary(stats: Dict) -> str:
    """Return a human-readable summary of stats."""
    total = int(stats.get("total", 0))
    correct = int(stats.get("correct", 0))
    lines = [f"Total: {correct}/{total} correct ({success_percentage(stats)}%)"]
    per = stats.get("per_difficulty", {})
    order = {"Easy": 0, "Medium": 1, "Hard": 2}
    for d in sorted(per.keys(), key=lambda x: order.get(x, 99)):
        asked = per[d].get("asked", 0)
        corr = per[d].get("correct", 0)
        lines.append(f"{d}: {corr}/{asked}")
    return "\n".join(lines)
