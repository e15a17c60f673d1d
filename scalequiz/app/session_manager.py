from __future__ import annotations

"""Session Manager: builds a multiple-choice scale quiz and records answers.

Each question shows the notes of a realised scale (e.g. "D, E, F#, G, A,
B, C#") and asks which scale it is. The manager is UI-agnostic; `run`
drives it through a small dict of callbacks.
"""

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import numpy as np

from ..catalogue.difficulty import Difficulty
from ..catalogue.scale_manager import RealisedScaleEntry, ScaleManager
from ..errors import NoScalesLoadedError, SessionExhaustedError
from ..results.schema import QuestionResult
from ..stats.stats import format_summary, stats_from_results
from .explain import trace as xtrace

NUMBER_OF_CHOICES = 4


@dataclass(frozen=True)
class Question:
    entry: RealisedScaleEntry
    options: List[str]
    correct_index: int  # 0-based into options


@dataclass
class RuntimeState:
    index: int = 0
    started_at: Optional[datetime] = None
    answers: List[bool] = field(default_factory=list)


class SessionManager:
    def __init__(
        self,
        scale_manager: Optional[ScaleManager] = None,
        choices: int = NUMBER_OF_CHOICES,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        if choices < 1:
            raise ValueError(f"choices must be >= 1, got {choices}")
        self.scales = scale_manager if scale_manager is not None else ScaleManager(rng=rng)
        self.choices = choices
        # one stream for scales, roots and option order
        self._rng = rng if rng is not None else self.scales.rng
        self.questions: List[Question] = []
        self.state = RuntimeState()

    def load_scales(self, path: str | Path) -> None:
        self.scales.load(path)

    # ---- session generation ----

    def _make_options(self, name: str, rng: np.random.Generator) -> tuple[List[str], int]:
        others = [n for n in dict.fromkeys(self.scales.scale_names) if n != name]
        k = min(self.choices - 1, len(others))
        picks = rng.choice(len(others), size=k, replace=False) if k else []
        options = [name] + [others[int(i)] for i in picks]
        options = [options[int(i)] for i in rng.permutation(len(options))]
        return options, options.index(name)

    def generate_session(self, number_of_questions: int, difficulty: Difficulty) -> None:
        """Replace the current session with freshly sampled questions."""
        if len(self.scales) == 0:
            raise NoScalesLoadedError()
        difficulty = Difficulty.coerce(difficulty)

        generated = self.scales.generate_realised_scales_by_difficulty(number_of_questions, difficulty)
        self.questions = []
        for entry in generated:
            options, correct_index = self._make_options(entry.name, self._rng)
            self.questions.append(Question(entry=entry, options=options, correct_index=correct_index))
        self.state = RuntimeState(started_at=datetime.now())
        xtrace("session_generated", {"questions": len(self.questions), "difficulty": difficulty.label})

    # ---- question flow ----

    def has_more(self) -> bool:
        return self.state.index < len(self.questions)

    def current_question(self) -> Question:
        if not self.has_more():
            raise SessionExhaustedError()
        return self.questions[self.state.index]

    def header(self) -> str:
        return f"On question {self.state.index + 1}/{len(self.questions)}"

    def format_question(self) -> str:
        q = self.current_question()
        lines = [q.entry.realised.display_string()]
        lines += [f"{i}: {opt}" for i, opt in enumerate(q.options, start=1)]
        return "\n".join(lines)

    def submit_answer(self, choice: int) -> bool:
        """Grade a 1-based choice for the current question; any other number is wrong."""
        q = self.current_question()
        is_correct = (int(choice) - 1) == q.correct_index
        self.state.answers.append(is_correct)
        xtrace(
            "answer_graded",
            {"index": self.state.index + 1, "answer": choice, "truth": q.correct_index + 1, "correct": is_correct},
        )
        return is_correct

    def next_question(self) -> None:
        self.state.index += 1

    # ---- outcome ----

    @property
    def correct_count(self) -> int:
        return sum(self.state.answers)

    def success_percentage(self) -> int:
        if not self.questions:
            return 0
        return int(self.correct_count * 100 / len(self.questions))

    def results(self) -> List[QuestionResult]:
        out: List[QuestionResult] = []
        for q, ok in zip(self.questions, self.state.answers):
            out.append(
                QuestionResult(
                    root=q.entry.root_name,
                    scale_name=q.entry.name,
                    difficulty=q.entry.difficulty,
                    correct=ok,
                )
            )
        return out

    def summary(self) -> str:
        return format_summary(stats_from_results(self.results()))

    def run(self, ui: Dict[str, Callable[..., Any]]) -> Dict[str, Any]:
        """Ask every remaining question through `ui` callbacks.

        ui keys: "ask" (prompt -> str), "inform" (str -> None) and an
        optional "clear" (() -> None) called before each question.
        """
        ask = ui["ask"]
        inform = ui["inform"]
        clear = ui.get("clear", lambda: None)

        while self.has_more():
            clear()
            inform(self.header())
            inform(self.format_question())
            n_opts = len(self.current_question().options)
            while True:
                raw = ask(f"Your answer (1-{n_opts}): ").strip()
                try:
                    choice = int(raw)
                except ValueError:
                    inform("Please enter the number of an option.")
                    continue
                break
            q = self.current_question()
            if self.submit_answer(choice):
                inform("Correct!\n")
            else:
                inform(f"Incorrect. Answer was {q.options[q.correct_index]} ({q.entry.label}).\n")
            self.next_question()

        return {"total": len(self.questions), "correct": self.correct_count, "percentage": self.success_percentage()}
