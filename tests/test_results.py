import os
import tempfile
import unittest

from pydantic import ValidationError

from scalequiz.catalogue.difficulty import Difficulty
from scalequiz.errors import ResultsFileError
from scalequiz.results import QuestionResult, load_session_results, save_session_results
from scalequiz.stats.stats import format_summary, new_session_stats, stats_from_results, update_stats


def _results():
    return [
        QuestionResult(root="D", scale_name="Major", difficulty="Easy", correct=True),
        QuestionResult(root="Eb", scale_name="Dorian", difficulty=1, correct=False),
        QuestionResult(root="F#", scale_name="Lydian", difficulty=Difficulty.HARD, correct=True),
    ]


class QuestionResultTests(unittest.TestCase):
    def test_row(self) -> None:
        r = _results()[1]
        self.assertEqual(r.difficulty, Difficulty.MEDIUM)
        self.assertEqual(r.to_row(), {"question": "Eb Dorian", "difficulty": 1, "outcome": "INCORRECT"})

    def test_validation(self) -> None:
        with self.assertRaises(ValidationError):
            QuestionResult(root="", scale_name="Major", difficulty=0, correct=True)
        with self.assertRaises(ValidationError):
            QuestionResult(root="C", scale_name="Major", difficulty="Impossible", correct=True)


class ResultsFileTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = self._tmp.name

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_csv_layout(self) -> None:
        path = save_session_results(_results(), os.path.join(self.tmp, "results.csv"))
        with open(path, encoding="utf-8") as f:
            lines = f.read().splitlines()
        self.assertEqual(lines, ["D Major;0;CORRECT", "Eb Dorian;1;INCORRECT", "F# Lydian;2;CORRECT"])

    def test_csv_reload(self) -> None:
        path = save_session_results(_results(), os.path.join(self.tmp, "results.csv"))
        df = load_session_results(path)
        self.assertEqual(list(df.columns), ["question", "difficulty", "outcome"])
        self.assertEqual(df["question"].tolist(), ["D Major", "Eb Dorian", "F# Lydian"])
        self.assertEqual(df["difficulty"].tolist(), [0, 1, 2])

    def test_overwrites(self) -> None:
        path = os.path.join(self.tmp, "results.csv")
        save_session_results(_results(), path)
        save_session_results(_results()[:1], path)
        self.assertEqual(len(load_session_results(path)), 1)

    def test_empty_session(self) -> None:
        path = save_session_results([], os.path.join(self.tmp, "results.csv"))
        self.assertEqual(len(load_session_results(path)), 0)

    def test_parquet(self) -> None:
        path = save_session_results(_results(), os.path.join(self.tmp, "results.parquet"))
        df = load_session_results(path)
        self.assertEqual(df["outcome"].tolist(), ["CORRECT", "INCORRECT", "CORRECT"])
        self.assertEqual(str(df["difficulty"].dtype), "UInt8")

    def test_unwritable_path(self) -> None:
        with self.assertRaises(ResultsFileError):
            save_session_results(_results(), os.path.join(self.tmp, "missing", "results.csv"))


class StatsTests(unittest.TestCase):
    def test_summary(self) -> None:
        stats = stats_from_results(_results())
        self.assertEqual(stats["total"], 3)
        self.assertEqual(stats["correct"], 2)
        self.assertEqual(
            format_summary(stats).split("\n"),
            ["Total: 2/3 correct (66%)", "Easy: 1/1", "Medium: 0/1", "Hard: 1/1"],
        )

    def test_update(self) -> None:
        stats = new_session_stats()
        update_stats(stats, "Hard", False)
        update_stats(stats, "Easy", True)
        self.assertEqual(stats["per_difficulty"]["Hard"], {"asked": 1, "correct": 0})
        self.assertEqual(format_summary(stats).split("\n")[1], "Easy: 1/1")

    def test_empty(self) -> None:
        self.assertEqual(format_summary(new_session_stats()), "Total: 0/0 correct (0%)")


if __name__ == "__main__":
    unittest.main()
