import copy
import unittest

from scalequiz.catalogue.roots import POSSIBLE_ROOTS
from scalequiz.errors import (
    ConflictingAccidentalsError,
    InvalidNoteNameError,
    NoNameInformationError,
    NoNoteInformationError,
    NoPitchInformationError,
    UnderspecifiedRootError,
    ZeroDegreeError,
)
from scalequiz.theory.note import Note, derive_from_degree
from scalequiz.theory.pitch_tables import DIATONIC_STEPS, Spelling, pitch_from_spelling, spelled_octave


class NoteConstructionTests(unittest.TestCase):
    def test_default_is_middle_c(self) -> None:
        n = Note()
        self.assertEqual(n.pitch(), 60)
        self.assertEqual(n.octave(), 4)
        self.assertEqual(n.name(), "C")
        self.assertEqual(n, Note.from_text("C4"))

    def test_text_with_octave(self) -> None:
        n = Note.from_text("Db4")
        self.assertEqual(n.unique_spelling, Spelling(1, -1))
        self.assertEqual(n.pitch(), 61)
        self.assertEqual(n.name(), "Db")
        self.assertEqual(str(n), "Db4 (61)")

    def test_text_without_octave_has_no_pitch(self) -> None:
        n = Note.from_text("Eb")
        self.assertFalse(n.has_pitch)
        self.assertEqual(n.name(), "Eb")
        self.assertEqual(str(n), "Eb")
        with self.assertRaises(NoPitchInformationError):
            n.pitch()
        with self.assertRaises(NoPitchInformationError):
            n.octave()

    def test_written_octave_is_kept(self) -> None:
        cb = Note.from_text("Cb4")
        self.assertEqual(cb.pitch(), 59)
        self.assertEqual(cb.octave(), 4)
        self.assertEqual(cb.name_and_pitch(), "Cb4 (59)")

        bs = Note.from_text("B#3")
        self.assertEqual(bs.pitch(), 60)
        self.assertEqual(bs.octave(), 3)
        self.assertEqual(str(bs), "B#3 (60)")

    def test_negative_octave(self) -> None:
        self.assertEqual(Note.from_text("C-1").pitch(), 0)

    def test_pitch_names_are_ambiguous_on_black_keys(self) -> None:
        n = Note.from_pitch(61)
        self.assertTrue(n.is_ambiguous)
        self.assertIsNone(n.unique_spelling)
        self.assertEqual(n.name(), "C#/Db")
        self.assertEqual(n.name_and_pitch(), "C#4/Db4 (61)")

    def test_pitch_without_names(self) -> None:
        n = Note.from_pitch(60, generate_names=False)
        self.assertFalse(n.has_name)
        self.assertEqual(str(n), "60")
        with self.assertRaises(NoNameInformationError):
            n.name()
        with self.assertRaises(NoNoteInformationError):
            n.name_and_pitch()

    def test_bad_text(self) -> None:
        with self.assertRaises(InvalidNoteNameError):
            Note.from_text("X4")
        with self.assertRaises(InvalidNoteNameError):
            Note.from_text("C4x")
        with self.assertRaises(ConflictingAccidentalsError):
            Note.from_text("C#b")


class NoteStateTests(unittest.TestCase):
    def test_name_is_stable(self) -> None:
        n = Note.from_pitch(63)
        self.assertEqual(n.name(), n.name())
        self.assertEqual(str(n), str(n))

    def test_setters_replace_cached_names(self) -> None:
        n = Note.from_text("C4")
        self.assertEqual(str(n), "C4 (60)")
        n.set_text("F#")
        self.assertEqual(n.name(), "F#")
        self.assertFalse(n.has_pitch)
        n.set_pitch(70)
        self.assertEqual(n.name(), "A#/Bb")
        self.assertEqual(str(n), "A#4/Bb4 (70)")

    def test_copy_is_independent(self) -> None:
        n = Note.from_text("G4")
        clone = copy.copy(n)
        self.assertEqual(clone, n)
        clone.set_text("A")
        self.assertEqual(n.name(), "G")

    def test_notes_are_not_hashable(self) -> None:
        with self.assertRaises(TypeError):
            hash(Note())


class DegreeDerivationTests(unittest.TestCase):
    def test_major_third_above_d(self) -> None:
        n = Note.from_degree(Note.from_text("D4"), 3)
        self.assertEqual(n.name(), "F#")
        self.assertEqual(n.pitch(), 66)
        self.assertEqual(str(n), "F#4 (66)")

    def test_flat_degrees(self) -> None:
        eb = Note.from_text("Eb")
        self.assertEqual(Note.from_degree(eb, 5).name(), "Bb")
        self.assertEqual(Note.from_degree(eb, 6, -1).name(), "Cb")
        self.assertEqual(Note.from_degree(eb, 7, -1).name(), "Db")

    def test_sharp_root(self) -> None:
        fs = Note.from_text("F#4")
        seventh = Note.from_degree(fs, 7)
        self.assertEqual(seventh.name(), "E#")
        self.assertEqual(seventh.pitch(), 77)

    def test_sharp_root_above_b(self) -> None:
        second = Note.from_degree(Note.from_text("B#3"), 2)
        self.assertEqual(second.name(), "C##")
        self.assertEqual(second.pitch(), 62)
        self.assertEqual(str(second), "C##4 (62)")

    def test_diatonic_distance_from_every_root(self) -> None:
        for root in POSSIBLE_ROOTS:
            for degree in range(1, 8):
                with self.subTest(root=root.name(), degree=degree):
                    n = Note.from_degree(root, degree)
                    self.assertEqual(n.pitch() - root.pitch(), DIATONIC_STEPS[degree - 1])
                    spelling = n.unique_spelling
                    self.assertEqual(spelling.letter, (root.unique_spelling.letter + degree - 1) % 7)
                    self.assertEqual(pitch_from_spelling(spelling, spelled_octave(n.pitch(), spelling)), n.pitch())

    def test_octave_follows_the_spelling(self) -> None:
        third = Note.from_degree(Note.from_text("G#4"), 3)
        self.assertEqual(third.name(), "B#")
        self.assertEqual(third.pitch(), 72)
        self.assertEqual(third.octave(), 4)
        self.assertEqual(str(third), "B#4 (72)")
        seventh = Note.from_degree(Note.from_text("Db4"), 7)
        self.assertEqual((seventh.name(), seventh.pitch(), seventh.octave()), ("C", 72, 5))
        self.assertEqual(Note.from_pitch(59).octave(), 3)
        self.assertEqual(Note.from_pitch(61).octave(), 4)

    def test_compound_degree(self) -> None:
        ninth = Note.from_degree(Note(), 9)
        self.assertEqual(ninth.name(), "D")
        self.assertEqual(ninth.pitch(), 74)
        self.assertEqual(ninth.octave(), 5)

    def test_ambiguous_root_keeps_only_pitch(self) -> None:
        third = Note.from_degree(Note.from_pitch(61), 3)
        self.assertEqual(third.pitch(), 65)
        self.assertFalse(third.has_name)

    def test_degree_zero_is_rejected(self) -> None:
        with self.assertRaises(ZeroDegreeError):
            Note.from_degree(Note(), 0)

    def test_underspecified_root(self) -> None:
        nameless = Note.from_pitch(61, generate_names=False)
        self.assertEqual(derive_from_degree(nameless, 2), (63, None))
        pitchless = Note.from_text("E")
        self.assertEqual(derive_from_degree(pitchless, 2), (None, Spelling(3, 1)))
        with self.assertRaises(UnderspecifiedRootError):
            derive_from_degree(_NoInfoRoot(), 2)


class _NoInfoRoot:
    """Stand-in root with neither pitch nor a unique spelling."""

    has_pitch = False
    unique_spelling = None


if __name__ == "__main__":
    unittest.main()
