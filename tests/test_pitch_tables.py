import unittest

from scalequiz.theory.pitch_tables import (
    Spelling,
    degree_semitones,
    octave_for_pitch,
    pitch_class_offset,
    pitch_from_spelling,
    spelled_octave,
    spellings_for_pitch,
)


class PitchTableTests(unittest.TestCase):
    def test_octave_boundaries(self) -> None:
        self.assertEqual(octave_for_pitch(60), 4)
        self.assertEqual(octave_for_pitch(59), 3)
        self.assertEqual(octave_for_pitch(71), 4)
        self.assertEqual(octave_for_pitch(72), 5)
        self.assertEqual(octave_for_pitch(0), -1)

    def test_every_spelling_gives_back_its_pitch(self) -> None:
        for pitch in range(48, 84):
            for s in spellings_for_pitch(pitch):
                self.assertEqual(pitch_from_spelling(s, spelled_octave(pitch, s)), pitch)

    def test_pitch_class_offset_below_middle_c(self) -> None:
        self.assertEqual(pitch_class_offset(59), 11)
        self.assertEqual(pitch_class_offset(48), 0)

    def test_black_keys_have_sharp_then_flat(self) -> None:
        self.assertEqual(spellings_for_pitch(61), (Spelling(0, 1), Spelling(1, -1)))
        self.assertEqual(spellings_for_pitch(70), (Spelling(5, 1), Spelling(6, -1)))
        self.assertEqual(spellings_for_pitch(64), (Spelling(2, 0),))

    def test_spelled_octave_follows_letter(self) -> None:
        self.assertEqual(spelled_octave(59, Spelling(0, -1)), 4)  # Cb4
        self.assertEqual(spelled_octave(60, Spelling(6, 1)), 3)  # B#3
        self.assertEqual(spelled_octave(61, Spelling(1, -1)), 4)

    def test_pitch_from_spelling(self) -> None:
        self.assertEqual(pitch_from_spelling(Spelling(1, -1), 4), 61)
        self.assertEqual(pitch_from_spelling(Spelling(0, -1), 4), 59)
        self.assertEqual(pitch_from_spelling(Spelling(5, 0), 3), 57)

    def test_compound_degrees(self) -> None:
        self.assertEqual(degree_semitones(0), 0)
        self.assertEqual(degree_semitones(6), 11)
        self.assertEqual(degree_semitones(7), 12)
        self.assertEqual(degree_semitones(8), 14)

    def test_letter_range(self) -> None:
        with self.assertRaises(ValueError):
            Spelling(7)
        with self.assertRaises(ValueError):
            Spelling(-1)


if __name__ == "__main__":
    unittest.main()
