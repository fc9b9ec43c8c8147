import unittest

from harmonizer.errors import CatalogError
from harmonizer.theory import scales
from harmonizer.theory.scales import NO_SCALE, SCALE_CATALOG, ScaleType, find_scale, lookup, scale_notes


class ScaleCatalogTests(unittest.TestCase):
    def test_every_entry_partitions_the_octave(self) -> None:
        for st in SCALE_CATALOG:
            with self.subTest(scale=st.name):
                self.assertEqual(sum(st.steps), 12)
                self.assertTrue(all(s > 0 for s in st.steps))

    def test_names_are_unique(self) -> None:
        names = scales.scale_names()
        self.assertEqual(len(names), len(set(names)))
        scales.validate_catalog()

    def test_lookup_and_name(self) -> None:
        self.assertEqual(lookup(0).name, "Chromatic")
        self.assertEqual(len(lookup(0)), 12)
        ionian = find_scale("Ionian - Major")
        self.assertEqual(lookup(ionian).steps, (2, 2, 1, 2, 2, 2, 1))
        self.assertEqual(scales.name(ionian), "Ionian - Major")

    def test_lookup_out_of_range_is_a_programming_error(self) -> None:
        with self.assertRaises(AssertionError):
            lookup(len(SCALE_CATALOG))

    def test_find_scale_aliases(self) -> None:
        self.assertEqual(find_scale("major"), find_scale("ionian"))
        self.assertEqual(find_scale("Minor"), find_scale("Aeolian - Minor"))
        self.assertEqual(find_scale("natural_minor"), find_scale("aeolian"))
        self.assertEqual(lookup(find_scale("dorian")).steps, (2, 1, 2, 2, 2, 1, 2))
        self.assertEqual(lookup(find_scale("whole tone")).steps, (2, 2, 2, 2, 2, 2))
        with self.assertRaises(KeyError):
            find_scale("not a scale")

    def test_find_scale_accepts_ascii_accidentals(self) -> None:
        self.assertEqual(find_scale("lydian #2"), find_scale("Lydian ♯2"))
        self.assertEqual(find_scale("Dorian b2"), find_scale("Dorian ♭2 - Phrygian ♮6"))
        self.assertEqual(find_scale("locrian bb3 bb7"), find_scale("Locrian 𝄫3 𝄫7"))
        self.assertNotEqual(find_scale("lydian #2 #6"), find_scale("lydian #2"))

    def test_catalog_covers_several_scale_lengths(self) -> None:
        lengths = {len(st) for st in SCALE_CATALOG}
        self.assertEqual(lengths, {5, 6, 7, 8, 12})


class ScaleTypeTests(unittest.TestCase):
    def test_rejects_wrong_sum(self) -> None:
        with self.assertRaises(CatalogError):
            ScaleType((1, 2), "short")

    def test_rejects_non_positive_steps(self) -> None:
        with self.assertRaises(CatalogError):
            ScaleType((0, 12), "zero step")
        with self.assertRaises(CatalogError):
            ScaleType((13, -1), "negative step")

    def test_placeholder_is_allowed(self) -> None:
        self.assertTrue(NO_SCALE.is_empty)
        self.assertEqual(len(NO_SCALE), 0)
        self.assertEqual(ScaleType((), "other placeholder").steps, ())

    def test_single_step_type(self) -> None:
        st = ScaleType((12,), "root only")
        self.assertEqual(scale_notes(5, st), [5])


class ScaleNotesTests(unittest.TestCase):
    def test_c_major(self) -> None:
        self.assertEqual(scale_notes(0, lookup(find_scale("major"))), [0, 2, 4, 5, 7, 9, 11])

    def test_d_dorian_wraps_past_b(self) -> None:
        self.assertEqual(scale_notes(2, lookup(find_scale("dorian"))), [2, 4, 5, 7, 9, 11, 0])

    def test_pentatonic(self) -> None:
        self.assertEqual(scale_notes(0, lookup(find_scale("major pentatonic"))), [0, 2, 4, 7, 9])

    def test_no_scale(self) -> None:
        self.assertEqual(scale_notes(3, NO_SCALE), [])


if __name__ == "__main__":
    unittest.main()
