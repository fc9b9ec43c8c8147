import unittest

from harmonizer.engine.config_store import Configuration
from harmonizer.engine.display import describe, format_chord_map
from harmonizer.engine.engine import HarmonizerEngine
from harmonizer.engine.harmonize import NoteEvent, OtherEvent
from harmonizer.theory.chord_map import compile_chord_map
from harmonizer.theory.scales import find_scale
from harmonizer.theory.voicings import Voice

IONIAN = find_scale("Ionian - Major")


def _pitches(events):
    return [e.pitch for e in events]


class HarmonizerEngineTests(unittest.TestCase):
    def test_initial_map_is_published(self) -> None:
        engine = HarmonizerEngine()
        self.assertEqual(engine.compile_count, 1)
        self.assertFalse(engine.pending)
        # chromatic scale, voice 1 at unison
        self.assertEqual(_pitches(engine.handle_midi(NoteEvent("note_on", 61))), [61])

    def test_changes_coalesce_until_idle(self) -> None:
        engine = HarmonizerEngine()
        engine.parameter_changed(1, IONIAN)
        engine.parameter_changed(13, 3)  # Voice 1 Degree -> third
        engine.parameter_changed(0, 2)
        engine.parameter_changed(0, 0)
        self.assertTrue(engine.pending)
        self.assertEqual(engine.compile_count, 1)

        # events before the idle tick still see the old map
        self.assertEqual(_pitches(engine.handle_midi(NoteEvent("note_on", 61))), [61])

        self.assertTrue(engine.idle())
        self.assertEqual(engine.compile_count, 2)
        self.assertFalse(engine.idle())
        self.assertEqual(engine.compile_count, 2)

        self.assertEqual(engine.handle_midi(NoteEvent("note_on", 61)), [])
        self.assertEqual(_pitches(engine.handle_midi(NoteEvent("note_on", 60))), [64])

    def test_published_map_is_replaced_not_mutated(self) -> None:
        engine = HarmonizerEngine()
        before = engine.chord_map
        snapshot = before.to_lists()
        engine.parameter_changed(1, IONIAN)
        engine.idle()
        self.assertIsNot(engine.chord_map, before)
        self.assertEqual(before.to_lists(), snapshot)

    def test_recompile_with_same_configuration_is_equal(self) -> None:
        engine = HarmonizerEngine()
        before = engine.chord_map
        engine.parameter_changed(0, 0)
        engine.idle()
        self.assertEqual(engine.chord_map, before)

    def test_process_passes_other_events(self) -> None:
        cfg = Configuration(root=0, scale_id=IONIAN, voicing=(Voice(degree=0), Voice(degree=2), Voice(degree=4)))
        engine = HarmonizerEngine.from_configuration(cfg)
        cc = OtherEvent("control_change", {"control": 1, "value": 10})
        out = engine.process([NoteEvent("note_on", 60), cc, NoteEvent("note_on", 66)])
        self.assertEqual(len(out), 4)
        self.assertEqual(_pitches(out[:3]), [60, 64, 67])
        self.assertIs(out[3], cc)

    def test_clear_scale_silences(self) -> None:
        engine = HarmonizerEngine()
        engine.clear_scale()
        engine.idle()
        self.assertTrue(engine.chord_map.is_silent())
        self.assertEqual(engine.display.degree_range, (1, 1))

    def test_display_follows_compile(self) -> None:
        engine = HarmonizerEngine()
        self.assertEqual(engine.display.scale_name, "Chromatic")
        engine.parameter_changed(1, IONIAN)
        self.assertEqual(engine.display.scale_name, "Chromatic")
        engine.idle()
        self.assertEqual(engine.display.notes, ("C", "D", "E", "F", "G", "A", "B"))
        self.assertEqual(engine.display.degree_range, (1, 7))


class ConfigurationPublishingTests(unittest.TestCase):
    def test_compound_degree_and_wide_octave_are_published_unchanged(self) -> None:
        voicing = (Voice(degree=16), Voice(degree=0, octave=36), Voice(degree=2, octave=-48))
        cfg = Configuration(root=0, scale_id=IONIAN, voicing=voicing)
        engine = HarmonizerEngine.from_configuration(cfg)
        expected = compile_chord_map(cfg.root, cfg.scale_type, cfg.voicing)
        self.assertEqual(engine.chord_map, expected)
        self.assertEqual(engine.chord_map[0], (28, 36, -44))
        self.assertEqual(engine.store.snapshot(), cfg)

    def test_more_voices_than_parameter_slots(self) -> None:
        voicing = tuple(Voice(degree=d) for d in range(8))
        cfg = Configuration(root=0, scale_id=IONIAN, voicing=voicing)
        engine = HarmonizerEngine.from_configuration(cfg)
        self.assertEqual(engine.chord_map[0], (0, 2, 4, 5, 7, 9, 11, 12))

    def test_voice_edit_switches_to_parameter_voicing(self) -> None:
        cfg = Configuration(root=0, scale_id=IONIAN, voicing=(Voice(degree=16), Voice(degree=2)))
        engine = HarmonizerEngine.from_configuration(cfg)
        # voice 1 cannot be shown on the slider, so its slot starts switched off
        self.assertEqual(engine.store.get_parameter("Voice 1 Octave"), 5)
        engine.parameter_changed(13, 5)  # Voice 1 Degree
        engine.idle()
        self.assertEqual(engine.chord_map[0], (4,))

    def test_root_edit_keeps_loaded_voicing(self) -> None:
        cfg = Configuration(root=0, scale_id=IONIAN, voicing=(Voice(degree=9),))
        engine = HarmonizerEngine.from_configuration(cfg)
        engine.parameter_changed(0, 7)
        engine.idle()
        self.assertEqual(engine.chord_map[7], (16,))


class DisplayTests(unittest.TestCase):
    def test_describe(self) -> None:
        disp = describe(Configuration(root=1, scale_id=find_scale("major pentatonic"), voicing=()))
        self.assertEqual(disp.root_name, "C♯ - D♭")
        self.assertEqual(disp.notes, ("C#", "D#", "F", "G#", "A#"))
        self.assertEqual(disp.degree_range, (1, 5))
        self.assertIn("Major Pentatonic", disp.summary())

    def test_format_chord_map(self) -> None:
        cfg = Configuration(root=0, scale_id=IONIAN, voicing=(Voice(degree=0), Voice(degree=2)))
        engine = HarmonizerEngine.from_configuration(cfg)
        lines = format_chord_map(engine.chord_map).splitlines()
        self.assertEqual(len(lines), 12)
        self.assertEqual(lines[0], "C   [+0 +4]  C E")
        self.assertEqual(lines[1], "C#  -")


if __name__ == "__main__":
    unittest.main()
