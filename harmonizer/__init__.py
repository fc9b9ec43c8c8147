"""Scale/voicing harmonizer.

Compiles a root note, scale type and chord voicing into a per-note chord
table and applies it to a stream of note events.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .theory.chord_map import ChordMap, compile_chord_map
from .theory.scales import NO_SCALE, SCALE_CATALOG, ScaleType
from .theory.voicings import Voice
from .engine.harmonize import NoteEvent, OtherEvent, harmonize
from .engine.engine import HarmonizerEngine

__all__ = [
    "__version__",
    "ChordMap",
    "compile_chord_map",
    "NO_SCALE",
    "SCALE_CATALOG",
    "ScaleType",
    "Voice",
    "NoteEvent",
    "OtherEvent",
    "harmonize",
    "HarmonizerEngine",
]
