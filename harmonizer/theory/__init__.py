"""Music-theory layer: scale catalog, voicings and the chord-map compiler."""

from .scales import ScaleType, NO_SCALE, SCALE_CATALOG, lookup, name, find_scale  # noqa: F401
from .voicings import Voice, Voicing  # noqa: F401
from .chord_map import ChordMap, compile_chord_map  # noqa: F401
