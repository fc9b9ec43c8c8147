from __future__ import annotations

"""Chord voicings: ordered sets of scale-relative voices."""

from dataclasses import dataclass
from typing import List, Tuple

# "Voice N Octave" menu: index -> octave offset in half-steps; the last entry disables the voice.
OCTAVE_MENU: List[str] = ["+2", "+1", "0", "-1", "-2", "Off"]
OCTAVE_OFFSETS: List[int] = [+24, +12, 0, -12, -24]
OCTAVE_OFF_INDEX = len(OCTAVE_OFFSETS)

DEGREE_SLIDER_MIN = 1
DEGREE_SLIDER_MAX = 13

DEFAULT_VOICE_COUNT = 6


@dataclass(frozen=True)
class Voice:
    """One harmony layer.

    ``degree`` is the number of scale steps above the played note (0 = unison,
    i.e. the degree slider value minus one); ``octave`` is a signed offset in
    half-steps, always a multiple of 12.
    """

    degree: int
    octave: int = 0
    enabled: bool = True

    def __post_init__(self) -> None:
        assert self.degree >= 0, f"degree must be non-negative: {self.degree}"
        assert self.octave % 12 == 0, f"octave offset must be a multiple of 12: {self.octave}"

    @classmethod
    def from_parameters(cls, octave_index: int, degree_slider: int) -> "Voice":
        """Build a voice from the plug-in's octave menu index and degree slider value."""
        octave_index = max(0, min(OCTAVE_OFF_INDEX, int(octave_index)))
        degree_slider = max(DEGREE_SLIDER_MIN, min(DEGREE_SLIDER_MAX, int(degree_slider)))
        enabled = octave_index != OCTAVE_OFF_INDEX
        octave = OCTAVE_OFFSETS[octave_index] if enabled else 0
        return cls(degree=degree_slider - 1, octave=octave, enabled=enabled)

    def fits_parameters(self) -> bool:
        """True when the octave menu and degree slider can represent this voice."""
        if not self.enabled:
            return True
        return self.octave in OCTAVE_OFFSETS and DEGREE_SLIDER_MIN <= self.degree + 1 <= DEGREE_SLIDER_MAX

    def octave_index(self) -> int:
        if not self.enabled:
            return OCTAVE_OFF_INDEX
        return OCTAVE_OFFSETS.index(self.octave)

    def degree_slider(self) -> int:
        return self.degree + 1


Voicing = Tuple[Voice, ...]

