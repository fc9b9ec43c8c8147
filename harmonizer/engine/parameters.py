from __future__ import annotations

"""Plug-in parameter layout.

Parameters are addressed by index, in this order: "Scale Root", "Chord
Scale", then one "Voice N Octave" menu per voice from the last voice down
to voice 1, then one "Voice N Degree" slider per voice in the same order.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..theory.note_utils import ROOT_MENU_NAMES
from ..theory.scales import scale_names
from ..theory.voicings import (
    DEFAULT_VOICE_COUNT,
    DEGREE_SLIDER_MAX,
    DEGREE_SLIDER_MIN,
    OCTAVE_MENU,
    OCTAVE_OFF_INDEX,
)

ROOT_PARAMETER = "Scale Root"
SCALE_PARAMETER = "Chord Scale"


@dataclass(frozen=True)
class ParameterSpec:
    name: str
    type: str  # "menu" | "lin"
    default_value: int
    value_strings: Tuple[str, ...] = ()
    min_value: int = 0
    max_value: int = 0
    number_of_steps: int = 0

    def __post_init__(self) -> None:
        if self.type == "menu":
            object.__setattr__(self, "min_value", 0)
            object.__setattr__(self, "max_value", len(self.value_strings) - 1)
            object.__setattr__(self, "number_of_steps", len(self.value_strings) - 1)

    def clamp(self, value: int) -> int:
        return max(self.min_value, min(self.max_value, int(round(value))))

    def display(self, value: int) -> str:
        value = self.clamp(value)
        if self.type == "menu":
            return self.value_strings[value]
        return str(value)


def voice_parameter_name(voice: int, kind: str) -> str:
    """Name of a per-voice parameter; ``voice`` is zero-based."""
    return f"Voice {voice + 1} {kind}"


def build_parameters(voices: int = DEFAULT_VOICE_COUNT) -> List[ParameterSpec]:
    params = [
        ParameterSpec(ROOT_PARAMETER, "menu", 0, tuple(ROOT_MENU_NAMES)),
        ParameterSpec(SCALE_PARAMETER, "menu", 0, tuple(scale_names())),
    ]
    for v in range(voices, 0, -1):
        params.append(
            ParameterSpec(
                voice_parameter_name(v - 1, "Octave"),
                "menu",
                OCTAVE_MENU.index("0") if v == 1 else OCTAVE_OFF_INDEX,
                tuple(OCTAVE_MENU),
            )
        )
    for v in range(voices, 0, -1):
        params.append(
            ParameterSpec(
                voice_parameter_name(v - 1, "Degree"),
                "lin",
                DEGREE_SLIDER_MIN,
                min_value=DEGREE_SLIDER_MIN,
                max_value=DEGREE_SLIDER_MAX,
                number_of_steps=DEGREE_SLIDER_MAX - DEGREE_SLIDER_MIN,
            )
        )
    return params


def parameter_index(params: List[ParameterSpec], name: str) -> int:
    for i, p in enumerate(params):
        if p.name == name:
            return i
    raise KeyError(f"Unknown parameter: {name}")


def parse_voice_parameter(param_name: str) -> Optional[Tuple[int, str]]:
    """Split 'Voice 3 Degree' into (2, 'Degree'); None for non-voice parameters."""
    parts = param_name.split()
    if len(parts) != 3 or parts[0] != "Voice" or not parts[1].isdigit():
        return None
    return int(parts[1]) - 1, parts[2]
