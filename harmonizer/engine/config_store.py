from __future__ import annotations

"""Configuration holder: the live root / scale / voicing selection.

The store keeps the raw parameter values (as the host would) and derives an
immutable ``Configuration`` snapshot from them for the compiler.
"""

from dataclasses import dataclass
from typing import List, Optional, Union

from ..theory.scales import NO_SCALE, ScaleType, lookup
from ..theory.voicings import DEFAULT_VOICE_COUNT, Voice, Voicing
from .parameters import (
    ROOT_PARAMETER,
    SCALE_PARAMETER,
    ParameterSpec,
    build_parameters,
    parameter_index,
    parse_voice_parameter,
    voice_parameter_name,
)


@dataclass(frozen=True)
class Configuration:
    root: int
    scale_id: Optional[int]  # None selects NO_SCALE
    voicing: Voicing

    @property
    def scale_type(self) -> ScaleType:
        if self.scale_id is None:
            return NO_SCALE
        return lookup(self.scale_id)


class ConfigurationStore:
    def __init__(self, voices: int = DEFAULT_VOICE_COUNT) -> None:
        self.voices = voices
        self.parameters: List[ParameterSpec] = build_parameters(voices)
        self._values: List[int] = [p.default_value for p in self.parameters]
        self._no_scale = False
        self._loaded_voicing: Optional[Voicing] = None
        self._root_idx = parameter_index(self.parameters, ROOT_PARAMETER)
        self._scale_idx = parameter_index(self.parameters, SCALE_PARAMETER)
        self._octave_idx = [parameter_index(self.parameters, voice_parameter_name(v, "Octave")) for v in range(voices)]
        self._degree_idx = [parameter_index(self.parameters, voice_parameter_name(v, "Degree")) for v in range(voices)]

    # Parameter access ------------------------------------------------------
    def _resolve(self, key: Union[int, str]) -> int:
        if isinstance(key, str):
            return parameter_index(self.parameters, key)
        if not 0 <= key < len(self.parameters):
            raise IndexError(f"parameter index out of range: {key}")
        return key

    def get_parameter(self, key: Union[int, str]) -> int:
        return self._values[self._resolve(key)]

    def set_parameter(self, key: Union[int, str], value: int) -> int:
        """Store a parameter change, clamped to the parameter's range; returns the stored value."""
        idx = self._resolve(key)
        stored = self.parameters[idx].clamp(value)
        self._values[idx] = stored
        if idx == self._scale_idx:
            self._no_scale = False
        if parse_voice_parameter(self.parameters[idx].name) is not None:
            self._loaded_voicing = None
        return stored

    def clear_scale(self) -> None:
        """Select the "no scale" placeholder until the scale parameter is set again."""
        self._no_scale = True

    def describe_parameters(self) -> List[str]:
        """'Name: value' for every parameter, as the host would label it."""
        return [f"{p.name}: {p.display(self.get_parameter(i))}" for i, p in enumerate(self.parameters)]

    # Derived views ---------------------------------------------------------
    @property
    def root(self) -> int:
        return self._values[self._root_idx]

    @property
    def scale_id(self) -> Optional[int]:
        if self._no_scale:
            return None
        return self._values[self._scale_idx]

    @property
    def scale_type(self) -> ScaleType:
        return self.snapshot().scale_type

    def voice(self, v: int) -> Voice:
        return Voice.from_parameters(self._values[self._octave_idx[v]], self._values[self._degree_idx[v]])

    @property
    def voicing(self) -> Voicing:
        if self._loaded_voicing is not None:
            return self._loaded_voicing
        return tuple(self.voice(v) for v in range(self.voices))

    def snapshot(self) -> Configuration:
        return Configuration(root=self.root, scale_id=self.scale_id, voicing=self.voicing)

    def load(self, cfg: Configuration) -> None:
        """Overwrite the current selection with ``cfg``.

        The voicing is kept exactly as given until a voice parameter is next
        edited; from then on the voice parameters define it. Voices the menus
        cannot show (degree above 12, octave beyond two, extra voices) leave
        their parameter slot switched off.
        """
        self.set_parameter(self._root_idx, cfg.root)
        if cfg.scale_id is None:
            self.clear_scale()
        else:
            self.set_parameter(self._scale_idx, cfg.scale_id)
        for v in range(self.voices):
            voice = cfg.voicing[v] if v < len(cfg.voicing) else None
            if voice is None or not voice.fits_parameters():
                voice = Voice(degree=0, enabled=False)
            self.set_parameter(self._octave_idx[v], voice.octave_index())
            self.set_parameter(self._degree_idx[v], voice.degree_slider())
        self._loaded_voicing = tuple(cfg.voicing)
