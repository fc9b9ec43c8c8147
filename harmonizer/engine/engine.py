from __future__ import annotations

"""HarmonizerEngine: ties the configuration store, compiler and event path together.

Parameter changes only mark the configuration dirty; the chord map is rebuilt
on the next ``idle()`` tick and published by replacing a single reference, so
the event path always reads a complete map.
"""

import logging
from typing import Iterable, List, Optional

from ..theory.chord_map import EMPTY_CHORD_MAP, ChordMap, compile_chord_map
from ..theory.voicings import DEFAULT_VOICE_COUNT
from .config_store import Configuration, ConfigurationStore
from .display import ScaleDisplay, describe
from .harmonize import Event, harmonize_event

logger = logging.getLogger(__name__)


class HarmonizerEngine:
    def __init__(self, store: Optional[ConfigurationStore] = None, voices: int = DEFAULT_VOICE_COUNT) -> None:
        self.store = store or ConfigurationStore(voices)
        self.pending = False
        self.compile_count = 0
        self._chords: ChordMap = EMPTY_CHORD_MAP
        self._display: Optional[ScaleDisplay] = None
        self.recompile_now()

    @classmethod
    def from_configuration(cls, cfg: Configuration, voices: int = DEFAULT_VOICE_COUNT) -> "HarmonizerEngine":
        store = ConfigurationStore(voices)
        store.load(cfg)
        return cls(store)

    # Configuration side --------------------------------------------------
    def parameter_changed(self, index: int, value: int) -> None:
        self.store.set_parameter(index, value)
        self.pending = True

    def clear_scale(self) -> None:
        self.store.clear_scale()
        self.pending = True

    def idle(self) -> bool:
        """Maintenance tick: compile and publish if a change is pending."""
        if not self.pending:
            return False
        self.recompile_now()
        return True

    def recompile_now(self) -> ChordMap:
        cfg = self.store.snapshot()
        chords = compile_chord_map(cfg.root, cfg.scale_type, cfg.voicing)
        self.pending = False
        self._chords = chords
        self.compile_count += 1
        self._display = describe(cfg)
        logger.debug(
            "compiled %s (%d enabled voices)",
            self._display.summary(),
            sum(1 for v in cfg.voicing if v.enabled),
        )
        return chords

    @property
    def chord_map(self) -> ChordMap:
        return self._chords

    @property
    def display(self) -> ScaleDisplay:
        assert self._display is not None
        return self._display

    # Event side ----------------------------------------------------------
    def handle_midi(self, event: Event) -> List[Event]:
        return harmonize_event(event, self._chords)

    def process(self, events: Iterable[Event]) -> List[Event]:
        out: List[Event] = []
        for ev in events:
            out.extend(self.handle_midi(ev))
        return out
