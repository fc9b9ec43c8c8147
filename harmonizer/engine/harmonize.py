from __future__ import annotations

"""Per-event harmonization against a compiled ChordMap."""

import logging
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Iterable, Iterator, List, Union

from ..theory.chord_map import ChordMap
from ..theory.note_utils import is_pitch

logger = logging.getLogger(__name__)

NOTE_KINDS = {"note_on", "note_off"}


@dataclass(frozen=True)
class NoteEvent:
    kind: str
    pitch: int
    velocity: int = 90
    channel: int = 0
    t: int = 0

    def __post_init__(self) -> None:
        assert self.kind in NOTE_KINDS, f"not a note event kind: {self.kind}"


@dataclass(frozen=True)
class OtherEvent:
    """Any non-note event (control change, pitch bend, ...); passed through as-is."""

    kind: str
    payload: Dict[str, Any] = field(default_factory=dict)
    t: int = 0


Event = Union[NoteEvent, OtherEvent]


def harmonize(pitch: int, chord_map: ChordMap) -> List[int]:
    """Return ``pitch + offset`` for each offset of the pitch's chord, in order."""
    return [pitch + o for o in chord_map.chord_for(pitch)]


def harmonize_event(event: Event, chord_map: ChordMap) -> List[Event]:
    if not isinstance(event, NoteEvent):
        return [event]
    out: List[Event] = []
    for p in harmonize(event.pitch, chord_map):
        if not is_pitch(p):
            logger.debug("dropping out-of-range pitch %d (from %d)", p, event.pitch)
            continue
        out.append(replace(event, pitch=p))
    return out


def harmonize_stream(events: Iterable[Event], chord_map: ChordMap) -> Iterator[Event]:
    for ev in events:
        yield from harmonize_event(ev, chord_map)
