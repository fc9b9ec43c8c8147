from __future__ import annotations

"""Human-readable rendering of the compiled scale (presentation only)."""

from dataclasses import dataclass
from typing import List, Tuple

from ..theory.chord_map import ChordMap
from ..theory.note_utils import ROOT_MENU_NAMES, note_name
from ..theory.scales import scale_notes
from .config_store import Configuration


@dataclass(frozen=True)
class ScaleDisplay:
    root_name: str
    scale_name: str
    notes: Tuple[str, ...]
    degree_range: Tuple[int, int]

    def summary(self) -> str:
        return f"{self.root_name} {self.scale_name}: {' '.join(self.notes)}"


def describe(cfg: Configuration) -> ScaleDisplay:
    st = cfg.scale_type
    notes = tuple(note_name(n) for n in scale_notes(cfg.root, st))
    return ScaleDisplay(
        root_name=ROOT_MENU_NAMES[cfg.root],
        scale_name=st.name,
        notes=notes,
        degree_range=(1, max(1, len(st))),
    )


def format_chord_map(chord_map: ChordMap) -> str:
    """One line per note: name, offsets, and the sounding notes relative to it."""
    lines: List[str] = []
    for n, chord in enumerate(chord_map):
        if not chord:
            lines.append(f"{note_name(n):<3} -")
            continue
        offsets = " ".join(f"{o:+d}" for o in chord)
        names = " ".join(note_name(n + o) for o in chord)
        lines.append(f"{note_name(n):<3} [{offsets}]  {names}")
    return "\n".join(lines)
