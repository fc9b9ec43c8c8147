from __future__ import annotations

"""Scale types for 12-TET.

A scale type is a cyclic sequence of half-step intervals that partitions the
octave. Anchored at a root note it yields a concrete scale. The catalog below
is the fixed, ordered set of types offered by the "Chord Scale" menu; a type's
id is its index in the catalog.
"""

from dataclasses import dataclass
from typing import Dict, List, Tuple

from ..errors import CatalogError
from .note_utils import NOTES_PER_OCTAVE, is_note


@dataclass(frozen=True)
class ScaleType:
    steps: Tuple[int, ...]
    name: str
    family: str = ""

    def __post_init__(self) -> None:
        if not self.steps:
            return  # the "no scale" placeholder
        if any(int(s) <= 0 for s in self.steps):
            raise CatalogError(f"{self.name}: steps must be positive, got {list(self.steps)}")
        if sum(self.steps) != NOTES_PER_OCTAVE:
            raise CatalogError(f"{self.name}: steps must sum to 12, got {sum(self.steps)}")

    def __len__(self) -> int:
        return len(self.steps)

    @property
    def is_empty(self) -> bool:
        return not self.steps


NO_SCALE = ScaleType((), "None", "none")


_CATALOG_SOURCE: List[Tuple[str, Tuple[int, ...], str]] = [
    ("chromatic", (1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1), "Chromatic"),

    ("symmetric", (2, 1, 2, 1, 2, 1, 2, 1), "Whole Half"),
    ("symmetric", (1, 2, 1, 2, 1, 2, 1, 2), "Half Whole"),

    ("diatonic", (2, 2, 1, 2, 2, 2, 1), "Ionian - Major"),
    ("diatonic", (2, 1, 2, 2, 2, 1, 2), "Dorian"),
    ("diatonic", (1, 2, 2, 2, 1, 2, 2), "Phrygian"),
    ("diatonic", (2, 2, 2, 1, 2, 2, 1), "Lydian"),
    ("diatonic", (2, 2, 1, 2, 2, 1, 2), "Mixolydian"),
    ("diatonic", (2, 1, 2, 2, 1, 2, 2), "Aeolian - Minor"),
    ("diatonic", (1, 2, 2, 1, 2, 2, 2), "Locrian"),

    ("melodic_minor", (2, 1, 2, 2, 2, 2, 1), "Melodic Minor"),
    ("melodic_minor", (1, 2, 2, 2, 2, 1, 2), "Dorian ♭2 - Phrygian ♮6"),
    ("melodic_minor", (2, 2, 2, 2, 1, 2, 1), "Lydian ♯5 - Lydian Augmented"),
    ("melodic_minor", (2, 2, 2, 1, 2, 1, 2), "Lydian ♭7 - Lydian Dominant"),
    ("melodic_minor", (2, 2, 1, 2, 1, 2, 2), "Mixolydian ♭6 - Melodic Major"),
    ("melodic_minor", (2, 1, 2, 1, 2, 2, 2), "Dorian ♭5 - Locrian ♮2 - Half Diminished"),
    ("melodic_minor", (1, 2, 1, 2, 2, 2, 2), "Altered Dominant - Superlocrian"),

    ("harmonic_minor", (2, 1, 2, 2, 1, 3, 1), "Harmonic Minor"),
    ("harmonic_minor", (1, 2, 2, 1, 3, 1, 2), "Locrian ♯6"),
    ("harmonic_minor", (2, 2, 1, 3, 1, 2, 1), "Ionian ♯5 - Ionian Augmented"),
    ("harmonic_minor", (2, 1, 3, 1, 2, 1, 2), "Dorian ♯4 - Romanian"),
    ("harmonic_minor", (1, 3, 1, 2, 1, 2, 2), "Phrygian ♯3 - Phrygian Dominant"),
    ("harmonic_minor", (1, 2, 1, 2, 2, 1, 3), "Mixolydian ♯1 - Ultralocrian"),
    ("harmonic_minor", (3, 1, 2, 1, 2, 2, 1), "Lydian ♯2"),

    ("double_harmonic", (1, 3, 1, 2, 1, 3, 1), "Double Harmonic - Arabic - Gypsy - Byzantine"),
    ("double_harmonic", (3, 1, 2, 1, 3, 1, 1), "Lydian ♯2 ♯6"),
    ("double_harmonic", (1, 2, 1, 3, 1, 1, 3), "Ultraphrygian"),
    ("double_harmonic", (2, 1, 3, 1, 1, 3, 1), "Hungarian Minor"),
    ("double_harmonic", (1, 3, 1, 1, 3, 1, 2), "Oriental"),
    ("double_harmonic", (3, 1, 1, 3, 1, 2, 1), "Ionian Augmented ♯2"),
    ("double_harmonic", (1, 1, 3, 1, 2, 1, 3), "Locrian 𝄫3 𝄫7"),

    ("hexatonic", (2, 2, 2, 2, 2, 2), "Whole Tone"),
    ("hexatonic", (2, 2, 2, 3, 1, 2), "Prometheus"),
    ("hexatonic", (3, 1, 3, 1, 3, 1), "Augmented"),
    ("hexatonic", (1, 2, 3, 1, 3, 2), "Tritone"),
    ("hexatonic", (3, 2, 1, 1, 3, 2), "Blues"),

    ("pentatonic", (2, 2, 3, 2, 3), "Major Pentatonic"),
    ("pentatonic", (2, 3, 2, 3, 2), "Suspended Pentatonic - Egyptian"),
    ("pentatonic", (3, 2, 3, 2, 2), "Blues Minor Pentatonic - Man Gong"),
    ("pentatonic", (2, 3, 2, 2, 3), "Blues Major Pentatonic - Ritusen"),
    ("pentatonic", (3, 2, 2, 3, 2), "Minor Pentatonic"),
]

SCALE_CATALOG: Tuple[ScaleType, ...] = tuple(
    ScaleType(steps, name, family) for family, steps, name in _CATALOG_SOURCE
)


def _normalize_name(name: str) -> str:
    text = str(name).replace("𝄫", "bb").replace("♯", "#").replace("♭", "b")
    return " ".join(text.lower().replace("_", " ").split())


def _build_aliases() -> Dict[str, int]:
    aliases: Dict[str, int] = {}
    for idx, st in enumerate(SCALE_CATALOG):
        aliases.setdefault(_normalize_name(st.name), idx)
        for part in st.name.split(" - "):
            aliases.setdefault(_normalize_name(part), idx)
    aliases.setdefault("natural minor", aliases["aeolian"])
    return aliases


_ALIASES = _build_aliases()


def lookup(scale_id: int) -> ScaleType:
    """Return the scale type registered under ``scale_id``."""
    assert 0 <= scale_id < len(SCALE_CATALOG), f"scale id out of range: {scale_id}"
    return SCALE_CATALOG[scale_id]


def name(scale_id: int) -> str:
    return lookup(scale_id).name


def scale_names() -> List[str]:
    return [st.name for st in SCALE_CATALOG]


def find_scale(scale_name: str) -> int:
    """Resolve a display name or alias (e.g. 'major', 'dorian') to a scale id.

    Raises:
        KeyError: for names that match no catalog entry.
    """
    key = _normalize_name(scale_name)
    if key not in _ALIASES:
        raise KeyError(f"Unknown scale: {scale_name}")
    return _ALIASES[key]


def scale_notes(root: int, scale_type: ScaleType) -> List[int]:
    """Notes of ``scale_type`` anchored at ``root``, ascending from the root."""
    assert is_note(root), f"root out of range: {root}"
    notes: List[int] = []
    n = root
    for step in scale_type.steps:
        notes.append(n)
        n = (n + step) % NOTES_PER_OCTAVE
    return notes


def validate_catalog() -> None:
    """Re-check catalog integrity: invariants per entry and unique names."""
    seen = set()
    for st in SCALE_CATALOG:
        if st.is_empty:
            raise CatalogError(f"{st.name}: catalog entries must not be empty")
        ScaleType(st.steps, st.name, st.family)
        if st.name in seen:
            raise CatalogError(f"Duplicate scale name: {st.name}")
        seen.add(st.name)


validate_catalog()
