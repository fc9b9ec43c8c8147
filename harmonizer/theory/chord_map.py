from __future__ import annotations

"""Scale/voicing compiler.

Turns (root, scale type, voicing) into a ChordMap: for each of the 12 pitch
classes, the half-step offsets to sound when a pitch of that class is played.
"""

from typing import Iterator, List, Sequence, Tuple

from .note_utils import NOTES_PER_OCTAVE, is_note
from .scales import ScaleType
from .voicings import Voicing

Chord = Tuple[int, ...]


class ChordMap:
    """Immutable total map from note (0..11) to chord offsets."""

    __slots__ = ("_chords",)

    def __init__(self, chords: Sequence[Sequence[int]] | None = None) -> None:
        if chords is None:
            chords = [() for _ in range(NOTES_PER_OCTAVE)]
        if len(chords) != NOTES_PER_OCTAVE:
            raise ValueError("ChordMap needs exactly 12 entries")
        self._chords: Tuple[Chord, ...] = tuple(tuple(int(o) for o in c) for c in chords)

    def __getitem__(self, note: int) -> Chord:
        return self._chords[note]

    def __len__(self) -> int:
        return NOTES_PER_OCTAVE

    def __iter__(self) -> Iterator[Chord]:
        return iter(self._chords)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ChordMap):
            return NotImplemented
        return self._chords == other._chords

    def __hash__(self) -> int:
        return hash(self._chords)

    def __repr__(self) -> str:
        return f"ChordMap({[list(c) for c in self._chords]!r})"

    def chord_for(self, pitch: int) -> Chord:
        return self._chords[pitch % NOTES_PER_OCTAVE]

    def is_silent(self) -> bool:
        return not any(self._chords)

    def to_lists(self) -> List[List[int]]:
        return [list(c) for c in self._chords]


EMPTY_CHORD_MAP = ChordMap()


def interval(steps: Sequence[int], start: int, count: int) -> int:
    """Sum ``count`` consecutive steps beginning at index ``start``.

    The index wraps around the step sequence, the running sum does not: a
    count larger than the scale length climbs past the octave (compound
    interval).
    """
    length = len(steps)
    total = 0
    for k in range(count):
        total += steps[(start + k) % length]
    return total


def compile_chord_map(root: int, scale_type: ScaleType, voicing: Voicing) -> ChordMap:
    """Compile the chord for every note of the scale rooted at ``root``.

    Notes outside the scale get an empty chord. An empty scale type or a
    voicing without enabled voices yields a silent map.
    """
    assert is_note(root), f"root out of range: {root}"
    chords: List[List[int]] = [[] for _ in range(NOTES_PER_OCTAVE)]
    steps = scale_type.steps
    active = [v for v in voicing if v.enabled]

    n = root
    for i, step in enumerate(steps):
        chords[n] = [interval(steps, i, v.degree) + v.octave for v in active]
        n = (n + step) % NOTES_PER_OCTAVE

    return ChordMap(chords)
