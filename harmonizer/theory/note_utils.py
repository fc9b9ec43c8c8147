# harmonizer/theory/note_utils.py
from __future__ import annotations
from typing import Dict, List

NOTES_PER_OCTAVE = 12
PITCH_MIN = 0
PITCH_MAX = 127

PITCH_CLASS_NAMES_SHARP: List[str] = ["C","C#","D","D#","E","F","F#","G","G#","A","A#","B"]

# Menu strings shown for the "Scale Root" parameter.
ROOT_MENU_NAMES: List[str] = [
    "C", "C♯ - D♭", "D", "D♯ - E♭", "E", "F", "F♯ - G♭", "G", "G♯ - A♭", "A", "A♯ - B♭", "B",
]

NAME_TO_PC: Dict[str, int] = {
    "C":0,"B#":0, "C#":1,"Db":1, "D":2,"D#":3,"Eb":3, "E":4,"Fb":4,
    "F":5,"E#":5, "F#":6,"Gb":6, "G":7,"G#":8,"Ab":8, "A":9,"A#":10,"Bb":10, "B":11,"Cb":11
}


def is_note(value: int) -> bool:
    return 0 <= value < NOTES_PER_OCTAVE


def is_pitch(value: int) -> bool:
    return PITCH_MIN <= value <= PITCH_MAX


def note_name(note: int) -> str:
    """Sharp-based name of a pitch class (C=0)."""
    return PITCH_CLASS_NAMES_SHARP[note % NOTES_PER_OCTAVE]


def pitch_name(pitch: int) -> str:
    """Name with octave, middle C (60) -> 'C4'."""
    return f"{note_name(pitch)}{pitch // NOTES_PER_OCTAVE - 1}"


def parse_root(name: str) -> int:
    """Resolve a root name ('Eb', 'F#', 'C♯ - D♭', '3') to a pitch class.

    Raises:
        ValueError: if the name is not recognized.
    """
    text = str(name).strip()
    if text.isdigit() and is_note(int(text)):
        return int(text)
    if text in ROOT_MENU_NAMES:
        return ROOT_MENU_NAMES.index(text)
    norm = text.replace("♯", "#").replace("♭", "b")
    if norm[:1]:
        norm = norm[0].upper() + norm[1:]
    if norm not in NAME_TO_PC:
        raise ValueError(f"Unknown root note: {name}")
    return NAME_TO_PC[norm]
