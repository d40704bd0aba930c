"""
Pitch primitives - PitchClass and note-name handling.

PitchClass represents the 12 chromatic pitches (octave-independent).
Note names are a display concern: sharp and flat spellings of the same
pitch compare equal once they are resolved to a PitchClass.
"""

from __future__ import annotations

import logging
from enum import IntEnum

logger = logging.getLogger(__name__)

# Display name mappings (module level to avoid IntEnum member issues)
_SHARP_NAMES: list[str] = [
    "C",
    "C#",
    "D",
    "D#",
    "E",
    "F",
    "F#",
    "G",
    "G#",
    "A",
    "A#",
    "B",
]
_FLAT_NAMES: list[str] = [
    "C",
    "Db",
    "D",
    "Eb",
    "E",
    "F",
    "Gb",
    "G",
    "Ab",
    "A",
    "Bb",
    "B",
]

# C, G, D, A, E, B, F#, C#, G#, D#, A#, F
_CIRCLE_OF_FIFTHS: tuple[int, ...] = (0, 7, 2, 9, 4, 11, 6, 1, 8, 3, 10, 5)


class PitchClass(IntEnum):
    """
    The 12 chromatic pitch classes (0-11).

    Octave-independent - C4 and C5 are both PitchClass.C.
    Enharmonic equivalents share the same value (C# == Db == 1).

    Spelling is a display concern, handled at serialization.
    Internally, we use sharp names (Cs, Ds, etc.).
    """

    C = 0
    Cs = 1  # C# / Db
    D = 2
    Ds = 3  # D# / Eb
    E = 4
    F = 5
    Fs = 6  # F# / Gb
    G = 7
    Gs = 8  # G# / Ab
    A = 9
    As = 10  # A# / Bb
    B = 11

    def transpose(self, semitones: int) -> PitchClass:
        """Transpose by a number of semitones (positive or negative)."""
        return PitchClass((self.value + semitones) % 12)

    def semitones_to(self, other: PitchClass) -> int:
        """Ascending distance in semitones from this pitch class to another."""
        return (other.value - self.value) % 12

    def spell(self, prefer_flats: bool = False) -> str:
        """Get human-readable name."""
        names = _FLAT_NAMES if prefer_flats else _SHARP_NAMES
        return names[self.value]

    @classmethod
    def parse(cls, name: str) -> PitchClass:
        """
        Parse a pitch class from a string like 'C', 'C#', 'Db'.

        Strict: raises ValueError for anything it does not recognize.
        Use note_index() for the lenient, C-defaulting variant.
        """
        cleaned = _clean_name(name)

        if cleaned in _SHARP_NAMES:
            return cls(_SHARP_NAMES.index(cleaned))

        if cleaned in _FLAT_NAMES:
            return cls(_FLAT_NAMES.index(cleaned))

        # Try enum names (C, Cs, D, Ds, etc.)
        name_upper = name.strip().upper()
        for member in cls:
            if member.name.upper() == name_upper:
                return member

        raise ValueError(f"Unknown pitch class: {name}")


def _clean_name(name: str) -> str:
    """Normalize case and accidental glyphs ('c♯' -> 'C#', 'eb' -> 'Eb')."""
    cleaned = name.strip().replace("♯", "#").replace("♭", "b")
    if not cleaned:
        return cleaned
    return cleaned[0].upper() + cleaned[1:]


def note_index(name: str) -> PitchClass:
    """
    Resolve a note name to its pitch class.

    Sharp and flat spellings resolve to the same value. Unrecognized
    names fall back to C rather than failing.
    """
    try:
        return PitchClass.parse(name)
    except ValueError:
        logger.debug(f"Unrecognized note name {name!r}, defaulting to C")
        return PitchClass.C


def note_name(pitch: int, prefer_flats: bool = False) -> str:
    """Spell a pitch class (any int, reduced mod 12)."""
    return PitchClass(pitch % 12).spell(prefer_flats)


def normalize_note_name(name: str) -> str:
    """Normalize a note name to sharp spelling ('Bb' -> 'A#')."""
    cleaned = _clean_name(name)
    if cleaned in _FLAT_NAMES and cleaned not in _SHARP_NAMES:
        return _SHARP_NAMES[_FLAT_NAMES.index(cleaned)]
    return cleaned


def notes_equal(a: str, b: str) -> bool:
    """Check whether two note names spell the same pitch."""
    return normalize_note_name(a) == normalize_note_name(b)


def all_notes(prefer_flats: bool = False) -> list[str]:
    """All 12 chromatic note names, starting at C."""
    return list(_FLAT_NAMES if prefer_flats else _SHARP_NAMES)


def circle_of_fifths() -> list[PitchClass]:
    """The fixed circle-of-fifths traversal starting at C."""
    return [PitchClass(p) for p in _CIRCLE_OF_FIFTHS]
