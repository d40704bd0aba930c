"""
Scale primitives - Mode and Key.

A mode is a fixed pattern of semitone offsets from the tonic.
A key is a mode applied to a root pitch; its scale degrees are a pure
function of the two.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from chuk_mcp_harmony.constants import ErrorMessages
from chuk_mcp_harmony.core.pitch import PitchClass, note_index


class Mode(str, Enum):
    """The seven diatonic modes."""

    MAJOR = "major"
    MINOR = "minor"
    DORIAN = "dorian"
    PHRYGIAN = "phrygian"
    LYDIAN = "lydian"
    MIXOLYDIAN = "mixolydian"
    LOCRIAN = "locrian"

    @property
    def offsets(self) -> tuple[int, ...]:
        """Semitone offsets of the seven degrees from the tonic."""
        return MODE_OFFSETS[self]

    @property
    def is_major_flavored(self) -> bool:
        """True when the tonic triad of this mode is major."""
        return self in _MAJOR_FLAVORED

    @property
    def parallel(self) -> Mode:
        """The parallel mode used for modal interchange (flavor flipped)."""
        return Mode.MINOR if self.is_major_flavored else Mode.MAJOR

    @classmethod
    def parse(cls, name: str) -> Mode:
        """Parse a mode name ('major', 'Minor', 'natural_minor', 'ionian', 'aeolian')."""
        cleaned = name.strip().lower().replace("-", "_")
        cleaned = _MODE_ALIASES.get(cleaned, cleaned)
        try:
            return cls(cleaned)
        except ValueError:
            raise ValueError(f"Unknown mode: {name}") from None


MODE_OFFSETS: dict[Mode, tuple[int, ...]] = {
    Mode.MAJOR: (0, 2, 4, 5, 7, 9, 11),
    Mode.MINOR: (0, 2, 3, 5, 7, 8, 10),
    Mode.DORIAN: (0, 2, 3, 5, 7, 9, 10),
    Mode.PHRYGIAN: (0, 1, 3, 5, 7, 8, 10),
    Mode.LYDIAN: (0, 2, 4, 6, 7, 9, 11),
    Mode.MIXOLYDIAN: (0, 2, 4, 5, 7, 9, 10),
    Mode.LOCRIAN: (0, 1, 3, 5, 6, 8, 10),
}

_MAJOR_FLAVORED = frozenset({Mode.MAJOR, Mode.LYDIAN, Mode.MIXOLYDIAN})

_MODE_ALIASES: dict[str, str] = {
    "ionian": "major",
    "aeolian": "minor",
    "natural_minor": "minor",
}


@dataclass(frozen=True)
class Key:
    """
    A key is a root pitch class plus a mode.

    This is the context for resolving Roman numerals to actual chords.

    Examples:
        Key(PitchClass.C, Mode.MAJOR) = C major
        Key(PitchClass.D, Mode.DORIAN) = D dorian
    """

    root: PitchClass
    mode: Mode = Mode.MAJOR

    def __post_init__(self) -> None:
        # Accept plain ints and mode strings from callers
        object.__setattr__(self, "root", PitchClass(int(self.root) % 12))
        if not isinstance(self.mode, Mode):
            object.__setattr__(self, "mode", Mode.parse(str(self.mode)))

    def scale_degrees(self) -> list[PitchClass]:
        """The seven scale degrees, starting at the root."""
        return [self.root.transpose(offset) for offset in self.mode.offsets]

    def parallel(self) -> Key:
        """Same root, opposite flavor (C major <-> C minor)."""
        return Key(self.root, self.mode.parallel)

    @property
    def is_major_flavored(self) -> bool:
        return self.mode.is_major_flavored

    def __str__(self) -> str:
        return f"{self.root.spell()} {self.mode.value}"

    def __repr__(self) -> str:
        return f"Key({self.root!r}, {self.mode!r})"

    @classmethod
    def from_names(cls, root: str, mode: str = "major") -> Key:
        """
        Build a key from a note name and a mode name.

        Unknown note names fall back to C; unknown modes raise ValueError.
        """
        return cls(note_index(root), Mode.parse(mode))

    @classmethod
    def parse(cls, name: str) -> Key:
        """
        Parse a key from a string like 'C_major', 'D_minor', 'F#_dorian'.

        Args:
            name: Key name with underscore separator

        Returns:
            Parsed Key object
        """
        parts = name.strip().split("_")
        if len(parts) < 2:
            raise ValueError(ErrorMessages.INVALID_KEY.format(key=name))

        return cls.from_names(parts[0], "_".join(parts[1:]))


def scale_degrees(key: Key) -> list[PitchClass]:
    """The seven scale degrees of a key, rotated to start at its root."""
    return key.scale_degrees()


def scale_notes(key: Key, prefer_flats: bool = False) -> list[str]:
    """Spelled note names of a key's scale."""
    return [p.spell(prefer_flats) for p in key.scale_degrees()]
