"""
Chord model - the value every engine component produces and consumes.

A Chord is a resolved triad: three pitch classes (root, third, fifth)
plus the labels a user sees. Caller metadata (beats, start position,
bass) is carried through transforms but never read by the engine.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, field_validator

from chuk_mcp_harmony.core.pitch import PitchClass


class ChordQuality(str, Enum):
    """Triad qualities the engine can produce."""

    MAJOR = "major"
    MINOR = "minor"
    DIMINISHED = "diminished"
    AUGMENTED = "augmented"
    DOMINANT = "dominant"
    SUS2 = "sus2"
    SUS4 = "sus4"


class HarmonicFunction(str, Enum):
    """Functional role of a chord within its key."""

    TONIC = "tonic"
    SUBDOMINANT = "subdominant"
    DOMINANT = "dominant"


# Order used by the progression scorer for "forward" motion
FUNCTION_ORDER: tuple[HarmonicFunction, ...] = (
    HarmonicFunction.TONIC,
    HarmonicFunction.SUBDOMINANT,
    HarmonicFunction.DOMINANT,
)


class Chord(BaseModel):
    """
    A concrete chord resolved from a Roman numeral in a key.

    notes[0] is always the root. Equality between chords in analysis code
    is by pitch class, never by the spelled name.
    """

    roman_numeral: str = Field(..., description="Roman numeral label (e.g., 'V', 'ii7', 'bVII')")
    quality: ChordQuality = Field(..., description="Chord quality")
    notes: tuple[PitchClass, PitchClass, PitchClass] = Field(
        ..., description="Root, third and fifth pitch classes"
    )
    function: HarmonicFunction = Field(..., description="Harmonic function in the key")
    name: str | None = Field(None, description="Display name (e.g., 'G major')")
    extension: int | None = Field(None, description="Extension degree (7, 9, 11 or 13)")

    # Caller metadata, carried through untouched
    beats: float | None = Field(None, description="Number of beats the chord lasts")
    duration_beats: float | None = Field(None, description="Duration in beats")
    start_beat: float | None = Field(None, description="Start position in the progression")
    bass: str | None = Field(None, description="Bass note for slash chords")

    model_config = {"frozen": True}

    @field_validator("notes", mode="before")
    @classmethod
    def reduce_notes(cls, v: object) -> object:
        """Accept any ints and reduce them mod 12."""
        if isinstance(v, (list, tuple)):
            return tuple(int(n) % 12 for n in v)
        return v

    @property
    def root(self) -> PitchClass:
        return self.notes[0]

    @property
    def third(self) -> PitchClass:
        return self.notes[1]

    @property
    def fifth(self) -> PitchClass:
        return self.notes[2]

    def pitch_set(self) -> frozenset[PitchClass]:
        """Distinct pitch classes in the chord."""
        return frozenset(self.notes)

    def shared_notes(self, other: Chord) -> tuple[PitchClass, ...]:
        """Pitch classes this chord shares with another, in this chord's order."""
        other_set = other.pitch_set()
        shared: list[PitchClass] = []
        for note in self.notes:
            if note in other_set and note not in shared:
                shared.append(note)
        return tuple(shared)

    def is_same_chord(self, other: Chord) -> bool:
        """Same quality with either the same label or the same pitch classes."""
        if self.quality != other.quality:
            return False
        return self.roman_numeral == other.roman_numeral or self.notes == other.notes

    def __str__(self) -> str:
        return self.name or self.roman_numeral
