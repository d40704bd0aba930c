"""
Analysis models - substitution options, bridge suggestions, emotion.

These are the structured results of the harmony analysis functions.
All are frozen and serialize directly with model_dump(mode="json").
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from chuk_mcp_harmony.constants import EmotionTag, SuggestionStrength
from chuk_mcp_harmony.core.pitch import PitchClass
from chuk_mcp_harmony.models.chord import Chord


class SubstitutionCategory(str, Enum):
    """Why a substitution was suggested."""

    COMMON_TONE = "common-tone"
    FUNCTIONAL = "functional"
    MODAL_INTERCHANGE = "modal-interchange"


class SubstitutionOption(BaseModel):
    """A candidate replacement chord with its justification."""

    chord: Chord = Field(..., description="The substitute chord")
    reason: str = Field(..., description="Human-readable justification")
    strength: float = Field(..., ge=0.0, le=1.0, description="Suitability score (0-1)")
    shared_notes: tuple[PitchClass, ...] = Field(
        default=(), description="Pitch classes shared with the original chord"
    )
    category: SubstitutionCategory = Field(..., description="Substitution category")

    model_config = {"frozen": True}


class SubstitutionSet(BaseModel):
    """All substitution options for a chord, grouped by category."""

    common_tone: list[SubstitutionOption] = Field(default_factory=list)
    functional: list[SubstitutionOption] = Field(default_factory=list)
    modal_interchange: list[SubstitutionOption] = Field(default_factory=list)

    model_config = {"frozen": True}

    def all_options(self) -> list[SubstitutionOption]:
        """Every option, category by category."""
        return [*self.common_tone, *self.functional, *self.modal_interchange]


class BridgeSuggestion(BaseModel):
    """A chord suggestion for writing a bridge section."""

    chord: Chord
    reason: str
    strength: SuggestionStrength = "safe"

    model_config = {"frozen": True}


class EmotionalProfile(BaseModel):
    """Primary emotion of a progression and how strongly it comes across."""

    primary: EmotionTag = "neutral"
    intensity: int = Field(default=5, ge=1, le=10)

    model_config = {"frozen": True}


class FamousExample(BaseModel):
    """A well-known song using a progression."""

    artist: str
    song: str

    model_config = {"frozen": True}


class ProgressionVibe(BaseModel):
    """Descriptive vibe for a progression."""

    label: str
    description: str
    famous_examples: list[FamousExample] = Field(default_factory=list)
    when_to_use: str = ""

    model_config = {"frozen": True}


class ProgressionAnalysis(BaseModel):
    """Full analysis of a progression."""

    emotional_profile: EmotionalProfile
    vibe: ProgressionVibe
    strength: int = Field(..., ge=0, le=100, description="Progression strength (0-100)")
    roman_numerals: str = Field(..., description="Numerals joined with ' - '")
    degrees: list[str] = Field(default_factory=list)

    model_config = {"frozen": True}
