"""
Pydantic models for the harmony engine.

This module provides:
- Chord: A resolved triad with its labels and function
- SubstitutionOption / SubstitutionSet: Substitution suggestions
- BridgeSuggestion, EmotionalProfile, ProgressionAnalysis: Analysis results
- HexPosition / HexLayer / LayoutTheme: The hexagon wheel
- ChordSchema: Named four-chord progressions
"""

from chuk_mcp_harmony.models.analysis import (
    BridgeSuggestion,
    EmotionalProfile,
    FamousExample,
    ProgressionAnalysis,
    ProgressionVibe,
    SubstitutionCategory,
    SubstitutionOption,
    SubstitutionSet,
)
from chuk_mcp_harmony.models.chord import Chord, ChordQuality, HarmonicFunction
from chuk_mcp_harmony.models.layout import (
    HexLayer,
    HexPosition,
    LayerName,
    LayoutTheme,
    ThemeMetadata,
)
from chuk_mcp_harmony.models.schema import ChordSchema, SchemaMetadata

__all__ = [
    # Chord
    "Chord",
    "ChordQuality",
    "HarmonicFunction",
    # Analysis
    "BridgeSuggestion",
    "EmotionalProfile",
    "FamousExample",
    "ProgressionAnalysis",
    "ProgressionVibe",
    "SubstitutionCategory",
    "SubstitutionOption",
    "SubstitutionSet",
    # Layout
    "HexLayer",
    "HexPosition",
    "LayerName",
    "LayoutTheme",
    "ThemeMetadata",
    # Schemas
    "ChordSchema",
    "SchemaMetadata",
]
