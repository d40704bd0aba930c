"""
Constants and enums for the harmony engine.

No magic strings - use enums and Literal types for constrained values.
"""

from typing import Literal

# Roman numerals in degree order (index 0 = tonic)
ROMAN_NUMERALS: tuple[str, ...] = ("I", "II", "III", "IV", "V", "VI", "VII")

# Allowed chord extensions
EXTENSION_DEGREES: tuple[int, ...] = (7, 9, 11, 13)

# Number of nodes on every outer ring of the hexagon wheel
HEX_RING_SIZE = 6

# Neutral score for progressions too short to judge
NEUTRAL_PROGRESSION_SCORE = 50

# Qualitative strength labels for suggestions
SuggestionStrength = Literal["safe", "moderate", "spicy"]

# Emotion tags produced by the progression analyzer
EmotionTag = Literal["uplifting", "melancholic", "tense", "romantic", "hopeful", "dark", "neutral"]

# Schema difficulty levels
Difficulty = Literal["beginner", "intermediate", "advanced"]


class ErrorMessages:
    """Standardized error messages."""

    INVALID_ROMAN_NUMERAL = "Invalid roman numeral: '{symbol}'."
    INVALID_KEY = "Invalid key: '{key}'. Expected format like 'C_major' or 'D_dorian'."
    INVALID_EXTENSION = "Invalid extension: {degree}. Must be one of 7, 9, 11, 13."
    INVALID_QUALITY_CHANGE = "Invalid quality change: '{quality}'. Use augmented, diminished or dominant."
    INVALID_SUSPENSION = "Invalid suspension: '{kind}'. Use sus2 or sus4."
    INVALID_DIRECTION = "Invalid transpose direction: '{direction}'. Use up or down."
    UNKNOWN_OPERATION = "Unknown chord operation: '{operation}'."
    SCHEMA_NOT_FOUND = "Schema '{name}' not found."
    THEME_NOT_FOUND = "Theme '{name}' not found."
    INVALID_ROTATION = "Rotation {rotation} out of range for schema '{name}' ({count} available)."
