"""
Core harmony primitives - the pitch space everything else composes on.

- PitchClass: The 12 chromatic pitch classes (0-11)
- Mode: The seven diatonic modes as semitone-offset patterns
- Key: Root + mode, resolves scale degrees to pitches
- NumeralParts: A Roman-numeral symbol split into flat/numeral/suffix
"""

from chuk_mcp_harmony.core.numeral import (
    InvalidRomanNumeral,
    NumeralParts,
    base_numeral,
    parse_numeral,
    try_parse_numeral,
)
from chuk_mcp_harmony.core.pitch import (
    PitchClass,
    all_notes,
    circle_of_fifths,
    normalize_note_name,
    note_index,
    note_name,
    notes_equal,
)
from chuk_mcp_harmony.core.scale import Key, Mode, scale_degrees, scale_notes

__all__ = [
    # Pitch
    "PitchClass",
    "all_notes",
    "circle_of_fifths",
    "normalize_note_name",
    "note_index",
    "note_name",
    "notes_equal",
    # Scale
    "Key",
    "Mode",
    "scale_degrees",
    "scale_notes",
    # Numerals
    "InvalidRomanNumeral",
    "NumeralParts",
    "base_numeral",
    "parse_numeral",
    "try_parse_numeral",
]
