"""
Schema realization - a key-free schema resolved into concrete chords.
"""

from __future__ import annotations

from chuk_mcp_harmony.constants import ErrorMessages
from chuk_mcp_harmony.core.scale import Key
from chuk_mcp_harmony.harmony.resolver import roman_numeral_to_chord
from chuk_mcp_harmony.models.chord import Chord
from chuk_mcp_harmony.models.schema import ChordSchema


def realize_schema(schema: ChordSchema, key: Key, rotation: int = 0) -> list[Chord]:
    """
    Resolve a schema's numerals against a key.

    Args:
        schema: The schema to realize
        key: Target key
        rotation: 0 for the progression itself, 1..n for its rotations

    Returns:
        One Chord per numeral, in order

    Raises:
        ValueError: if the rotation index is out of range
        InvalidRomanNumeral: if the schema holds an unusable numeral
    """
    if not 0 <= rotation < schema.variant_count:
        raise ValueError(
            ErrorMessages.INVALID_ROTATION.format(
                rotation=rotation, name=schema.name, count=schema.variant_count
            )
        )

    return [roman_numeral_to_chord(numeral, key) for numeral in schema.variant(rotation)]
