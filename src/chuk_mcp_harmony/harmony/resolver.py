"""
Chord resolver - Roman numeral + Key -> concrete Chord.

Diatonic numerals build their triad from the key's own scale and read
the quality off the resulting intervals. Flat-prefixed numerals are
borrowed roots: one semitone below the major-scale degree, always a
major triad.
"""

from __future__ import annotations

from chuk_mcp_harmony.constants import ROMAN_NUMERALS
from chuk_mcp_harmony.core.numeral import parse_numeral
from chuk_mcp_harmony.core.pitch import PitchClass
from chuk_mcp_harmony.core.scale import Key, Mode
from chuk_mcp_harmony.harmony.naming import diatonic_label, render_chord_name
from chuk_mcp_harmony.models.chord import Chord, ChordQuality, HarmonicFunction

# (third, fifth) semitones above the root
QUALITY_TEMPLATES: dict[tuple[int, int], ChordQuality] = {
    (4, 7): ChordQuality.MAJOR,
    (3, 7): ChordQuality.MINOR,
    (3, 6): ChordQuality.DIMINISHED,
    (4, 8): ChordQuality.AUGMENTED,
}

# Function by 0-based scale degree
FUNCTION_BY_DEGREE: tuple[HarmonicFunction, ...] = (
    HarmonicFunction.TONIC,  # I
    HarmonicFunction.SUBDOMINANT,  # ii
    HarmonicFunction.DOMINANT,  # iii
    HarmonicFunction.SUBDOMINANT,  # IV
    HarmonicFunction.DOMINANT,  # V
    HarmonicFunction.DOMINANT,  # vi
    HarmonicFunction.DOMINANT,  # vii°
)

MAJOR_TRIAD = (4, 7)


def classify_triad(root: PitchClass, third: PitchClass, fifth: PitchClass) -> ChordQuality:
    """Match a triad's intervals against the quality templates (default major)."""
    intervals = (root.semitones_to(third), root.semitones_to(fifth))
    return QUALITY_TEMPLATES.get(intervals, ChordQuality.MAJOR)


def roman_numeral_to_chord(symbol: str, key: Key) -> Chord:
    """
    Resolve a Roman-numeral symbol to a chord in a key.

    Args:
        symbol: Numeral like 'V', 'ii7', 'vii°', 'bVII'
        key: The key context

    Returns:
        The resolved Chord (roman_numeral keeps the caller's symbol)

    Raises:
        InvalidRomanNumeral: if the base numeral is not I..VII
    """
    parts = parse_numeral(symbol)
    index = parts.degree_index

    if parts.flat:
        unflattened = Key(key.root, Mode.MAJOR).scale_degrees()[index]
        root = unflattened.transpose(-1)
        third = root.transpose(MAJOR_TRIAD[0])
        fifth = root.transpose(MAJOR_TRIAD[1])
        quality = ChordQuality.MAJOR
    else:
        degrees = key.scale_degrees()
        root = degrees[index]
        third = degrees[(index + 2) % 7]
        fifth = degrees[(index + 4) % 7]
        quality = classify_triad(root, third, fifth)

    extension = parts.extension
    return Chord(
        roman_numeral=symbol,
        quality=quality,
        notes=(root, third, fifth),
        function=FUNCTION_BY_DEGREE[index],
        name=render_chord_name(root, quality, extension, prefer_flats=parts.flat),
        extension=extension,
    )


def diatonic_numerals(key: Key) -> list[str]:
    """
    The seven diatonic numerals of a key with conventional case and glyphs.

    C major -> I ii iii IV V vi vii°
    C minor -> i ii° III iv v VI VII
    """
    numerals: list[str] = []
    for numeral in ROMAN_NUMERALS:
        quality = roman_numeral_to_chord(numeral, key).quality
        numerals.append(diatonic_label(numeral, quality))
    return numerals


def diatonic_chords(key: Key) -> list[Chord]:
    """All seven diatonic chords of a key, tonic first."""
    return [roman_numeral_to_chord(numeral, key) for numeral in diatonic_numerals(key)]
