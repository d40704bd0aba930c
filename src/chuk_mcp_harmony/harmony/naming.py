"""
Label rendering - chord names and Roman-numeral labels from enums.

Labels are never patched by substring replacement. Every label is
rebuilt from (flat marker, base numeral, quality, extension), so a
transform that changes the quality can't leave a stale glyph behind.
"""

from __future__ import annotations

from chuk_mcp_harmony.core.numeral import NumeralParts
from chuk_mcp_harmony.core.pitch import PitchClass
from chuk_mcp_harmony.models.chord import ChordQuality

# Short suffix used in compact chord symbols ("Am", "B°", "C+")
_SYMBOL_SUFFIX: dict[ChordQuality, str] = {
    ChordQuality.MAJOR: "",
    ChordQuality.MINOR: "m",
    ChordQuality.DIMINISHED: "°",
    ChordQuality.AUGMENTED: "+",
    ChordQuality.DOMINANT: "7",
    ChordQuality.SUS2: "sus2",
    ChordQuality.SUS4: "sus4",
}

_MINOR_CASE = frozenset({ChordQuality.MINOR, ChordQuality.DIMINISHED})


def render_chord_name(
    root: PitchClass,
    quality: ChordQuality,
    extension: int | None = None,
    prefer_flats: bool = False,
) -> str:
    """
    Render a long-form chord name.

    Examples:
        (G, MAJOR)          -> 'G major'
        (A, MINOR, 7)       -> 'A minor 7'
        (A#, MAJOR, flats)  -> 'Bb major'
    """
    name = f"{root.spell(prefer_flats)} {quality.value}"
    if extension is not None:
        name += f" {extension}"
    return name


def render_chord_symbol(root: PitchClass, quality: ChordQuality, prefer_flats: bool = False) -> str:
    """Render a compact chord symbol ('C', 'Am', 'B°', 'C+', 'Dsus4')."""
    return f"{root.spell(prefer_flats)}{_SYMBOL_SUFFIX[quality]}"


def extension_label(quality: ChordQuality, degree: int) -> str:
    """
    Quality-aware extension label used inside Roman numerals.

    Sevenths pick their own flavour (°7, m7 or 7); 9/11/13 keep the
    quality marker in front of the degree.
    """
    if degree == 7:
        if quality == ChordQuality.DIMINISHED:
            return "°7"
        if quality == ChordQuality.MINOR:
            return "m7"
        return "7"

    prefix = {
        ChordQuality.MINOR: "m",
        ChordQuality.DIMINISHED: "°",
        ChordQuality.AUGMENTED: "+",
    }.get(quality, "")
    return f"{prefix}{degree}"


def render_numeral(parts: NumeralParts, quality: ChordQuality, extension: int | None = None) -> str:
    """
    Rebuild a Roman-numeral label for a quality and optional extension.

    The numeral keeps the caller's case and flat marker; only the suffix
    is regenerated.

    Examples:
        ('vii', DIMINISHED)        -> 'vii°'
        ('ii', MINOR, 7)           -> 'iim7'
        ('V', AUGMENTED)           -> 'V+'
        ('V', SUS4, 7)             -> 'V7sus4'
    """
    base = f"{parts.prefix}{parts.numeral}"

    if extension is not None:
        suffix = extension_label(quality, extension)
    elif quality == ChordQuality.DIMINISHED:
        suffix = "°"
    elif quality == ChordQuality.AUGMENTED:
        suffix = "+"
    else:
        suffix = ""

    if quality in (ChordQuality.SUS2, ChordQuality.SUS4):
        suffix += quality.value

    return base + suffix


def diatonic_label(numeral: str, quality: ChordQuality) -> str:
    """
    Conventional diatonic label for a base numeral ('II' + MINOR -> 'ii').

    Minor and diminished chords are lower case; diminished adds '°' and
    augmented adds '+'.
    """
    label = numeral.lower() if quality in _MINOR_CASE else numeral.upper()
    if quality == ChordQuality.DIMINISHED:
        label += "°"
    elif quality == ChordQuality.AUGMENTED:
        label += "+"
    return label
