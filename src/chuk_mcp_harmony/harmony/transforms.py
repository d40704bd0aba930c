"""
Chord transforms - pure edits that return a new Chord.

- extend: add a 7th/9th/11th/13th label (notes unchanged)
- modify_quality: rebuild third and fifth as augmented, diminished or dominant
- add_suspension: replace the third with a 2nd or 4th
- transpose: shift everything a semitone up or down

Every transform keeps notes[0] as the root and re-renders the name and
Roman-numeral label from the new quality. A label the parser can't read
(a caller-made chord) is kept verbatim.
"""

from __future__ import annotations

from typing import Literal

from chuk_mcp_harmony.constants import EXTENSION_DEGREES, ErrorMessages
from chuk_mcp_harmony.core.numeral import try_parse_numeral
from chuk_mcp_harmony.harmony.naming import render_chord_name, render_numeral
from chuk_mcp_harmony.models.chord import Chord, ChordQuality

QualityChange = Literal["augmented", "diminished", "dominant"]
Suspension = Literal["sus2", "sus4"]
Direction = Literal["up", "down"]

# (third, fifth) semitones above the root for each quality change
_QUALITY_INTERVALS: dict[ChordQuality, tuple[int, int]] = {
    ChordQuality.AUGMENTED: (4, 8),
    ChordQuality.DIMINISHED: (3, 6),
    ChordQuality.DOMINANT: (4, 7),
}

_SUSPENSION_INTERVALS: dict[ChordQuality, int] = {
    ChordQuality.SUS2: 2,
    ChordQuality.SUS4: 5,
}

PERFECT_FIFTH = 7


def _coerce_quality(value: str) -> ChordQuality | None:
    try:
        return ChordQuality(value)
    except ValueError:
        return None


def _relabel(chord: Chord, quality: ChordQuality, extension: int | None) -> dict[str, str]:
    """New roman_numeral and name for a chord taking on a quality/extension."""
    parts = try_parse_numeral(chord.roman_numeral)
    numeral = render_numeral(parts, quality, extension) if parts else chord.roman_numeral
    prefer_flats = bool(parts and parts.flat)
    return {
        "roman_numeral": numeral,
        "name": render_chord_name(chord.root, quality, extension, prefer_flats),
    }


def extend(chord: Chord, degree: int) -> Chord:
    """
    Add an extension to a chord's labels.

    The triad itself is untouched; only the label and name change.

    Args:
        chord: Chord to extend
        degree: 7, 9, 11 or 13

    Returns:
        New Chord with the extension recorded
    """
    if degree not in EXTENSION_DEGREES:
        raise ValueError(ErrorMessages.INVALID_EXTENSION.format(degree=degree))

    return chord.model_copy(
        update={"extension": degree, **_relabel(chord, chord.quality, degree)}
    )


def modify_quality(chord: Chord, target: QualityChange | ChordQuality) -> Chord:
    """
    Rebuild a chord's third and fifth from its existing root.

    augmented: +4/+8, diminished: +3/+6, dominant: +4/+7

    Args:
        chord: Chord to modify
        target: 'augmented', 'diminished' or 'dominant'

    Returns:
        New Chord with replaced notes and quality
    """
    quality = _coerce_quality(target)
    if quality not in _QUALITY_INTERVALS:
        raise ValueError(ErrorMessages.INVALID_QUALITY_CHANGE.format(quality=target))

    third, fifth = _QUALITY_INTERVALS[quality]
    root = chord.root
    return chord.model_copy(
        update={
            "quality": quality,
            "notes": (root, root.transpose(third), root.transpose(fifth)),
            **_relabel(chord, quality, chord.extension),
        }
    )


def add_suspension(chord: Chord, kind: Suspension | ChordQuality) -> Chord:
    """
    Replace the third with a major second (sus2) or perfect fourth (sus4).

    The fifth is rebuilt as a perfect fifth above the root.
    """
    quality = _coerce_quality(kind)
    if quality not in _SUSPENSION_INTERVALS:
        raise ValueError(ErrorMessages.INVALID_SUSPENSION.format(kind=kind))

    root = chord.root
    return chord.model_copy(
        update={
            "quality": quality,
            "notes": (
                root,
                root.transpose(_SUSPENSION_INTERVALS[quality]),
                root.transpose(PERFECT_FIFTH),
            ),
            **_relabel(chord, quality, chord.extension),
        }
    )


def transpose(chord: Chord, direction: Direction) -> Chord:
    """Shift every note (and the displayed root) one semitone up or down."""
    if direction == "up":
        step = 1
    elif direction == "down":
        step = -1
    else:
        raise ValueError(ErrorMessages.INVALID_DIRECTION.format(direction=direction))

    notes = tuple(note.transpose(step) for note in chord.notes)
    parts = try_parse_numeral(chord.roman_numeral)
    name = render_chord_name(
        notes[0], chord.quality, chord.extension, prefer_flats=bool(parts and parts.flat)
    )
    return chord.model_copy(update={"notes": notes, "name": name})
