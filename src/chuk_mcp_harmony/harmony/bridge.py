"""
Bridge helpers - chord ideas for a contrasting section.

A bridge usually steps away from the tonic. These helpers suggest the
non-tonic diatonic chords a progression hasn't used yet, and a short list
of chords borrowed from the parallel key.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from chuk_mcp_harmony.constants import SuggestionStrength
from chuk_mcp_harmony.core.numeral import InvalidRomanNumeral, base_numeral
from chuk_mcp_harmony.core.scale import Key
from chuk_mcp_harmony.harmony.naming import render_chord_name
from chuk_mcp_harmony.harmony.resolver import roman_numeral_to_chord
from chuk_mcp_harmony.models.analysis import BridgeSuggestion
from chuk_mcp_harmony.models.chord import Chord

logger = logging.getLogger(__name__)

MAJOR_BRIDGE_NUMERALS = ("IV", "V", "ii", "vi", "iii")
MINOR_BRIDGE_NUMERALS = ("iv", "v", "VI", "VII", "III")

# (label shown to the user, numeral in the parallel key, spicy)
MAJOR_BORROWS: tuple[tuple[str, str, bool], ...] = (
    ("bIII", "III", True),
    ("bVI", "VI", True),
    ("bVII", "VII", True),
    ("iv", "iv", False),
)
MINOR_BORROWS: tuple[tuple[str, str, bool], ...] = (
    ("iii", "iii", True),
    ("vi", "vi", True),
    ("vii°", "vii°", True),
    ("IV", "IV", False),
)


def _bridge_reason(numeral: str) -> tuple[str, SuggestionStrength]:
    base = base_numeral(numeral)
    if base == "IV":
        return "Subdominant - provides contrast while staying in key", "safe"
    if base == "V":
        return "Dominant - creates tension and leads back to chorus", "safe"
    if base in ("II", "VI"):
        return "Provides color while maintaining function", "moderate"
    return "Adds harmonic interest", "moderate"


def get_bridge_chord_suggestions(key: Key, progression: Sequence[Chord]) -> list[BridgeSuggestion]:
    """
    Non-tonic chords for a bridge, skipping any already in the progression.

    Args:
        key: The song's key
        progression: Chords already used (compared by Roman numeral)

    Returns:
        Suggestions in preference order (IV and V first)
    """
    numerals = MAJOR_BRIDGE_NUMERALS if key.is_major_flavored else MINOR_BRIDGE_NUMERALS
    used = {chord.roman_numeral for chord in progression}

    suggestions: list[BridgeSuggestion] = []
    for numeral in numerals:
        try:
            chord = roman_numeral_to_chord(numeral, key)
        except InvalidRomanNumeral:
            logger.debug(f"Skipping bridge candidate {numeral!r}")
            continue
        if chord.roman_numeral in used:
            continue

        reason, strength = _bridge_reason(numeral)
        suggestions.append(BridgeSuggestion(chord=chord, reason=reason, strength=strength))

    return suggestions


def get_borrowed_chords(key: Key) -> list[BridgeSuggestion]:
    """
    A short list of chords borrowed from the parallel key.

    Major-flavored keys borrow bIII, bVI, bVII and iv from the parallel
    minor; minor-flavored keys borrow iii, vi, vii° and IV from the
    parallel major. The chord keeps the label a writer would use in the
    home key.
    """
    parallel = key.parallel()
    borrows = MAJOR_BORROWS if key.is_major_flavored else MINOR_BORROWS

    suggestions: list[BridgeSuggestion] = []
    for label, parallel_numeral, spicy in borrows:
        chord = roman_numeral_to_chord(parallel_numeral, parallel)
        mode = parallel.mode.value
        name = render_chord_name(chord.root, chord.quality, prefer_flats=label.startswith("b"))
        suggestions.append(
            BridgeSuggestion(
                chord=chord.model_copy(update={"roman_numeral": label, "name": name}),
                reason=(
                    f"Borrowed from {mode} - adds dramatic color"
                    if spicy
                    else f"Borrowed from {mode} - safe but interesting"
                ),
                strength="spicy" if spicy else "moderate",
            )
        )

    return suggestions
