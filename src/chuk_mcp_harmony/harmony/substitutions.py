"""
Substitution engine - alternative chords for a chord in a key.

Three independent generators:
- common-tone: diatonic chords sharing at least two notes
- functional: chords from the same tonic/subdominant/dominant bucket
- modal interchange: chords borrowed from the parallel key

Each returns options sorted by descending strength (stable for ties).
Candidates that fail to resolve are skipped, never fatal.
"""

from __future__ import annotations

import logging

from chuk_mcp_harmony.core.numeral import InvalidRomanNumeral
from chuk_mcp_harmony.core.pitch import PitchClass
from chuk_mcp_harmony.core.scale import Key
from chuk_mcp_harmony.harmony.resolver import diatonic_numerals, roman_numeral_to_chord
from chuk_mcp_harmony.models.analysis import (
    SubstitutionCategory,
    SubstitutionOption,
    SubstitutionSet,
)
from chuk_mcp_harmony.models.chord import Chord, HarmonicFunction

logger = logging.getLogger(__name__)

# Functional buckets by key flavor
MAJOR_FUNCTION_MAP: dict[HarmonicFunction, tuple[str, ...]] = {
    HarmonicFunction.TONIC: ("I", "iii", "vi"),
    HarmonicFunction.SUBDOMINANT: ("IV", "ii"),
    HarmonicFunction.DOMINANT: ("V", "vii°"),
}
MINOR_FUNCTION_MAP: dict[HarmonicFunction, tuple[str, ...]] = {
    HarmonicFunction.TONIC: ("i", "III", "VI"),
    HarmonicFunction.SUBDOMINANT: ("iv", "ii°"),
    HarmonicFunction.DOMINANT: ("v", "VII"),
}

# Borrowing these into a major-flavored key is the adventurous choice
SPICY_BORROWS = frozenset({"III", "VI", "VII", "bIII", "bVI", "bVII"})

FUNCTIONAL_BASE_STRENGTH = 0.7
FUNCTIONAL_MATCH_STRENGTH = 0.9
FUNCTIONAL_SHARED_BONUS = 0.1
MODAL_SAFE_STRENGTH = 0.8
MODAL_SPICY_STRENGTH = 0.5
MODAL_SHARED_BONUS = 0.2


def _by_strength(options: list[SubstitutionOption]) -> list[SubstitutionOption]:
    return sorted(options, key=lambda o: o.strength, reverse=True)


def _resolve(numeral: str, key: Key) -> Chord | None:
    try:
        return roman_numeral_to_chord(numeral, key)
    except InvalidRomanNumeral:
        logger.debug(f"Skipping unresolvable candidate {numeral!r} in {key}")
        return None


def _spell(notes: tuple[PitchClass, ...]) -> str:
    return ", ".join(note.spell() for note in notes)


def get_common_tone_substitutions(chord: Chord, key: Key) -> list[SubstitutionOption]:
    """
    Diatonic chords sharing at least two notes with the input chord.

    Common-tone substitutions keep the harmonic colour while changing
    function. Strength is shared / max(|input|, |candidate|).
    """
    options: list[SubstitutionOption] = []
    input_size = len(chord.pitch_set())

    for numeral in diatonic_numerals(key):
        candidate = _resolve(numeral, key)
        if candidate is None:
            continue
        if candidate.roman_numeral == chord.roman_numeral or candidate.is_same_chord(chord):
            continue

        shared = chord.shared_notes(candidate)
        if len(shared) < 2:
            continue

        options.append(
            SubstitutionOption(
                chord=candidate,
                reason=f"Shares {len(shared)} notes: {_spell(shared)}",
                strength=len(shared) / max(input_size, len(candidate.pitch_set())),
                shared_notes=shared,
                category=SubstitutionCategory.COMMON_TONE,
            )
        )

    return _by_strength(options)


def get_functional_substitutions(chord: Chord, key: Key) -> list[SubstitutionOption]:
    """
    Chords from the same functional bucket as the input chord.

    Strength starts at 0.7, becomes 0.9 when the candidate's own function
    matches, then gains 0.1 per shared note (capped at 1.0).
    """
    function_map = MAJOR_FUNCTION_MAP if key.is_major_flavored else MINOR_FUNCTION_MAP
    options: list[SubstitutionOption] = []

    for numeral in function_map.get(chord.function, ()):
        candidate = _resolve(numeral, key)
        if candidate is None:
            continue
        if candidate.roman_numeral == chord.roman_numeral or candidate.is_same_chord(chord):
            continue

        strength = FUNCTIONAL_BASE_STRENGTH
        if candidate.function == chord.function:
            strength = FUNCTIONAL_MATCH_STRENGTH

        shared = chord.shared_notes(candidate)
        if shared:
            strength = min(1.0, strength + FUNCTIONAL_SHARED_BONUS * len(shared))

        options.append(
            SubstitutionOption(
                chord=candidate,
                reason=f"Same {chord.function.value} function",
                strength=strength,
                shared_notes=shared,
                category=SubstitutionCategory.FUNCTIONAL,
            )
        )

    return _by_strength(options)


def get_modal_interchange(chord: Chord, key: Key) -> list[SubstitutionOption]:
    """
    Every diatonic chord of the parallel key, offered as a borrowed colour.

    Strength is 0.8 for a safe borrow, 0.5 for a spicy one, plus 0.2 when
    at least two notes are shared (capped at 1.0).
    """
    parallel = key.parallel()
    options: list[SubstitutionOption] = []

    for numeral in diatonic_numerals(parallel):
        borrowed = _resolve(numeral, parallel)
        if borrowed is None:
            continue
        if borrowed.is_same_chord(chord):
            continue

        is_spicy = key.is_major_flavored and numeral in SPICY_BORROWS
        strength = MODAL_SPICY_STRENGTH if is_spicy else MODAL_SAFE_STRENGTH

        shared = chord.shared_notes(borrowed)
        if len(shared) >= 2:
            strength = min(1.0, strength + MODAL_SHARED_BONUS)

        options.append(
            SubstitutionOption(
                chord=borrowed,
                reason=f"Borrowed from {parallel.mode.value} ({'spicy' if is_spicy else 'safe'})",
                strength=strength,
                shared_notes=shared,
                category=SubstitutionCategory.MODAL_INTERCHANGE,
            )
        )

    return _by_strength(options)


def get_all_substitutions(chord: Chord, key: Key) -> SubstitutionSet:
    """All substitution options for a chord, grouped by category."""
    return SubstitutionSet(
        common_tone=get_common_tone_substitutions(chord, key),
        functional=get_functional_substitutions(chord, key),
        modal_interchange=get_modal_interchange(chord, key),
    )
