"""
Progression scoring - a heuristic strength score for chord sequences.

The score starts neutral (50) and each adjacent pair of chords, weighted
equally, adds:
- voice leading: shared notes / max(size) * 30
- resolution: dominant->tonic +20, subdominant->dominant +15,
  subdominant->tonic +10
- direction: forward motion or a return to tonic +10, backward motion -5

The coefficients are the contract; they are not a canonical music-theory
metric.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from chuk_mcp_harmony.constants import NEUTRAL_PROGRESSION_SCORE
from chuk_mcp_harmony.core.numeral import try_parse_numeral
from chuk_mcp_harmony.models.chord import FUNCTION_ORDER, Chord, HarmonicFunction

VOICE_LEADING_WEIGHT = 30.0
FORWARD_BONUS = 10.0
BACKWARD_PENALTY = 5.0

RESOLUTION_BONUS: dict[tuple[HarmonicFunction, HarmonicFunction], float] = {
    (HarmonicFunction.DOMINANT, HarmonicFunction.TONIC): 20.0,
    (HarmonicFunction.SUBDOMINANT, HarmonicFunction.DOMINANT): 15.0,
    (HarmonicFunction.SUBDOMINANT, HarmonicFunction.TONIC): 10.0,
}

TENSION_BY_FUNCTION: dict[HarmonicFunction, int] = {
    HarmonicFunction.DOMINANT: 80,
    HarmonicFunction.SUBDOMINANT: 40,
    HarmonicFunction.TONIC: 10,
}
ALTERED_TENSION = 20


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _pair_terms(current: Chord, following: Chord) -> list[float]:
    """Unweighted terms contributed by one chord-to-chord move."""
    shared = len(current.shared_notes(following))
    size = max(len(current.pitch_set()), len(following.pitch_set()))
    terms = [(shared / size) * VOICE_LEADING_WEIGHT]

    resolution = RESOLUTION_BONUS.get((current.function, following.function))
    if resolution is not None:
        terms.append(resolution)

    current_index = FUNCTION_ORDER.index(current.function)
    next_index = FUNCTION_ORDER.index(following.function)
    if next_index > current_index or following.function == HarmonicFunction.TONIC:
        terms.append(FORWARD_BONUS)
    elif next_index < current_index:
        terms.append(-BACKWARD_PENALTY)

    return terms


def analyze_progression_strength(chords: Sequence[Chord]) -> int:
    """
    Score a chord progression from 0 to 100.

    Args:
        chords: Ordered chords of the progression

    Returns:
        Integer score; 50 for progressions shorter than two chords
    """
    if len(chords) < 2:
        return NEUTRAL_PROGRESSION_SCORE

    weight = 1.0 / (len(chords) - 1)
    score = float(NEUTRAL_PROGRESSION_SCORE)
    for current, following in zip(chords, chords[1:]):
        for term in _pair_terms(current, following):
            score += term * weight

    return max(0, min(100, _round_half_up(score)))


def calculate_harmonic_tension(chord: Chord) -> int:
    """
    Tension of a chord within its key, 0-100.

    Dominant chords pull hardest (80), subdominant less (40), tonic
    least (10); altered numerals (b/#) add 20.
    """
    tension = TENSION_BY_FUNCTION[chord.function]

    parts = try_parse_numeral(chord.roman_numeral)
    altered = chord.roman_numeral.startswith("#") or bool(parts and parts.flat)
    if altered:
        tension += ALTERED_TENSION

    return min(100, tension)
