"""
Tests for progression scoring and harmonic tension.
"""

import pytest

from chuk_mcp_harmony.core import Key
from chuk_mcp_harmony.harmony.progression import (
    analyze_progression_strength,
    calculate_harmonic_tension,
)
from chuk_mcp_harmony.harmony.resolver import roman_numeral_to_chord
from chuk_mcp_harmony.models import Chord


def chords(numerals: str, key: Key) -> list[Chord]:
    return [roman_numeral_to_chord(n, key) for n in numerals.split()]


class TestProgressionStrength:
    """Tests for analyze_progression_strength."""

    @pytest.mark.parametrize("numeral", ["I", "ii", "V", "vii°", "bVII"])
    def test_single_chord_is_neutral(self, c_major: Key, numeral: str) -> None:
        """One chord scores 50."""
        assert analyze_progression_strength(chords(numeral, c_major)) == 50

    def test_empty_is_neutral(self) -> None:
        """No chords scores 50."""
        assert analyze_progression_strength([]) == 50

    def test_resolution_beats_departure(self, c_major: Key) -> None:
        """V-I scores higher than I-V."""
        assert analyze_progression_strength(chords("V I", c_major)) > (
            analyze_progression_strength(chords("I V", c_major))
        )

    def test_exact_two_chord_scores(self, c_major: Key) -> None:
        """
        V-I: 50 + 10 (one shared note) + 20 (resolution) + 10 (to tonic) = 90
        I-V: 50 + 10 (one shared note) + 10 (forward) = 70
        """
        assert analyze_progression_strength(chords("V I", c_major)) == 90
        assert analyze_progression_strength(chords("I V", c_major)) == 70

    def test_cadence_is_strong(self, c_major: Key) -> None:
        """I-IV-V-I scores at least 70."""
        score = analyze_progression_strength(chords("I IV V I", c_major))
        assert score >= 70
        assert score == 78

    def test_backward_motion_penalized(self, c_major: Key) -> None:
        """V-IV moves backwards and shares no resolution."""
        # 50 + 0 shared - 5 backwards
        assert analyze_progression_strength(chords("V IV", c_major)) == 45

    def test_score_in_range(self, c_major: Key) -> None:
        """Scores stay within 0-100."""
        for numerals in ["I I I I", "V I V I", "vii° iii vi ii V I", "ii V I"]:
            assert 0 <= analyze_progression_strength(chords(numerals, c_major)) <= 100

    def test_deterministic(self, c_major: Key) -> None:
        """Same input, same score."""
        progression = chords("vi IV I V", c_major)
        assert analyze_progression_strength(progression) == analyze_progression_strength(
            list(progression)
        )


class TestHarmonicTension:
    """Tests for calculate_harmonic_tension."""

    def test_by_function(self, c_major: Key) -> None:
        """Dominant > subdominant > tonic."""
        assert calculate_harmonic_tension(roman_numeral_to_chord("V", c_major)) == 80
        assert calculate_harmonic_tension(roman_numeral_to_chord("IV", c_major)) == 40
        assert calculate_harmonic_tension(roman_numeral_to_chord("I", c_major)) == 10

    def test_altered_numeral_adds_tension(self, c_major: Key) -> None:
        """Flat numerals add 20, capped at 100."""
        assert calculate_harmonic_tension(roman_numeral_to_chord("bIII", c_major)) == 100
        assert calculate_harmonic_tension(roman_numeral_to_chord("bVII", c_major)) == 100
