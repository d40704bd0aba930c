"""
Tests for the substitution engine.
"""

import logging

import pytest

from chuk_mcp_harmony.core import Key, PitchClass
from chuk_mcp_harmony.harmony import substitutions
from chuk_mcp_harmony.harmony.resolver import diatonic_numerals, roman_numeral_to_chord
from chuk_mcp_harmony.harmony.substitutions import (
    get_all_substitutions,
    get_common_tone_substitutions,
    get_functional_substitutions,
    get_modal_interchange,
)
from chuk_mcp_harmony.models import HarmonicFunction, SubstitutionCategory


class TestCommonTone:
    """Tests for common-tone substitutions."""

    def test_tonic_in_c_major(self, c_major: Key) -> None:
        """I shares two notes with iii and vi."""
        options = get_common_tone_substitutions(roman_numeral_to_chord("I", c_major), c_major)
        assert [o.chord.roman_numeral for o in options] == ["iii", "vi"]
        assert options[0].strength == pytest.approx(2 / 3)
        assert options[0].shared_notes == (PitchClass.E, PitchClass.G)
        assert options[0].reason == "Shares 2 notes: E, G"
        assert all(o.category == SubstitutionCategory.COMMON_TONE for o in options)

    def test_requires_two_shared_notes(self, c_major: Key) -> None:
        """Every option shares at least two notes."""
        options = get_common_tone_substitutions(roman_numeral_to_chord("V", c_major), c_major)
        assert options
        assert all(len(o.shared_notes) >= 2 for o in options)


class TestFunctional:
    """Tests for functional substitutions."""

    def test_subdominant_in_c_major(self, c_major: Key) -> None:
        """IV's bucket holds ii, which shares two notes."""
        options = get_functional_substitutions(roman_numeral_to_chord("IV", c_major), c_major)
        assert [o.chord.roman_numeral for o in options] == ["ii"]
        # Same function (0.9) plus two shared notes, capped at 1.0
        assert options[0].strength == pytest.approx(1.0)
        assert options[0].reason == "Same subdominant function"

    def test_tonic_in_c_major(self, c_major: Key) -> None:
        """I's bucket offers iii and vi."""
        options = get_functional_substitutions(roman_numeral_to_chord("I", c_major), c_major)
        assert {o.chord.roman_numeral for o in options} == {"iii", "vi"}
        # Neither shares I's function in the degree table: 0.7 + 2 * 0.1
        assert all(o.strength == pytest.approx(0.9) for o in options)

    def test_minor_key_bucket(self, a_minor: Key) -> None:
        """Minor-flavored keys use the minor bucket table."""
        options = get_functional_substitutions(roman_numeral_to_chord("v", a_minor), a_minor)
        assert [o.chord.roman_numeral for o in options] == ["VII"]

    def test_unresolvable_candidates_skipped(self, c_major: Key, monkeypatch, caplog) -> None:
        """A bad numeral in a bucket is logged and the rest still come back."""
        monkeypatch.setitem(
            substitutions.MAJOR_FUNCTION_MAP, HarmonicFunction.SUBDOMINANT, ("IV", "Z", "ii")
        )
        with caplog.at_level(logging.DEBUG, logger="chuk_mcp_harmony.harmony.substitutions"):
            options = get_functional_substitutions(roman_numeral_to_chord("IV", c_major), c_major)
        assert [o.chord.roman_numeral for o in options] == ["ii"]
        assert "'Z'" in caplog.text


class TestModalInterchange:
    """Tests for modal interchange."""

    def test_major_key_borrows_from_minor(self, c_major: Key) -> None:
        """All seven parallel-minor chords are offered for I."""
        options = get_modal_interchange(roman_numeral_to_chord("I", c_major), c_major)
        assert len(options) == 7
        assert all(o.chord.roman_numeral in diatonic_numerals(c_major.parallel()) for o in options)
        # i shares C and G: safe 0.8 + 0.2
        assert options[0].chord.roman_numeral == "i"
        assert options[0].strength == pytest.approx(1.0)

    def test_spicy_borrows(self, c_major: Key) -> None:
        """III, VI and VII are spicy in a major key."""
        options = get_modal_interchange(roman_numeral_to_chord("I", c_major), c_major)
        by_numeral = {o.chord.roman_numeral: o for o in options}
        assert by_numeral["VII"].strength == pytest.approx(0.5)
        assert by_numeral["VII"].reason == "Borrowed from minor (spicy)"
        assert by_numeral["iv"].reason == "Borrowed from minor (safe)"

    def test_minor_key_borrows_are_safe(self, a_minor: Key) -> None:
        """Nothing is spicy when borrowing into a minor key."""
        options = get_modal_interchange(roman_numeral_to_chord("i", a_minor), a_minor)
        assert all("safe" in o.reason for o in options)

    def test_sorted_by_strength(self, c_major: Key) -> None:
        """Options come strongest first."""
        options = get_modal_interchange(roman_numeral_to_chord("V", c_major), c_major)
        strengths = [o.strength for o in options]
        assert strengths == sorted(strengths, reverse=True)


class TestAllSubstitutions:
    """Tests for get_all_substitutions."""

    @pytest.mark.parametrize("key_name", ["C_major", "A_minor", "D_dorian", "G_mixolydian"])
    def test_never_returns_input(self, key_name: str) -> None:
        """No list contains the input chord itself."""
        key = Key.parse(key_name)
        for numeral in diatonic_numerals(key):
            chord = roman_numeral_to_chord(numeral, key)
            result = get_all_substitutions(chord, key)
            for option in result.all_options():
                assert not option.chord.is_same_chord(chord)
            for option in result.common_tone + result.functional:
                assert option.chord.roman_numeral != chord.roman_numeral

    def test_strengths_in_range(self, c_major: Key) -> None:
        """Strengths stay within [0, 1]."""
        for numeral in diatonic_numerals(c_major):
            result = get_all_substitutions(roman_numeral_to_chord(numeral, c_major), c_major)
            assert all(0.0 <= o.strength <= 1.0 for o in result.all_options())

    def test_groups(self, c_major: Key) -> None:
        """Each list carries its own category."""
        result = get_all_substitutions(roman_numeral_to_chord("I", c_major), c_major)
        assert {o.category for o in result.functional} == {SubstitutionCategory.FUNCTIONAL}
        assert {o.category for o in result.modal_interchange} == {
            SubstitutionCategory.MODAL_INTERCHANGE
        }
        assert len(result.all_options()) == (
            len(result.common_tone) + len(result.functional) + len(result.modal_interchange)
        )

    def test_serializable(self, c_major: Key) -> None:
        """Results dump to plain JSON values."""
        result = get_all_substitutions(roman_numeral_to_chord("IV", c_major), c_major)
        data = result.model_dump(mode="json")
        assert data["functional"][0]["category"] == "functional"
        assert data["functional"][0]["chord"]["notes"] == [2, 5, 9]
