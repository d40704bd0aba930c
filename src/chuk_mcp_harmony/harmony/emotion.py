"""
Emotion analysis - what a progression feels like.

A small rule cascade over chord qualities and a couple of cadences
(IV->I, V->I) picks a primary emotion; a vibe table then describes it,
preferring an exact match on well-known progressions.
"""

from __future__ import annotations

from collections.abc import Sequence

from chuk_mcp_harmony.core.scale import Key
from chuk_mcp_harmony.harmony.progression import analyze_progression_strength
from chuk_mcp_harmony.models.analysis import (
    EmotionalProfile,
    FamousExample,
    ProgressionAnalysis,
    ProgressionVibe,
)
from chuk_mcp_harmony.models.chord import Chord, ChordQuality


def _examples(*pairs: tuple[str, str]) -> list[FamousExample]:
    return [FamousExample(artist=artist, song=song) for artist, song in pairs]


# Exact numeral patterns with a well-known identity
PATTERN_VIBES: dict[str, ProgressionVibe] = {
    "I - V - vi - IV": ProgressionVibe(
        label="Uplifting & Anthemic",
        description="The 'Don't Stop Believin'' Progression",
        famous_examples=_examples(
            ("Journey", "Don't Stop Believin'"),
            ("The Beatles", "Let It Be"),
            ("Ed Sheeran", "Perfect"),
        ),
        when_to_use="Choruses that need to soar, triumphant moments",
    ),
    "vi - IV - I - V": ProgressionVibe(
        label="Melancholic & Modern",
        description="The 'Someone Like You' Progression",
        famous_examples=_examples(
            ("Adele", "Someone Like You"),
            ("The Beatles", "Let It Be"),
            ("Leonard Cohen", "Hallelujah"),
        ),
        when_to_use="Emotional verses, introspective moments",
    ),
    "I - vi - IV - V": ProgressionVibe(
        label="Nostalgic & Classic",
        description="The 'Doo-wop' Progression",
        famous_examples=_examples(
            ("Ben E. King", "Stand By Me"),
            ("The Penguins", "Earth Angel"),
            ("The Everly Brothers", "All I Have to Do Is Dream"),
        ),
        when_to_use="Classic pop sound, timeless feel",
    ),
    "IV - V - vi - I": ProgressionVibe(
        label="Uplifting & Recent Pop",
        description="The 'Hopscotch' Progression",
        famous_examples=_examples(
            ("Jason Mraz", "I'm Yours"),
            ("Lady Gaga", "Poker Face"),
        ),
        when_to_use="Modern pop choruses, energetic sections",
    ),
    "i - VI - III - VII": ProgressionVibe(
        label="Dark & Intense",
        description="The Harmonic Minor Progression",
        famous_examples=_examples(
            ("Led Zeppelin", "Stairway to Heaven"),
            ("The Eagles", "Hotel California"),
        ),
        when_to_use="Dramatic sections, intense emotional moments",
    ),
}

EMOTION_VIBES: dict[str, ProgressionVibe] = {
    "uplifting": ProgressionVibe(
        label="Uplifting & Anthemic",
        description="A progression that lifts the spirit",
        when_to_use="Choruses that need energy, triumphant moments",
    ),
    "melancholic": ProgressionVibe(
        label="Melancholic & Wistful",
        description="A progression with emotional depth",
        when_to_use="Introspective verses, emotional moments",
    ),
    "tense": ProgressionVibe(
        label="Tense & Dramatic",
        description="A progression that creates tension",
        when_to_use="Building sections, dramatic moments",
    ),
    "romantic": ProgressionVibe(
        label="Romantic & Warm",
        description="A progression that feels loving",
        when_to_use="Love songs, tender moments",
    ),
    "hopeful": ProgressionVibe(
        label="Hopeful & Optimistic",
        description="A progression with a positive outlook",
        when_to_use="Bridges, uplifting transitions",
    ),
    "dark": ProgressionVibe(
        label="Dark & Intense",
        description="A progression with darker tones",
        when_to_use="Dramatic sections, intense moments",
    ),
    "neutral": ProgressionVibe(
        label="Balanced & Versatile",
        description="A versatile progression",
        when_to_use="Versatile sections",
    ),
}


def numeral_pattern(progression: Sequence[Chord]) -> str:
    """Numerals of a progression joined with ' - '."""
    return " - ".join(chord.roman_numeral for chord in progression)


# Cadence checks read the symbols as written, so case matters: iv->i is not
# a IV->I move. Any upper-case "V" counts as dominant (IV, VI and bVII too)
# and any upper-case numeral with an "I" counts as a landing.
def _is_fourth(symbol: str) -> bool:
    return "IV" in symbol


def _is_dominant(symbol: str) -> bool:
    return "V" in symbol and "vi" not in symbol


def _lands_major(symbol: str) -> bool:
    return "I" in symbol


def detect_emotional_profile(progression: Sequence[Chord], key: Key) -> EmotionalProfile:
    """
    Pick the primary emotion of a progression.

    Rules are checked in order; the first match wins:
    1. more major than minor chords, a IV->I move, major key: uplifting (8)
    2. more minor than major chords in a minor key (or 2+ minor): melancholic (7)
    3. any diminished or augmented chord: tense (8)
    4. a V->I move with more major than minor chords: romantic (6)
    5. as many major as minor chords: hopeful (6)
    6. minor key with 3+ minor chords: dark (7)
    7. otherwise melancholic (5) in a minor key, uplifting (5) in a major one
    """
    if not progression:
        return EmotionalProfile(primary="neutral", intensity=5)

    counts = {quality: 0 for quality in ChordQuality}
    for chord in progression:
        counts[chord.quality] += 1
    major = counts[ChordQuality.MAJOR]
    minor = counts[ChordQuality.MINOR]
    altered = counts[ChordQuality.DIMINISHED] + counts[ChordQuality.AUGMENTED]

    symbols = [chord.roman_numeral for chord in progression]
    moves = list(zip(symbols, symbols[1:]))
    has_fourth_resolution = any(_is_fourth(a) and _lands_major(b) for a, b in moves)
    has_dominant_pullback = any(_is_dominant(a) and _lands_major(b) for a, b in moves)

    is_minor_key = not key.is_major_flavored

    if major > minor and has_fourth_resolution and not is_minor_key:
        return EmotionalProfile(primary="uplifting", intensity=8)
    if minor > major and (is_minor_key or minor >= 2):
        return EmotionalProfile(primary="melancholic", intensity=7)
    if altered > 0:
        return EmotionalProfile(primary="tense", intensity=8)
    if has_dominant_pullback and major > minor:
        return EmotionalProfile(primary="romantic", intensity=6)
    if major == minor and major > 0:
        return EmotionalProfile(primary="hopeful", intensity=6)
    if is_minor_key and minor >= 3:
        return EmotionalProfile(primary="dark", intensity=7)

    if is_minor_key:
        return EmotionalProfile(primary="melancholic", intensity=5)
    return EmotionalProfile(primary="uplifting", intensity=5)


def get_progression_vibe(progression: Sequence[Chord], profile: EmotionalProfile) -> ProgressionVibe:
    """Vibe for a progression: exact pattern match first, then by emotion."""
    pattern = numeral_pattern(progression)
    if pattern in PATTERN_VIBES:
        return PATTERN_VIBES[pattern]
    return EMOTION_VIBES[profile.primary]


def analyze_progression(progression: Sequence[Chord], key: Key) -> ProgressionAnalysis:
    """Emotion, vibe and strength of a progression in one record."""
    profile = detect_emotional_profile(progression, key)
    return ProgressionAnalysis(
        emotional_profile=profile,
        vibe=get_progression_vibe(progression, profile),
        strength=analyze_progression_strength(progression),
        roman_numerals=numeral_pattern(progression),
        degrees=[chord.roman_numeral for chord in progression],
    )
