"""
Harmony operations on resolved chords.

- resolver: Roman numeral + Key -> Chord
- transforms: extend, modify_quality, add_suspension, transpose
- substitutions: common-tone, functional and modal-interchange options
- progression: strength score and per-chord tension
- bridge: bridge chord ideas and borrowed chords
- emotion: emotional profile and vibe of a progression
"""

from chuk_mcp_harmony.harmony.bridge import get_borrowed_chords, get_bridge_chord_suggestions
from chuk_mcp_harmony.harmony.emotion import (
    analyze_progression,
    detect_emotional_profile,
    get_progression_vibe,
)
from chuk_mcp_harmony.harmony.progression import (
    analyze_progression_strength,
    calculate_harmonic_tension,
)
from chuk_mcp_harmony.harmony.resolver import (
    diatonic_chords,
    diatonic_numerals,
    roman_numeral_to_chord,
)
from chuk_mcp_harmony.harmony.substitutions import (
    get_all_substitutions,
    get_common_tone_substitutions,
    get_functional_substitutions,
    get_modal_interchange,
)
from chuk_mcp_harmony.harmony.transforms import (
    add_suspension,
    extend,
    modify_quality,
    transpose,
)

__all__ = [
    # Resolver
    "diatonic_chords",
    "diatonic_numerals",
    "roman_numeral_to_chord",
    # Transforms
    "add_suspension",
    "extend",
    "modify_quality",
    "transpose",
    # Substitutions
    "get_all_substitutions",
    "get_common_tone_substitutions",
    "get_functional_substitutions",
    "get_modal_interchange",
    # Progression
    "analyze_progression_strength",
    "calculate_harmonic_tension",
    # Bridge
    "get_borrowed_chords",
    "get_bridge_chord_suggestions",
    # Emotion
    "analyze_progression",
    "detect_emotional_profile",
    "get_progression_vibe",
]
