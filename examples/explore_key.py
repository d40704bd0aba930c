#!/usr/bin/env python3
"""
Example: Exploring a key.

Resolves the diatonic chords of a key, scores a few progressions, lists
substitutions and bridge ideas, and prints the hexagon wheel ring by ring.

Usage:
    python examples/explore_key.py [KEY]

    KEY defaults to C_major (e.g. A_minor, D_dorian, F#_mixolydian).
"""

import sys

from chuk_mcp_harmony.core import Key
from chuk_mcp_harmony.harmony import (
    analyze_progression,
    diatonic_chords,
    get_all_substitutions,
    get_borrowed_chords,
    get_bridge_chord_suggestions,
    roman_numeral_to_chord,
)
from chuk_mcp_harmony.layout import calculate_dissonance, generate_all_layers
from chuk_mcp_harmony.schemas import SchemaLoader, realize_schema


def main() -> None:
    """Walk through the engine for one key."""
    key = Key.parse(sys.argv[1] if len(sys.argv) > 1 else "C_major")

    print(f"CHUK Harmony - {key}")
    print("=" * 40)
    print()

    print("Diatonic chords:")
    for chord in diatonic_chords(key):
        print(f"  {chord.roman_numeral:6} {chord.name:12} ({chord.function.value})")
    print()

    print("Progressions:")
    for numerals in (["I", "IV", "V", "I"], ["vi", "IV", "I", "V"], ["I", "V", "vi", "IV"]):
        chords = [roman_numeral_to_chord(n, key) for n in numerals]
        analysis = analyze_progression(chords, key)
        print(
            f"  {analysis.roman_numerals:18} strength {analysis.strength:3}  "
            f"{analysis.emotional_profile.primary} / {analysis.vibe.label}"
        )
    print()

    tonic = roman_numeral_to_chord("I", key)
    print(f"Substitutes for {tonic.name}:")
    for option in get_all_substitutions(tonic, key).all_options()[:6]:
        print(f"  {option.chord.name:12} {option.strength:.2f}  {option.reason}")
    print()

    used = [roman_numeral_to_chord(n, key) for n in ("I", "V", "vi", "IV")]
    print("Bridge ideas:")
    for suggestion in get_bridge_chord_suggestions(key, used):
        print(f"  {suggestion.chord.name:12} [{suggestion.strength}] {suggestion.reason}")
    for suggestion in get_borrowed_chords(key):
        print(f"  {suggestion.chord.name:12} [{suggestion.strength}] {suggestion.reason}")
    print()

    print("Hexagon wheel:")
    for name, layer in generate_all_layers(key.root, key.mode).items():
        labels = ", ".join(
            f"{node.display_chord} ({calculate_dissonance(node):.2f})" for node in layer.chords
        )
        print(f"  {name:14} r={layer.radius:5.0f}  {labels}")
    print()

    loader = SchemaLoader()
    print("Schemas:")
    for meta in loader.list_schemas():
        schema = loader.get_schema(meta.slug)
        names = " - ".join(chord.name or "" for chord in realize_schema(schema, key))
        print(f"  {meta.name:20} {names}")


if __name__ == "__main__":
    main()
