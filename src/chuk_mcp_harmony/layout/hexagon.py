"""
Hexagon wheel layout - six rings of chords around the key's tonic.

Ring contents, innermost first:
- diatonic: the six non-tonic diatonic chords
- extensions: the same chords with a seventh added (ø7 on the diminished triad)
- borrowed: chords from the parallel key
- substitutions: common functional substitutes and what they replace
- circle-fifths: six keys around the root on the circle of fifths
- chromatic: six adjacent semitone pairs (decorative)

Every outer ring has exactly six nodes at 0, 60, ..., 300 degrees,
measured clockwise from the top.
"""

from __future__ import annotations

import math

from chuk_mcp_harmony.constants import HEX_RING_SIZE
from chuk_mcp_harmony.core.pitch import PitchClass, circle_of_fifths
from chuk_mcp_harmony.core.scale import Key, Mode
from chuk_mcp_harmony.harmony.naming import render_chord_symbol
from chuk_mcp_harmony.harmony.resolver import diatonic_numerals, roman_numeral_to_chord
from chuk_mcp_harmony.models.chord import Chord, ChordQuality
from chuk_mcp_harmony.models.layout import HexLayer, HexPosition, LayerName, LayoutTheme

ANGLE_STEP = 360.0 / HEX_RING_SIZE

# Borrowed labels for major-flavored keys; minor-flavored keys borrow the
# whole parallel diatonic set
MAJOR_KEY_BORROWS: tuple[str, ...] = ("i", "bIII", "iv", "bVI", "bVII")

# (replaced degree, substitute degree), 0-based
SUBSTITUTION_DEGREES: tuple[tuple[int, int], ...] = ((0, 2), (0, 5), (3, 1), (4, 6))

# Seventh suffix by triad quality; anything else takes a plain "7"
SEVENTH_SUFFIX: dict[ChordQuality, str] = {
    ChordQuality.MAJOR: "7",
    ChordQuality.MINOR: "m7",
    ChordQuality.DIMINISHED: "ø7",
}

# Circle-of-fifths positions from Ab round to F are spelled with flats
FLAT_SIDE_START = 8


def angle_for(position: int) -> float:
    return position * ANGLE_STEP


def polar_to_cartesian(radius: float, angle_degrees: float) -> tuple[float, float]:
    """
    Convert a ring position to screen coordinates around the centre.

    0 degrees is straight up and angles grow clockwise, with y growing
    downwards as on a screen.
    """
    theta = math.radians(angle_degrees)
    return radius * math.sin(theta), -radius * math.cos(theta)


def _chord_node(
    layer: LayerName,
    position: int,
    chord: Chord,
    color: str,
    prefer_flats: bool = False,
    **extra: str | None,
) -> HexPosition:
    return HexPosition(
        layer=layer,
        position=position,
        pitch_class=chord.root,
        display_chord=render_chord_symbol(chord.root, chord.quality, prefer_flats),
        roman_numeral=chord.roman_numeral,
        angle_degrees=angle_for(position),
        color=color,
        quality=chord.quality,
        **extra,
    )


def seventh_label(quality: ChordQuality) -> str:
    """Suffix for a seventh added to a triad: G7, Dm7, Bø7."""
    return SEVENTH_SUFFIX.get(quality, "7")


def on_flat_side(pitch: PitchClass) -> bool:
    """True for Ab, Eb, Bb and F, the keys spelled with flats."""
    return circle_of_fifths().index(pitch) >= FLAT_SIDE_START


def _root_layer(key: Key, theme: LayoutTheme) -> list[HexPosition]:
    tonic = roman_numeral_to_chord(diatonic_numerals(key)[0], key)
    return [
        _chord_node(
            LayerName.ROOT,
            0,
            tonic,
            theme.layer_color(LayerName.ROOT),
            prefer_flats=on_flat_side(tonic.root),
        )
    ]


def _diatonic_layer(key: Key, theme: LayoutTheme) -> list[HexPosition]:
    nodes = []
    for position, numeral in enumerate(diatonic_numerals(key)[1:]):
        chord = roman_numeral_to_chord(numeral, key)
        nodes.append(
            _chord_node(LayerName.DIATONIC, position, chord, theme.quality_color(chord.quality))
        )
    return nodes


def _extensions_layer(key: Key, theme: LayoutTheme) -> list[HexPosition]:
    nodes = []
    color = theme.layer_color(LayerName.EXTENSIONS)
    for position, numeral in enumerate(diatonic_numerals(key)[1:]):
        chord = roman_numeral_to_chord(numeral, key)
        label = seventh_label(chord.quality)
        nodes.append(
            HexPosition(
                layer=LayerName.EXTENSIONS,
                position=position,
                pitch_class=chord.root,
                display_chord=f"{chord.root.spell()}{label}",
                roman_numeral=chord.roman_numeral,
                angle_degrees=angle_for(position),
                color=color,
                quality=chord.quality,
                extension=label,
            )
        )
    return nodes


def _borrowed_layer(key: Key, theme: LayoutTheme) -> list[HexPosition]:
    parallel = key.parallel()
    parallel_numerals = diatonic_numerals(parallel)
    labels = list(MAJOR_KEY_BORROWS) if key.is_major_flavored else list(parallel_numerals)

    chords = [roman_numeral_to_chord(label, parallel) for label in labels]

    # Pad with parallel diatonic chords not already on the ring
    for numeral in parallel_numerals:
        if len(chords) >= HEX_RING_SIZE:
            break
        candidate = roman_numeral_to_chord(numeral, parallel)
        if not any(candidate.notes == chord.notes for chord in chords):
            chords.append(candidate)

    color = theme.layer_color(LayerName.BORROWED)
    return [
        _chord_node(
            LayerName.BORROWED,
            position,
            chord,
            color,
            prefer_flats=chord.roman_numeral.startswith("b"),
            source=parallel.mode.value,
        )
        for position, chord in enumerate(chords[:HEX_RING_SIZE])
    ]


def _substitutions_layer(key: Key, theme: LayoutTheme) -> list[HexPosition]:
    numerals = diatonic_numerals(key)
    pairs: list[tuple[int, int | None]] = list(SUBSTITUTION_DEGREES)

    # Pad with non-tonic diatonic chords not used as substitutes
    used = {substitute for _, substitute in SUBSTITUTION_DEGREES}
    for degree in range(1, 7):
        if len(pairs) >= HEX_RING_SIZE:
            break
        if degree not in used:
            pairs.append((None, degree))

    color = theme.layer_color(LayerName.SUBSTITUTIONS)
    nodes = []
    for position, (replaced, substitute) in enumerate(pairs[:HEX_RING_SIZE]):
        chord = roman_numeral_to_chord(numerals[substitute], key)
        nodes.append(
            _chord_node(
                LayerName.SUBSTITUTIONS,
                position,
                chord,
                color,
                substitutes_for=numerals[replaced] if replaced is not None else None,
            )
        )
    return nodes


def _circle_of_fifths_layer(key: Key, theme: LayoutTheme) -> list[HexPosition]:
    circle = circle_of_fifths()
    centre = circle.index(key.root)
    color = theme.layer_color(LayerName.CIRCLE_FIFTHS)

    nodes = []
    for position, offset in enumerate(range(-2, HEX_RING_SIZE - 2)):
        pitch = circle[(centre + offset) % len(circle)]
        nodes.append(
            HexPosition(
                layer=LayerName.CIRCLE_FIFTHS,
                position=position,
                pitch_class=pitch,
                display_chord=pitch.spell(on_flat_side(pitch)),
                angle_degrees=angle_for(position),
                color=color,
            )
        )
    return nodes


def _chromatic_layer(key: Key, theme: LayoutTheme) -> list[HexPosition]:
    color = theme.layer_color(LayerName.CHROMATIC)
    nodes = []
    for position in range(HEX_RING_SIZE):
        low = key.root.transpose(2 * position)
        high = low.transpose(1)
        nodes.append(
            HexPosition(
                layer=LayerName.CHROMATIC,
                position=position,
                pitch_class=low,
                display_chord=f"{low.spell()} / {high.spell()}",
                angle_degrees=angle_for(position),
                color=color,
            )
        )
    return nodes


_LAYER_BUILDERS = {
    LayerName.ROOT: _root_layer,
    LayerName.DIATONIC: _diatonic_layer,
    LayerName.EXTENSIONS: _extensions_layer,
    LayerName.BORROWED: _borrowed_layer,
    LayerName.SUBSTITUTIONS: _substitutions_layer,
    LayerName.CIRCLE_FIFTHS: _circle_of_fifths_layer,
    LayerName.CHROMATIC: _chromatic_layer,
}


def generate_all_layers(
    root_pitch: int | PitchClass,
    mode: Mode | str = Mode.MAJOR,
    theme: LayoutTheme | None = None,
) -> dict[str, HexLayer]:
    """
    Build every ring of the wheel for a key.

    Args:
        root_pitch: Tonic pitch class (0-11, C=0)
        mode: Mode of the key
        theme: Sizes and colours (defaults to LayoutTheme())

    Returns:
        Layers keyed by layer name ('root', 'diatonic', ..., 'chromatic')
    """
    key = Key(PitchClass(int(root_pitch) % 12), mode)
    theme = theme or LayoutTheme()

    return {
        layer.value: HexLayer(
            layer=layer,
            radius=theme.ring_radius(layer),
            chords=build(key, theme),
        )
        for layer, build in _LAYER_BUILDERS.items()
    }
