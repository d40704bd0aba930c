"""
Dissonance estimate for wheel nodes (0 = restful, 1 = tense).

Rules apply in order and only ever raise the value. The root and
chromatic rings are neutral; the circle-of-fifths ring is fixed.
"""

from __future__ import annotations

from chuk_mcp_harmony.models.chord import ChordQuality
from chuk_mcp_harmony.models.layout import HexPosition, LayerName

CIRCLE_OF_FIFTHS_DISSONANCE = 0.15

QUALITY_DISSONANCE: dict[ChordQuality, float] = {
    ChordQuality.DIMINISHED: 0.8,
    ChordQuality.AUGMENTED: 0.75,
}

# Seventh suffixes; a half-diminished seventh takes its tension from the triad
EXTENSION_DISSONANCE: dict[str, float] = {
    "7": 0.5,
    "m7": 0.3,
    "maj7": 0.2,
}

LAYER_FLOOR: dict[LayerName, float] = {
    LayerName.BORROWED: 0.4,
    LayerName.SUBSTITUTIONS: 0.35,
}

DIATONIC_MAJOR_FLOOR = 0.1
DIATONIC_MINOR_FLOOR = 0.2


def calculate_dissonance(node: HexPosition) -> float:
    """
    Estimate how tense a node sounds.

    Examples:
        diminished chord on the borrowed ring -> max(0.8, 0.4) = 0.8
        G7 on the extensions ring             -> 0.5
        Am on the diatonic ring               -> 0.2
    """
    if node.layer in (LayerName.ROOT, LayerName.CHROMATIC):
        return 0.0
    if node.layer == LayerName.CIRCLE_FIFTHS:
        return CIRCLE_OF_FIFTHS_DISSONANCE

    dissonance = 0.0
    if node.quality is not None:
        dissonance = max(dissonance, QUALITY_DISSONANCE.get(node.quality, 0.0))
    if node.extension:
        dissonance = max(dissonance, EXTENSION_DISSONANCE.get(node.extension, 0.0))

    dissonance = max(dissonance, LAYER_FLOOR.get(node.layer, 0.0))

    if node.layer == LayerName.DIATONIC:
        if node.quality == ChordQuality.MINOR:
            dissonance = max(dissonance, DIATONIC_MINOR_FLOOR)
        elif node.quality != ChordQuality.DIMINISHED:
            dissonance = max(dissonance, DIATONIC_MAJOR_FLOOR)

    return min(1.0, dissonance)
