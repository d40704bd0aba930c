"""
Hexagon wheel layout.

This module provides:
- generate_all_layers: Builds the centre node and six rings for a key
- calculate_dissonance: Tension estimate per node
- polar_to_cartesian: Screen coordinates for a ring position
- ThemeLoader: Discovers sizing/colour themes
"""

from chuk_mcp_harmony.layout.dissonance import calculate_dissonance
from chuk_mcp_harmony.layout.hexagon import generate_all_layers, polar_to_cartesian
from chuk_mcp_harmony.layout.themes import ThemeLoader

__all__ = [
    "ThemeLoader",
    "calculate_dissonance",
    "generate_all_layers",
    "polar_to_cartesian",
]
