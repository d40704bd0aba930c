"""
MCP tool implementations.

Tools are organized by domain:
- chords - Resolving numerals, describing keys, chord transforms
- analysis - Substitutions, progression analysis, bridge ideas
- layout - Hexagon wheel and themes
- schemas - Four-chord schema discovery and realization
"""

from chuk_mcp_harmony.tools.analysis import register_analysis_tools
from chuk_mcp_harmony.tools.chords import register_chord_tools
from chuk_mcp_harmony.tools.layout import register_layout_tools
from chuk_mcp_harmony.tools.schemas import register_schema_tools

__all__ = [
    "register_analysis_tools",
    "register_chord_tools",
    "register_layout_tools",
    "register_schema_tools",
]
