"""
Analysis tools - MCP tools for substitutions and progression analysis.

Tools for finding substitutes for a chord, scoring and describing a
progression, and suggesting chords for a bridge.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_harmony.core.scale import Key
from chuk_mcp_harmony.harmony.bridge import get_borrowed_chords, get_bridge_chord_suggestions
from chuk_mcp_harmony.harmony.emotion import analyze_progression
from chuk_mcp_harmony.harmony.progression import calculate_harmonic_tension
from chuk_mcp_harmony.harmony.resolver import roman_numeral_to_chord
from chuk_mcp_harmony.harmony.substitutions import get_all_substitutions

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_analysis_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register analysis tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def harmony_get_substitutions(numeral: str, key: str = "C_major") -> str:
        """
        Find substitutes for a chord.

        Options come in three groups, each sorted strongest first:
        common-tone, functional and modal interchange (borrowed from the
        parallel key).

        Args:
            numeral: Roman numeral of the chord to replace (e.g., "IV")
            key: Key as root_mode (e.g., "C_major")

        Returns:
            JSON string with substitution options by category

        Example:
            harmony_get_substitutions(numeral="IV", key="G_major")
        """
        try:
            parsed = Key.parse(key)
            chord = roman_numeral_to_chord(numeral, parsed)
            substitutions = get_all_substitutions(chord, parsed)

            return json.dumps(
                {
                    "status": "success",
                    "chord": chord.model_dump(mode="json"),
                    "substitutions": substitutions.model_dump(mode="json"),
                    "count": len(substitutions.all_options()),
                }
            )
        except Exception as e:
            logger.exception("Failed to get substitutions")
            return json.dumps({"status": "error", "message": str(e)})

    tools["harmony_get_substitutions"] = harmony_get_substitutions

    @mcp.tool  # type: ignore[arg-type]
    async def harmony_analyze_progression(numerals: list[str], key: str = "C_major") -> str:
        """
        Analyze a chord progression.

        Returns a 0-100 strength score (voice leading, resolutions and
        functional direction), the emotional profile, a descriptive vibe
        and the tension of each chord.

        Args:
            numerals: Roman numerals in order (e.g., ["I", "IV", "V", "I"])
            key: Key as root_mode

        Returns:
            JSON string with the analysis

        Example:
            harmony_analyze_progression(numerals=["vi", "IV", "I", "V"], key="C_major")
        """
        try:
            parsed = Key.parse(key)
            chords = [roman_numeral_to_chord(numeral, parsed) for numeral in numerals]
            analysis = analyze_progression(chords, parsed)

            return json.dumps(
                {
                    "status": "success",
                    "key": str(parsed),
                    "analysis": analysis.model_dump(mode="json"),
                    "tension": [calculate_harmonic_tension(chord) for chord in chords],
                }
            )
        except Exception as e:
            logger.exception("Failed to analyze progression")
            return json.dumps({"status": "error", "message": str(e)})

    tools["harmony_analyze_progression"] = harmony_analyze_progression

    @mcp.tool  # type: ignore[arg-type]
    async def harmony_suggest_bridge(numerals: list[str], key: str = "C_major") -> str:
        """
        Suggest chords for a bridge section.

        Diatonic suggestions skip chords the song already uses; borrowed
        chords come from the parallel key for extra colour.

        Args:
            numerals: Roman numerals already used in the song
            key: Key as root_mode

        Returns:
            JSON string with diatonic and borrowed suggestions

        Example:
            harmony_suggest_bridge(numerals=["I", "V", "vi", "IV"], key="C_major")
        """
        try:
            parsed = Key.parse(key)
            used = [roman_numeral_to_chord(numeral, parsed) for numeral in numerals]

            return json.dumps(
                {
                    "status": "success",
                    "suggestions": [
                        s.model_dump(mode="json") for s in get_bridge_chord_suggestions(parsed, used)
                    ],
                    "borrowed": [s.model_dump(mode="json") for s in get_borrowed_chords(parsed)],
                }
            )
        except Exception as e:
            logger.exception("Failed to suggest bridge chords")
            return json.dumps({"status": "error", "message": str(e)})

    tools["harmony_suggest_bridge"] = harmony_suggest_bridge

    return tools
