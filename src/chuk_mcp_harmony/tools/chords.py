"""
Chord tools - MCP tools for resolving and editing chords.

Tools for turning Roman numerals into chords, listing a key's diatonic
chords and applying the chord transforms.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_harmony.constants import ErrorMessages
from chuk_mcp_harmony.core.scale import Key, scale_notes
from chuk_mcp_harmony.harmony.resolver import diatonic_chords, roman_numeral_to_chord
from chuk_mcp_harmony.harmony.transforms import (
    add_suspension,
    extend,
    modify_quality,
    transpose,
)
from chuk_mcp_harmony.models.chord import Chord

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_chord_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register chord tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def harmony_resolve_chord(numeral: str, key: str = "C_major") -> str:
        """
        Resolve a Roman numeral to a chord in a key.

        Flat-prefixed numerals (bIII, bVI, bVII) are borrowed roots and
        always resolve to a major triad.

        Args:
            numeral: Roman numeral (e.g., "V", "ii7", "vii°", "bVII")
            key: Key as root_mode (e.g., "C_major", "F#_dorian")

        Returns:
            JSON string with the resolved chord

        Example:
            harmony_resolve_chord(numeral="V", key="C_major")
        """
        try:
            chord = roman_numeral_to_chord(numeral, Key.parse(key))
            return json.dumps({"status": "success", "chord": chord.model_dump(mode="json")})
        except Exception as e:
            logger.exception("Failed to resolve chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["harmony_resolve_chord"] = harmony_resolve_chord

    @mcp.tool  # type: ignore[arg-type]
    async def harmony_describe_key(key: str) -> str:
        """
        Describe a key: its scale and its seven diatonic chords.

        Args:
            key: Key as root_mode (e.g., "A_minor")

        Returns:
            JSON string with scale notes and diatonic chords

        Example:
            harmony_describe_key(key="D_dorian")
        """
        try:
            parsed = Key.parse(key)
            chords = diatonic_chords(parsed)
            return json.dumps(
                {
                    "status": "success",
                    "key": str(parsed),
                    "mode": parsed.mode.value,
                    "scale": scale_notes(parsed),
                    "parallel": str(parsed.parallel()),
                    "chords": [chord.model_dump(mode="json") for chord in chords],
                }
            )
        except Exception as e:
            logger.exception("Failed to describe key")
            return json.dumps({"status": "error", "message": str(e)})

    tools["harmony_describe_key"] = harmony_describe_key

    @mcp.tool  # type: ignore[arg-type]
    async def harmony_transform_chord(
        chord: dict[str, Any],
        operation: str,
        value: str | int,
    ) -> str:
        """
        Apply a transform to a chord.

        Operations:
        - extend: value is 7, 9, 11 or 13
        - modify_quality: value is augmented, diminished or dominant
        - add_suspension: value is sus2 or sus4
        - transpose: value is up or down

        Args:
            chord: Chord object (as returned by harmony_resolve_chord)
            operation: Transform name
            value: Transform argument

        Returns:
            JSON string with the new chord

        Example:
            harmony_transform_chord(chord=chord, operation="extend", value=7)
        """
        try:
            source = Chord.model_validate(chord)

            if operation == "extend":
                result = extend(source, int(value))
            elif operation == "modify_quality":
                result = modify_quality(source, str(value))  # type: ignore[arg-type]
            elif operation == "add_suspension":
                result = add_suspension(source, str(value))  # type: ignore[arg-type]
            elif operation == "transpose":
                result = transpose(source, str(value))  # type: ignore[arg-type]
            else:
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.UNKNOWN_OPERATION.format(operation=operation),
                    }
                )

            return json.dumps({"status": "success", "chord": result.model_dump(mode="json")})
        except Exception as e:
            logger.exception("Failed to transform chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["harmony_transform_chord"] = harmony_transform_chord

    return tools
