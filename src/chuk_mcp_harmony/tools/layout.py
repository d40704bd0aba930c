"""
Layout tools - MCP tools for the hexagon wheel.

Tools for building the wheel for a key and listing the available themes.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_harmony.constants import ErrorMessages
from chuk_mcp_harmony.core.scale import Key
from chuk_mcp_harmony.layout.dissonance import calculate_dissonance
from chuk_mcp_harmony.layout.hexagon import generate_all_layers, polar_to_cartesian
from chuk_mcp_harmony.layout.themes import ThemeLoader

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_layout_tools(mcp: ChukMCPServer, theme_loader: ThemeLoader) -> dict[str, Any]:
    """
    Register layout tools with the MCP server.

    Args:
        mcp: The MCP server instance
        theme_loader: The theme loader

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def harmony_hexagon_layout(
        key: str = "C_major",
        theme: str = "default",
        include_coordinates: bool = False,
    ) -> str:
        """
        Build the hexagon wheel for a key.

        The centre node is the tonic; six rings of six chords surround
        it (diatonic, extensions, borrowed, substitutions, circle of
        fifths, chromatic). Every node carries a dissonance estimate.

        Args:
            key: Key as root_mode (e.g., "C_major")
            theme: Theme name for sizes and colours
            include_coordinates: Add x/y screen coordinates to each node

        Returns:
            JSON string with layers keyed by name

        Example:
            harmony_hexagon_layout(key="A_minor", include_coordinates=True)
        """
        try:
            layout_theme = theme_loader.get_theme(theme)
            if layout_theme is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.THEME_NOT_FOUND.format(name=theme)}
                )

            parsed = Key.parse(key)
            layers = generate_all_layers(parsed.root, parsed.mode, layout_theme)

            result: dict[str, Any] = {}
            for name, layer in layers.items():
                nodes = []
                for node in layer.chords:
                    entry = node.model_dump(mode="json")
                    entry["dissonance"] = calculate_dissonance(node)
                    if include_coordinates:
                        x, y = polar_to_cartesian(layer.radius, node.angle_degrees)
                        entry["x"] = round(x, 3)
                        entry["y"] = round(y, 3)
                    nodes.append(entry)
                result[name] = {"radius": layer.radius, "chords": nodes}

            return json.dumps(
                {
                    "status": "success",
                    "key": str(parsed),
                    "theme": layout_theme.name,
                    "layers": result,
                }
            )
        except Exception as e:
            logger.exception("Failed to build hexagon layout")
            return json.dumps({"status": "error", "message": str(e)})

    tools["harmony_hexagon_layout"] = harmony_hexagon_layout

    @mcp.tool  # type: ignore[arg-type]
    async def harmony_list_themes() -> str:
        """
        List available wheel themes.

        Returns:
            JSON string with theme names and descriptions

        Example:
            harmony_list_themes()
        """
        try:
            themes = theme_loader.list_themes()
            return json.dumps(
                {
                    "status": "success",
                    "themes": [t.model_dump(mode="json") for t in themes],
                    "count": len(themes),
                }
            )
        except Exception as e:
            logger.exception("Failed to list themes")
            return json.dumps({"status": "error", "message": str(e)})

    tools["harmony_list_themes"] = harmony_list_themes

    return tools
