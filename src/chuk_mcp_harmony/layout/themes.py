"""
Theme loader - discovers and loads wheel themes.

Themes can come from:
1. Built-in library (shipped with package)
2. Project themes (user's project/themes directory)
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from chuk_mcp_harmony.library import YamlLibrary
from chuk_mcp_harmony.models.layout import LayoutTheme, ThemeMetadata


class ThemeLoader(YamlLibrary[LayoutTheme]):
    """
    Discovers and loads layout themes.

    Missing sizes and colours keep the LayoutTheme defaults; a file
    without a name is named after the file.
    """

    kind = "Theme"

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        """
        Initialize the theme loader.

        Args:
            library_path: Path to built-in theme library
            project_path: Path to project themes directory
        """
        super().__init__(library_path or (Path(__file__).parent / "library"), project_path)

    def list_themes(self) -> list[ThemeMetadata]:
        """List all available themes, project themes taking precedence."""
        return [ThemeMetadata.from_theme(theme) for _, theme in self.entries()]

    def get_theme(self, name: str) -> LayoutTheme | None:
        """
        Get a theme by file name or theme name.

        Returns:
            LayoutTheme if found, None otherwise
        """
        return self.get(name)

    def _parse(self, data: dict[str, Any], path: Path) -> LayoutTheme:
        sizes = data.get("sizes", {})
        colors = data.get("colors", {})

        fields: dict[str, Any] = {
            "name": data.get("name", path.stem),
            "description": data.get("description", ""),
        }
        if "node_radius" in sizes:
            fields["node_radius"] = sizes["node_radius"]
        if "root_node_radius" in sizes:
            fields["root_node_radius"] = sizes["root_node_radius"]
        if "quality" in colors:
            fields["quality_colors"] = colors["quality"]
        if "layers" in colors:
            fields["layer_colors"] = colors["layers"]

        return LayoutTheme.model_validate(fields)

    def _display_name(self, entry: LayoutTheme) -> str:
        return entry.name
