"""
Schema loader - discovers and loads four-chord schemas.

Schemas can come from:
1. Built-in library (shipped with package)
2. Project schemas (user's project/schemas directory)
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from chuk_mcp_harmony.library import YamlLibrary
from chuk_mcp_harmony.models.schema import ChordSchema, SchemaMetadata


class SchemaLoader(YamlLibrary[ChordSchema]):
    """
    Discovers and loads chord schemas.

    A listed schema's slug is its file name, so a project file
    'my-prog.yaml' named 'Sunset Walk' is found as 'my-prog' or as
    'Sunset Walk'.
    """

    kind = "Schema"

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        """
        Initialize the schema loader.

        Args:
            library_path: Path to built-in schema library
            project_path: Path to project schemas directory
        """
        super().__init__(library_path or (Path(__file__).parent / "library"), project_path)

    def list_schemas(self) -> list[SchemaMetadata]:
        """List all available schemas, project schemas taking precedence."""
        return [SchemaMetadata.from_schema(schema, slug) for slug, schema in self.entries()]

    def get_schema(self, name: str) -> ChordSchema | None:
        """
        Get a schema by slug or display name.

        Returns:
            ChordSchema if found, None otherwise
        """
        return self.get(name)

    def _parse(self, data: dict[str, Any], path: Path) -> ChordSchema:
        return ChordSchema(
            name=data["name"],
            progression=data.get("progression", []),
            rotations=data.get("rotations", []),
            substitutions=[tuple(pair) for pair in data.get("substitutions", [])],
            emotional_context=data.get("emotional_context", ""),
            examples=data.get("examples", []),
            difficulty=data.get("difficulty", "beginner"),
        )

    def _display_name(self, entry: ChordSchema) -> str:
        return entry.name
