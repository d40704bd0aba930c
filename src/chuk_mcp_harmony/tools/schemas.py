"""
Schema tools - MCP tools for four-chord schemas.

Tools for listing schemas, getting schema details, realizing a schema
in a key and copying a schema into the project for editing.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_harmony.constants import ErrorMessages
from chuk_mcp_harmony.core.scale import Key
from chuk_mcp_harmony.harmony.progression import analyze_progression_strength
from chuk_mcp_harmony.schemas import SchemaLoader, realize_schema

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_schema_tools(mcp: ChukMCPServer, schema_loader: SchemaLoader) -> dict[str, Any]:
    """
    Register schema tools with the MCP server.

    Args:
        mcp: The MCP server instance
        schema_loader: The schema loader

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def harmony_list_schemas() -> str:
        """
        List available chord schemas.

        Returns all schemas from the library and project with basic
        metadata.

        Returns:
            JSON string with list of schema summaries

        Example:
            harmony_list_schemas()
        """
        try:
            schemas = schema_loader.list_schemas()
            return json.dumps(
                {
                    "status": "success",
                    "schemas": [s.model_dump(mode="json") for s in schemas],
                    "count": len(schemas),
                }
            )
        except Exception as e:
            logger.exception("Failed to list schemas")
            return json.dumps({"status": "error", "message": str(e)})

    tools["harmony_list_schemas"] = harmony_list_schemas

    @mcp.tool  # type: ignore[arg-type]
    async def harmony_describe_schema(name: str) -> str:
        """
        Get detailed information about a schema.

        Returns the progression, its rotations, common substitutions,
        emotional context and example songs.

        Args:
            name: Schema name (e.g., "Doo-wop" or "doo-wop")

        Returns:
            JSON string with schema details

        Example:
            harmony_describe_schema(name="Royal Road")
        """
        try:
            schema = schema_loader.get_schema(name)
            if schema is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.SCHEMA_NOT_FOUND.format(name=name)}
                )

            return json.dumps({"status": "success", "schema": schema.model_dump(mode="json")})
        except Exception as e:
            logger.exception("Failed to describe schema")
            return json.dumps({"status": "error", "message": str(e)})

    tools["harmony_describe_schema"] = harmony_describe_schema

    @mcp.tool  # type: ignore[arg-type]
    async def harmony_realize_schema(name: str, key: str = "C_major", rotation: int = 0) -> str:
        """
        Resolve a schema into chords in a key.

        Args:
            name: Schema name
            key: Key as root_mode
            rotation: 0 for the progression, 1..n for one of its rotations

        Returns:
            JSON string with the chords and the progression strength

        Example:
            harmony_realize_schema(name="Andalusian Cadence", key="A_minor")
        """
        try:
            schema = schema_loader.get_schema(name)
            if schema is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.SCHEMA_NOT_FOUND.format(name=name)}
                )

            chords = realize_schema(schema, Key.parse(key), rotation)
            return json.dumps(
                {
                    "status": "success",
                    "schema": schema.name,
                    "rotation": rotation,
                    "numerals": schema.variant(rotation),
                    "chords": [chord.model_dump(mode="json") for chord in chords],
                    "strength": analyze_progression_strength(chords),
                }
            )
        except Exception as e:
            logger.exception("Failed to realize schema")
            return json.dumps({"status": "error", "message": str(e)})

    tools["harmony_realize_schema"] = harmony_realize_schema

    @mcp.tool  # type: ignore[arg-type]
    async def harmony_copy_schema_to_project(name: str) -> str:
        """
        Copy a library schema into the project for customization.

        Args:
            name: Schema name

        Returns:
            JSON string with the path of the copied file

        Example:
            harmony_copy_schema_to_project(name="doo-wop")
        """
        try:
            path = schema_loader.copy_to_project(name)
            if path is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.SCHEMA_NOT_FOUND.format(name=name)}
                )

            schema_loader.clear_cache()
            return json.dumps({"status": "success", "path": str(path)})
        except Exception as e:
            logger.exception("Failed to copy schema")
            return json.dumps({"status": "error", "message": str(e)})

    tools["harmony_copy_schema_to_project"] = harmony_copy_schema_to_project

    return tools
