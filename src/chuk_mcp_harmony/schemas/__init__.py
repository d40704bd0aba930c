"""
Chord schemas - named four-chord progressions shipped as YAML.

This module provides:
- SchemaLoader: Discovers schemas in the library and project directories
- realize_schema: Resolves a schema (or a rotation of it) in a key
"""

from chuk_mcp_harmony.schemas.loader import SchemaLoader
from chuk_mcp_harmony.schemas.realize import realize_schema

__all__ = [
    "SchemaLoader",
    "realize_schema",
]
