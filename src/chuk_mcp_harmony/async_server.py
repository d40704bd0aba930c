#!/usr/bin/env python3
"""
Async Harmony MCP Server using chuk-mcp-server

This server provides MCP tools for songwriting harmony: it resolves Roman
numerals to chords, suggests substitutions and bridge chords, scores
progressions and lays chords out on a hexagon wheel.

The server provides tools for:
- Resolving chords and describing keys in any of the seven modes
- Editing chords (extensions, quality changes, suspensions, transposition)
- Substitution and progression analysis
- Hexagon wheel layouts with per-node dissonance
- Four-chord schema discovery and customization
"""

import logging
import os
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_harmony.layout import ThemeLoader
from chuk_mcp_harmony.schemas import SchemaLoader
from chuk_mcp_harmony.tools import (
    register_analysis_tools,
    register_chord_tools,
    register_layout_tools,
    register_schema_tools,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-harmony")

# Paths - project dir from the environment (set by --project-dir), else cwd
BASE_PATH = Path(os.environ.get("CHUK_HARMONY_PROJECT_DIR") or Path.cwd())
SCHEMAS_DIR = BASE_PATH / "schemas"
THEMES_DIR = BASE_PATH / "themes"
SCHEMAS_LIBRARY_PATH = Path(__file__).parent / "schemas" / "library"
THEMES_LIBRARY_PATH = Path(__file__).parent / "layout" / "library"

# Create loaders
schema_loader = SchemaLoader(
    library_path=SCHEMAS_LIBRARY_PATH,
    project_path=SCHEMAS_DIR,
)
theme_loader = ThemeLoader(
    library_path=THEMES_LIBRARY_PATH,
    project_path=THEMES_DIR,
)

# Register all tools
chord_tools = register_chord_tools(mcp)
analysis_tools = register_analysis_tools(mcp)
layout_tools = register_layout_tools(mcp, theme_loader)
schema_tools = register_schema_tools(mcp, schema_loader)

# Export tool functions for direct access
harmony_resolve_chord = chord_tools["harmony_resolve_chord"]
harmony_describe_key = chord_tools["harmony_describe_key"]
harmony_transform_chord = chord_tools["harmony_transform_chord"]

harmony_get_substitutions = analysis_tools["harmony_get_substitutions"]
harmony_analyze_progression = analysis_tools["harmony_analyze_progression"]
harmony_suggest_bridge = analysis_tools["harmony_suggest_bridge"]

harmony_hexagon_layout = layout_tools["harmony_hexagon_layout"]
harmony_list_themes = layout_tools["harmony_list_themes"]

harmony_list_schemas = schema_tools["harmony_list_schemas"]
harmony_describe_schema = schema_tools["harmony_describe_schema"]
harmony_realize_schema = schema_tools["harmony_realize_schema"]
harmony_copy_schema_to_project = schema_tools["harmony_copy_schema_to_project"]

logger.info("CHUK Harmony MCP Server initialized")
logger.info(f"  Schemas library: {SCHEMAS_LIBRARY_PATH}")
logger.info(f"  Project schemas dir: {SCHEMAS_DIR}")
logger.info(f"  Project themes dir: {THEMES_DIR}")
