"""
Tests for MCP tools.

Tests the MCP tool implementations for chords, analysis, the hexagon
layout and schemas.
"""

import json
from pathlib import Path

import pytest

from chuk_mcp_harmony.layout import ThemeLoader
from chuk_mcp_harmony.schemas import SchemaLoader
from chuk_mcp_harmony.tools import (
    register_analysis_tools,
    register_chord_tools,
    register_layout_tools,
    register_schema_tools,
)


# Mock MCP server for testing tools
class MockMCPServer:
    """Mock MCP server that just stores registered tools."""

    def __init__(self, name: str):
        self.name = name
        self.tools: dict = {}

    def tool(self, func):
        """Decorator to register a tool."""
        self.tools[func.__name__] = func
        return func


@pytest.fixture
def chord_tools():
    return register_chord_tools(MockMCPServer("test"))


@pytest.fixture
def analysis_tools():
    return register_analysis_tools(MockMCPServer("test"))


@pytest.fixture
def layout_tools():
    return register_layout_tools(MockMCPServer("test"), ThemeLoader())


@pytest.fixture
def schema_tools(temp_dir: Path):
    loader = SchemaLoader(project_path=temp_dir / "schemas")
    return register_schema_tools(MockMCPServer("test"), loader)


class TestRegistration:
    """Tests for tool registration."""

    def test_tools_registered_on_server(self) -> None:
        """Every tool lands on the server under its function name."""
        mcp = MockMCPServer("test")
        register_chord_tools(mcp)
        register_analysis_tools(mcp)
        register_layout_tools(mcp, ThemeLoader())
        register_schema_tools(mcp, SchemaLoader())
        assert set(mcp.tools) == {
            "harmony_resolve_chord",
            "harmony_describe_key",
            "harmony_transform_chord",
            "harmony_get_substitutions",
            "harmony_analyze_progression",
            "harmony_suggest_bridge",
            "harmony_hexagon_layout",
            "harmony_list_themes",
            "harmony_list_schemas",
            "harmony_describe_schema",
            "harmony_realize_schema",
            "harmony_copy_schema_to_project",
        }


class TestChordTools:
    """Tests for chord tools."""

    @pytest.mark.asyncio
    async def test_resolve_chord(self, chord_tools):
        """V in C major is G-B-D."""
        result = await chord_tools["harmony_resolve_chord"](numeral="V", key="C_major")
        data = json.loads(result)
        assert data["status"] == "success"
        assert data["chord"]["notes"] == [7, 11, 2]
        assert data["chord"]["quality"] == "major"
        assert data["chord"]["function"] == "dominant"
        assert data["chord"]["name"] == "G major"

    @pytest.mark.asyncio
    async def test_resolve_invalid_numeral(self, chord_tools):
        """Unreadable numerals report an error."""
        data = json.loads(await chord_tools["harmony_resolve_chord"](numeral="X", key="C_major"))
        assert data["status"] == "error"
        assert "X" in data["message"]

    @pytest.mark.asyncio
    async def test_resolve_invalid_key(self, chord_tools):
        """Keys need a root and a mode."""
        data = json.loads(await chord_tools["harmony_resolve_chord"](numeral="I", key="C"))
        assert data["status"] == "error"
        assert "Invalid key" in data["message"]

    @pytest.mark.asyncio
    async def test_describe_key(self, chord_tools):
        """D dorian: white-key scale, minor tonic."""
        data = json.loads(await chord_tools["harmony_describe_key"](key="D_dorian"))
        assert data["status"] == "success"
        assert data["key"] == "D dorian"
        assert data["scale"] == ["D", "E", "F", "G", "A", "B", "C"]
        assert data["parallel"] == "D major"
        assert len(data["chords"]) == 7
        assert data["chords"][0]["quality"] == "minor"

    @pytest.mark.asyncio
    async def test_transform_extend(self, chord_tools):
        """Extending V by 7 gives V7."""
        resolved = json.loads(await chord_tools["harmony_resolve_chord"](numeral="V"))
        result = await chord_tools["harmony_transform_chord"](
            chord=resolved["chord"], operation="extend", value=7
        )
        data = json.loads(result)
        assert data["status"] == "success"
        assert data["chord"]["roman_numeral"] == "V7"
        assert data["chord"]["extension"] == 7
        assert data["chord"]["notes"] == [7, 11, 2]

    @pytest.mark.asyncio
    async def test_transform_transpose(self, chord_tools):
        """Transposing keeps the triad shape."""
        resolved = json.loads(await chord_tools["harmony_resolve_chord"](numeral="I"))
        data = json.loads(
            await chord_tools["harmony_transform_chord"](
                chord=resolved["chord"], operation="transpose", value="down"
            )
        )
        assert data["status"] == "success"
        assert data["chord"]["notes"] == [11, 3, 6]

    @pytest.mark.asyncio
    async def test_transform_unknown_operation(self, chord_tools):
        """Unknown operations report an error."""
        resolved = json.loads(await chord_tools["harmony_resolve_chord"](numeral="I"))
        data = json.loads(
            await chord_tools["harmony_transform_chord"](
                chord=resolved["chord"], operation="invert", value=1
            )
        )
        assert data["status"] == "error"
        assert "invert" in data["message"]

    @pytest.mark.asyncio
    async def test_transform_bad_value(self, chord_tools):
        """Transform validation errors come back as errors."""
        resolved = json.loads(await chord_tools["harmony_resolve_chord"](numeral="I"))
        data = json.loads(
            await chord_tools["harmony_transform_chord"](
                chord=resolved["chord"], operation="extend", value=6
            )
        )
        assert data["status"] == "error"


class TestAnalysisTools:
    """Tests for analysis tools."""

    @pytest.mark.asyncio
    async def test_get_substitutions(self, analysis_tools):
        """Substitutions come grouped with a total count."""
        data = json.loads(
            await analysis_tools["harmony_get_substitutions"](numeral="IV", key="C_major")
        )
        assert data["status"] == "success"
        subs = data["substitutions"]
        assert [o["chord"]["roman_numeral"] for o in subs["functional"]] == ["ii"]
        assert len(subs["modal_interchange"]) == 7
        assert data["count"] == (
            len(subs["common_tone"]) + len(subs["functional"]) + len(subs["modal_interchange"])
        )

    @pytest.mark.asyncio
    async def test_analyze_progression(self, analysis_tools):
        """I-IV-V-I scores 78 with rising tension to the dominant."""
        data = json.loads(
            await analysis_tools["harmony_analyze_progression"](
                numerals=["I", "IV", "V", "I"], key="C_major"
            )
        )
        assert data["status"] == "success"
        assert data["analysis"]["strength"] == 78
        assert data["analysis"]["roman_numerals"] == "I - IV - V - I"
        assert data["tension"] == [10, 40, 80, 10]

    @pytest.mark.asyncio
    async def test_analyze_bad_numeral(self, analysis_tools):
        """One bad numeral fails the whole request."""
        data = json.loads(
            await analysis_tools["harmony_analyze_progression"](numerals=["I", "Q"], key="C_major")
        )
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_suggest_bridge(self, analysis_tools):
        """Unused diatonic chords plus borrowed colour."""
        data = json.loads(
            await analysis_tools["harmony_suggest_bridge"](
                numerals=["I", "V", "vi", "IV"], key="C_major"
            )
        )
        assert data["status"] == "success"
        assert [s["chord"]["roman_numeral"] for s in data["suggestions"]] == ["ii", "iii"]
        assert [s["chord"]["roman_numeral"] for s in data["borrowed"]] == [
            "bIII",
            "bVI",
            "bVII",
            "iv",
        ]


class TestLayoutTools:
    """Tests for layout tools."""

    @pytest.mark.asyncio
    async def test_hexagon_layout(self, layout_tools):
        """Seven layers with radii and dissonance per node."""
        data = json.loads(await layout_tools["harmony_hexagon_layout"](key="C_major"))
        assert data["status"] == "success"
        assert data["theme"] == "default"
        layers = data["layers"]
        assert list(layers) == [
            "root",
            "diatonic",
            "extensions",
            "borrowed",
            "substitutions",
            "circle-fifths",
            "chromatic",
        ]
        assert layers["diatonic"]["radius"] == 120
        assert len(layers["root"]["chords"]) == 1
        assert all(len(layers[name]["chords"]) == 6 for name in list(layers)[1:])
        assert layers["root"]["chords"][0]["dissonance"] == 0.0
        assert "x" not in layers["diatonic"]["chords"][0]

    @pytest.mark.asyncio
    async def test_hexagon_coordinates(self, layout_tools):
        """The first node of a ring sits straight above the centre."""
        data = json.loads(
            await layout_tools["harmony_hexagon_layout"](key="C_major", include_coordinates=True)
        )
        first = data["layers"]["diatonic"]["chords"][0]
        assert first["x"] == pytest.approx(0.0)
        assert first["y"] == pytest.approx(-120.0)
        centre = data["layers"]["root"]["chords"][0]
        assert centre["x"] == pytest.approx(0.0)
        assert centre["y"] == pytest.approx(0.0)

    @pytest.mark.asyncio
    async def test_hexagon_other_theme(self, layout_tools):
        """Themes change ring sizes."""
        data = json.loads(await layout_tools["harmony_hexagon_layout"](key="A_minor", theme="print"))
        assert data["status"] == "success"
        assert data["key"] == "A minor"
        assert data["layers"]["diatonic"]["radius"] == 136

    @pytest.mark.asyncio
    async def test_hexagon_missing_theme(self, layout_tools):
        """Unknown themes report an error."""
        data = json.loads(await layout_tools["harmony_hexagon_layout"](theme="neon"))
        assert data["status"] == "error"
        assert "neon" in data["message"]

    @pytest.mark.asyncio
    async def test_list_themes(self, layout_tools):
        """Built-in themes are listed."""
        data = json.loads(await layout_tools["harmony_list_themes"]())
        assert data["status"] == "success"
        assert {t["name"] for t in data["themes"]} == {"default", "print"}
        assert data["count"] == 2


class TestSchemaTools:
    """Tests for schema tools."""

    @pytest.mark.asyncio
    async def test_list_schemas(self, schema_tools):
        """All built-in schemas are listed."""
        data = json.loads(await schema_tools["harmony_list_schemas"]())
        assert data["status"] == "success"
        assert data["count"] == 8
        assert "doo-wop" in {s["slug"] for s in data["schemas"]}

    @pytest.mark.asyncio
    async def test_describe_schema(self, schema_tools):
        """Details include rotations and examples."""
        data = json.loads(await schema_tools["harmony_describe_schema"](name="Royal Road"))
        assert data["status"] == "success"
        assert data["schema"]["progression"] == ["IV", "V", "iii", "vi"]
        assert len(data["schema"]["rotations"]) == 3

    @pytest.mark.asyncio
    async def test_describe_missing_schema(self, schema_tools):
        """Unknown schemas report an error."""
        data = json.loads(await schema_tools["harmony_describe_schema"](name="Twelve Bar Blues"))
        assert data["status"] == "error"
        assert "not found" in data["message"]

    @pytest.mark.asyncio
    async def test_realize_schema(self, schema_tools):
        """Doo-wop rotation 1 in G major."""
        data = json.loads(
            await schema_tools["harmony_realize_schema"](name="doo-wop", key="G_major", rotation=1)
        )
        assert data["status"] == "success"
        assert data["numerals"] == ["vi", "IV", "V", "I"]
        assert [c["notes"][0] for c in data["chords"]] == [4, 0, 2, 7]
        assert 0 <= data["strength"] <= 100

    @pytest.mark.asyncio
    async def test_realize_bad_rotation(self, schema_tools):
        """Out-of-range rotations report an error."""
        data = json.loads(
            await schema_tools["harmony_realize_schema"](name="doo-wop", rotation=9)
        )
        assert data["status"] == "error"
        assert "Rotation 9" in data["message"]

    @pytest.mark.asyncio
    async def test_copy_schema_to_project(self, schema_tools, temp_dir: Path):
        """Copy once, then refuse to overwrite."""
        data = json.loads(await schema_tools["harmony_copy_schema_to_project"](name="Doo-wop"))
        assert data["status"] == "success"
        assert Path(data["path"]) == temp_dir / "schemas" / "doo-wop.yaml"
        assert Path(data["path"]).exists()

        again = json.loads(await schema_tools["harmony_copy_schema_to_project"](name="Doo-wop"))
        assert again["status"] == "error"

        missing = json.loads(
            await schema_tools["harmony_copy_schema_to_project"](name="Twelve Bar Blues")
        )
        assert missing["status"] == "error"

    @pytest.mark.asyncio
    async def test_listed_project_schema_describes(self, schema_tools, temp_dir: Path):
        """A project schema whose file name differs from its name is reachable by its slug."""
        project = temp_dir / "schemas"
        project.mkdir()
        (project / "my-prog.yaml").write_text("name: Sunset Walk\nprogression: [I, IV, V, I]\n")

        listed = json.loads(await schema_tools["harmony_list_schemas"]())
        slugs = {s["name"]: s["slug"] for s in listed["schemas"]}
        assert slugs["Sunset Walk"] == "my-prog"

        data = json.loads(await schema_tools["harmony_describe_schema"](name=slugs["Sunset Walk"]))
        assert data["status"] == "success"
        assert data["schema"]["name"] == "Sunset Walk"


class TestServerFlags:
    """Tests for the server entry point flags."""

    def test_defaults(self) -> None:
        """stdio on port 8000 with no project override."""
        from chuk_mcp_harmony.server import build_parser

        args = build_parser().parse_args([])
        assert args.transport == "stdio"
        assert args.port == 8000
        assert args.project_dir is None
        assert args.debug is False

    def test_project_dir(self) -> None:
        """--project-dir is accepted alongside http flags."""
        from chuk_mcp_harmony.server import build_parser

        args = build_parser().parse_args(
            ["--transport", "http", "--port", "9000", "--project-dir", "/tmp/song"]
        )
        assert args.transport == "http"
        assert args.port == 9000
        assert args.project_dir == "/tmp/song"
