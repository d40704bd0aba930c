"""
Layout models - the hexagon wheel's nodes, rings and theme.

The wheel is a centre node (the key's tonic) surrounded by six rings of
six nodes each. Positions are polar: a ring radius and an angle measured
clockwise from the top.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from chuk_mcp_harmony.core.pitch import PitchClass
from chuk_mcp_harmony.models.chord import ChordQuality


class LayerName(str, Enum):
    """Rings of the hexagon wheel, innermost first."""

    ROOT = "root"
    DIATONIC = "diatonic"
    EXTENSIONS = "extensions"
    BORROWED = "borrowed"
    SUBSTITUTIONS = "substitutions"
    CIRCLE_FIFTHS = "circle-fifths"
    CHROMATIC = "chromatic"

    @property
    def ring(self) -> int:
        """Ring index (0 for the centre node)."""
        return list(LayerName).index(self)


class HexPosition(BaseModel):
    """One node on the wheel."""

    layer: LayerName = Field(..., description="Ring this node belongs to")
    position: int = Field(..., ge=0, description="0-based index within the ring")
    pitch_class: PitchClass = Field(..., description="Root pitch class of the node")
    display_chord: str = Field(..., description="Label drawn on the node (e.g., 'Am', 'G7')")
    roman_numeral: str | None = Field(None, description="Roman numeral, when the node is a chord")
    angle_degrees: float = Field(..., description="Angle from the top, clockwise")
    color: str = Field(..., description="Fill colour (hex)")
    quality: ChordQuality | None = Field(None, description="Triad quality, when known")
    extension: str | None = Field(None, description="Seventh label (e.g., 'maj7', 'm7', 'ø7')")
    source: str | None = Field(None, description="Mode a borrowed chord comes from")
    substitutes_for: str | None = Field(None, description="Numeral a substitution replaces")

    model_config = {"frozen": True}


class HexLayer(BaseModel):
    """A ring of nodes at a fixed radius."""

    layer: LayerName
    radius: float = Field(..., ge=0.0, description="Distance from the centre")
    chords: list[HexPosition] = Field(default_factory=list)

    model_config = {"frozen": True}


class LayoutTheme(BaseModel):
    """
    Sizes and colours used to draw the wheel.

    Rings are packed so neighbours touch: the first ring sits at
    root_node_radius + node_radius and every further ring adds one node
    diameter.
    """

    name: str = "default"
    description: str = ""
    node_radius: float = Field(default=30.0, gt=0.0, description="Radius of an outer node")
    root_node_radius: float = Field(default=90.0, gt=0.0, description="Radius of the centre node")
    quality_colors: dict[ChordQuality, str] = Field(
        default_factory=lambda: {
            ChordQuality.MAJOR: "#4A90E2",
            ChordQuality.MINOR: "#7ED321",
            ChordQuality.DIMINISHED: "#F5A623",
            ChordQuality.AUGMENTED: "#BD10E0",
            ChordQuality.DOMINANT: "#FF6B6B",
        }
    )
    layer_colors: dict[LayerName, str] = Field(
        default_factory=lambda: {
            LayerName.ROOT: "#667eea",
            LayerName.EXTENSIONS: "#7ED321",
            LayerName.BORROWED: "#F5A623",
            LayerName.SUBSTITUTIONS: "#BD10E0",
            LayerName.CIRCLE_FIFTHS: "#00D4FF",
            LayerName.CHROMATIC: "#808080",
        }
    )

    model_config = {"frozen": True}

    def ring_radius(self, layer: LayerName) -> float:
        if layer == LayerName.ROOT:
            return 0.0
        first = self.root_node_radius + self.node_radius
        return first + (layer.ring - 1) * 2 * self.node_radius

    def quality_color(self, quality: ChordQuality) -> str:
        """Colour for a quality; unlisted qualities use the major colour."""
        return self.quality_colors.get(quality, self.quality_colors.get(ChordQuality.MAJOR, "#4A90E2"))

    def layer_color(self, layer: LayerName) -> str:
        return self.layer_colors.get(layer, "#808080")


class ThemeMetadata(BaseModel):
    """Lightweight metadata for listing themes."""

    name: str
    description: str

    model_config = {"frozen": True}

    @classmethod
    def from_theme(cls, theme: LayoutTheme) -> ThemeMetadata:
        return cls(name=theme.name, description=theme.description)
