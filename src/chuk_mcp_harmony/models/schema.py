"""
Schema models - named four-chord progressions.

A schema is a progression template in Roman numerals. It is key-free
until realized against a Key.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from chuk_mcp_harmony.constants import Difficulty
from chuk_mcp_harmony.library import slugify


class ChordSchema(BaseModel):
    """A well-known progression with its rotations and common swaps."""

    name: str = Field(..., description="Display name (e.g., 'Doo-wop')")
    progression: list[str] = Field(..., min_length=1, description="Roman numerals in order")
    rotations: list[list[str]] = Field(
        default_factory=list, description="Same chords starting elsewhere"
    )
    substitutions: list[tuple[str, str]] = Field(
        default_factory=list, description="(original, substitute) numeral pairs"
    )
    emotional_context: str = Field(default="", description="How the progression feels")
    examples: list[str] = Field(default_factory=list, description="'Song - Artist' entries")
    difficulty: Difficulty = "beginner"

    model_config = {"frozen": True}

    @property
    def slug(self) -> str:
        return slugify(self.name)

    @property
    def variant_count(self) -> int:
        """Original progression plus its rotations."""
        return 1 + len(self.rotations)

    def variant(self, rotation: int = 0) -> list[str]:
        """Numerals of the progression (0) or one of its rotations (1..n)."""
        if rotation == 0:
            return list(self.progression)
        return list(self.rotations[rotation - 1])


class SchemaMetadata(BaseModel):
    """Lightweight metadata for listing schemas."""

    name: str
    slug: str
    progression: list[str]
    emotional_context: str
    difficulty: Difficulty

    model_config = {"frozen": True}

    @classmethod
    def from_schema(cls, schema: ChordSchema, slug: str | None = None) -> SchemaMetadata:
        """Create metadata from a schema, optionally under the slug it was stored as."""
        return cls(
            name=schema.name,
            slug=slug or schema.slug,
            progression=list(schema.progression),
            emotional_context=schema.emotional_context,
            difficulty=schema.difficulty,
        )
