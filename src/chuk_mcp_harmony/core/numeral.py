"""
Roman numeral primitives - parsing a symbol into its parts.

A symbol like 'bVII7' splits into a flat marker, a base numeral ('VII')
and a suffix of quality/extension glyphs ('7'). The base numeral alone
decides the scale degree; the suffix is carried for labels only.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from chuk_mcp_harmony.constants import ROMAN_NUMERALS, ErrorMessages

_EXTENSION_RE = re.compile(r"(13|11|9|7)")


class InvalidRomanNumeral(ValueError):
    """Raised when a symbol has no recognizable I..VII base numeral."""

    def __init__(self, symbol: str):
        super().__init__(ErrorMessages.INVALID_ROMAN_NUMERAL.format(symbol=symbol))
        self.symbol = symbol


@dataclass(frozen=True)
class NumeralParts:
    """
    A Roman-numeral symbol split into its components.

    Examples:
        'V'      -> NumeralParts(flat=False, numeral='V', suffix='')
        'bVII7'  -> NumeralParts(flat=True, numeral='VII', suffix='7')
        'vii°'   -> NumeralParts(flat=False, numeral='vii', suffix='°')
    """

    flat: bool
    numeral: str  # case preserved
    suffix: str = ""

    @property
    def degree_index(self) -> int:
        """0-based scale degree (0 = tonic)."""
        return ROMAN_NUMERALS.index(self.numeral.upper())

    @property
    def is_lower(self) -> bool:
        return self.numeral.islower()

    @property
    def extension(self) -> int | None:
        """Extension digit found in the suffix, if any."""
        match = _EXTENSION_RE.search(self.suffix)
        return int(match.group(1)) if match else None

    @property
    def prefix(self) -> str:
        return "b" if self.flat else ""

    def __str__(self) -> str:
        return f"{self.prefix}{self.numeral}{self.suffix}"


def parse_numeral(symbol: str) -> NumeralParts:
    """
    Split a Roman-numeral symbol into flat marker, numeral and suffix.

    Raises:
        InvalidRomanNumeral: if the base numeral is not one of I..VII
    """
    text = symbol.strip()

    flat = text.startswith("b")
    if flat:
        text = text[1:]

    numeral = ""
    for char in text:
        if char.upper() in "IV":
            numeral += char
        else:
            break
    suffix = text[len(numeral) :]

    if numeral.upper() not in ROMAN_NUMERALS:
        raise InvalidRomanNumeral(symbol)

    return NumeralParts(flat, numeral, suffix)


def try_parse_numeral(symbol: str) -> NumeralParts | None:
    """parse_numeral() that answers None instead of raising."""
    try:
        return parse_numeral(symbol)
    except InvalidRomanNumeral:
        return None


def base_numeral(symbol: str) -> str | None:
    """Upper-case base numeral of a symbol ('bVII7' -> 'VII'), or None."""
    parts = try_parse_numeral(symbol)
    return parts.numeral.upper() if parts else None
