"""
chuk-mcp-harmony - harmonic computation engine for songwriting tools.

Resolves Roman numerals to chords, suggests substitutions, scores
progressions and lays chords out on a hexagon wheel.
"""
