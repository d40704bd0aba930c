"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from chuk_mcp_harmony.core import Key, Mode, PitchClass


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def c_major() -> Key:
    """C major."""
    return Key(PitchClass.C, Mode.MAJOR)


@pytest.fixture
def a_minor() -> Key:
    """A (natural) minor."""
    return Key(PitchClass.A, Mode.MINOR)
