"""Shared fixtures for vttparse tests."""

import io
from pathlib import Path

import pytest

TESTDATA_DIR = Path(__file__).parent / "testdata"


@pytest.fixture
def testdata_dir():
    """Directory holding the sample .vtt documents."""
    return TESTDATA_DIR


@pytest.fixture
def vtt_stream():
    """Build an in-memory text stream from document text."""
    def _make(text):
        return io.StringIO(text)
    return _make


@pytest.fixture
def valid_files():
    """Every sample document expected to parse cleanly."""
    return sorted(p for p in TESTDATA_DIR.glob("*.vtt") if not p.name.startswith("invalid-"))


@pytest.fixture
def invalid_files():
    """Every sample document expected to fail."""
    return sorted(TESTDATA_DIR.glob("invalid-*.vtt"))
