"""Shared test fixtures for termotype tests."""

import json
import random
import tempfile
from pathlib import Path

import pytest


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 0.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    """Clock starting at 0 seconds."""
    return FakeClock()


@pytest.fixture
def rng():
    """Seeded random generator for reproducible word sequences."""
    return random.Random(1234)


@pytest.fixture
def temp_dir():
    """Create a temporary directory and clean up afterwards."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def words_file(temp_dir):
    """JSON word file with a small known pool."""
    path = temp_dir / "words.json"
    path.write_text(json.dumps(["ala", "ma", "kota"]), encoding="utf-8")
    return path
