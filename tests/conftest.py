"""Pytest configuration and fixtures for Thread Safety Explained tests."""
import random
import sys
from pathlib import Path

import pytest

# Add the parent directory to the path so we can import thread_safety
sys.path.insert(0, str(Path(__file__).parent.parent))

from thread_safety import SharedStateCalculator, StatelessCalculator, pacing
from thread_safety.pacing import Pacing


@pytest.fixture
def stateless():
    return StatelessCalculator()


@pytest.fixture
def shared():
    """A fresh, unguarded shared-state calculator."""
    return SharedStateCalculator()


@pytest.fixture
def guarded():
    return SharedStateCalculator(guarded=True)


@pytest.fixture
def instant():
    """Scenario pacing without settle or flush delays."""
    return Pacing(settle_millis=0, flush_millis=0)


@pytest.fixture
def seeded_rng():
    return random.Random(1234)


@pytest.fixture
def recorded_pauses(monkeypatch):
    """Replace pacing.pause with a recorder that does not sleep."""
    calls = []
    monkeypatch.setattr(pacing, "pause", calls.append)
    return calls


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "slow: mark test as slow (deselect with '-m \"not slow\"')"
    )
