"""Pytest configuration and fixtures for ttsplay tests."""

import sys
from pathlib import Path

import pytest

# Add src and tests to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
sys.path.insert(0, str(Path(__file__).parent))

from test_helpers import FakeProvider, SleepRecorder
from ttsplay.cache import MemoryStore
from ttsplay.tts.models import SynthesisConfig


@pytest.fixture
def synthesis_config() -> SynthesisConfig:
    """Default synthesis settings used across tests."""
    return SynthesisConfig(model="tts-1", voice="alloy", credential="sk-test", speed=1.0)


@pytest.fixture
def memory_store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def fake_provider() -> FakeProvider:
    return FakeProvider()


@pytest.fixture
def sleep_recorder() -> SleepRecorder:
    return SleepRecorder()


@pytest.fixture(autouse=True)
def reset_config_cache(monkeypatch) -> None:
    """Never let a loaded config leak between tests."""
    monkeypatch.setattr("ttsplay.config._cached_config", None)
