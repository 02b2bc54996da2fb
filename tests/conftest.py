import pytest
import os
import sys
from unittest.mock import MagicMock

# Add project root to path to ensure imports work correctly
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

# Import after setting up the path
from maybe_monad import Maybe, just, nothing
from maybe_monad.utils.config_manager import config


def double_if_positive(x: int) -> Maybe[int]:
    """Just(x * 2) for positive input, Nothing otherwise."""
    return just(x * 2) if x > 0 else nothing(int)


def increment_below_hundred(x: int) -> Maybe[int]:
    """Just(x + 1) while x stays below 100, Nothing otherwise."""
    return just(x + 1) if x < 100 else nothing(int)


@pytest.fixture
def f():
    """First step of the two-step pipeline used across tests."""
    return double_if_positive


@pytest.fixture
def g():
    """Second step of the two-step pipeline used across tests."""
    return increment_below_hundred


@pytest.fixture
def counting_stub():
    """A Maybe-returning stub that records every call."""
    return MagicMock(side_effect=lambda x: just(x))


@pytest.fixture
def maybe_config(monkeypatch):
    """The live ``config.maybe`` section; changes are undone after the test."""
    for name in ("deep_copy_values", "strict_signatures"):
        monkeypatch.setattr(config.maybe, name, getattr(config.maybe, name))
    return config.maybe


@pytest.fixture
def logging_config(monkeypatch, tmp_path):
    """The live ``config.logging`` section pointed at a temporary log dir."""
    monkeypatch.setattr(config.logging, "log_dir", str(tmp_path))
    for name in ("enable_file_logging", "console_logging", "log_level"):
        monkeypatch.setattr(config.logging, name, getattr(config.logging, name))
    return config.logging
