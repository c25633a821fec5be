"""
Root conftest.py for shared test fixtures and configuration.
This file provides common fixtures used across the test suite.
"""

import sys
from pathlib import Path
from typing import List, Tuple

import pytest
from loguru import logger

# Add project root to Python path for consistent imports
PROJECT_ROOT = Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from navstack import config
from navstack.navigation import Coordinator, SignalPublisher

from Tests.navigation_test_utilities import CallbackRecorder, HomeDestination


# ========== Configuration Fixtures ==========

@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the config loader at a per-test file that does not exist yet."""
    config_path = tmp_path / "navstack" / "config.toml"
    monkeypatch.setenv(config.CONFIG_ENV_VAR, str(config_path))
    monkeypatch.delenv("NAVSTACK_LOG_LEVEL", raising=False)
    monkeypatch.setattr(config, "_CONFIG_CACHE", None)
    yield config_path
    config._CONFIG_CACHE = None


@pytest.fixture
def write_config(isolated_config):
    """Write TOML text to the isolated config file and reload it."""
    def _write(content: str) -> Path:
        isolated_config.parent.mkdir(parents=True, exist_ok=True)
        isolated_config.write_text(content, encoding="utf-8")
        config.load_config(force_reload=True)
        return isolated_config
    return _write


# ========== Logging Fixtures ==========

@pytest.fixture
def loguru_messages():
    """Capture loguru records as (level, message) tuples."""
    messages: List[Tuple[str, str]] = []

    def sink(message):
        record = message.record
        messages.append((record["level"].name, record["message"]))

    handler_id = logger.add(sink, level="TRACE")
    yield messages
    logger.remove(handler_id)


# ========== Navigation Fixtures ==========

@pytest.fixture
def publisher():
    return SignalPublisher()


@pytest.fixture
def changes(publisher):
    """Every NavigationChange emitted through the `publisher` fixture."""
    received = []
    publisher.subscribe(received.append)
    return received


@pytest.fixture
def coordinator(publisher):
    return Coordinator(HomeDestination(), publisher=publisher)


@pytest.fixture
def recorder():
    return CallbackRecorder()
