"""
protocol-handler test suite - shared fixtures
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

import pytest

# ---------------------------------------------------------------------------
# Ensure the project root is importable
# ---------------------------------------------------------------------------
PROJECT_ROOT = os.path.dirname(
    os.path.dirname(os.path.abspath(__file__))
)
sys.path.insert(0, PROJECT_ROOT)

EXAMPLES_DIR = Path(PROJECT_ROOT) / "examples"

REDIRECT_TARGET = "https://example.com"


@pytest.fixture(autouse=True)
def reset_protocol_handler_logging():
    """setup_logging() replaces handlers; undo it between tests."""
    root = logging.getLogger("protocol_handler")
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def handler():
    from protocol_handler import create_handler

    return create_handler()


@pytest.fixture
def s3_handler(handler):
    handler.protocol("s3:", lambda url: REDIRECT_TARGET)
    return handler


@pytest.fixture
def examples_dir() -> Path:
    return EXAMPLES_DIR


class RecordingResolver:
    """Callable resolver that remembers every URL it was asked about."""

    def __init__(self, target: str | None = REDIRECT_TARGET):
        self.target = target
        self.calls: list[str] = []

    def __call__(self, url: str) -> str | None:
        self.calls.append(url)
        return self.target


@pytest.fixture
def recording_resolver():
    return RecordingResolver()
