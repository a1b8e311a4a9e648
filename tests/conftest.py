"""Pytest configuration and fixtures.

Provides environment isolation, logging configuration, marker registration
and callable test doubles. Fixtures here are autouse unless noted.
"""

from __future__ import annotations

import logging
import os

import pytest

from tests.helpers import Recorder, Runnable

# =============================================================================
# Test Doubles
# =============================================================================


@pytest.fixture
def recorder() -> Recorder:
    """Return a fresh argument-taking callable double."""
    return Recorder()


@pytest.fixture
def runnable() -> Runnable:
    """Return a fresh zero-argument callable double."""
    return Runnable()


# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def isolate_railyard_env(request, monkeypatch):
    """Ensure a clean RAILYARD_* environment for each test.

    Opt-out: @pytest.mark.allow_env_pollution
    """
    if request.node.get_closest_marker("allow_env_pollution"):
        return

    for key in list(os.environ.keys()):
        if key.startswith("RAILYARD_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def validation_enabled(monkeypatch):
    """Enable callback result validation for one test (not autouse)."""
    monkeypatch.setenv("RAILYARD_VALIDATE", "1")


# =============================================================================
# Logging & Markers
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def debug_railyard_logging():
    """Let caplog see the library's DEBUG records."""
    logging.getLogger("railyard").setLevel(logging.DEBUG)


def pytest_configure(config):
    """Configure custom markers for test organization."""
    markers = [
        "unit: Fast, isolated unit tests",
        "contract: Architectural contracts of the public surface",
        "allow_env_pollution: Keep RAILYARD_* environment variables",
    ]
    for marker in markers:
        config.addinivalue_line("markers", marker)
