"""Pytest configuration and fixtures."""

import io
import random

import pytest

from console_drills.output import make_console


@pytest.fixture
def buffer():
    """Return a text buffer that collects console output."""
    return io.StringIO()


@pytest.fixture
def console(buffer, monkeypatch):
    """Return a console writing plain, uncolored text into the buffer."""
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("TTY_COMPATIBLE", raising=False)
    return make_console(file=buffer)


@pytest.fixture
def seeded_rng():
    """Return a deterministic random source."""
    return random.Random(1234)
