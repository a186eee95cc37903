"""Shared fixtures for signal mediator tests."""

import os

import pytest

from signal_mediator import Director, Mediator
from signal_mediator.config import MediatorConfig


@pytest.fixture(autouse=True)
def clean_mediator_env(monkeypatch):
    """Remove MEDIATOR_* configuration variables so tests see the defaults."""
    for key in list(os.environ):
        if key.startswith("MEDIATOR_") and key != "MEDIATOR_LOG_LEVEL":
            monkeypatch.delenv(key)


@pytest.fixture
def mediator():
    """Create a mediator with default (silent no-match) configuration."""
    return Mediator(MediatorConfig())


@pytest.fixture
def strict_mediator():
    """Create a mediator that raises when no director handles a signal."""
    return Mediator(MediatorConfig(strict_dispatch=True))


class RecordingDirector(Director):
    """Director recording every call it receives, per handler name."""

    def initialize(self, *args, **kwargs):
        self.calls = []
        self.torn_down = 0

    def teardown(self):
        self.torn_down += 1


@pytest.fixture
def recording_director_cls():
    return RecordingDirector


@pytest.fixture
def view():
    """Stand-in for the emitting view/router instance."""

    class View:
        pass

    return View()
