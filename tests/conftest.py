"""pytest configuration and shared fixtures."""
from __future__ import annotations

import sys
from datetime import date
from pathlib import Path

import pytest

# Ensure the project root is available on sys.path so tests can import the package.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from inkmaster import create_app  # noqa: E402
from inkmaster.config import TestingConfig  # noqa: E402
from inkmaster.studio import StudioApp  # noqa: E402


class FrozenClock:
    """Stand-in for ``date.today`` whose date a test can move."""

    def __init__(self, today: date) -> None:
        self.today = today

    def __call__(self) -> date:
        return self.today


@pytest.fixture
def clock() -> FrozenClock:
    # matches the first seeded appointment
    return FrozenClock(date(2024, 1, 15))


@pytest.fixture
def app(clock):
    app = create_app(TestingConfig)
    app.extensions["studio"] = StudioApp.from_config(app.config, clock=clock)
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def state(app) -> StudioApp:
    return app.extensions["studio"]
