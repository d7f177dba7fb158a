"""Pytest fixtures for Skyburst tests."""
import random

import pytest
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def project_root():
    """Return the project root path."""
    return PROJECT_ROOT


@pytest.fixture
def data_dir():
    """Return the data directory path."""
    return PROJECT_ROOT / "data"


@pytest.fixture(autouse=True)
def seeded():
    """Seed the process-wide random source so every test is repeatable."""
    random.seed(1234)


@pytest.fixture
def params():
    from skyburst.core.config import DEFAULT_PARAMS
    return DEFAULT_PARAMS


@pytest.fixture
def colors():
    from skyburst.core.config import ColorPair
    return ColorPair("#c99700", "#fff3b0")


@pytest.fixture
def bus():
    """A private EventBus so tests don't leak handlers into the global one."""
    from skyburst.core.events import EventBus
    return EventBus()


@pytest.fixture
def surface():
    """A drawing surface that records calls instead of drawing."""
    from frontends.headless_renderer import HeadlessRenderer
    return HeadlessRenderer(800, 600)


@pytest.fixture
def show_entries(data_dir):
    """The default battery script."""
    from skyburst.core.schedule import load_show
    entries, _ = load_show(data_dir / "show.json")
    return entries
