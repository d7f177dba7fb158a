"""Test that all modules can be imported."""
import pytest


def test_core_imports():
    """Core modules should import cleanly without pygame."""
    from skyburst.core.particles import Particle, prune_expired
    from skyburst.core.rockets import Rocket
    from skyburst.core.bursts import RadialBurst, SecondaryBurst, FountainBurst
    from skyburst.core.effects import Effect
    from skyburst.core.scheduler import Battery
    from skyburst.core.events import event_bus, LaunchEvent, DetonationEvent
    from skyburst.core.schedule import load_show, ScheduleEntry


def test_package_exports():
    import skyburst.core as core
    assert core.Battery is not None
    assert core.DEFAULT_PARAMS is not None


def test_frontends_import():
    """Frontend renderers should import (pygame may not be available)."""
    from frontends.headless_renderer import HeadlessRenderer
    try:
        from frontends.pygame_renderer import PygameRenderer, parse_color
    except ImportError:
        pytest.skip("pygame not installed")
    assert parse_color("#c99700") == (201, 151, 0)
    assert parse_color("#fffc9cff") == (255, 252, 156, 255)
    assert parse_color("#fff") == (255, 255, 255)


def test_main_import():
    """Main module should import."""
    from skyburst.main import Show, main
