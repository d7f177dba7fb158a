"""
Skyburst Configuration
Contains display constants, simulation parameters, and data file paths.
"""
import json
from dataclasses import dataclass, fields, replace
from pathlib import Path

# Paths
PROJECT_ROOT = Path(__file__).parent.parent.parent
DATA_DIR = PROJECT_ROOT / "data"
DEFAULT_SHOW = DATA_DIR / "show.json"

# Display
SCREEN_WIDTH = 1024
SCREEN_HEIGHT = 768
FPS = 60
BACKGROUND = "#000000"


class ConfigError(ValueError):
    """Raised when show data or simulation parameters are malformed."""


@dataclass(frozen=True)
class ColorPair:
    """Base color plus the brighter highlight drawn on top of it."""
    color: str
    highlight: str


@dataclass(frozen=True)
class SimParams:
    """Every physics and shape constant used by the simulation.

    Passed explicitly into particles, rockets and bursts so that tests
    can run with tweaked values without touching module globals.
    """
    # Physics
    gravity: float = 0.04
    drag: float = 0.996
    terminal_velocity: float = 10.0

    # Radial burst (primary particles)
    burst_count: int = 50
    burst_speed: float = 8.0
    burst_size: float = 5.0
    burst_decay: int = 50

    # Sparkles (flat color, flickering)
    sparkle_count: int = 30
    sparkle_speed_scale: float = 1.2
    sparkle_size_scale: float = 0.5
    sparkle_decay_scale: float = 1.5
    sparkle_color: str = "#fffc9c"
    sparkle_flicker: float = 0.3

    # Stars (die and spawn a secondary burst)
    star_count: int = 5
    star_speed_scale: float = 1.5
    star_color: str = "#ffffff"

    # Secondary burst
    secondary_count: int = 5
    secondary_speed: float = 4.0
    secondary_size: float = 3.0
    secondary_decay: int = 30
    secondary_flicker: float = 0.5
    secondary_color: str = "#fffc9c"

    # Fountain (upward shower launched straight from the ground)
    fountain_count: int = 100
    fountain_speed: float = 5.0
    fountain_size: float = 5.0
    fountain_decay: int = 100
    fountain_direction_range: float = 0.08
    fountain_y_spread: float = 1.5

    # Rocket
    rocket_speed: float = 10.0
    rocket_width: float = 5.0
    rocket_height: float = 20.0
    rocket_color: str = "#503c3c"
    apex_min: float = 150.0
    apex_max: float = 300.0
    trail_speed: float = 4.0
    trail_size: float = 2.0
    trail_decay: int = 15
    trail_color: str = "#ebeb75"
    trail_highlight: str = "#fffec6"

    # Rendering
    highlight_threshold: float = 0.8
    fade_alpha: float = 0.2

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            # bool is an int subclass but never a valid count or amount
            if f.type is int:
                ok = isinstance(value, int) and not isinstance(value, bool)
            elif f.type is float:
                ok = isinstance(value, (int, float)) and not isinstance(value, bool)
            else:
                ok = isinstance(value, f.type)
            if not ok:
                raise ConfigError(f"{f.name} must be {f.type.__name__}, got {value!r}")

        if self.rocket_speed <= 0:
            raise ConfigError(f"rocket_speed must be positive, got {self.rocket_speed}")
        if not 0 < self.drag <= 1:
            raise ConfigError(f"drag must be in (0, 1], got {self.drag}")
        if self.apex_min > self.apex_max:
            raise ConfigError("apex_min must not exceed apex_max")
        for name in ("burst_decay", "secondary_decay", "fountain_decay", "trail_decay"):
            if getattr(self, name) < 1:
                raise ConfigError(f"{name} must be at least 1")
        for name in ("burst_count", "sparkle_count", "star_count",
                     "secondary_count", "fountain_count"):
            if getattr(self, name) < 0:
                raise ConfigError(f"{name} must not be negative")

    @property
    def sparkle_colors(self) -> ColorPair:
        return ColorPair(self.sparkle_color, self.sparkle_color)

    @property
    def star_colors(self) -> ColorPair:
        return ColorPair(self.star_color, self.star_color)

    @property
    def secondary_colors(self) -> ColorPair:
        return ColorPair(self.secondary_color, self.secondary_color)

    @property
    def trail_colors(self) -> ColorPair:
        return ColorPair(self.trail_color, self.trail_highlight)

    def with_overrides(self, overrides: dict) -> "SimParams":
        """Return a copy with the given fields replaced.

        Unknown field names raise ConfigError instead of being ignored.
        """
        known = {f.name for f in fields(self)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise ConfigError(f"Unknown simulation parameter(s): {', '.join(unknown)}")
        try:
            return replace(self, **overrides)
        except TypeError as e:
            raise ConfigError(f"Invalid simulation parameter value: {e}") from e


DEFAULT_PARAMS = SimParams()


def load_show_data(path=DEFAULT_SHOW) -> dict:
    """Load the raw show description (palette, params, entries)."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"{path}: invalid JSON ({e})") from e
    except UnicodeDecodeError as e:
        raise ConfigError(f"{path}: not UTF-8 text ({e})") from e
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: top level must be an object")
    return data


def load_params(data: dict) -> SimParams:
    """Build SimParams from the optional "params" section of show data."""
    overrides = data.get("params", {})
    if not isinstance(overrides, dict):
        raise ConfigError("'params' must be an object")
    return DEFAULT_PARAMS.with_overrides(overrides)
