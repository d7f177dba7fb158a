"""
Skyburst Schedule
Loads the scripted battery from JSON and validates it up front.

A malformed entry fails at load time rather than leaving the battery
stuck on a descriptor it cannot fire.
"""
from dataclasses import dataclass
from typing import Dict, List, Tuple, Union

from .config import ColorPair, ConfigError, DEFAULT_SHOW, load_params, load_show_data, SimParams


@dataclass(frozen=True)
class RocketDescriptor:
    """A rocket launched from the battery, drifting sideways by `offset` per tick."""
    color: ColorPair
    offset: float = 0.0
    sparkles: bool = False
    stars: bool = False


@dataclass(frozen=True)
class FountainDescriptor:
    """An upward shower fired `offset` px left of the battery center."""
    color: ColorPair
    offset: float = 0.0


EffectDescriptor = Union[RocketDescriptor, FountainDescriptor]


@dataclass(frozen=True)
class ScheduleEntry:
    """Effects fired together once `cooldown` ticks have passed."""
    cooldown: int
    effects: Tuple[EffectDescriptor, ...]


_COMMON_KEYS = {"type", "color", "offset"}
_ROCKET_KEYS = _COMMON_KEYS | {"sparkles", "stars"}


def parse_palette(raw: dict) -> Dict[str, ColorPair]:
    """Parse {"name": {"color": ..., "highlight": ...}} into ColorPairs."""
    if not isinstance(raw, dict):
        raise ConfigError("'palette' must be an object")
    return {name: parse_color(value, {}, where=f"palette[{name!r}]")
            for name, value in raw.items()}


def parse_color(raw, palette: Dict[str, ColorPair], where: str = "color") -> ColorPair:
    """Resolve a palette name or an inline {"color", "highlight"} object."""
    if isinstance(raw, str):
        if raw not in palette:
            raise ConfigError(f"{where}: unknown palette color {raw!r}")
        return palette[raw]
    if isinstance(raw, dict):
        color = raw.get("color")
        highlight = raw.get("highlight")
        if not isinstance(color, str) or not isinstance(highlight, str):
            raise ConfigError(f"{where}: needs string 'color' and 'highlight'")
        return ColorPair(color, highlight)
    raise ConfigError(f"{where}: missing color")


def _parse_offset(raw: dict, where: str) -> float:
    offset = raw.get("offset", 0.0)
    if isinstance(offset, bool) or not isinstance(offset, (int, float)):
        raise ConfigError(f"{where}: 'offset' must be a number")
    return float(offset)


def _parse_flag(raw: dict, key: str, where: str) -> bool:
    value = raw.get(key, False)
    if not isinstance(value, bool):
        raise ConfigError(f"{where}: {key!r} must be true or false")
    return value


def parse_descriptor(raw: dict, palette: Dict[str, ColorPair], where: str) -> EffectDescriptor:
    """Parse one effect descriptor, rejecting unknown types and keys."""
    if not isinstance(raw, dict):
        raise ConfigError(f"{where}: effect must be an object")

    kind = raw.get("type")
    if kind == "rocket":
        allowed = _ROCKET_KEYS
    elif kind == "fountain":
        allowed = _COMMON_KEYS
    else:
        raise ConfigError(f"{where}: unknown effect type {kind!r}")

    unknown = sorted(set(raw) - allowed)
    if unknown:
        raise ConfigError(f"{where}: unexpected key(s) for {kind}: {', '.join(unknown)}")

    if "color" not in raw:
        raise ConfigError(f"{where}: missing color")
    color = parse_color(raw["color"], palette, where=where)
    offset = _parse_offset(raw, where)

    if kind == "rocket":
        return RocketDescriptor(
            color=color,
            offset=offset,
            sparkles=_parse_flag(raw, "sparkles", where),
            stars=_parse_flag(raw, "stars", where)
        )
    return FountainDescriptor(color=color, offset=offset)


def parse_entry(raw: dict, palette: Dict[str, ColorPair], index: int) -> ScheduleEntry:
    where = f"entries[{index}]"
    if not isinstance(raw, dict):
        raise ConfigError(f"{where}: entry must be an object")

    cooldown = raw.get("cooldown")
    if isinstance(cooldown, bool) or not isinstance(cooldown, int) or cooldown <= 0:
        raise ConfigError(f"{where}: cooldown must be a positive integer, got {cooldown!r}")

    effects = raw.get("effects")
    if not isinstance(effects, list) or not effects:
        raise ConfigError(f"{where}: needs at least one effect")

    return ScheduleEntry(
        cooldown=cooldown,
        effects=tuple(
            parse_descriptor(effect, palette, f"{where}.effects[{i}]")
            for i, effect in enumerate(effects)
        )
    )


def parse_schedule(data: dict) -> List[ScheduleEntry]:
    """Parse the "palette" and "entries" sections of show data."""
    palette = parse_palette(data.get("palette", {}))
    entries = data.get("entries")
    if not isinstance(entries, list):
        raise ConfigError("'entries' must be a list")
    return [parse_entry(entry, palette, i) for i, entry in enumerate(entries)]


def load_show(path=DEFAULT_SHOW) -> Tuple[List[ScheduleEntry], SimParams]:
    """Load and validate a show file. Returns (entries, params)."""
    data = load_show_data(path)
    return parse_schedule(data), load_params(data)
