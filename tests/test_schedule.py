"""Test loading and validating battery scripts."""
import json

import pytest
from skyburst.core.config import ColorPair, ConfigError
from skyburst.core.schedule import (
    FountainDescriptor, RocketDescriptor, ScheduleEntry,
    load_show, parse_schedule
)

PALETTE = {"gold": {"color": "#c99700", "highlight": "#fff3b0"}}


def schedule(*effects, cooldown=10):
    return {"palette": PALETTE, "entries": [{"cooldown": cooldown, "effects": list(effects)}]}


class TestDefaultShow:
    """The bundled show file."""

    def test_default_show_loads(self, show_entries):
        assert len(show_entries) == 43
        assert all(isinstance(e, ScheduleEntry) for e in show_entries)
        assert show_entries[0].cooldown == 100

    def test_default_show_has_both_variants(self, show_entries):
        kinds = {type(d) for entry in show_entries for d in entry.effects}
        assert kinds == {RocketDescriptor, FountainDescriptor}

    def test_default_show_params(self, data_dir, params):
        _, loaded = load_show(data_dir / "show.json")
        assert loaded == params


class TestParseSchedule:
    """Valid descriptors."""

    def test_rocket_defaults(self):
        entries = parse_schedule(schedule({"type": "rocket", "color": "gold"}))
        rocket = entries[0].effects[0]
        assert rocket == RocketDescriptor(color=ColorPair("#c99700", "#fff3b0"))
        assert rocket.offset == 0.0
        assert not rocket.sparkles and not rocket.stars

    def test_rocket_flags_and_offset(self):
        entries = parse_schedule(schedule(
            {"type": "rocket", "color": "gold", "offset": -2, "sparkles": True, "stars": True}
        ))
        rocket = entries[0].effects[0]
        assert rocket.offset == -2.0
        assert rocket.sparkles and rocket.stars

    def test_inline_color(self):
        entries = parse_schedule(schedule(
            {"type": "fountain", "color": {"color": "#ff0000", "highlight": "#ffffff"}, "offset": 40}
        ))
        assert entries[0].effects[0] == FountainDescriptor(ColorPair("#ff0000", "#ffffff"), 40.0)

    def test_entries_keep_order(self):
        data = {"palette": PALETTE, "entries": [
            {"cooldown": c, "effects": [{"type": "rocket", "color": "gold"}]}
            for c in (100, 70, 120)
        ]}
        assert [e.cooldown for e in parse_schedule(data)] == [100, 70, 120]


class TestScheduleValidation:
    """Malformed scripts fail at load time."""

    @pytest.mark.parametrize("cooldown", [0, -5, "10", 1.5, True, None])
    def test_bad_cooldown(self, cooldown):
        with pytest.raises(ConfigError):
            parse_schedule(schedule({"type": "rocket", "color": "gold"}, cooldown=cooldown))

    def test_missing_color(self):
        with pytest.raises(ConfigError, match="missing color"):
            parse_schedule(schedule({"type": "rocket"}))

    def test_unknown_palette_color(self):
        with pytest.raises(ConfigError, match="unknown palette color"):
            parse_schedule(schedule({"type": "rocket", "color": "plaid"}))

    def test_unknown_effect_type(self):
        with pytest.raises(ConfigError, match="unknown effect type"):
            parse_schedule(schedule({"type": "upwardExplosion", "color": "gold"}))

    def test_rocket_flags_rejected_on_fountain(self):
        with pytest.raises(ConfigError, match="unexpected key"):
            parse_schedule(schedule({"type": "fountain", "color": "gold", "stars": True}))

    def test_non_bool_flag(self):
        with pytest.raises(ConfigError):
            parse_schedule(schedule({"type": "rocket", "color": "gold", "sparkles": "yes"}))

    def test_non_numeric_offset(self):
        with pytest.raises(ConfigError):
            parse_schedule(schedule({"type": "rocket", "color": "gold", "offset": "left"}))

    def test_empty_effects(self):
        with pytest.raises(ConfigError):
            parse_schedule(schedule())

    def test_entries_must_be_list(self):
        with pytest.raises(ConfigError):
            parse_schedule({"palette": PALETTE, "entries": {}})

    def test_incomplete_inline_color(self):
        with pytest.raises(ConfigError):
            parse_schedule(schedule({"type": "rocket", "color": {"color": "#ff0000"}}))


class TestLoadShow:
    """Reading show files from disk."""

    def test_load_with_param_overrides(self, tmp_path):
        data = schedule({"type": "rocket", "color": "gold"})
        data["params"] = {"gravity": 0.1}
        path = tmp_path / "show.json"
        path.write_text(json.dumps(data))

        entries, params = load_show(path)
        assert len(entries) == 1
        assert params.gravity == 0.1

    def test_unknown_param_rejected(self, tmp_path):
        data = schedule({"type": "rocket", "color": "gold"})
        data["params"] = {"antigravity": 1}
        path = tmp_path / "show.json"
        path.write_text(json.dumps(data))
        with pytest.raises(ConfigError, match="antigravity"):
            load_show(path)

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "show.json"
        path.write_text("{not json")
        with pytest.raises(ConfigError, match="invalid JSON"):
            load_show(path)

    def test_not_utf8(self, tmp_path):
        path = tmp_path / "show.json"
        path.write_bytes(b'{"entries": [], "name": "\xff\xfe"}')
        with pytest.raises(ConfigError, match="UTF-8"):
            load_show(path)
