"""Test simulation parameters."""
import pytest
from skyburst.core.config import ConfigError, DEFAULT_PARAMS, SimParams


class TestSimParams:
    """Tests for SimParams."""

    def test_defaults(self):
        assert DEFAULT_PARAMS.gravity == 0.04
        assert DEFAULT_PARAMS.drag == 0.996
        assert DEFAULT_PARAMS.burst_count == 50
        assert DEFAULT_PARAMS.fountain_count == 100

    def test_params_are_frozen(self):
        with pytest.raises(AttributeError):
            DEFAULT_PARAMS.gravity = 1.0

    def test_overrides_return_copy(self):
        heavy = DEFAULT_PARAMS.with_overrides({"gravity": 0.5})
        assert heavy.gravity == 0.5
        assert DEFAULT_PARAMS.gravity == 0.04

    def test_unknown_override(self):
        with pytest.raises(ConfigError):
            DEFAULT_PARAMS.with_overrides({"gravitas": 1})

    @pytest.mark.parametrize("overrides", [
        {"rocket_speed": 0},
        {"rocket_speed": -10},
        {"drag": 0},
        {"drag": 1.5},
        {"burst_decay": 0},
        {"fountain_count": -1},
        {"apex_min": 400, "apex_max": 300},
        {"rocket_speed": "fast"},
        {"burst_count": 2.5},
        {"trail_decay": 15.0},
        {"star_count": True},
        {"gravity": "0.04"},
        {"drag": None},
        {"sparkle_color": 0xfffc9c},
    ])
    def test_invalid_values(self, overrides):
        with pytest.raises(ConfigError):
            DEFAULT_PARAMS.with_overrides(overrides)

    def test_invalid_direct_construction(self):
        with pytest.raises(ConfigError):
            SimParams(rocket_speed=0)

    def test_integer_accepted_for_float_field(self):
        params = DEFAULT_PARAMS.with_overrides({"gravity": 1, "rocket_speed": 12})
        assert params.gravity == 1
        assert params.rocket_speed == 12

    def test_derived_color_pairs(self):
        assert DEFAULT_PARAMS.trail_colors.color == DEFAULT_PARAMS.trail_color
        assert DEFAULT_PARAMS.trail_colors.highlight == DEFAULT_PARAMS.trail_highlight
        assert DEFAULT_PARAMS.star_colors.highlight == DEFAULT_PARAMS.star_color
