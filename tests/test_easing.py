"""Tests for easing curves."""

import pytest

from tick_cursor import EASINGS, ConfigurationError, get_easing
from tick_cursor.easing import DEFAULT_EASING, ease_in_out_quad


class TestEndpoints:
    """Every registered curve starts at 0 and ends at 1."""

    @pytest.mark.parametrize("name", sorted(EASINGS))
    def test_zero_maps_to_zero(self, name):
        assert EASINGS[name](0.0) == 0.0

    @pytest.mark.parametrize("name", sorted(EASINGS))
    def test_one_maps_to_one(self, name):
        assert EASINGS[name](1.0) == 1.0

    @pytest.mark.parametrize("name", sorted(EASINGS))
    def test_monotonic(self, name):
        """Curves never move backwards across the unit interval."""
        fn = EASINGS[name]
        samples = [fn(i / 20) for i in range(21)]
        assert samples == sorted(samples)


class TestQuad:
    def test_ease_in_at_half(self):
        assert EASINGS["ease_in_quad"](0.5) == 0.25

    def test_ease_out_at_half(self):
        assert EASINGS["ease_out_quad"](0.5) == 0.75

    def test_ease_in_out_at_half(self):
        assert ease_in_out_quad(0.5) == 0.5

    def test_ease_in_out_first_quarter(self):
        """First half is 2t^2."""
        assert ease_in_out_quad(0.25) == pytest.approx(0.125)


class TestGetEasing:
    def test_none_is_default(self):
        assert get_easing(None) is DEFAULT_EASING
        assert DEFAULT_EASING is ease_in_out_quad

    def test_by_name(self):
        assert get_easing("linear") is EASINGS["linear"]

    def test_callable_passthrough(self):
        def step(t: float) -> float:
            return 0.0 if t < 1.0 else 1.0

        assert get_easing(step) is step

    def test_unknown_name_raises(self):
        with pytest.raises(ConfigurationError, match="Unknown easing"):
            get_easing("bounce")
