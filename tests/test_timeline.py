"""Tests for waypoint segment lookup."""
from __future__ import annotations

import pytest

from tick_cursor import AbsolutePoint, ConfigurationError, Waypoint, resolve_segment
from tick_cursor.easing import EASINGS, ease_in_out_quad
from tick_cursor.timeline import segment_progress


def wp(frame: int, x: float = 0.0, y: float = 0.0, **kwargs) -> Waypoint:
    return Waypoint(frame, AbsolutePoint(x, y), **kwargs)


class TestWaypoint:
    def test_defaults(self) -> None:
        w = wp(3)
        assert w.offset == (0.0, 0.0)
        assert w.triggers_click is False
        assert w.ease is ease_in_out_quad

    def test_easing_name_resolved(self) -> None:
        assert wp(3, easing="linear").ease is EASINGS["linear"]

    def test_unknown_easing_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            wp(3, easing="wobbly")

    def test_non_int_frame_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            wp(2.5)  # type: ignore[arg-type]
        with pytest.raises(ConfigurationError):
            wp(True)  # type: ignore[arg-type]

    def test_bad_offset_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            wp(0, offset=(1.0, 2.0, 3.0))
        with pytest.raises(ConfigurationError):
            wp(0, offset=(float("nan"), 0.0))

    def test_offset_list_normalized(self) -> None:
        assert wp(0, offset=[1, 2]).offset == (1.0, 2.0)  # type: ignore[arg-type]


class TestSegmentProgress:
    def test_linear_fraction(self) -> None:
        assert segment_progress(5, wp(0), wp(10)) == 0.5

    def test_clamped(self) -> None:
        assert segment_progress(-5, wp(0), wp(10)) == 0.0
        assert segment_progress(50, wp(0), wp(10)) == 1.0

    def test_shared_frame_is_complete(self) -> None:
        """Two waypoints on one frame snap instantly instead of dividing by zero."""
        assert segment_progress(15, wp(15), wp(15)) == 1.0


class TestResolveSegment:
    def test_empty(self) -> None:
        assert resolve_segment(10, []) is None

    def test_single_waypoint(self) -> None:
        only = wp(10)
        for frame in (0, 10, 99):
            seg = resolve_segment(frame, [only])
            assert seg is not None
            assert seg.start is only and seg.end is only
            assert seg.t == 1.0

    def test_before_first_holds_first(self) -> None:
        first, second = wp(10), wp(20)
        seg = resolve_segment(3, [first, second])
        assert seg is not None
        assert seg.start is first and seg.end is first
        assert seg.is_hold

    def test_after_last_holds_last(self) -> None:
        first, second = wp(10), wp(20)
        seg = resolve_segment(25, [first, second])
        assert seg is not None
        assert seg.start is second and seg.end is second

    def test_inside_segment(self) -> None:
        a, b, c = wp(0), wp(10, easing="linear"), wp(20)
        seg = resolve_segment(4, [a, b, c])
        assert seg is not None
        assert seg.start is a and seg.end is b
        assert seg.t == pytest.approx(0.4)

    def test_end_easing_applies(self) -> None:
        a, b = wp(0), wp(10, easing="ease_in_quad")
        seg = resolve_segment(5, [a, b])
        assert seg is not None
        assert seg.t == pytest.approx(0.25)

    def test_waypoint_frame_ends_segment(self) -> None:
        """An interior waypoint's own frame closes the segment arriving at it."""
        a, b, c = wp(0), wp(10), wp(20)
        seg = resolve_segment(10, [a, b, c])
        assert seg is not None
        assert seg.start is a and seg.end is b
        assert seg.t == 1.0

    def test_end_easing_evaluated_at_one(self) -> None:
        """The arriving segment uses end.ease(1), whatever the curve does at 0."""
        a = wp(0)
        b = wp(10, easing=lambda t: 0.2 + 0.8 * t)
        c = wp(20, easing=lambda t: 0.2 + 0.8 * t)
        seg = resolve_segment(10, [a, b, c])
        assert seg is not None
        assert seg.end is b
        assert seg.t == pytest.approx(1.0)

    def test_last_frame_closes_final_segment(self) -> None:
        a, b = wp(0), wp(10)
        seg = resolve_segment(10, [a, b])
        assert seg is not None
        assert seg.start is a and seg.end is b
        assert seg.t == 1.0

    def test_degenerate_pair_not_eased(self) -> None:
        """Pairs sharing a frame snap with t = 1 regardless of easing."""
        a, b, c = wp(15, 10, 10), wp(15, 50, 50, easing=lambda t: 0.0), wp(30)
        seg = resolve_segment(15, [a, b, c])
        assert seg is not None
        assert seg.start is a and seg.end is b
        assert seg.t == 1.0

    def test_shared_frame_resolves_to_later_waypoint(self) -> None:
        a, b, c, d = wp(0), wp(15, 10, 10), wp(15, 50, 50), wp(30)
        seg = resolve_segment(15, [a, b, c, d])
        assert seg is not None
        assert seg.start is c

    def test_only_shared_frame_pair(self) -> None:
        a, b = wp(15, 10, 10), wp(15, 50, 50)
        seg = resolve_segment(15, [a, b])
        assert seg is not None
        assert seg.start is a and seg.end is b and seg.t == 1.0
