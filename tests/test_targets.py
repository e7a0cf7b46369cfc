"""Tests for waypoint target resolution."""
from __future__ import annotations

from tick_cursor import AbsolutePoint, ElementRect, ElementRef, GeometrySnapshot, resolve_to_point


class TestAbsolutePoint:
    def test_no_offset(self) -> None:
        assert resolve_to_point(AbsolutePoint(10.0, 20.0)) == (10.0, 20.0)

    def test_offset_added(self) -> None:
        assert resolve_to_point(AbsolutePoint(10.0, 20.0), (5.0, -5.0)) == (15.0, 15.0)

    def test_kind_tag(self) -> None:
        assert AbsolutePoint(0, 0).kind == "point"
        assert ElementRef("x").kind == "element"


class TestElementRef:
    def test_measured_center_plus_offset(self) -> None:
        geo = GeometrySnapshot({"btn": ElementRect(100, 100, 200, 140)})
        point = resolve_to_point(ElementRef("btn"), (4.0, 0.0), geo)
        assert point == (154.0, 120.0)

    def test_unmeasured_uses_fallback(self) -> None:
        """Missing geometry degrades to the fallback, offset not applied."""
        point = resolve_to_point(ElementRef("btn"), (4.0, 4.0), GeometrySnapshot())
        assert point == (960.0, 540.0)

    def test_no_provider_uses_fallback(self) -> None:
        point = resolve_to_point(ElementRef("btn"), fallback=(320.0, 240.0))
        assert point == (320.0, 240.0)
