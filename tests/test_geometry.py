"""Tests for element rectangles and geometry providers."""
from __future__ import annotations

import pytest

from tick_cursor import ConfigurationError, ElementRect, ElementRef, GeometrySnapshot, LiveGeometry


class TestElementRect:
    def test_size_and_center(self) -> None:
        rect = ElementRect(100.0, 50.0, 300.0, 150.0)
        assert rect.width == 200.0
        assert rect.height == 100.0
        assert rect.center == (200.0, 100.0)

    def test_from_size(self) -> None:
        assert ElementRect.from_size(10, 20, 30, 40) == ElementRect(10, 20, 40, 60)

    def test_contains_is_inclusive(self) -> None:
        rect = ElementRect(0.0, 0.0, 10.0, 10.0)
        assert rect.contains((0.0, 0.0))
        assert rect.contains((10.0, 10.0))
        assert not rect.contains((10.01, 5.0))

    def test_expanded(self) -> None:
        rect = ElementRect(10.0, 10.0, 20.0, 20.0)
        assert rect.expanded(5.0) == ElementRect(5.0, 5.0, 25.0, 25.0)
        assert rect.expanded(0) is rect

    def test_inverted_edges_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            ElementRect(10.0, 0.0, 0.0, 10.0)
        with pytest.raises(ConfigurationError):
            ElementRect(0.0, 10.0, 10.0, 0.0)

    def test_non_finite_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            ElementRect(0.0, 0.0, float("inf"), 10.0)


class TestGeometrySnapshot:
    def test_measure(self) -> None:
        rect = ElementRect(0, 0, 10, 10)
        snap = GeometrySnapshot({"a": rect})
        assert snap.measure(ElementRef("a")) == rect
        assert snap.measure(ElementRef("missing")) is None

    def test_equal_contents_hash_equal(self) -> None:
        rect = ElementRect(0, 0, 10, 10)
        a = GeometrySnapshot({"a": rect})
        b = GeometrySnapshot({"a": rect})
        assert a == b
        assert hash(a) == hash(b)
        assert a != GeometrySnapshot()

    def test_snapshot_is_self(self) -> None:
        snap = GeometrySnapshot()
        assert snap.snapshot() is snap


class TestLiveGeometry:
    def test_set_and_forget(self) -> None:
        geo = LiveGeometry()
        ref = ElementRef("btn")
        assert geo.measure(ref) is None
        geo.set("btn", ElementRect(0, 0, 5, 5))
        assert geo.measure(ref) == ElementRect(0, 0, 5, 5)
        geo.forget("btn")
        assert geo.measure(ref) is None
        geo.forget("never-set")

    def test_snapshot_is_detached(self) -> None:
        """Later host mutations do not leak into an earlier snapshot."""
        geo = LiveGeometry({"btn": ElementRect(0, 0, 5, 5)})
        snap = geo.snapshot()
        geo.set("btn", ElementRect(50, 50, 60, 60))
        geo.set("other", ElementRect(0, 0, 1, 1))
        assert snap.measure(ElementRef("btn")) == ElementRect(0, 0, 5, 5)
        assert "other" not in snap
        assert len(snap) == 1

    def test_clear(self) -> None:
        geo = LiveGeometry({"btn": ElementRect(0, 0, 5, 5)})
        geo.clear()
        assert len(geo.snapshot()) == 0
