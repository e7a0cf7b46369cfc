"""Element rectangles and the geometry providers that hand them out.

Element geometry is owned by the host (layout engine, DOM, scene graph).
The pipeline only ever reads point-in-time snapshots of it: a
``LiveGeometry`` is mutated by the host between frames, and a
``GeometrySnapshot`` freezes its contents for one evaluation.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator, Mapping, Protocol

from tick_cursor.types import ConfigurationError, Point

if TYPE_CHECKING:
    from tick_cursor.targets import ElementRef


@dataclass(frozen=True, slots=True)
class ElementRect:
    """Screen-space bounding box. Edges are inclusive."""

    left: float
    top: float
    right: float
    bottom: float

    def __post_init__(self) -> None:
        for name in ("left", "top", "right", "bottom"):
            if not math.isfinite(getattr(self, name)):
                raise ConfigurationError(f"{name} must be finite, got {getattr(self, name)}")
        if self.right < self.left:
            raise ConfigurationError(
                f"right ({self.right}) must be >= left ({self.left})"
            )
        if self.bottom < self.top:
            raise ConfigurationError(
                f"bottom ({self.bottom}) must be >= top ({self.top})"
            )

    @classmethod
    def from_size(cls, x: float, y: float, width: float, height: float) -> ElementRect:
        return cls(left=x, top=y, right=x + width, bottom=y + height)

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    @property
    def center(self) -> Point:
        return (self.left + self.width / 2, self.top + self.height / 2)

    def expanded(self, padding: float) -> ElementRect:
        if padding == 0:
            return self
        return ElementRect(
            left=self.left - padding,
            top=self.top - padding,
            right=self.right + padding,
            bottom=self.bottom + padding,
        )

    def contains(self, point: Point) -> bool:
        x, y = point
        return self.left <= x <= self.right and self.top <= y <= self.bottom


class GeometryProvider(Protocol):
    def measure(self, ref: ElementRef) -> ElementRect | None:
        """Return the element's rectangle, or None while it is unmeasured."""
        ...

    def snapshot(self) -> GeometrySnapshot:
        ...


class GeometrySnapshot:
    """Immutable, hashable view of element rectangles at one instant."""

    __slots__ = ("_rects", "_key")

    def __init__(self, rects: Mapping[str, ElementRect] | None = None) -> None:
        self._rects: dict[str, ElementRect] = dict(rects or {})
        self._key = frozenset(self._rects.items())

    def measure(self, ref: ElementRef) -> ElementRect | None:
        return self._rects.get(ref.element_id)

    def snapshot(self) -> GeometrySnapshot:
        return self

    def __contains__(self, element_id: object) -> bool:
        return element_id in self._rects

    def __iter__(self) -> Iterator[str]:
        return iter(self._rects)

    def __len__(self) -> int:
        return len(self._rects)

    def __hash__(self) -> int:
        return hash(self._key)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GeometrySnapshot):
            return NotImplemented
        return self._key == other._key

    def __repr__(self) -> str:
        return f"GeometrySnapshot({self._rects!r})"


EMPTY_GEOMETRY = GeometrySnapshot()


class LiveGeometry:
    """Mutable geometry store updated by the host as layout changes."""

    def __init__(self, rects: Mapping[str, ElementRect] | None = None) -> None:
        self._rects: dict[str, ElementRect] = dict(rects or {})

    def set(self, element_id: str, rect: ElementRect) -> None:
        self._rects[element_id] = rect

    def forget(self, element_id: str) -> None:
        """Mark an element as unmeasured again. Unknown ids are ignored."""
        self._rects.pop(element_id, None)

    def clear(self) -> None:
        self._rects.clear()

    def measure(self, ref: ElementRef) -> ElementRect | None:
        return self._rects.get(ref.element_id)

    def snapshot(self) -> GeometrySnapshot:
        return GeometrySnapshot(self._rects)
