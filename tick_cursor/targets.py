"""Waypoint targets: fixed screen points or references to measured elements."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Literal, Union

from tick_cursor import vec
from tick_cursor.types import Point

if TYPE_CHECKING:
    from tick_cursor.geometry import GeometryProvider

logger = logging.getLogger(__name__)

ORIGIN: Point = (0.0, 0.0)


@dataclass(frozen=True, slots=True)
class AbsolutePoint:
    """A fixed screen coordinate."""

    kind: ClassVar[Literal["point"]] = "point"

    x: float
    y: float

    def resolve(
        self, geometry: GeometryProvider | None, offset: Point, fallback: Point
    ) -> Point:
        return (self.x + offset[0], self.y + offset[1])


@dataclass(frozen=True, slots=True)
class ElementRef:
    """A target bound to an element's bounding box.

    Resolves to the rectangle's center. While the element is unmeasured
    (or no geometry provider is available) it resolves to ``fallback``
    with no offset applied.
    """

    kind: ClassVar[Literal["element"]] = "element"

    element_id: str

    def resolve(
        self, geometry: GeometryProvider | None, offset: Point, fallback: Point
    ) -> Point:
        rect = geometry.measure(self) if geometry is not None else None
        if rect is None:
            logger.debug("Element %r unmeasured, using fallback %s", self.element_id, fallback)
            return fallback
        return vec.add(rect.center, offset)


Target = Union[AbsolutePoint, ElementRef]


def resolve_to_point(
    target: Target,
    offset: Point = ORIGIN,
    geometry: GeometryProvider | None = None,
    fallback: Point = (960.0, 540.0),
) -> Point:
    """Resolve any target to a concrete screen point. Never raises."""
    return target.resolve(geometry, offset, fallback)
