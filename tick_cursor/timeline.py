"""Waypoints and segment lookup along the cursor timeline."""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Sequence

from tick_cursor.easing import get_easing
from tick_cursor.targets import ORIGIN, Target
from tick_cursor.types import ConfigurationError, Easing, Point


@dataclass(frozen=True)
class Waypoint:
    """Where the cursor should be at a given frame.

    Attributes:
        frame: Frame at which the cursor arrives at the target.
        target: Fixed point or element reference.
        offset: Added to the resolved target (ignored by the unmeasured fallback).
        triggers_click: Start a click window at ``frame``.
        easing: Curve for the segment ending at this waypoint. Accepts a
            registered easing name or a callable; None selects the default.
    """

    frame: int
    target: Target
    offset: Point = ORIGIN
    triggers_click: bool = False
    easing: str | Easing | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if isinstance(self.frame, bool) or not isinstance(self.frame, int):
            raise ConfigurationError(f"frame must be an int, got {self.frame!r}")
        try:
            offset = tuple(float(v) for v in self.offset)
        except (TypeError, ValueError) as exc:
            raise ConfigurationError(f"offset must be two numbers, got {self.offset!r}") from exc
        if len(offset) != 2 or not all(math.isfinite(v) for v in offset):
            raise ConfigurationError(f"offset must be two finite numbers, got {self.offset!r}")
        object.__setattr__(self, "offset", offset)
        object.__setattr__(self, "easing", get_easing(self.easing))

    @property
    def ease(self) -> Easing:
        # Resolved to a callable in __post_init__.
        return self.easing  # type: ignore[return-value]


@dataclass(frozen=True, slots=True)
class Segment:
    start: Waypoint
    end: Waypoint
    t: float

    @property
    def is_hold(self) -> bool:
        return self.start is self.end


def segment_progress(frame: int, start: Waypoint, end: Waypoint) -> float:
    """Raw linear progress through a segment, clamped to [0, 1]."""
    if start.frame == end.frame:
        return 1.0
    t = (frame - start.frame) / (end.frame - start.frame)
    return min(max(t, 0.0), 1.0)


def resolve_segment(frame: int, waypoints: Sequence[Waypoint]) -> Segment | None:
    """Find the active segment for ``frame`` and its eased progress.

    Scans for the first adjacent pair with
    ``start.frame <= frame <= end.frame``. When ``frame`` lands on
    ``end.frame`` and later waypoints share that frame, the cursor holds at
    the last of them. Pairs sharing a frame snap with ``t = 1``. Frames
    before the first waypoint hold at the first, frames after the last
    hold at the last. Returns None for an empty timeline.
    """
    if not waypoints:
        return None

    first = waypoints[0]
    last = waypoints[-1]
    if len(waypoints) == 1 or frame < first.frame:
        return Segment(first, first, 1.0)
    if frame > last.frame:
        return Segment(last, last, 1.0)

    for i in range(len(waypoints) - 1):
        start, end = waypoints[i], waypoints[i + 1]
        if not start.frame <= frame <= end.frame:
            continue
        if frame == end.frame:
            j = i + 1
            while j + 1 < len(waypoints) and waypoints[j + 1].frame == frame:
                j += 1
            if j > i + 1:
                return Segment(waypoints[j], waypoints[j], 1.0)
        if start.frame == end.frame:
            return Segment(start, end, 1.0)
        return Segment(start, end, end.ease(segment_progress(frame, start, end)))

    # Only reachable for out-of-order sequences, which MouseConfig rejects.
    return Segment(last, last, 1.0)
