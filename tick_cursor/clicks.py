"""Click windows opened by waypoints."""
from __future__ import annotations

from typing import Sequence

from tick_cursor.timeline import Waypoint
from tick_cursor.types import MousePosition

DEFAULT_CLICK_SCALE = 0.85


def is_clicking(frame: int, waypoints: Sequence[Waypoint], click_duration: int) -> bool:
    """True while ``frame`` is inside any triggered click window.

    Each window is ``[wp.frame, wp.frame + click_duration)``; overlapping
    windows merge.
    """
    for wp in waypoints:
        if wp.triggers_click and wp.frame <= frame < wp.frame + click_duration:
            return True
    return False


def click_progress(
    frame: int, waypoints: Sequence[Waypoint], click_duration: int
) -> float | None:
    """Progress (0..1) through the most recently opened active click window."""
    latest: int | None = None
    for wp in waypoints:
        if wp.triggers_click and wp.frame <= frame < wp.frame + click_duration:
            if latest is None or wp.frame > latest:
                latest = wp.frame
    if latest is None:
        return None
    return (frame - latest) / click_duration


def cursor_scale(mouse: MousePosition, click_scale: float = DEFAULT_CLICK_SCALE) -> float:
    return click_scale if mouse.is_clicking else 1.0
