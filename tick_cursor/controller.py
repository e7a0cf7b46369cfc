"""MouseController - per-frame cursor position from a waypoint timeline."""
from __future__ import annotations

import functools
from typing import TYPE_CHECKING, Iterable

from tick_cursor import vec
from tick_cursor.clicks import is_clicking
from tick_cursor.geometry import GeometrySnapshot
from tick_cursor.jitter import wobble_offset
from tick_cursor.targets import resolve_to_point
from tick_cursor.timeline import resolve_segment
from tick_cursor.types import ConfigurationError, MousePosition

if TYPE_CHECKING:
    from tick_cursor.config import MouseConfig
    from tick_cursor.geometry import GeometryProvider


class MouseController:
    """Composes timeline, target resolution, jitter and clicks.

    ``compute`` is a pure function of ``(frame, config, geometry)``. With
    ``cache_size > 0`` results for immutable ``GeometrySnapshot`` inputs
    are memoised; live providers always recompute.
    """

    def __init__(self, config: MouseConfig, cache_size: int = 0) -> None:
        if cache_size < 0:
            raise ConfigurationError(f"cache_size must be >= 0, got {cache_size}")
        self._config = config
        self._cached = (
            functools.lru_cache(maxsize=cache_size)(self._evaluate)
            if cache_size
            else None
        )

    @property
    def config(self) -> MouseConfig:
        return self._config

    def compute(self, frame: int, geometry: GeometryProvider | None = None) -> MousePosition:
        if self._cached is not None and (
            geometry is None or isinstance(geometry, GeometrySnapshot)
        ):
            return self._cached(frame, geometry)
        return self._evaluate(frame, geometry)

    def path(
        self, frames: Iterable[int], geometry: GeometryProvider | None = None
    ) -> list[MousePosition]:
        return [self.compute(frame, geometry) for frame in frames]

    def cache_info(self) -> tuple[int, int, int | None, int] | None:
        """``(hits, misses, maxsize, currsize)``, or None when caching is off."""
        return self._cached.cache_info() if self._cached is not None else None

    def clear_cache(self) -> None:
        if self._cached is not None:
            self._cached.cache_clear()

    def _evaluate(self, frame: int, geometry: GeometryProvider | None) -> MousePosition:
        cfg = self._config
        fallback = cfg.viewport.center

        segment = resolve_segment(frame, cfg.waypoints)
        if segment is None:
            return MousePosition(fallback[0], fallback[1], False)

        start = resolve_to_point(segment.start.target, segment.start.offset, geometry, fallback)
        if segment.is_hold:
            point = start
        else:
            end = resolve_to_point(segment.end.target, segment.end.offset, geometry, fallback)
            point = vec.lerp(start, end, segment.t)

        x, y = vec.add(point, wobble_offset(frame, cfg.wobble))
        return MousePosition(x, y, is_clicking(frame, cfg.waypoints, cfg.click_duration))
