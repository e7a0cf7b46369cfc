"""Hover detection with persistent onset tracking.

Whether the cursor is over an element is a per-frame question, but *when*
the current hover run started is not: it depends on every frame seen so
far. Each ``HoverDetector`` owns that onset cell for one element within
one render session, and a ``HoverTracker`` groups the detectors of a
session. Detectors must never be shared across sessions.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from tick_cursor import vec
from tick_cursor.config import HoverConfig
from tick_cursor.types import NOT_HOVERED, ConfigurationError, HoverState, MousePosition, Point

if TYPE_CHECKING:
    from tick_cursor.geometry import ElementRect, GeometryProvider
    from tick_cursor.targets import ElementRef

logger = logging.getLogger(__name__)

HoverCallback = Callable[["ElementRef", int], None]


def within_padded_rect(point: Point, rect: ElementRect, padding: float) -> bool:
    """Inclusive containment test against ``rect`` grown by ``padding``."""
    return rect.expanded(padding).contains(point)


def center_distance(point: Point, rect: ElementRect) -> float:
    return vec.distance(point, rect.center)


class HoverDetector:
    """Tracks hover runs of the cursor over a single element."""

    def __init__(
        self,
        element: ElementRef,
        config: HoverConfig | None = None,
        on_enter: HoverCallback | None = None,
        on_leave: HoverCallback | None = None,
    ) -> None:
        self._element = element
        self._config = config if config is not None else HoverConfig()
        self._on_enter = on_enter
        self._on_leave = on_leave
        self._hover_start: int | None = None
        self._last_frame: int | None = None

    @property
    def element(self) -> ElementRef:
        return self._element

    @property
    def hover_start_frame(self) -> int | None:
        return self._hover_start

    @property
    def is_hovering(self) -> bool:
        return self._hover_start is not None

    def reset(self) -> None:
        """Forget the current hover run. No callbacks fire."""
        self._hover_start = None
        self._last_frame = None

    def update(
        self,
        frame: int,
        mouse: MousePosition,
        rect: ElementRect | None,
        hitbox_padding: float | None = None,
    ) -> HoverState:
        if self._last_frame is not None and frame < self._last_frame:
            logger.debug(
                "Frame went back from %d to %d for %r, starting a new pass",
                self._last_frame, frame, self._element.element_id,
            )
            self.reset()
        self._last_frame = frame

        if rect is None:
            self._transition(frame, False)
            return NOT_HOVERED

        # Per-call overrides are clamped rather than rejected mid-frame.
        padding = self._config.hitbox_padding if hitbox_padding is None else max(hitbox_padding, 0.0)

        point = mouse.point
        hovered = within_padded_rect(point, rect, padding)
        self._transition(frame, hovered)
        return HoverState(
            is_hovered=hovered,
            distance=center_distance(point, rect),
            hover_start_frame=self._hover_start,
        )

    def _transition(self, frame: int, hovered: bool) -> None:
        if hovered and self._hover_start is None:
            self._hover_start = frame
            logger.debug("Hover enter %r at frame %d", self._element.element_id, frame)
            if self._on_enter is not None:
                self._on_enter(self._element, frame)
        elif not hovered and self._hover_start is not None:
            self._hover_start = None
            logger.debug("Hover leave %r at frame %d", self._element.element_id, frame)
            if self._on_leave is not None:
                self._on_leave(self._element, frame)


class HoverTracker:
    """The hover detectors of one render session, keyed by element id."""

    def __init__(self, config: HoverConfig | None = None) -> None:
        self._config = config if config is not None else HoverConfig()
        self._detectors: dict[str, HoverDetector] = {}

    def track(
        self,
        element: ElementRef,
        on_enter: HoverCallback | None = None,
        on_leave: HoverCallback | None = None,
        hitbox_padding: float | None = None,
    ) -> HoverDetector:
        if element.element_id in self._detectors:
            raise ConfigurationError(f"Element {element.element_id!r} is already tracked")
        config = (
            self._config if hitbox_padding is None else HoverConfig(hitbox_padding=hitbox_padding)
        )
        detector = HoverDetector(element, config, on_enter=on_enter, on_leave=on_leave)
        self._detectors[element.element_id] = detector
        return detector

    def untrack(self, element: ElementRef) -> None:
        """Stop tracking an element and drop its onset state."""
        self._detectors.pop(element.element_id, None)

    def detector(self, element: ElementRef) -> HoverDetector:
        return self._detectors[element.element_id]

    def tracked(self) -> list[ElementRef]:
        return [d.element for d in self._detectors.values()]

    def update_all(
        self, frame: int, mouse: MousePosition, geometry: GeometryProvider | None
    ) -> dict[str, HoverState]:
        states: dict[str, HoverState] = {}
        for element_id, detector in list(self._detectors.items()):
            rect = geometry.measure(detector.element) if geometry is not None else None
            states[element_id] = detector.update(frame, mouse, rect)
        return states

    def reset(self) -> None:
        for detector in self._detectors.values():
            detector.reset()

    def __len__(self) -> int:
        return len(self._detectors)
