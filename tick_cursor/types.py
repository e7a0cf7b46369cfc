"""Shared value types, aliases and errors for the cursor pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

Point = tuple[float, float]
Easing = Callable[[float], float]


class ConfigurationError(ValueError):
    """Raised when a configuration value is out of domain.

    Only raised while building configuration objects, never while a frame
    is being evaluated.
    """


@dataclass(frozen=True, slots=True)
class MousePosition:
    x: float
    y: float
    is_clicking: bool = False

    @property
    def point(self) -> Point:
        return (self.x, self.y)


@dataclass(frozen=True, slots=True)
class HoverState:
    is_hovered: bool
    distance: float
    hover_start_frame: int | None

    def hover_frames(self, frame: int) -> int | None:
        """Frames elapsed since the current hover run began, or None."""
        if self.hover_start_frame is None:
            return None
        return frame - self.hover_start_frame


NOT_HOVERED = HoverState(is_hovered=False, distance=float("inf"), hover_start_frame=None)


@dataclass(frozen=True, slots=True)
class CameraTransform:
    translate_x: float = 0.0
    translate_y: float = 0.0
    rotate_x: float = 0.0
    rotate_y: float = 0.0

    @property
    def is_identity(self) -> bool:
        return (
            self.translate_x == 0.0
            and self.translate_y == 0.0
            and self.rotate_x == 0.0
            and self.rotate_y == 0.0
        )


IDENTITY = CameraTransform()


@dataclass(frozen=True, slots=True)
class FrameContext:
    frame: int
    fps: int
    elapsed: float
    request_stop: Callable[[], None]


@dataclass(frozen=True, slots=True)
class FrameResult:
    """Everything one session step produced for a single frame."""

    frame: int
    mouse: MousePosition
    hovers: dict[str, HoverState]
    camera: CameraTransform
