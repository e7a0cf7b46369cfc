"""Parallax camera derived from a tracked screen point."""
from __future__ import annotations

from tick_cursor.config import ParallaxConfig, Viewport
from tick_cursor.types import IDENTITY, CameraTransform, MousePosition, Point


def normalize(point: Point, viewport: Viewport) -> Point:
    """Map screen coordinates to [-1, 1] with (0, 0) at viewport center."""
    return (
        (point[0] / viewport.width) * 2 - 1,
        (point[1] / viewport.height) * 2 - 1,
    )


def camera_transform(
    target: Point,
    viewport: Viewport,
    parallax_strength: float,
    rotate_strength: float,
    follow: bool = True,
) -> CameraTransform:
    """Camera recoils away from ``target`` and tilts toward it."""
    if not follow:
        return IDENTITY
    nx, ny = normalize(target, viewport)
    return CameraTransform(
        translate_x=-nx * viewport.width * parallax_strength,
        translate_y=-ny * viewport.height * parallax_strength,
        rotate_x=-ny * rotate_strength,
        rotate_y=nx * rotate_strength,
    )


class ParallaxCamera:
    def __init__(self, config: ParallaxConfig | None = None, viewport: Viewport | None = None) -> None:
        self._config = config if config is not None else ParallaxConfig()
        self._viewport = viewport if viewport is not None else Viewport()

    @property
    def config(self) -> ParallaxConfig:
        return self._config

    @property
    def viewport(self) -> Viewport:
        return self._viewport

    @property
    def perspective(self) -> float:
        return self._config.fov

    def active_target(self, mouse: MousePosition | Point | None = None) -> Point:
        """Override target, else the cursor when following, else center."""
        if self._config.override_target is not None:
            return self._config.override_target
        if self._config.follow and mouse is not None:
            if isinstance(mouse, MousePosition):
                return mouse.point
            return (mouse[0], mouse[1])
        return self._viewport.center

    def transform(self, mouse: MousePosition | Point | None = None) -> CameraTransform:
        cfg = self._config
        return camera_transform(
            self.active_target(mouse),
            self._viewport,
            cfg.parallax_strength,
            cfg.rotate_strength,
            cfg.follow,
        )
