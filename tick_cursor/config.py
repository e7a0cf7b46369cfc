"""Validated configuration for every pipeline component.

All defaults live here as module constants. Each dataclass checks its
fields once in ``__post_init__`` and raises ``ConfigurationError``; nothing
is re-validated per frame.
"""
from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Sequence

from tick_cursor.targets import AbsolutePoint, ElementRef, Target
from tick_cursor.timeline import Waypoint
from tick_cursor.types import ConfigurationError, Point

logger = logging.getLogger(__name__)

DEFAULT_WOBBLE_AMPLITUDE = 2.0
DEFAULT_WOBBLE_SPEED = 0.1
DEFAULT_CLICK_DURATION = 8
DEFAULT_VIEWPORT_WIDTH = 1920.0
DEFAULT_VIEWPORT_HEIGHT = 1080.0
DEFAULT_FOV = 1000.0
DEFAULT_PARALLAX_STRENGTH = 0.05
DEFAULT_ROTATE_STRENGTH = 0.0
DEFAULT_HITBOX_PADDING = 0.0


def _require_finite(name: str, value: float) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
        raise ConfigurationError(f"{name} must be a finite number, got {value!r}")


@dataclass(frozen=True)
class WobbleConfig:
    """Organic jitter.

    Attributes:
        amplitude: Peak offset in pixels (0 disables wobble).
        speed: Angular frequency in radians per frame.
    """

    amplitude: float = DEFAULT_WOBBLE_AMPLITUDE
    speed: float = DEFAULT_WOBBLE_SPEED

    def __post_init__(self) -> None:
        _require_finite("amplitude", self.amplitude)
        _require_finite("speed", self.speed)
        if self.amplitude < 0:
            raise ConfigurationError(f"amplitude must be >= 0, got {self.amplitude}")


NO_WOBBLE = WobbleConfig(amplitude=0.0)


@dataclass(frozen=True)
class Viewport:
    width: float = DEFAULT_VIEWPORT_WIDTH
    height: float = DEFAULT_VIEWPORT_HEIGHT

    def __post_init__(self) -> None:
        _require_finite("width", self.width)
        _require_finite("height", self.height)
        if self.width <= 0 or self.height <= 0:
            raise ConfigurationError(
                f"viewport must have positive size, got {self.width}x{self.height}"
            )

    @property
    def center(self) -> Point:
        return (self.width / 2, self.height / 2)


@dataclass(frozen=True)
class MouseConfig:
    """Waypoint timeline plus the settings shared by every frame.

    Attributes:
        waypoints: Frame-ascending waypoints. Equal frames are allowed.
        wobble: Organic jitter settings.
        click_duration: Length in frames of every click window.
        viewport: Screen size; its center is the fallback position.
    """

    waypoints: tuple[Waypoint, ...] = ()
    wobble: WobbleConfig = field(default_factory=WobbleConfig)
    click_duration: int = DEFAULT_CLICK_DURATION
    viewport: Viewport = field(default_factory=Viewport)

    def __post_init__(self) -> None:
        object.__setattr__(self, "waypoints", tuple(self.waypoints))
        if isinstance(self.click_duration, bool) or not isinstance(self.click_duration, int):
            raise ConfigurationError(
                f"click_duration must be an int, got {self.click_duration!r}"
            )
        if self.click_duration < 0:
            raise ConfigurationError(
                f"click_duration must be >= 0, got {self.click_duration}"
            )
        for prev, cur in zip(self.waypoints, self.waypoints[1:]):
            if cur.frame < prev.frame:
                raise ConfigurationError(
                    f"waypoints must be frame-ascending, got {cur.frame} after {prev.frame}"
                )
        if not self.waypoints:
            logger.debug("MouseConfig has no waypoints; cursor rests at viewport center")


@dataclass(frozen=True)
class ParallaxConfig:
    """Camera settings for the pseudo-3D scene.

    Attributes:
        fov: Perspective distance in pixels, passed through to the scene.
        parallax_strength: Translation as a fraction of viewport size.
        rotate_strength: Peak tilt in degrees.
        follow: Track the active target. When False the camera stays still.
        override_target: Followed instead of the cursor when set.
    """

    fov: float = DEFAULT_FOV
    parallax_strength: float = DEFAULT_PARALLAX_STRENGTH
    rotate_strength: float = DEFAULT_ROTATE_STRENGTH
    follow: bool = True
    override_target: Point | None = None

    def __post_init__(self) -> None:
        _require_finite("fov", self.fov)
        _require_finite("parallax_strength", self.parallax_strength)
        _require_finite("rotate_strength", self.rotate_strength)
        if self.fov <= 0:
            raise ConfigurationError(f"fov must be > 0, got {self.fov}")
        if self.override_target is not None:
            target = tuple(self.override_target)
            if len(target) != 2:
                raise ConfigurationError(
                    f"override_target must be an (x, y) pair, got {self.override_target!r}"
                )
            _require_finite("override_target.x", target[0])
            _require_finite("override_target.y", target[1])
            object.__setattr__(self, "override_target", (float(target[0]), float(target[1])))


@dataclass(frozen=True)
class HoverConfig:
    hitbox_padding: float = DEFAULT_HITBOX_PADDING

    def __post_init__(self) -> None:
        _require_finite("hitbox_padding", self.hitbox_padding)
        if self.hitbox_padding < 0:
            raise ConfigurationError(
                f"hitbox_padding must be >= 0, got {self.hitbox_padding}"
            )


# -- Loading from plain data --


def _target_from_mapping(index: int, data: Mapping[str, Any]) -> Target:
    if "element" in data:
        element_id = data["element"]
        if not isinstance(element_id, str) or not element_id:
            raise ConfigurationError(f"waypoints[{index}].element must be a non-empty string")
        return ElementRef(element_id)
    if "x" in data and "y" in data:
        _require_finite(f"waypoints[{index}].x", data["x"])
        _require_finite(f"waypoints[{index}].y", data["y"])
        return AbsolutePoint(float(data["x"]), float(data["y"]))
    raise ConfigurationError(f"waypoints[{index}] needs either 'element' or 'x' and 'y'")


def _waypoint_from_mapping(index: int, data: Any) -> Waypoint:
    if not isinstance(data, Mapping):
        raise ConfigurationError(f"waypoints[{index}] must be a mapping, got {type(data).__name__}")
    if "frame" not in data:
        raise ConfigurationError(f"waypoints[{index}].frame is required")
    offset = data.get("offset", (0.0, 0.0))
    if not isinstance(offset, Sequence) or isinstance(offset, str):
        raise ConfigurationError(f"waypoints[{index}].offset must be an [x, y] pair")
    click = data.get("click", False)
    if not isinstance(click, bool):
        raise ConfigurationError(f"waypoints[{index}].click must be a boolean, got {click!r}")
    return Waypoint(
        frame=data["frame"],
        target=_target_from_mapping(index, data),
        offset=tuple(offset),
        triggers_click=click,
        easing=data.get("easing"),
    )


def mouse_config_from_mapping(data: Mapping[str, Any]) -> MouseConfig:
    """Build a MouseConfig from plain (e.g. JSON-decoded) data."""
    raw_waypoints = data.get("waypoints", [])
    if not isinstance(raw_waypoints, Sequence) or isinstance(raw_waypoints, str):
        raise ConfigurationError("waypoints must be a list")
    waypoints = tuple(
        _waypoint_from_mapping(i, wp) for i, wp in enumerate(raw_waypoints)
    )

    wobble_data = data.get("wobble", {})
    viewport_data = data.get("viewport", {})
    if not isinstance(wobble_data, Mapping):
        raise ConfigurationError("wobble must be a mapping")
    if not isinstance(viewport_data, Mapping):
        raise ConfigurationError("viewport must be a mapping")

    return MouseConfig(
        waypoints=waypoints,
        wobble=WobbleConfig(
            amplitude=wobble_data.get("amplitude", DEFAULT_WOBBLE_AMPLITUDE),
            speed=wobble_data.get("speed", DEFAULT_WOBBLE_SPEED),
        ),
        click_duration=data.get("click_duration", DEFAULT_CLICK_DURATION),
        viewport=Viewport(
            width=viewport_data.get("width", DEFAULT_VIEWPORT_WIDTH),
            height=viewport_data.get("height", DEFAULT_VIEWPORT_HEIGHT),
        ),
    )


def load_mouse_config(path: str | Path) -> MouseConfig:
    """Read a JSON cursor script from disk."""
    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"{path} is not valid JSON: {exc}") from exc
    if not isinstance(raw, Mapping):
        raise ConfigurationError(f"{path} must contain a JSON object")
    config = mouse_config_from_mapping(raw)
    logger.info("Loaded %d waypoints from %s", len(config.waypoints), path)
    return config
