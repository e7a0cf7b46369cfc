"""tick-cursor - Frame-exact simulated cursor, hover tracking and parallax camera."""

from tick_cursor.clicks import click_progress, cursor_scale, is_clicking
from tick_cursor.clock import FrameClock
from tick_cursor.config import (
    HoverConfig,
    MouseConfig,
    ParallaxConfig,
    Viewport,
    WobbleConfig,
    load_mouse_config,
    mouse_config_from_mapping,
)
from tick_cursor.controller import MouseController
from tick_cursor.easing import EASINGS, get_easing
from tick_cursor.geometry import ElementRect, GeometryProvider, GeometrySnapshot, LiveGeometry
from tick_cursor.hover import HoverDetector, HoverTracker
from tick_cursor.jitter import wobble_offset
from tick_cursor.parallax import ParallaxCamera, camera_transform
from tick_cursor.session import RenderSession
from tick_cursor.targets import AbsolutePoint, ElementRef, resolve_to_point
from tick_cursor.timeline import Segment, Waypoint, resolve_segment
from tick_cursor.types import (
    IDENTITY,
    CameraTransform,
    ConfigurationError,
    FrameContext,
    FrameResult,
    HoverState,
    MousePosition,
)

__all__ = [
    "AbsolutePoint",
    "CameraTransform",
    "ConfigurationError",
    "EASINGS",
    "ElementRect",
    "ElementRef",
    "FrameClock",
    "FrameContext",
    "FrameResult",
    "GeometryProvider",
    "GeometrySnapshot",
    "HoverConfig",
    "HoverDetector",
    "HoverState",
    "HoverTracker",
    "IDENTITY",
    "LiveGeometry",
    "MouseConfig",
    "MouseController",
    "MousePosition",
    "ParallaxCamera",
    "ParallaxConfig",
    "RenderSession",
    "Segment",
    "Viewport",
    "Waypoint",
    "WobbleConfig",
    "camera_transform",
    "click_progress",
    "cursor_scale",
    "get_easing",
    "is_clicking",
    "load_mouse_config",
    "mouse_config_from_mapping",
    "resolve_segment",
    "resolve_to_point",
    "wobble_offset",
]
