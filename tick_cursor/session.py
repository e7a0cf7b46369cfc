"""RenderSession - drives the cursor pipeline frame by frame.

A session owns one clock, one controller, one camera and the hover state
cells of its tracked elements. Renders of independent frame ranges (for
example parallel segment pre-rendering) each need their own session; use
``fork`` to get one with identical configuration and fresh hover state.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Generator

from tick_cursor.clock import FrameClock
from tick_cursor.config import HoverConfig, MouseConfig, ParallaxConfig
from tick_cursor.controller import MouseController
from tick_cursor.geometry import EMPTY_GEOMETRY, GeometryProvider
from tick_cursor.hover import HoverCallback, HoverDetector, HoverTracker
from tick_cursor.parallax import ParallaxCamera
from tick_cursor.targets import ElementRef
from tick_cursor.types import FrameContext, FrameResult

logger = logging.getLogger(__name__)

Stage = Callable[[FrameResult, FrameContext], None]
Hook = Callable[["RenderSession", FrameContext], None]


@dataclass(frozen=True)
class _Tracking:
    element: ElementRef
    on_enter: HoverCallback | None
    on_leave: HoverCallback | None
    hitbox_padding: float | None


class RenderSession:
    def __init__(
        self,
        mouse: MouseConfig,
        *,
        parallax: ParallaxConfig | None = None,
        hover: HoverConfig | None = None,
        geometry: GeometryProvider | None = None,
        fps: int = 30,
        start_frame: int = 0,
        cache_size: int = 0,
    ) -> None:
        self._mouse_config = mouse
        self._parallax_config = parallax if parallax is not None else ParallaxConfig()
        self._hover_config = hover if hover is not None else HoverConfig()
        self._geometry = geometry
        self._cache_size = cache_size

        self._clock = FrameClock(fps, start_frame)
        self._controller = MouseController(mouse, cache_size=cache_size)
        self._camera = ParallaxCamera(self._parallax_config, mouse.viewport)
        self._hovers = HoverTracker(self._hover_config)
        self._tracking: list[_Tracking] = []

        self._stages: list[Stage] = []
        self._start_hooks: list[Hook] = []
        self._stop_hooks: list[Hook] = []
        self._stop_requested: bool = False

    @property
    def clock(self) -> FrameClock:
        return self._clock

    @property
    def controller(self) -> MouseController:
        return self._controller

    @property
    def camera(self) -> ParallaxCamera:
        return self._camera

    @property
    def hovers(self) -> HoverTracker:
        return self._hovers

    @property
    def geometry(self) -> GeometryProvider | None:
        return self._geometry

    def track(
        self,
        element: ElementRef,
        on_enter: HoverCallback | None = None,
        on_leave: HoverCallback | None = None,
        hitbox_padding: float | None = None,
    ) -> HoverDetector:
        detector = self._hovers.track(element, on_enter, on_leave, hitbox_padding)
        self._tracking.append(_Tracking(element, on_enter, on_leave, hitbox_padding))
        return detector

    def untrack(self, element: ElementRef) -> None:
        self._hovers.untrack(element)
        self._tracking = [t for t in self._tracking if t.element != element]

    def set_parallax(self, parallax: ParallaxConfig) -> None:
        """Swap the camera settings. Hover state and the clock are kept."""
        self._parallax_config = parallax
        self._camera = ParallaxCamera(parallax, self._mouse_config.viewport)

    def add_stage(self, stage: Stage) -> None:
        self._stages.append(stage)

    def on_start(self, hook: Hook) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: Hook) -> None:
        self._stop_hooks.append(hook)

    def _request_stop(self) -> None:
        self._stop_requested = True

    def evaluate(self, frame: int) -> FrameResult:
        """Compute one frame. Updates hover state, runs no stages."""
        snapshot = self._geometry.snapshot() if self._geometry is not None else EMPTY_GEOMETRY
        mouse = self._controller.compute(frame, snapshot)
        return FrameResult(
            frame=frame,
            mouse=mouse,
            hovers=self._hovers.update_all(frame, mouse, snapshot),
            camera=self._camera.transform(mouse),
        )

    def _tick(self) -> FrameResult:
        ctx = self._clock.context(self._request_stop)
        result = self.evaluate(ctx.frame)
        for stage in self._stages:
            stage(result, ctx)
            if self._stop_requested:
                break
        self._clock.advance()
        return result

    def step(self) -> FrameResult:
        self._stop_requested = False
        return self._tick()

    def frames(self, n: int) -> Generator[FrameResult, None, None]:
        """Evaluate up to ``n`` frames from the clock's current frame."""
        self._stop_requested = False
        ctx = self._clock.context(self._request_stop)
        logger.info("Render start at frame %d (%d frames)", ctx.frame, n)
        for hook in self._start_hooks:
            hook(self, ctx)

        try:
            for _ in range(n):
                yield self._tick()
                if self._stop_requested:
                    logger.info("Render stopped at frame %d", self._clock.frame - 1)
                    break
        finally:
            ctx = self._clock.context(self._request_stop)
            for hook in self._stop_hooks:
                hook(self, ctx)
            logger.info("Render end at frame %d", ctx.frame)

    def render(self, n: int) -> list[FrameResult]:
        return list(self.frames(n))

    def fork(self, start_frame: int | None = None) -> RenderSession:
        """New session with the same configuration and fresh hover state.

        Tracked elements, stages and hooks are carried over. Onset state is not.
        """
        session = RenderSession(
            self._mouse_config,
            parallax=self._parallax_config,
            hover=self._hover_config,
            geometry=self._geometry,
            fps=self._clock.fps,
            start_frame=self._clock.frame if start_frame is None else start_frame,
            cache_size=self._cache_size,
        )
        for t in self._tracking:
            session.track(t.element, t.on_enter, t.on_leave, t.hitbox_padding)
        session._stages = list(self._stages)
        session._start_hooks = list(self._start_hooks)
        session._stop_hooks = list(self._stop_hooks)
        return session

    def close(self) -> None:
        """End the session's hover runs and rewind the clock."""
        self._hovers.reset()
        self._clock.reset()
