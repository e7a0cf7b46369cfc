"""Frame clock and FrameContext for render sessions."""

from typing import Callable

from tick_cursor.types import ConfigurationError, FrameContext


class FrameClock:
    def __init__(self, fps: int = 30, start_frame: int = 0) -> None:
        if fps <= 0:
            raise ConfigurationError("fps must be positive")
        self._fps = fps
        self._seconds_per_frame = 1.0 / fps
        self._start_frame = start_frame
        self._frame = start_frame

    @property
    def fps(self) -> int:
        return self._fps

    @property
    def seconds_per_frame(self) -> float:
        return self._seconds_per_frame

    @property
    def frame(self) -> int:
        """The next frame to be evaluated."""
        return self._frame

    @property
    def start_frame(self) -> int:
        return self._start_frame

    def advance(self) -> int:
        self._frame += 1
        return self._frame

    def context(self, stop_fn: Callable[[], None]) -> FrameContext:
        return FrameContext(
            frame=self._frame,
            fps=self._fps,
            elapsed=self._frame * self._seconds_per_frame,
            request_stop=stop_fn,
        )

    def reset(self, frame: int | None = None) -> None:
        self._frame = self._start_frame if frame is None else frame
