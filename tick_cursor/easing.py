"""Easing curves for waypoint segments.

Every curve maps [0, 1] onto [0, 1] with f(0) == 0 and f(1) == 1.
"""
from __future__ import annotations

from typing import Callable

from tick_cursor.types import ConfigurationError, Easing


def linear(t: float) -> float:
    return t


def ease_in_quad(t: float) -> float:
    return t * t


def ease_out_quad(t: float) -> float:
    return t * (2 - t)


def ease_in_out_quad(t: float) -> float:
    if t < 0.5:
        return 2 * t * t
    return 1 - (-2 * t + 2) ** 2 / 2


def ease_in_cubic(t: float) -> float:
    return t * t * t


def ease_out_cubic(t: float) -> float:
    return 1 - (1 - t) ** 3


def ease_in_out_cubic(t: float) -> float:
    if t < 0.5:
        return 4 * t * t * t
    return 1 - (-2 * t + 2) ** 3 / 2


DEFAULT_EASING: Easing = ease_in_out_quad

EASINGS: dict[str, Callable[[float], float]] = {
    "linear": linear,
    "ease_in_quad": ease_in_quad,
    "ease_out_quad": ease_out_quad,
    "ease_in_out_quad": ease_in_out_quad,
    "ease_in_cubic": ease_in_cubic,
    "ease_out_cubic": ease_out_cubic,
    "ease_in_out_cubic": ease_in_out_cubic,
}


def get_easing(easing: str | Easing | None) -> Easing:
    """Look up an easing by name, pass callables through, default on None."""
    if easing is None:
        return DEFAULT_EASING
    if callable(easing):
        return easing
    fn = EASINGS.get(easing)
    if fn is None:
        raise ConfigurationError(
            f"Unknown easing {easing!r}, expected one of {sorted(EASINGS)}"
        )
    return fn
