"""Organic cursor wobble. Deterministic, periodic, no randomness."""
from __future__ import annotations

import math
from typing import TYPE_CHECKING

from tick_cursor.types import Point

if TYPE_CHECKING:
    from tick_cursor.config import WobbleConfig

# Vertical wobble frequency relative to horizontal.
Y_SPEED_RATIO = 0.8


def wobble_offset(frame: int, wobble: WobbleConfig) -> Point:
    if wobble.amplitude == 0:
        return (0.0, 0.0)
    return (
        math.sin(frame * wobble.speed) * wobble.amplitude,
        math.cos(frame * wobble.speed * Y_SPEED_RATIO) * wobble.amplitude,
    )
