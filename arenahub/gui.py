"""Screen and scaling settings shared by the game client's GUI."""

from __future__ import annotations

import math
from dataclasses import dataclass

WINDOW_MINIMAL_SIZE: tuple[float, float] = (800.0, 600.0)


@dataclass
class GuiSettings:
    """User-adjustable GUI settings."""

    scale: float = 1.0


def _round_half_away(value: float) -> int:
    return int(math.floor(value + 0.5)) if value >= 0 else -int(math.floor(-value + 0.5))


def constrain_screen_size(
    screen_width: float, screen_height: float
) -> tuple[int, int] | None:
    """Return the window size to enforce if the screen is below the minimum.

    Returns ``None`` when the screen already meets the minimal size.
    """
    min_width, min_height = WINDOW_MINIMAL_SIZE
    if screen_width >= min_width and screen_height >= min_height:
        return None
    return (
        _round_half_away(max(screen_width, min_width)) + 1,
        _round_half_away(max(screen_height, min_height)) + 1,
    )