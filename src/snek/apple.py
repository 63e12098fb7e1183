"""Apple placement logic."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import numpy as np

    from snek.grid import Grid, GridPosition
    from snek.snake import Snake

logger = logging.getLogger(__name__)


def place_apple(
    snake: Snake,
    grid: Grid,
    rng: np.random.Generator,
) -> GridPosition:
    """Pick a uniformly random cell not covered by *snake*.

    Uses rejection sampling over the whole grid with no retry limit.
    Occupancy stays low in normal play; a snake that fills every cell
    makes this loop spin forever.
    """
    attempts = 1
    pos = grid.random_position(rng)
    while snake.contains(pos):
        attempts += 1
        pos = grid.random_position(rng)

    logger.debug(
        "Apple placed at (%d, %d) after %d attempt(s).", pos.x, pos.y, attempts,
    )
    return pos
