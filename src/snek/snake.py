"""Snake representation, movement, growth and death."""

from __future__ import annotations

import enum
import logging
from collections import deque
from typing import TYPE_CHECKING

from snek.apple import place_apple
from snek.grid import Grid, GridPosition
from snek.platform import Key

if TYPE_CHECKING:
    import numpy as np

logger = logging.getLogger(__name__)


class Direction(enum.Enum):
    """Heading of the snake with (dx, dy) values. ``NONE`` means idle."""

    NONE = (0, 0)
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    def opposite(self) -> Direction:
        """Return the 180° reversal. ``NONE`` is its own opposite."""
        return _OPPOSITES[self]

    @classmethod
    def from_key(cls, key: Key) -> Direction:
        """Convert an arrow key to a direction."""
        try:
            return _KEY_DIRECTIONS[key]
        except KeyError:
            raise ValueError(f"{key.name} is not a directional key.") from None


_OPPOSITES: dict[Direction, Direction] = {
    Direction.NONE: Direction.NONE,
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

_KEY_DIRECTIONS: dict[Key, Direction] = {
    Key.UP: Direction.UP,
    Key.DOWN: Direction.DOWN,
    Key.LEFT: Direction.LEFT,
    Key.RIGHT: Direction.RIGHT,
}


class Health(enum.Enum):
    """Two-step death: a collision makes the snake DYING, another DEAD."""

    ALIVE = "alive"
    DYING = "dying"
    DEAD = "dead"


class Snake:
    """A snake on a toroidal grid, stored as a deque of positions.

    The head is ``body[0]``; the tail is ``body[-1]``. New snakes are a
    single idle segment in the middle of the grid.
    """

    def __init__(self, grid: Grid) -> None:
        self.grid = grid
        self.body: deque[GridPosition] = deque([grid.center()])
        self.health = Health.ALIVE
        self.direction = Direction.NONE
        self.needs_to_grow = False

    def __len__(self) -> int:
        return len(self.body)

    @property
    def head(self) -> GridPosition:
        """Return a copy of the head position."""
        if not self.body:
            raise RuntimeError("Snake body is empty.")
        return self.body[0].copy()

    def contains(self, pos: GridPosition) -> bool:
        """Check whether any segment occupies *pos*."""
        return pos in self.body

    def will_collide(self, candidate: GridPosition) -> bool:
        """Check whether *candidate* hits the body.

        The head and the tail are ignored: the tail vacates its cell on a
        non-growing move, so stepping into it is allowed.
        """
        return any(seg == candidate for seg in list(self.body)[1:-1])

    def tick(self, apple: GridPosition, rng: np.random.Generator) -> None:
        """Advance one step, eating and relocating *apple* in place."""
        if self.health is Health.DEAD or self.direction is Direction.NONE:
            return

        new_head = self.head.moved(self.direction)

        if self.will_collide(new_head):
            if self.health is Health.ALIVE:
                self.health = Health.DYING
            else:
                self.health = Health.DEAD
                logger.info("Snake died with a length of %d.", len(self))
            return

        self.health = Health.ALIVE
        self.body.appendleft(new_head)

        if self.contains(apple):
            self.needs_to_grow = True
            spot = place_apple(self, self.grid, rng)
            apple.x, apple.y = spot.x, spot.y

        if self.health is not Health.DEAD and not self.needs_to_grow:
            self.body.pop()
        self.needs_to_grow = False

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {
            "body": [seg.to_list() for seg in self.body],
            "direction": self.direction.name,
            "health": self.health.value,
        }
