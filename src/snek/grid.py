"""Toroidal grid dimensions and wrapping positions."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from snek.snake import Direction


class CellType(enum.IntEnum):
    """Integer codes stored in the occupancy array."""

    EMPTY = 0
    SNAKE = 1
    APPLE = 2
    HEAD = 3


@dataclass(frozen=True)
class Grid:
    """Fixed grid dimensions. Every edge wraps to the opposite edge.

    Coordinates use (x, y) ordering: ``x`` is the column, ``y`` the row.
    """

    width: int = 20
    height: int = 10

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError("Grid dimensions must be at least 1×1.")

    @property
    def area(self) -> int:
        return self.width * self.height

    def position(self, x: int, y: int) -> GridPosition:
        """Build a position on this grid."""
        return GridPosition(x, y, self)

    def center(self) -> GridPosition:
        """Return the cell where a new snake spawns."""
        return GridPosition(self.width // 2, self.height // 2, self)

    def random_position(self, rng: np.random.Generator) -> GridPosition:
        """Sample a cell uniformly from the whole grid."""
        return GridPosition(
            int(rng.integers(0, self.width)),
            int(rng.integers(0, self.height)),
            self,
        )

    def empty_array(self) -> np.ndarray:
        """Return an all-empty occupancy array indexed ``[y, x]``."""
        return np.zeros((self.height, self.width), dtype=np.int8)

    def to_dict(self) -> dict:
        return {"width": self.width, "height": self.height}


@dataclass
class GridPosition:
    """A mutable (x, y) cell on a :class:`Grid`.

    Equality compares coordinates only. Movement wraps, so once built a
    position can never leave the grid.
    """

    x: int
    y: int
    grid: Grid = field(default_factory=Grid, compare=False, repr=False)

    def __post_init__(self) -> None:
        if not (0 <= self.x < self.grid.width and 0 <= self.y < self.grid.height):
            raise ValueError(
                f"Position ({self.x}, {self.y}) is outside the "
                f"{self.grid.width}×{self.grid.height} grid."
            )

    @staticmethod
    def _wrapping_inc(n: int, limit: int) -> int:
        return 0 if n == limit - 1 else n + 1

    @staticmethod
    def _wrapping_dec(n: int, limit: int) -> int:
        return limit - 1 if n == 0 else n - 1

    def up(self) -> None:
        self.y = self._wrapping_dec(self.y, self.grid.height)

    def down(self) -> None:
        self.y = self._wrapping_inc(self.y, self.grid.height)

    def left(self) -> None:
        self.x = self._wrapping_dec(self.x, self.grid.width)

    def right(self) -> None:
        self.x = self._wrapping_inc(self.x, self.grid.width)

    def step(self, direction: Direction) -> None:
        """Move one cell in *direction* in place. ``NONE`` does nothing."""
        dx, dy = direction.value
        if dx > 0:
            self.right()
        elif dx < 0:
            self.left()
        if dy > 0:
            self.down()
        elif dy < 0:
            self.up()

    def moved(self, direction: Direction) -> GridPosition:
        """Return a copy moved one cell in *direction*."""
        pos = self.copy()
        pos.step(direction)
        return pos

    def copy(self) -> GridPosition:
        return GridPosition(self.x, self.y, self.grid)

    def to_list(self) -> list[int]:
        return [self.x, self.y]
