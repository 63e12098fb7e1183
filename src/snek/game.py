"""A single round: one snake, one apple, one random generator."""

from __future__ import annotations

import logging

import numpy as np

from snek.apple import place_apple
from snek.grid import CellType, Grid
from snek.snake import Health, Snake

logger = logging.getLogger(__name__)


class Game:
    """Owns the snake, the apple and the RNG for one round.

    A restart throws the whole object away and builds a new one.
    """

    def __init__(
        self,
        grid: Grid | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.grid = grid if grid is not None else Grid()
        self.rng = rng if rng is not None else np.random.default_rng()
        self.snake = Snake(self.grid)
        self.apple = place_apple(self.snake, self.grid, self.rng)

    @property
    def over(self) -> bool:
        return self.snake.health is Health.DEAD

    def tick(self) -> None:
        """Advance the snake one step."""
        self.snake.tick(self.apple, self.rng)

    def to_array(self) -> np.ndarray:
        """Return the occupancy array indexed ``[y, x]``."""
        cells = self.grid.empty_array()
        for seg in self.snake.body:
            cells[seg.y, seg.x] = CellType.SNAKE
        head = self.snake.head
        cells[head.y, head.x] = CellType.HEAD
        cells[self.apple.y, self.apple.x] = CellType.APPLE
        return cells

    def get_state(self) -> dict:
        """Return the full, serializable game state."""
        return {
            "grid": self.grid.to_dict(),
            "snake": self.snake.to_dict(),
            "apple": self.apple.to_list(),
            "length": len(self.snake),
            "game_over": self.over,
            "cells": self.to_array().tolist(),
        }
