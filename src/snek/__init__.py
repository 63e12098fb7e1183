"""snek: Snake on a wrapping grid."""

from snek.config import GameConfig
from snek.game import Game
from snek.grid import Grid, GridPosition
from snek.input import InputResolver
from snek.loop import GameLoop
from snek.snake import Direction, Health, Snake

__all__ = [
    "Direction",
    "Game",
    "GameConfig",
    "GameLoop",
    "Grid",
    "GridPosition",
    "Health",
    "InputResolver",
    "Snake",
]
