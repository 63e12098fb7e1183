"""Draws a game onto a platform using semantic colors."""

from __future__ import annotations

from typing import TYPE_CHECKING

from snek.platform import Color

if TYPE_CHECKING:
    from snek.game import Game
    from snek.platform import Platform


def death_message(length: int) -> list[str]:
    return [
        f"You died with a length of {length}.",
        "Press 'Q' to quit.",
        "Press 'R' to restart.",
    ]


def draw_game(game: Game, platform: Platform) -> None:
    """Draw snake, apple, grid lines and, once dead, the death panel."""
    head = game.snake.head
    platform.draw_cell(head.x, head.y, Color.HEAD)
    for idx, seg in enumerate(list(game.snake.body)[1:]):
        platform.draw_cell(seg.x, seg.y, Color.BODY_ALT if idx & 1 else Color.BODY)
    platform.draw_cell(game.apple.x, game.apple.y, Color.APPLE)

    for x in range(game.grid.width):
        platform.draw_grid_line(True, x)
    for y in range(game.grid.height):
        platform.draw_grid_line(False, y)

    if game.over:
        platform.draw_text(death_message(len(game.snake)))
