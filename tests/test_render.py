"""Tests for semantic game drawing."""

from collections import deque

import numpy as np

from snek.game import Game
from snek.grid import Grid
from snek.platform import Color
from snek.render import death_message, draw_game
from snek.snake import Health


class Recorder:
    def __init__(self):
        self.cells = []
        self.lines = []
        self.text = []

    def draw_cell(self, x, y, color):
        self.cells.append((x, y, color))

    def draw_grid_line(self, vertical, index):
        self.lines.append((vertical, index))

    def draw_text(self, lines):
        self.text.extend(lines)


def _game(cells):
    game = Game(Grid(width=8, height=4), np.random.default_rng(0))
    game.snake.body = deque(game.grid.position(x, y) for x, y in cells)
    game.apple = game.grid.position(7, 3)
    return game


class TestDrawGame:
    def test_body_shading_alternates(self):
        recorder = Recorder()
        draw_game(_game([(4, 1), (3, 1), (2, 1), (1, 1)]), recorder)
        assert recorder.cells == [
            (4, 1, Color.HEAD),
            (3, 1, Color.BODY),
            (2, 1, Color.BODY_ALT),
            (1, 1, Color.BODY),
            (7, 3, Color.APPLE),
        ]

    def test_grid_lines(self):
        recorder = Recorder()
        draw_game(_game([(4, 1)]), recorder)
        assert recorder.lines == (
            [(True, x) for x in range(8)] + [(False, y) for y in range(4)]
        )

    def test_no_text_while_alive(self):
        recorder = Recorder()
        game = _game([(4, 1)])
        game.snake.health = Health.DYING
        draw_game(game, recorder)
        assert recorder.text == []

    def test_death_panel(self):
        recorder = Recorder()
        game = _game([(4, 1), (3, 1), (2, 1)])
        game.snake.health = Health.DEAD
        draw_game(game, recorder)
        assert recorder.text == death_message(3)
        assert recorder.text[0] == "You died with a length of 3."
        assert "Press 'R' to restart." in recorder.text
