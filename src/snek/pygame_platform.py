"""Pygame window and keyboard backend."""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence

import pygame

from snek.config import GameConfig
from snek.platform import Color, Key

logger = logging.getLogger(__name__)

_PALETTE: dict[Color, tuple[int, int, int]] = {
    Color.HEAD: (0, 228, 48),
    Color.BODY: (0, 153, 48),
    Color.BODY_ALT: (0, 128, 48),
    Color.APPLE: (230, 41, 55),
    Color.GRID: (80, 80, 80),
    Color.TEXT: (255, 161, 0),
}

_BACKGROUND = (0, 0, 0)
_PANEL = (77, 77, 77, 178)

_KEYMAP: dict[int, Key] = {
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_q: Key.QUIT,
    pygame.K_r: Key.RESTART,
}

_FONT_SIZE = 30
_LINE_HEIGHT = 30


class PygamePlatform:
    """Draws grid cells into a pygame window and reports key presses.

    Key presses are gathered while a frame is presented and reported
    during the following frame.
    """

    def __init__(self, config: GameConfig) -> None:
        pygame.init()
        self.cell_px = config.cell_px
        self.fps = config.fps
        self.width = config.grid_width * config.cell_px
        self.height = config.grid_height * config.cell_px
        self.screen = pygame.display.set_mode((self.width, self.height))
        pygame.display.set_caption("snek")
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont(None, _FONT_SIZE)
        self._pressed: set[Key] = set()
        self.screen.fill(_BACKGROUND)
        logger.info("Opened %dx%d window.", self.width, self.height)

    def now(self) -> float:
        return time.monotonic()

    def key_pressed(self, key: Key) -> bool:
        return key in self._pressed

    def draw_cell(self, x: int, y: int, color: Color) -> None:
        rect = (x * self.cell_px, y * self.cell_px, self.cell_px, self.cell_px)
        pygame.draw.rect(self.screen, _PALETTE[color], rect)

    def draw_grid_line(self, vertical: bool, index: int) -> None:
        offset = index * self.cell_px
        if vertical:
            start, end = (offset, 0), (offset, self.height)
        else:
            start, end = (0, offset), (self.width, offset)
        pygame.draw.line(self.screen, _PALETTE[Color.GRID], start, end, 2)

    def draw_text(self, lines: Sequence[str]) -> None:
        rendered = [self.font.render(line, True, _PALETTE[Color.TEXT]) for line in lines]
        panel_w = max((s.get_width() for s in rendered), default=0) + 20
        panel_h = _LINE_HEIGHT * len(rendered) + 15
        panel = pygame.Surface((panel_w, panel_h), pygame.SRCALPHA)
        panel.fill(_PANEL)
        self.screen.blit(panel, (0, 0))
        for i, surface in enumerate(rendered):
            self.screen.blit(surface, (10, 10 + i * _LINE_HEIGHT))

    def present_frame(self) -> None:
        pygame.display.flip()
        self.clock.tick(self.fps)
        self._pressed = set()
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._pressed.add(Key.QUIT)
            elif event.type == pygame.KEYDOWN and event.key in _KEYMAP:
                self._pressed.add(_KEYMAP[event.key])
        self.screen.fill(_BACKGROUND)

    def close(self) -> None:
        pygame.quit()
