"""Frame loop that advances the simulation at a fixed polling rate."""

from __future__ import annotations

import logging

import numpy as np

from snek.config import GameConfig
from snek.game import Game
from snek.input import InputResolver
from snek.platform import DIRECTIONAL_KEYS, Key, Platform
from snek.render import draw_game

logger = logging.getLogger(__name__)


class GameLoop:
    """Drives one :class:`Game` from a :class:`Platform`, frame by frame.

    Rendering happens every frame; the snake only moves once at least
    ``polling_rate`` seconds have passed since the previous tick.
    """

    def __init__(
        self,
        platform: Platform,
        config: GameConfig | None = None,
    ) -> None:
        self.platform = platform
        self.config = config if config is not None else GameConfig()
        self._seeds = np.random.SeedSequence(self.config.seed)
        self.inputs = InputResolver(stale_after=self.config.stale_after)
        self.game = self._new_game()
        self.last_update = platform.now()
        self.ticks = 0

    def _new_game(self) -> Game:
        rng = np.random.default_rng(self._seeds.spawn(1)[0])
        game = Game(self.config.grid, rng)
        logger.info(
            "New game on a %dx%d grid.", game.grid.width, game.grid.height,
        )
        return game

    def restart(self) -> None:
        """Replace the game and forget all buffered input."""
        self.game = self._new_game()
        self.inputs.clear()

    def frame(self) -> bool:
        """Run one frame. Returns ``False`` when the player quits."""
        now = self.platform.now()

        draw_game(self.game, self.platform)

        for key in DIRECTIONAL_KEYS:
            if self.platform.key_pressed(key):
                self.inputs.push(now, key)

        if self.platform.key_pressed(Key.RESTART):
            self.restart()
            self.platform.present_frame()
            return True

        if self.platform.key_pressed(Key.QUIT):
            logger.info("Quit requested.")
            return False

        if now - self.last_update >= self.config.polling_rate:
            self.inputs.resolve(self.game.snake, now)
            self.game.tick()
            self.ticks += 1
            self.last_update = now

        self.platform.present_frame()
        return True

    def run(self) -> int:
        """Loop until quit, then release the platform."""
        try:
            while self.frame():
                pass
        finally:
            self.platform.close()
        return 0
