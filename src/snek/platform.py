"""Boundary between the game core and a graphics/input backend."""

from __future__ import annotations

import enum
from collections.abc import Sequence
from typing import Protocol


class Key(enum.Enum):
    """Keys the game reacts to."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    QUIT = "quit"
    RESTART = "restart"


DIRECTIONAL_KEYS: tuple[Key, ...] = (Key.UP, Key.DOWN, Key.LEFT, Key.RIGHT)


class Color(enum.Enum):
    """Semantic colors. Backends map them to actual pixels."""

    HEAD = "head"
    BODY = "body"
    BODY_ALT = "body_alt"
    APPLE = "apple"
    GRID = "grid"
    TEXT = "text"


class Platform(Protocol):
    """Capabilities the game loop needs from its host."""

    def now(self) -> float:
        """Monotonic time in seconds."""
        ...

    def key_pressed(self, key: Key) -> bool:
        """Whether *key* went down during the current frame."""
        ...

    def draw_cell(self, x: int, y: int, color: Color) -> None: ...

    def draw_grid_line(self, vertical: bool, index: int) -> None: ...

    def draw_text(self, lines: Sequence[str]) -> None: ...

    def present_frame(self) -> None:
        """Show the frame and block until the next one starts."""
        ...

    def close(self) -> None: ...
