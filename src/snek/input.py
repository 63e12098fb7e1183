"""Buffered arrow-key input with anti-reversal resolution."""

from __future__ import annotations

import logging
from collections import deque
from typing import NamedTuple

from snek.platform import DIRECTIONAL_KEYS, Key
from snek.snake import Direction, Snake

logger = logging.getLogger(__name__)


class InputEvent(NamedTuple):
    """A key press and the monotonic time it was seen."""

    timestamp: float
    key: Key


class InputResolver:
    """Buffers key presses between polls and picks the next heading.

    Events sit newest-first in :attr:`events`; :meth:`resolve` consumes
    them oldest-first. Events older than *stale_after* seconds are
    dropped without being read.
    """

    def __init__(self, stale_after: float = 0.6) -> None:
        if stale_after <= 0:
            raise ValueError("stale_after must be positive.")
        self.stale_after = stale_after
        self.events: deque[InputEvent] = deque()

    def __len__(self) -> int:
        return len(self.events)

    def push(self, now: float, key: Key) -> None:
        """Record a directional key press seen at *now*."""
        if key not in DIRECTIONAL_KEYS:
            raise ValueError(f"{key.name} is not a directional key.")
        self.events.appendleft(InputEvent(now, key))

    def clear(self) -> None:
        self.events.clear()

    def resolve(self, snake: Snake, now: float) -> Direction | None:
        """Apply the oldest acceptable buffered press to *snake*.

        A press is accepted when it changes the heading and is not a
        reversal of a snake longer than one segment. If the accepted
        heading is safe from the current head, later presses stay
        buffered for the next poll. If it is not, the heading is still
        applied and the rest of the buffer is drained unused.

        Returns the accepted direction, or ``None``.
        """
        current = snake.direction
        head = snake.head
        accepted: Direction | None = None

        while self.events:
            when, key = self.events.pop()
            if now - when > self.stale_after:
                logger.debug("Dropped stale %s press.", key.name)
                continue

            if accepted is not None:
                logger.debug("Discarded %s after unsafe turn.", key.name)
                continue

            candidate = Direction.from_key(key)
            if candidate is current or (
                len(snake) > 1 and candidate is current.opposite()
            ):
                logger.debug(
                    "Rejected %s while heading %s.", candidate.name, current.name,
                )
                continue

            snake.direction = candidate
            accepted = candidate
            if not snake.will_collide(head.moved(candidate)):
                logger.debug("Accepted %s.", candidate.name)
                break
            logger.debug("Accepted unsafe %s.", candidate.name)

        return accepted
