"""Runtime configuration for a game session."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

from snek.grid import Grid

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameConfig:
    """Grid size, simulation cadence and window settings.

    Validated once on construction. Supports JSON loading so a session
    can be described in a file.
    """

    # Grid
    grid_width: int = 20
    grid_height: int = 10

    # Simulation
    polling_rate: float = 0.2
    stale_factor: float = 3.0
    seed: int | None = None

    # Window
    cell_px: int = 40
    fps: int = 60

    def __post_init__(self) -> None:
        if self.grid_width < 1 or self.grid_height < 1:
            raise ValueError("grid_width and grid_height must each be at least 1.")
        if self.polling_rate <= 0:
            raise ValueError("polling_rate must be positive.")
        if self.stale_factor <= 0:
            raise ValueError("stale_factor must be positive.")
        if self.cell_px < 1:
            raise ValueError("cell_px must be at least 1.")
        if self.fps < 1:
            raise ValueError("fps must be at least 1.")

    @property
    def grid(self) -> Grid:
        return Grid(self.grid_width, self.grid_height)

    @property
    def stale_after(self) -> float:
        """Age in seconds after which a buffered key press is ignored."""
        return self.polling_rate * self.stale_factor

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        config = cls(**raw)
        logger.info("Config loaded from %s", path)
        return config
