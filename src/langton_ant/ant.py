from __future__ import annotations

from dataclasses import dataclass

from .geometry import Facing

ITERATIONS_MAX: int = 2**64 - 1


@dataclass
class Ant:
    """Position, heading and step count of the ant."""

    x: int
    y: int
    facing: Facing = Facing.N
    stalled: bool = False
    iterations: int = 0

    @classmethod
    def centred(cls, grid_size: int) -> "Ant":
        """Ant in the middle of a ``grid_size`` square grid, facing North."""
        start = int(grid_size / 2.0)
        return cls(x=start, y=start)
