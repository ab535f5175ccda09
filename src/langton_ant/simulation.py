"""
Simulation driver.

``LangtonSimulator`` owns one run: the rule table, the grid, the ant and
the palette. Each ``tick()`` advances the ant by ``moves_per_tick`` moves,
which decouples the simulation rate from the frame rate of the renderer.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional, Tuple

import numpy as np

from . import utils
from .ant import Ant
from .grid import MAX_GRID_SIZE, MIN_GRID_SIZE, Grid
from .palette import generate_palette
from .rules import RuleTable
from .stepper import advance

MOVES_PER_SECOND_CHOICES = (1, 2, 5, 10, 20, 50, 100, 200, 500, 1000)
MAX_WINDOW_DIM = 1000

# moves per second -> (frames per second, moves per frame)
TICK_SCHEDULE = {
    1: (1, 1),
    2: (2, 1),
    5: (5, 1),
    10: (10, 1),
    20: (20, 1),
    50: (50, 1),
    100: (10, 10),
    200: (20, 10),
    500: (50, 10),
    1000: (50, 20),
}


class ConfigError(ValueError):
    """Invalid simulation parameters."""


@dataclass
class SimulationConfig:
    rule: str = "RL"
    moves_per_second: int = 10
    grid_size: int = 150
    square_size: float = 5.0
    seed: Optional[int] = None

    @classmethod
    def from_dict(cls, params: Dict[str, Any]) -> "SimulationConfig":
        known = {k: params[k] for k in asdict(cls()) if k in params}
        return cls(**known)

    @property
    def window_dim(self) -> int:
        return self.grid_size * int(self.square_size)


def validate_rule(rule: str) -> str:
    if not rule or any(c not in "LR" for c in rule):
        raise ConfigError(f"Invalid rule input: {rule}")
    return rule


def validate_config(config: SimulationConfig) -> SimulationConfig:
    """Reject anything the engine cannot run. Returns ``config`` unchanged."""
    validate_rule(config.rule)
    if config.moves_per_second not in MOVES_PER_SECOND_CHOICES:
        raise ConfigError(f"Invalid moves per second = {config.moves_per_second}")
    if not MIN_GRID_SIZE <= config.grid_size <= MAX_GRID_SIZE:
        raise ConfigError(f"Invalid grid size = {config.grid_size}")
    if not 1.0 <= config.square_size <= 20.0:
        raise ConfigError(f"Invalid grid square size = {config.square_size}")
    if config.window_dim > MAX_WINDOW_DIM:
        raise ConfigError(
            "Invalid grid dimension, grid_size * square_size must be "
            f"<= {MAX_WINDOW_DIM}, dim = {config.window_dim}"
        )
    return config


def tick_schedule(moves_per_second: int) -> Tuple[int, int]:
    """Returns (frames per second, moves per tick)."""
    return TICK_SCHEDULE.get(moves_per_second, (1, 1))


class LangtonSimulator:
    """
    The Manager Class.

    Responsibilities:
    1. Validate the configuration and build the rule table.
    2. Own the grid and the ant for the lifetime of the run.
    3. Drive the stepping kernel once per tick.
    """

    def __init__(self, config: SimulationConfig | None = None) -> None:
        self.config = validate_config(config or SimulationConfig())
        rng = np.random.default_rng(self.config.seed)

        self.rules = RuleTable.from_string(self.config.rule)
        self.grid = Grid(self.config.grid_size)
        self.ant = Ant.centred(self.config.grid_size)
        self.palette = generate_palette(len(self.rules), rng)
        self.fps, self.moves_per_tick = tick_schedule(self.config.moves_per_second)
        self.ticks = 0

    @property
    def stalled(self) -> bool:
        return self.ant.stalled

    @property
    def iterations(self) -> int:
        return self.ant.iterations

    def tick(self) -> None:
        """Advance one frame's worth of moves."""
        self.ant = advance(self.rules, self.grid, self.ant, self.moves_per_tick)
        self.ticks += 1

    def run(self, max_ticks: int, stop_when_stalled: bool = True) -> None:
        """Run headless for up to ``max_ticks`` ticks."""
        print(
            f"Running Langton's Ant: rule={self.rules}, "
            f"grid={self.grid.dim}x{self.grid.dim}, moves/tick={self.moves_per_tick}"
        )
        for _ in range(max_ticks):
            if stop_when_stalled and self.ant.stalled:
                break
            self.tick()
        if self.ant.stalled:
            print(f"Ant stalled at ({self.ant.x}, {self.ant.y}) after N={self.ant.iterations}")

    def title(self) -> str:
        return f"Langton's Ant - N = {self.ant.iterations}"

    def snapshot(self) -> utils.SimulationResult:
        """Current state as a read-only SimulationResult."""
        meta = asdict(self.config)
        meta["model"] = "langton"
        meta["ticks"] = self.ticks
        meta["palette"] = self.palette.copy()
        return utils.SimulationResult(
            cells=self.grid.snapshot(),
            x=self.ant.x,
            y=self.ant.y,
            facing=int(self.ant.facing),
            stalled=self.ant.stalled,
            iterations=self.ant.iterations,
            meta=meta,
        )


__all__ = [
    "ConfigError",
    "LangtonSimulator",
    "SimulationConfig",
    "tick_schedule",
    "validate_config",
]
