"""
Langton's Ant Simulation Library

Generalised multi-colour Langton's Ant on a bounded square grid:
- rules / geometry: rule table, facings and the turn table
- grid / ant: the mutable state
- stepper: Numba stepping kernel (step, advance)
- simulation: LangtonSimulator driver and configuration
"""

from .ant import ITERATIONS_MAX, Ant
from .geometry import Facing
from .grid import UNPAINTED, Grid
from .rules import Direction, RuleTable
from .simulation import ConfigError, LangtonSimulator, SimulationConfig
from .stepper import advance, step
from . import utils

__all__ = [
    # Core engine
    "Ant",
    "Direction",
    "Facing",
    "Grid",
    "RuleTable",
    "advance",
    "step",
    "ITERATIONS_MAX",
    "UNPAINTED",
    # Driver
    "LangtonSimulator",
    "SimulationConfig",
    "ConfigError",
    # Utilities
    "utils",
]
