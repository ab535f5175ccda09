"""
Coverage analysis: how the painted area grows with the number of moves.

For the classic "RL" ant the painted area grows roughly linearly once
the highway forms; symmetric rules tend to grow like a filled disc.
"""

from __future__ import annotations

from typing import Tuple

import numpy as np
from scipy.stats import linregress


def coverage_curve(simulator, samples: int, ticks_per_sample: int = 1) -> Tuple[np.ndarray, np.ndarray]:
    """
    Advance ``simulator`` and record (iterations, painted cells) after each
    sample. Stops early once the ant has stalled.
    """
    iterations = []
    painted = []
    for _ in range(samples):
        if simulator.stalled:
            break
        for _ in range(ticks_per_sample):
            simulator.tick()
        iterations.append(simulator.iterations)
        painted.append(simulator.grid.painted_count())
    return np.asarray(iterations, dtype=np.float64), np.asarray(painted, dtype=np.float64)


def growth_exponent(iterations: np.ndarray, painted: np.ndarray) -> Tuple[float, float]:
    """
    Fit painted ~ iterations^alpha on log-log axes.

    Returns:
        (alpha, r_squared)
    """
    it = np.asarray(iterations, dtype=np.float64)
    pc = np.asarray(painted, dtype=np.float64)
    valid = (it > 0) & (pc > 0)
    it = it[valid]
    pc = pc[valid]
    if len(it) < 10:
        raise ValueError("Too few valid points for growth analysis after filtering.")
    fit = linregress(np.log(it), np.log(pc))
    return float(fit.slope), float(fit.rvalue ** 2)
