"""
Coverage growth analysis for Langton's Ant rules.

Samples painted-cell count against moves and fits a power law on log-log axes.
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

from matplotlib import pyplot as plt

SRC = Path(__file__).resolve().parents[1]
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from langton_ant import LangtonSimulator, SimulationConfig
from langton_ant.analysis import coverage_curve, growth_exponent


def main():
    parser = argparse.ArgumentParser(description="Fit coverage growth of a Langton's Ant rule")
    parser.add_argument("--rule", default="RL")
    parser.add_argument("--grid-size", type=int, default=200)
    parser.add_argument("--samples", type=int, default=500)
    parser.add_argument("--mps", type=int, default=1000, help="Moves per second (sets moves per sample tick)")
    parser.add_argument("--out", default=None, help="Save the log-log plot here")
    args = parser.parse_args()

    config = SimulationConfig(
        rule=args.rule, moves_per_second=args.mps, grid_size=args.grid_size, square_size=1.0
    )
    sim = LangtonSimulator(config)
    iterations, painted = coverage_curve(sim, args.samples)
    alpha, r_squared = growth_exponent(iterations, painted)

    print(f"Rule {args.rule}: painted ~ N^{alpha:.3f} (R^2 = {r_squared:.4f})")
    if sim.stalled:
        print(f"Ant stalled at N={sim.iterations}")

    if args.out:
        fig, ax = plt.subplots(figsize=(6, 4))
        ax.loglog(iterations, painted, ".", markersize=3, label="painted cells")
        ax.loglog(
            iterations,
            painted[0] * (iterations / iterations[0]) ** alpha,
            "-",
            label=f"fit alpha={alpha:.2f}",
        )
        ax.set_xlabel("moves")
        ax.set_ylabel("painted cells")
        ax.legend()
        fig.savefig(args.out, dpi=150, bbox_inches="tight")
        print(f"Saved figure to {args.out}")
        plt.close(fig)


if __name__ == "__main__":
    main()
