#!/usr/bin/env python3
"""
Langton's Ant Runner

Runs a single simulation either in a live matplotlib window or headless,
saving the final grid to .npz.
"""

import argparse
import sys
import time
from pathlib import Path

# Add package source to path
SRC = Path(__file__).resolve().parents[1]
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from langton_ant import LangtonSimulator, SimulationConfig, utils
from langton_ant.prompts import ask_for_config, print_summary
from langton_ant.simulation import ConfigError


def build_config(args) -> SimulationConfig:
    """Config from prompts, a parameter file or command-line flags."""
    if args.interactive:
        return ask_for_config()
    if args.params:
        return SimulationConfig.from_dict(utils.load_params(args.params))
    return SimulationConfig(
        rule=args.rule,
        moves_per_second=args.mps,
        grid_size=args.grid_size,
        square_size=args.square_size,
        seed=args.seed,
    )


def main():
    parser = argparse.ArgumentParser(
        description="Run a multi-colour Langton's Ant simulation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--rule", default="RL", help="Turn rule over L/R (default: RL)")
    parser.add_argument(
        "--mps",
        type=int,
        default=10,
        help="Moves per second: 1, 2, 5, 10, 20, 50, 100, 200, 500 or 1000 (default: 10)",
    )
    parser.add_argument(
        "--grid-size", type=int, default=150, help="Grid side in squares, 10-1000 (default: 150)"
    )
    parser.add_argument(
        "--square-size", type=float, default=5.0, help="Square side in pixels, 1-20 (default: 5)"
    )
    parser.add_argument("--seed", type=int, default=None, help="Palette seed")
    parser.add_argument("--params", default=None, help="JSON/TOML parameter file")
    parser.add_argument(
        "--interactive", action="store_true", help="Ask for the parameters on the console"
    )
    parser.add_argument(
        "--headless", action="store_true", help="Run without a window and save the result"
    )
    parser.add_argument(
        "--ticks", type=int, default=1000, help="Ticks to run when headless (default: 1000)"
    )
    parser.add_argument(
        "--out", default=None, help="Output .npz path when headless (auto-generated if not provided)"
    )

    args = parser.parse_args()

    try:
        config = build_config(args)
        simulator = LangtonSimulator(config)
    except ConfigError as exc:
        print(f"ERROR - {exc}")
        return 1

    print_summary(config)

    if not args.headless:
        import matplotlib.pyplot as plt

        from langton_ant.render import animate

        anim = animate(simulator)  # noqa: F841 - keep a reference while the window is open
        plt.show()
        print(f"Finished after N={simulator.iterations}")
        return 0

    start_time = time.time()
    simulator.run(args.ticks)
    elapsed_time = time.time() - start_time

    if args.out is None:
        output_dir = Path("results")
        output_dir.mkdir(exist_ok=True)
        args.out = str(
            output_dir / f"langton_{config.rule}_G{config.grid_size}_{utils.now_str()}.npz"
        )
    utils.save_result(args.out, simulator.snapshot())

    print("\nSimulation completed")
    print(f"   Time elapsed: {elapsed_time:.2f} seconds")
    print(f"   Moves: {simulator.iterations}")
    print(f"   Stalled: {simulator.stalled}")
    print(f"   Output saved to: {args.out}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
