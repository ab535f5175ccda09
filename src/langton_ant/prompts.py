"""
Console prompts for collecting simulation parameters.

Blank answers fall back to the defaults. Bad answers raise ``ConfigError``
before a simulator is ever built.
"""

from __future__ import annotations

import sys
from typing import TextIO

from .grid import MAX_GRID_SIZE, MIN_GRID_SIZE
from .simulation import (
    MOVES_PER_SECOND_CHOICES,
    ConfigError,
    SimulationConfig,
    validate_config,
    validate_rule,
)

TITLE = (
    "***************************\n"
    "* LANGTON's ANT SIMULATOR *\n"
    "***************************\n"
)

RULE_PROMPT = (
    "Please enter a rule using L and R characters, e.g. LR or RLLR etc. "
    'Press enter to use default "RL". > '
)
MPS_PROMPT = (
    "Please enter number of moves per second "
    "(1, 2, 5, 10, 20, 50, 100, 200, 500, 1000). Press enter to use default 10. > "
)
GRID_PROMPT = (
    "Please enter a grid size as a number of squares (10 - 1000). "
    "Press enter to use default 150 squares. > "
)
SQUARE_PROMPT = (
    "Please enter the size of a grid square as a number of pixels (1 - 20). "
    "Press enter to use default 5 pixels. > "
)


def _ask(prompt: str, default: str, stdin: TextIO, stdout: TextIO) -> str:
    stdout.write(prompt + "\n")
    stdout.flush()
    answer = stdin.readline().strip()
    return answer or default


def ask_for_config(stdin: TextIO | None = None, stdout: TextIO | None = None) -> SimulationConfig:
    """Prompt for rule, speed, grid size and square size."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stdout.write(TITLE + "\n")

    rule = validate_rule(_ask(RULE_PROMPT, "RL", stdin, stdout))

    raw = _ask(MPS_PROMPT, "10", stdin, stdout)
    try:
        mps = int(raw)
    except ValueError:
        raise ConfigError(f"Invalid moves per second = {raw}") from None
    if mps not in MOVES_PER_SECOND_CHOICES:
        raise ConfigError(f"Invalid moves per second = {mps}")

    raw = _ask(GRID_PROMPT, "150", stdin, stdout)
    try:
        grid_size = int(raw)
    except ValueError:
        raise ConfigError(f"Invalid grid size = {raw}") from None
    if not MIN_GRID_SIZE <= grid_size <= MAX_GRID_SIZE:
        raise ConfigError(f"Invalid grid size = {grid_size}")

    raw = _ask(SQUARE_PROMPT, "5", stdin, stdout)
    try:
        square_size = float(raw)
    except ValueError:
        raise ConfigError(f"Invalid grid square size = {raw}") from None

    config = SimulationConfig(
        rule=rule,
        moves_per_second=mps,
        grid_size=grid_size,
        square_size=square_size,
    )
    return validate_config(config)


def print_summary(config: SimulationConfig, stdout: TextIO | None = None) -> None:
    stdout = stdout or sys.stdout
    stdout.write(
        "\n"
        f"Rule = {config.rule}\n"
        f"Moves per second = {config.moves_per_second}\n"
        f"Grid size (number of squares) = {config.grid_size}\n"
        f"Square size (number of pixels) = {config.square_size}\n"
    )
