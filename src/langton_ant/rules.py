from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Tuple

import numpy as np


class Direction(IntEnum):
    """Turn instruction attached to a colour index."""

    L = 0
    R = 1


RULE_SYMBOLS = {"L": Direction.L, "R": Direction.R}


@dataclass(frozen=True)
class RuleTable:
    """
    Immutable mapping from colour index to turn direction.

    The table length fixes the number of colours N for the whole run.
    """

    directions: Tuple[Direction, ...]

    def __post_init__(self) -> None:
        if len(self.directions) == 0:
            raise ValueError("Rule table needs at least one direction")

    @classmethod
    def from_directions(cls, directions: Iterable[Direction]) -> "RuleTable":
        return cls(tuple(Direction(d) for d in directions))

    @classmethod
    def from_string(cls, rule: str) -> "RuleTable":
        """Build a table from a rule such as "RL" or "RLLR"."""
        try:
            return cls(tuple(RULE_SYMBOLS[c] for c in rule))
        except KeyError as exc:
            raise ValueError(f"Invalid rule symbol {exc.args[0]!r} in {rule!r}") from None

    def __len__(self) -> int:
        return len(self.directions)

    @property
    def num_colours(self) -> int:
        return len(self.directions)

    def lookup(self, colour_index: int) -> Direction:
        if not 0 <= colour_index < len(self.directions):
            raise IndexError(
                f"Colour index {colour_index} outside rule of length {len(self.directions)}"
            )
        return self.directions[colour_index]

    def as_array(self) -> np.ndarray:
        """Turn indices as an int64 array for the stepping kernel."""
        return np.array([int(d) for d in self.directions], dtype=np.int64)

    def __str__(self) -> str:
        return "".join(d.name for d in self.directions)
