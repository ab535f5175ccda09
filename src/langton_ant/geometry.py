"""
Facing and turn geometry.

Facings are stored in cyclic clockwise order so that a right turn is
``+1`` and a left turn is ``-1`` modulo 4. The explicit tables below are
what the stepping kernel reads.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Tuple

import numpy as np

from .rules import Direction


class Facing(IntEnum):
    N = 0
    E = 1
    S = 2
    W = 3


# TURN_TABLE[facing, direction] -> new facing
TURN_TABLE = np.array(
    [
        [Facing.W, Facing.E],  # N
        [Facing.N, Facing.S],  # E
        [Facing.E, Facing.W],  # S
        [Facing.S, Facing.N],  # W
    ],
    dtype=np.int64,
)

# DISPLACEMENT[facing] -> (dx, dy); y grows downwards
DISPLACEMENT = np.array(
    [
        [0, -1],  # N
        [1, 0],  # E
        [0, 1],  # S
        [-1, 0],  # W
    ],
    dtype=np.int64,
)


def turn(facing: Facing, direction: Direction) -> Facing:
    return Facing(int(TURN_TABLE[int(facing), int(direction)]))


def displacement(facing: Facing) -> Tuple[int, int]:
    dx, dy = DISPLACEMENT[int(facing)]
    return int(dx), int(dy)
