"""
Stepping engine for the multi-colour Langton's Ant.

The work is done by a Numba kernel operating on raw arrays; ``step`` and
``advance`` wrap it so callers only deal with ``RuleTable``, ``Grid`` and
``Ant`` values.

One move, for a running ant:
1.  Read the cell colour (unpainted counts as 0) and look up the turn.
2.  Repaint the cell to the next colour, ``(c + 1) mod N``.
3.  Turn using ``TURN_TABLE``.
4.  If the step counter is saturated, stall without moving or counting.
5.  If the displacement of the new facing leaves the grid, stall in place.
    Otherwise move.
6.  Count the move (unless saturated, see 4).

A stalled ant is terminal: further moves change nothing.
"""

from __future__ import annotations

import numpy as np
from numba import njit

from .ant import ITERATIONS_MAX, Ant
from .geometry import DISPLACEMENT, TURN_TABLE, Facing
from .grid import UNPAINTED, Grid
from .rules import RuleTable

# ant state layout used by the kernel
X, Y, FACING, STALLED = 0, 1, 2, 3


@njit(cache=True)
def _advance_kernel(cells, turns, turn_table, displacement, state, counter, moves, limit):
    """
    Advance the ant ``moves`` times in place.

    Args:
        cells: (dim, dim) int64 colour indices, ``cells[y, x]``
        turns: (N,) int64 turn direction per colour
        turn_table: (4, 2) int64 facing x direction -> facing
        displacement: (4, 2) int64 facing -> (dx, dy)
        state: (4,) int64 [x, y, facing, stalled]
        counter: (1,) uint64 iteration count
        moves: number of moves to attempt
        limit: uint64 saturation value of the counter
    """
    n_colours = turns.shape[0]
    dim = cells.shape[0]
    for _ in range(moves):
        if state[STALLED] != 0:
            break

        x = state[X]
        y = state[Y]
        colour = cells[y, x]
        if colour == UNPAINTED:
            colour = 0
        elif colour < 0 or colour >= n_colours:
            raise IndexError("colour index outside rule")
        direction = turns[colour]

        nxt = colour + 1
        if nxt == n_colours:
            nxt = 0
        cells[y, x] = nxt

        facing = turn_table[state[FACING], direction]
        state[FACING] = facing

        if counter[0] == limit:
            state[STALLED] = 1
            continue

        nx = x + displacement[facing, 0]
        ny = y + displacement[facing, 1]
        if nx < 0 or nx >= dim or ny < 0 or ny >= dim:
            state[STALLED] = 1
        else:
            state[X] = nx
            state[Y] = ny

        counter[0] += np.uint64(1)


def advance(rules: RuleTable, grid: Grid, ant: Ant, moves: int = 1) -> Ant:
    """
    Advance the simulation by ``moves`` moves.

    ``grid`` is repainted in place; the updated ant is returned as a new
    value and ``ant`` itself is left untouched.
    """
    if moves < 1:
        raise ValueError(f"moves must be >= 1, got {moves}")
    if not (0 <= ant.x < grid.dim and 0 <= ant.y < grid.dim):
        raise IndexError(f"Ant at ({ant.x}, {ant.y}) outside {grid.dim}x{grid.dim} grid")
    if not 0 <= int(ant.facing) < 4:
        raise IndexError(f"Invalid facing {ant.facing!r}")

    state = np.array(
        [ant.x, ant.y, int(ant.facing), int(ant.stalled)], dtype=np.int64
    )
    counter = np.array([ant.iterations], dtype=np.uint64)
    _advance_kernel(
        grid.cells,
        rules.as_array(),
        TURN_TABLE,
        DISPLACEMENT,
        state,
        counter,
        moves,
        np.uint64(ITERATIONS_MAX),
    )
    return Ant(
        x=int(state[X]),
        y=int(state[Y]),
        facing=Facing(int(state[FACING])),
        stalled=bool(state[STALLED]),
        iterations=int(counter[0]),
    )


def step(rules: RuleTable, grid: Grid, ant: Ant) -> Ant:
    """Advance by exactly one move."""
    return advance(rules, grid, ant, 1)


__all__ = ["advance", "step"]
