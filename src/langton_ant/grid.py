from __future__ import annotations

import numpy as np

UNPAINTED: int = -1
MIN_GRID_SIZE = 10
MAX_GRID_SIZE = 1000


class Grid:
    """
    Square grid of colour indices, one per cell, stored as ``cells[y, x]``.

    Every cell starts as ``UNPAINTED``. Accessors are bounds-checked and
    raise ``IndexError``; negative coordinates never wrap around.
    """

    def __init__(self, dim: int) -> None:
        self.cells = np.full((dim, dim), UNPAINTED, dtype=np.int64)

    @property
    def dim(self) -> int:
        return self.cells.shape[0]

    def _check(self, x: int, y: int) -> None:
        n = self.cells.shape[0]
        if not (0 <= x < n and 0 <= y < n):
            raise IndexError(f"Cell ({x}, {y}) outside {n}x{n} grid")

    def get(self, x: int, y: int) -> int:
        self._check(x, y)
        return int(self.cells[y, x])

    def set(self, x: int, y: int, colour_index: int) -> None:
        self._check(x, y)
        if colour_index < UNPAINTED:
            raise IndexError(f"Colour index {colour_index} below the unpainted sentinel")
        self.cells[y, x] = colour_index

    def painted_count(self) -> int:
        return int(np.count_nonzero(self.cells != UNPAINTED))

    def snapshot(self) -> np.ndarray:
        """Read-only copy of the cell array."""
        view = self.cells.copy()
        view.setflags(write=False)
        return view
