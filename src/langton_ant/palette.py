"""
Colour palette for painted cells.

Colours are RGBA floats in [0, 1]. The background (unpainted cells) is
white, so no palette entry may be white.
"""

from __future__ import annotations

import numpy as np

from .grid import UNPAINTED

BACKGROUND = np.array([1.0, 1.0, 1.0, 1.0], dtype=np.float64)


def random_colour(rng: np.random.Generator | None = None) -> np.ndarray:
    """Random opaque colour."""
    if rng is None:
        r, g, b = np.random.random(3)
    else:
        r, g, b = rng.random(3)
    return np.array([r, g, b, 1.0], dtype=np.float64)


def generate_palette(n: int, rng: np.random.Generator | None = None) -> np.ndarray:
    """
    Returns an (n, 4) array of distinct random colours, none equal to the
    background.
    """
    if n < 1:
        raise ValueError(f"Palette needs at least one colour, got {n}")
    palette = np.empty((n, 4), dtype=np.float64)
    for i in range(n):
        colour = random_colour(rng)
        while np.allclose(colour, BACKGROUND) or any(
            np.allclose(colour, other) for other in palette[:i]
        ):
            colour = random_colour(rng)
        palette[i] = colour
    return palette


def colour_cells(cells: np.ndarray, palette: np.ndarray) -> np.ndarray:
    """Map a (dim, dim) cell array to a (dim, dim, 4) RGBA image."""
    image = np.empty(cells.shape + (4,), dtype=np.float64)
    image[...] = BACKGROUND
    painted = cells != UNPAINTED
    image[painted] = palette[cells[painted]]
    return image


def scale_image(image: np.ndarray, square_size: float) -> np.ndarray:
    """Blow each cell up to a ``square_size`` x ``square_size`` pixel block."""
    k = max(1, int(square_size))
    return np.repeat(np.repeat(image, k, axis=0), k, axis=1)
