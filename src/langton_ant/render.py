"""
Matplotlib front end: draws the grid each frame and drives the simulator
from a ``FuncAnimation`` timer.
"""

from __future__ import annotations

import os

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.animation import FuncAnimation

from . import utils
from .palette import colour_cells, scale_image


def frame_image(result: utils.SimulationResult, palette: np.ndarray, square_size: float = 1.0) -> np.ndarray:
    """RGBA image of the grid, ``square_size`` pixels per cell."""
    return scale_image(colour_cells(result.cells, palette), square_size)


def draw_frame(ax, result: utils.SimulationResult, palette: np.ndarray, square_size: float = 1.0):
    """Draw one frame onto ``ax`` and return the image artist."""
    im = ax.imshow(
        frame_image(result, palette, square_size),
        interpolation="nearest",
        origin="upper",
    )
    ax.set_aspect("equal")
    ax.axis("off")
    ax.set_title(f"Langton's Ant - N = {result.iterations}")
    return im


def save_frame(result: utils.SimulationResult, palette: np.ndarray, output: str, dpi: int = 150) -> None:
    fig, ax = plt.subplots(figsize=(6, 6))
    fig.patch.set_facecolor("white")
    draw_frame(ax, result, palette)
    os.makedirs(os.path.dirname(output) if os.path.dirname(output) else ".", exist_ok=True)
    fig.savefig(output, dpi=dpi, bbox_inches="tight", pad_inches=0.1, facecolor="white")
    print(f"Saved figure to {output}")
    plt.close(fig)


def animate(simulator, stop_when_stalled: bool = False) -> FuncAnimation:
    """
    Build the live animation for ``simulator``.

    Every frame advances the simulator by one tick and redraws the grid.
    The frame interval follows the simulator's frames per second.
    """
    square_size = simulator.config.square_size
    dim = simulator.config.window_dim
    fig = plt.figure(figsize=(dim / 100.0, dim / 100.0), dpi=100)
    ax = fig.add_axes([0.0, 0.0, 1.0, 1.0])
    ax.axis("off")
    im = ax.imshow(
        frame_image(simulator.snapshot(), simulator.palette, square_size),
        interpolation="nearest",
    )
    fig.canvas.manager.set_window_title(simulator.title())

    def update(_frame):
        if not (stop_when_stalled and simulator.stalled):
            simulator.tick()
        im.set_data(frame_image(simulator.snapshot(), simulator.palette, square_size))
        fig.canvas.manager.set_window_title(simulator.title())
        return (im,)

    return FuncAnimation(
        fig,
        update,
        interval=1000.0 / simulator.fps,
        blit=False,
        cache_frame_data=False,
    )
