"""
Tests for palette generation, frame rendering and coverage analysis.
"""

import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from langton_ant import UNPAINTED, LangtonSimulator, SimulationConfig
from langton_ant.analysis import coverage_curve, growth_exponent
from langton_ant.palette import BACKGROUND, colour_cells, generate_palette, scale_image
from langton_ant.render import animate, frame_image, save_frame


def test_palette_shape_and_no_background():
    palette = generate_palette(8, np.random.default_rng(0))
    assert palette.shape == (8, 4)
    assert np.all(palette[:, 3] == 1.0)
    for colour in palette:
        assert not np.allclose(colour, BACKGROUND)


def test_palette_needs_colours():
    with pytest.raises(ValueError):
        generate_palette(0)


def test_colour_cells_maps_indices():
    palette = np.array([[1.0, 0.0, 0.0, 1.0], [0.0, 0.0, 1.0, 1.0]])
    cells = np.full((3, 3), UNPAINTED, dtype=np.int64)
    cells[0, 0] = 0
    cells[2, 1] = 1
    image = colour_cells(cells, palette)
    assert image.shape == (3, 3, 4)
    np.testing.assert_array_equal(image[0, 0], palette[0])
    np.testing.assert_array_equal(image[2, 1], palette[1])
    np.testing.assert_array_equal(image[1, 1], BACKGROUND)


def test_scale_image():
    image = np.zeros((2, 2, 4))
    assert scale_image(image, 5.0).shape == (10, 10, 4)
    assert scale_image(image, 1.0).shape == (2, 2, 4)


def test_save_frame(tmp_path):
    sim = LangtonSimulator(SimulationConfig(grid_size=30, seed=0))
    sim.run(max_ticks=50)
    out = tmp_path / "frame.png"
    save_frame(sim.snapshot(), sim.palette, str(out))
    assert out.exists()
    assert frame_image(sim.snapshot(), sim.palette, 2.0).shape == (60, 60, 4)


def test_animation_interval_follows_fps():
    sim = LangtonSimulator(SimulationConfig(moves_per_second=200, grid_size=20, square_size=2.0))
    anim = animate(sim)
    assert anim._interval == pytest.approx(1000.0 / 20)
    anim._func(0)
    assert sim.iterations == 10


def test_growth_exponent_of_power_law():
    n = np.arange(1, 200, dtype=np.float64)
    alpha, r_squared = growth_exponent(n, 3.0 * n ** 0.5)
    assert alpha == pytest.approx(0.5)
    assert r_squared == pytest.approx(1.0)


def test_growth_exponent_needs_samples():
    with pytest.raises(ValueError):
        growth_exponent(np.arange(1, 5), np.arange(1, 5))


def test_coverage_curve_of_classic_ant():
    sim = LangtonSimulator(SimulationConfig(moves_per_second=1000, grid_size=200, square_size=1.0))
    iterations, painted = coverage_curve(sim, samples=50)
    assert len(iterations) == 50
    assert iterations[-1] == 1000
    assert np.all(np.diff(painted) >= 0)
    alpha, _ = growth_exponent(iterations, painted)
    assert 0.0 < alpha < 1.5


class _ScriptedRng:
    """Hands out fixed RGB triples in order."""

    def __init__(self, triples):
        self.triples = list(triples)

    def random(self, n):
        return np.array(self.triples.pop(0), dtype=np.float64)


def test_palette_redraws_repeated_colours():
    rng = _ScriptedRng(
        [
            [0.2, 0.3, 0.4],
            [0.2, 0.3, 0.4],
            [1.0, 1.0, 1.0],
            [0.5, 0.6, 0.7],
        ]
    )
    palette = generate_palette(2, rng)
    np.testing.assert_allclose(palette[0], [0.2, 0.3, 0.4, 1.0])
    np.testing.assert_allclose(palette[1], [0.5, 0.6, 0.7, 1.0])
    assert not rng.triples
