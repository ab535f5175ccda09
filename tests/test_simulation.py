"""
Tests for the driver layer: configuration, tick scheduling, prompts and export.
"""

import io
import json

import numpy as np
import pytest

from langton_ant import ConfigError, LangtonSimulator, SimulationConfig, utils
from langton_ant.prompts import ask_for_config, print_summary
from langton_ant.simulation import tick_schedule, validate_config


def test_default_config_is_valid():
    config = validate_config(SimulationConfig())
    assert config.rule == "RL"
    assert config.window_dim == 750


@pytest.mark.parametrize(
    "kwargs",
    [
        {"rule": ""},
        {"rule": "RLX"},
        {"moves_per_second": 3},
        {"grid_size": 9},
        {"grid_size": 1001},
        {"square_size": 0.5},
        {"square_size": 21.0},
        {"grid_size": 300, "square_size": 4.0},
    ],
)
def test_invalid_configs(kwargs):
    with pytest.raises(ConfigError):
        validate_config(SimulationConfig(**kwargs))


def test_window_limit_message():
    with pytest.raises(ConfigError, match="dim = 1200"):
        validate_config(SimulationConfig(grid_size=200, square_size=6.0))


def test_tick_schedule():
    assert tick_schedule(1) == (1, 1)
    assert tick_schedule(50) == (50, 1)
    assert tick_schedule(100) == (10, 10)
    assert tick_schedule(500) == (50, 10)
    assert tick_schedule(1000) == (50, 20)
    assert tick_schedule(7) == (1, 1)


def test_simulator_setup():
    sim = LangtonSimulator(SimulationConfig(rule="RLR", grid_size=50, square_size=2.0, seed=3))
    assert len(sim.rules) == 3
    assert sim.palette.shape == (3, 4)
    assert (sim.ant.x, sim.ant.y) == (25, 25)
    assert sim.title() == "Langton's Ant - N = 0"


def test_simulator_rejects_bad_config():
    with pytest.raises(ConfigError):
        LangtonSimulator(SimulationConfig(grid_size=5))


def test_tick_advances_moves_per_tick():
    sim = LangtonSimulator(SimulationConfig(moves_per_second=200, grid_size=100))
    sim.tick()
    sim.tick()
    assert sim.ticks == 2
    assert sim.iterations == 20
    assert sim.title() == "Langton's Ant - N = 20"


def test_run_stops_once_stalled():
    sim = LangtonSimulator(SimulationConfig(moves_per_second=1000, grid_size=10, square_size=1.0))
    sim.run(max_ticks=10_000)
    assert sim.stalled
    assert sim.ticks < 10_000
    ticks = sim.ticks
    sim.run(max_ticks=5)
    assert sim.ticks == ticks


def test_palette_seed_is_reproducible():
    a = LangtonSimulator(SimulationConfig(rule="RLLR", seed=7))
    b = LangtonSimulator(SimulationConfig(rule="RLLR", seed=7))
    np.testing.assert_array_equal(a.palette, b.palette)


def test_snapshot_and_export(tmp_path):
    sim = LangtonSimulator(SimulationConfig(rule="LLRR", grid_size=40, seed=1))
    sim.run(max_ticks=100)
    result = sim.snapshot()
    assert result.iterations == 100
    assert result.meta["rule"] == "LLRR"

    path = tmp_path / "out" / "run.npz"
    utils.save_result(path, result)
    loaded = utils.load_result(path)
    np.testing.assert_array_equal(loaded.cells, result.cells)
    assert (loaded.x, loaded.y, loaded.iterations) == (result.x, result.y, 100)
    assert loaded.meta["rule"] == "LLRR"
    np.testing.assert_allclose(loaded.meta["palette"], sim.palette)


def test_config_from_params_file(tmp_path):
    path = tmp_path / "params.json"
    path.write_text(json.dumps({"rule": "RRL", "grid_size": 60, "unused": 1}))
    config = SimulationConfig.from_dict(utils.load_params(path))
    assert config.rule == "RRL"
    assert config.grid_size == 60
    assert config.moves_per_second == 10


def test_prompts_use_defaults_on_blank_input():
    out = io.StringIO()
    config = ask_for_config(io.StringIO("\n\n\n\n"), out)
    assert config == SimulationConfig()
    assert "LANGTON's ANT SIMULATOR" in out.getvalue()


def test_prompts_parse_answers():
    config = ask_for_config(io.StringIO("RLLR\n500\n200\n4\n"), io.StringIO())
    assert config.rule == "RLLR"
    assert config.moves_per_second == 500
    assert config.grid_size == 200
    assert config.square_size == 4.0

    out = io.StringIO()
    print_summary(config, out)
    assert "Rule = RLLR" in out.getvalue()


@pytest.mark.parametrize(
    "answers, message",
    [
        ("RXL\n", "Invalid rule input"),
        ("RL\nfast\n", "Invalid moves per second"),
        ("RL\n3\n", "Invalid moves per second"),
        ("RL\n10\nbig\n", "Invalid grid size"),
        ("RL\n10\n5\n", "Invalid grid size"),
        ("RL\n10\n150\nx\n", "Invalid grid square size"),
        ("RL\n10\n150\n10\n", "Invalid grid dimension"),
    ],
)
def test_prompts_reject_bad_answers(answers, message):
    with pytest.raises(ConfigError, match=message):
        ask_for_config(io.StringIO(answers), io.StringIO())
