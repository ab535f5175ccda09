# src/langton_ant/utils.py
from __future__ import annotations

import json
import os
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import numpy as np

try:  # Python 3.11+
    import tomllib
except ModuleNotFoundError:  # pragma: no cover
    tomllib = None  # type: ignore


@dataclass
class SimulationResult:
    """Read-only view of a simulation handed to renderers and exporters."""

    cells: np.ndarray
    x: int = 0
    y: int = 0
    facing: int = 0
    stalled: bool = False
    iterations: int = 0
    meta: Optional[Dict[str, Any]] = None

    def ensure_meta(self) -> Dict[str, Any]:
        if self.meta is None:
            self.meta = {}
        return self.meta


def now_str() -> str:
    return time.strftime("%Y%m%d-%H%M%S")


def save_result(
    path: str | os.PathLike[str], result: SimulationResult, *, overwrite: bool = True
) -> None:
    """Export a finished run to .npz for plotting."""
    out_dir = Path(path).parent
    out_dir.mkdir(parents=True, exist_ok=True)
    if not overwrite and Path(path).exists():
        raise FileExistsError(f"{path} already exists")

    meta = dict(result.meta or {})
    out: Dict[str, Any] = {
        "cells": np.asarray(result.cells, dtype=np.int64),
        "ant": np.array(
            [result.x, result.y, result.facing, int(result.stalled)], dtype=np.int64
        ),
        "iterations": np.array([result.iterations], dtype=np.uint64),
    }
    # arrays (e.g. the palette) go to the top level, everything else into meta
    meta_clean = {}
    for key, value in meta.items():
        if isinstance(value, np.ndarray):
            out[key] = value
        else:
            meta_clean[key] = value
    out["meta"] = meta_clean
    np.savez_compressed(path, **out)


def load_result(path: str | os.PathLike[str]) -> SimulationResult:
    """Load an exported run back into a SimulationResult."""
    data = np.load(path, allow_pickle=True)
    if "cells" not in data:
        raise ValueError(f"{path} does not contain a 'cells' array")
    x, y, facing, stalled = (int(v) for v in data["ant"])
    meta: Dict[str, Any] = {}
    if "meta" in data:
        meta_raw = data["meta"]
        meta = meta_raw.item() if hasattr(meta_raw, "item") else dict(meta_raw)
    for key in data.files:
        if key not in {"cells", "ant", "iterations", "meta"}:
            meta[key] = data[key]
    return SimulationResult(
        cells=data["cells"].astype(np.int64),
        x=x,
        y=y,
        facing=facing,
        stalled=bool(stalled),
        iterations=int(data["iterations"][0]),
        meta=meta,
    )


def load_params(path: str | os.PathLike[str]) -> Dict[str, Any]:
    """
    Load simulation parameters from JSON or TOML.
    """
    path = str(path)
    with open(path, "rb") as fh:
        data = fh.read()
    suffix = Path(path).suffix.lower()
    if suffix in {".json", ""}:
        return json.loads(data.decode("utf-8"))
    if suffix in {".toml", ".tml"}:
        if tomllib is None:
            raise RuntimeError("tomllib is unavailable; cannot parse TOML files")
        return tomllib.loads(data.decode("utf-8"))
    raise ValueError(f"Unsupported parameter file format: {suffix}")
