"""Simple configuration loader for astar_grid."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

import yaml


CONFIG_PATH = Path(__file__).resolve().parents[1] / "config.yaml"


@dataclass
class GridConfig:
    """Dimensions and connectivity of the search grid."""

    rows: int = 24
    columns: int = 14
    diagonal: bool = True


@dataclass
class ViewerConfig:
    """Settings for the pygame viewer."""

    cell_size: int = 40
    update_delay_ms: int = 100
    max_update_delay_ms: int = 200
    delay_step_ms: int = 10
    fps: int = 60


@dataclass
class LoggingConfig:
    global_level: str = "INFO"
    module_levels: Dict[str, str] = field(default_factory=dict)


@dataclass
class Config:
    """Top level configuration dataclass."""

    grid: GridConfig
    viewer: ViewerConfig
    logging: LoggingConfig


def _parse_config(data: dict[str, Any]) -> Config:
    """Convert raw ``data`` into :class:`Config`."""

    grid_data = data.get("grid", {}) or {}
    grid = GridConfig(
        rows=int(grid_data.get("rows", 24)),
        columns=int(grid_data.get("columns", 14)),
        diagonal=bool(grid_data.get("diagonal", True)),
    )

    viewer_data = data.get("viewer", {}) or {}
    viewer = ViewerConfig(
        cell_size=int(viewer_data.get("cell_size", 40)),
        update_delay_ms=int(viewer_data.get("update_delay_ms", 100)),
        max_update_delay_ms=int(viewer_data.get("max_update_delay_ms", 200)),
        delay_step_ms=int(viewer_data.get("delay_step_ms", 10)),
        fps=int(viewer_data.get("fps", 60)),
    )

    logging_data = data.get("logging", {}) or {}
    logging_cfg = LoggingConfig(
        global_level=str(logging_data.get("global_level", "INFO")).upper(),
        module_levels=dict(logging_data.get("module_levels") or {}),
    )

    return Config(grid=grid, viewer=viewer, logging=logging_cfg)


def load_config(path: Path = CONFIG_PATH) -> Config:
    """Load configuration from ``path`` and return a :class:`Config`."""

    if path.is_file():
        raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    else:
        raw = {}
    return _parse_config(raw)


# Load configuration at module import time.
CONFIG = load_config()


__all__ = [
    "CONFIG",
    "Config",
    "GridConfig",
    "LoggingConfig",
    "ViewerConfig",
    "load_config",
]
