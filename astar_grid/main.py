# astar_grid/main.py
"""Logging bootstrap and the interactive viewer loop."""

from __future__ import annotations

import logging
from pathlib import Path

import pygame

from .config import CONFIG, Config, LoggingConfig, load_config
from .gui import input as gui_input
from .gui.renderer import Renderer
from .gui.session import Session
from .gui.window import Window


logger = logging.getLogger(__name__)


def configure_logging(cfg: LoggingConfig) -> None:
    """Apply the global and per-module log levels from ``cfg``."""

    numeric_level = getattr(logging, cfg.global_level, logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        force=True
    )
    for module_name, level_str in cfg.module_levels.items():
        module_numeric_level = getattr(logging, str(level_str).upper(), None)
        if isinstance(module_numeric_level, int):
            logging.getLogger(module_name).setLevel(module_numeric_level)
        else:
            logger.warning("Invalid log level '%s' for module '%s' in config.", level_str, module_name)


def bootstrap(config_path: str | Path | None = None) -> tuple[Config, Session]:
    """Load configuration, set up logging and build the editing session."""

    cfg = CONFIG if config_path is None else load_config(Path(config_path))
    configure_logging(cfg.logging)

    session = Session(
        cfg.grid.rows,
        cfg.grid.columns,
        diagonal=cfg.grid.diagonal,
        update_delay_ms=cfg.viewer.update_delay_ms,
        max_update_delay_ms=cfg.viewer.max_update_delay_ms,
    )
    logger.info(
        "[Bootstrap] Grid %sx%s, diagonal=%s, delay=%sms",
        cfg.grid.rows, cfg.grid.columns, cfg.grid.diagonal, session.update_delay_ms,
    )
    return cfg, session


def main(config_path: str | Path | None = None) -> None:
    cfg, session = bootstrap(config_path)

    pygame.init()
    cell_size = cfg.viewer.cell_size
    window = Window((cfg.grid.rows * cell_size, cfg.grid.columns * cell_size))
    renderer = Renderer(window, cell_size)
    state = {"running": True, "pressing_key": None, "delay_step_ms": cfg.viewer.delay_step_ms}
    clock = pygame.time.Clock()

    logger.info("Viewer started. Click to place barriers, hold S/E to place start/end, Space to run.")
    try:
        while state["running"]:
            gui_input.handle_events(session, renderer, state)
            if not state["running"]:
                break
            renderer.update(session)
            window.refresh()
            clock.tick(cfg.viewer.fps)
    except KeyboardInterrupt:
        logger.info("KeyboardInterrupt caught. Shutting down...")
    finally:
        logger.info("Viewer shutting down...")
        session.shutdown()
        if pygame.get_init():
            pygame.quit()


if __name__ == "__main__":
    main()
