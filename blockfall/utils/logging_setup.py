"""
Logging setup - rich console output plus an optional log file.
"""

import logging
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from .config_loader import LoggingConfig

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(config: Optional[LoggingConfig] = None, console: Optional[Console] = None) -> logging.Logger:
    """
    Configure the blockfall logger hierarchy.

    Safe to call more than once; previous handlers are replaced.

    Args:
        config: Level and optional log file (defaults to LoggingConfig())
        console: Rich console to write to (defaults to stderr)

    Returns:
        The package root logger

    Raises:
        ValueError: If the level name is unknown
    """
    config = config or LoggingConfig()

    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {config.level}")

    root = logging.getLogger("blockfall")
    root.setLevel(level)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    rich_handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        markup=False,
    )
    rich_handler.setLevel(level)
    root.addHandler(rich_handler)

    if config.log_file:
        log_path = Path(config.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        file_handler.setLevel(level)
        root.addHandler(file_handler)

    root.propagate = False
    return root
