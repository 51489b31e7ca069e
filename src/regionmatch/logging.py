import logging
import os
from typing import Optional

ROOT_NAME = "regionmatch"
LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Set by set_level() for the rest of the run; wins over the environment
_run_level: Optional[int] = None


def parse_level(level_name: str) -> int:
    """Map a level name such as 'debug' to its logging constant."""
    name = level_name.upper()
    if name not in LEVEL_NAMES:
        raise ValueError(f"Unknown log level {level_name!r}, expected one of {', '.join(LEVEL_NAMES)}")
    return getattr(logging, name)


def _default_level(name: str) -> int:
    # Library modules stay quiet unless asked; the CLI reports progress
    default_level = logging.WARNING
    if name.endswith('.cli'):
        default_level = logging.INFO

    level_name = os.getenv('REGIONMATCH_LOG_LEVEL')
    if level_name is None:
        return default_level
    try:
        return parse_level(level_name)
    except ValueError:
        return default_level


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    logger.setLevel(_run_level if _run_level is not None else _default_level(name))
    return logger


def set_level(level: int) -> None:
    """Apply one level to every package logger, including ones created later."""
    global _run_level
    _run_level = level
    for name in list(logging.Logger.manager.loggerDict):
        if name == ROOT_NAME or name.startswith(ROOT_NAME + "."):
            logging.getLogger(name).setLevel(level)


def reset_level() -> None:
    """Drop a run level so new loggers fall back to the environment defaults."""
    global _run_level
    _run_level = None
