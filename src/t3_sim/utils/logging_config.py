"""Logging configuration for T3 Sim."""

import logging
import sys


PACKAGE_PREFIX = 't3_sim.'

FORMATS = {
    "simple": "%(name)s - %(levelname)s - %(message)s",
    "detailed": "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s",
}


def setup_logging(level: str = "INFO", format_style: str = "simple") -> None:
    """
    Route T3 engine logs to stdout.

    Accepted placements, evictions, undos and rejected actions are logged
    at DEBUG, so INFO keeps a game quiet.

    Args:
        level: Level name; unknown names fall back to INFO
        format_style: "simple" (logger, level, message) or "detailed"
            (adds timestamp and source line); unknown styles use "simple"
    """
    numeric_level = getattr(logging, str(level).upper(), logging.INFO)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    log_format = FORMATS.get(format_style, FORMATS["simple"])

    logging.basicConfig(
        level=numeric_level,
        format=log_format,
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger by its full module name."""
    return logging.getLogger(name)


def get_game_logger(module_name: str) -> logging.Logger:
    """
    Get a logger named without the package prefix.

    Args:
        module_name: Full module name (e.g., 't3_sim.engine.game_engine')

    Returns:
        Logger named 'engine.game_engine' for the example above
    """
    if module_name.startswith(PACKAGE_PREFIX):
        short_name = module_name[len(PACKAGE_PREFIX):]
    else:
        short_name = module_name

    return logging.getLogger(short_name)
