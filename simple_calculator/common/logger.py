"""Shared logger for the calculator package."""
import logging
import sys


LOG_FORMAT: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class StderrHandler(logging.StreamHandler):
    """Stream handler bound to whatever sys.stderr is at emit time."""

    @property
    def stream(self):
        return sys.stderr

    @stream.setter
    def stream(self, value) -> None:
        # The stream is always looked up on sys, never stored
        pass


logger: logging.Logger = logging.getLogger("simple_calculator")

# Diagnostics go to stderr so that stdout only carries the console dialogue
if not logger.handlers:
    _handler = StderrHandler()
    _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(_handler)

# Records are printed by the handler above only, not again by the root logger
logger.propagate = False
logger.setLevel(logging.WARNING)


def set_level(level: str) -> None:
    """
    Change the level of the package logger.

    :param str level: Level name such as "DEBUG" or "WARNING"
    """
    logger.setLevel(level.upper())
