"""Logging configuration for tasktrack."""

import logging
import sys
from typing import Union

_HANDLER_NAME = "tasktrack-console"


def setup_logging(level: Union[int, str] = logging.INFO) -> None:
    """Send log records to stderr with timestamps.

    Safe to call more than once: the handler is installed only the first
    time, later calls just change the level.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root = logging.getLogger()
    root.setLevel(level)

    for h in root.handlers:
        if h.get_name() == _HANDLER_NAME:
            h.setLevel(level)
            return

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    ch = logging.StreamHandler(sys.stderr)
    ch.set_name(_HANDLER_NAME)
    ch.setLevel(level)
    ch.setFormatter(fmt)
    root.addHandler(ch)

    # SQL echo goes through logging too; keep it out unless asked for
    if level > logging.DEBUG:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
