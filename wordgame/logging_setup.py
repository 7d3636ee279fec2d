"""
logging_setup.py

Logging configuration for the command-line scripts.
"""

import logging
import sys


def setup_logging(level_name="WARNING"):
    """
    Configure root logging on stderr.

    - stdout stays reserved for game output
    - calling it twice does not add a second handler
    """
    level = getattr(logging, (level_name or "WARNING").upper(), logging.WARNING)

    root = logging.getLogger()
    root.setLevel(level)

    if root.handlers:
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root.addHandler(handler)
