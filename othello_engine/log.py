"""Process-wide logging setup."""

import logging
import sys

from othello_engine.config import CONFIG

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def configure_logging(level: str = None) -> None:
    """Send log records to stderr at ``level`` (defaults to CONFIG.log_level)."""
    logging.basicConfig(
        level=(level or CONFIG.log_level).upper(),
        format=LOG_FORMAT,
        stream=sys.stderr,
        force=True,
    )
