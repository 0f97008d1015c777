"""Logging setup for the command-line tool.

Library modules log through `loguru` and stay silent until the CLI enables
the `confbind` logger.
"""

from .logger import configure_logging, log_event

__all__ = ["configure_logging", "log_event"]
