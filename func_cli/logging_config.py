"""
Centralized logging configuration for func-cli.
User-facing output goes through the console adapter; logs go to stderr.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"

NOISY_LOGGERS = ("kubernetes", "urllib3")


def setup_logging(verbose: bool = False) -> None:
    """
    Configure logging for the CLI.

    Args:
        verbose: DEBUG level and library logs when True, WARNING otherwise
    """
    log_level = logging.DEBUG if verbose else logging.WARNING

    # Clear any existing handlers
    root = logging.getLogger()
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    root.setLevel(log_level)
    root.addHandler(handler)

    # Silence noisy loggers
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.DEBUG if verbose else logging.WARNING)
