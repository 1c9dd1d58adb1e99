"""
Logging Configuration

Diagnostics go to stderr; stdout carries only the clone progress lines.
"""

import logging
import sys

# Chatty HTTP libraries, only shown with --verbose
NOISY_LOGGERS = ("urllib3",)


def _level(verbose: bool, quiet: bool) -> int:
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """
    Configure the `shopclone` logger.

    Args:
        verbose: DEBUG level, including urllib3 connection logs
        quiet: WARNING level (retries and failures only)
    """
    level = _level(verbose, quiet)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)-8s %(name)s: %(message)s"))

    logger = logging.getLogger("shopclone")
    logger.setLevel(level)
    logger.handlers.clear()
    logger.addHandler(handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.DEBUG if verbose else logging.WARNING)
