"""Console logging setup for the prdiff namespace."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Attach a stderr handler to the ``prdiff`` logger.

    Args:
        verbose: Log DEBUG and above when True, WARNING and above otherwise.

    Returns:
        The configured ``prdiff`` namespace logger.
    """
    level = logging.DEBUG if verbose else logging.WARNING

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))

    prdiff_logger = logging.getLogger("prdiff")
    prdiff_logger.setLevel(level)

    # Remove any existing handlers to avoid duplicates on reconfigure
    prdiff_logger.handlers.clear()
    prdiff_logger.addHandler(handler)
    prdiff_logger.propagate = False

    return prdiff_logger
