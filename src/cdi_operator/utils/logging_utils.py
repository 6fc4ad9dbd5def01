"""Logging configuration for the command line entry point."""

import logging
import sys


def setup_logging(verbose: bool = False) -> None:
    """Configure root logging on stderr.

    Args:
        verbose: Enable debug-level logging if True
    """
    level = logging.DEBUG if verbose else logging.INFO

    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
