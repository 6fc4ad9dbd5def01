"""Utility functions for the CDI operator."""

from .logging_utils import setup_logging
from .manifest import render_manifests, to_manifests
from .validation import validate_args

__all__ = [
    "render_manifests",
    "setup_logging",
    "to_manifests",
    "validate_args",
]
