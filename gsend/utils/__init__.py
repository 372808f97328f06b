"""Utilities for gsend."""

from gsend.utils.console import ColorfulFormatter, configure_logging
from gsend.utils.validation import validate_host, validate_port

__all__ = [
    "ColorfulFormatter",
    "configure_logging",
    "validate_host",
    "validate_port",
]
