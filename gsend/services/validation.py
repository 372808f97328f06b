"""Command-line argument and destination validation."""

import logging
from collections.abc import Sequence
from pathlib import Path

from gsend.config import Config
from gsend.errors import (
    DestinationNotFoundError,
    InvalidDestinationError,
    InvalidUsageError,
    SourceNotFoundError,
)
from gsend.models import Location
from gsend.utils.validation import validate_host, validate_port

logger = logging.getLogger(__name__)

USAGE = "USAGE:\ngsend <src> <dest>"


def print_usage() -> None:
    """Print usage text to stdout."""
    print(USAGE)


def parse_args(argv: Sequence[str]) -> tuple[str, str]:
    """Split positional arguments into source path and destination name.

    Args:
        argv: Arguments without the program name

    Returns:
        (source, destination name)

    Raises:
        InvalidUsageError: If fewer than two arguments were given
    """
    if len(argv) < 2:
        print_usage()
        raise InvalidUsageError("invalid usage: expected <src> <dest>")
    if len(argv) > 2:
        logger.debug("Ignoring extra arguments: %s", " ".join(argv[2:]))
    return argv[0], argv[1]


def validate_source(source: str) -> Path:
    """Check the local source is an existing regular file.

    Raises:
        SourceNotFoundError: If source is missing or not a file
    """
    path = Path(source)
    if not path.is_file():
        raise SourceNotFoundError(source)
    return path


def validate_location(name: str, location: Location) -> Location:
    """Check a location's host and port are usable.

    Raises:
        InvalidDestinationError: If host is empty or malformed, or port out of range
    """
    try:
        validate_host(location.host)
        validate_port(location.port)
    except ValueError as e:
        raise InvalidDestinationError(f"destination '{name}' is invalid: {e}") from e
    return location


def select_location(config: Config, name: str) -> Location:
    """Look up a destination by name.

    Args:
        config: Parsed config
        name: Destination name from the command line

    Returns:
        The validated Location

    Raises:
        DestinationNotFoundError: If name is not in config.locations
        InvalidDestinationError: If the location has an unusable host or port
    """
    location = config.locations.get(name)
    if location is None:
        raise DestinationNotFoundError(name, sorted(config.locations))
    return validate_location(name, location)
