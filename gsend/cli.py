"""Command-line entry point.

    gsend <src> <dest>

Looks <dest> up in the user's gsend.yaml, asks for a password and uploads
<src> into the destination directory over SFTP.
"""

import asyncio
import logging
import sys
from collections.abc import Sequence

from gsend.config import HostKeyVerifier, Settings, config_path, load_config
from gsend.errors import ConfigNotFoundError, ConfigWriteError, GsendError
from gsend.models import TransferResult, UploadRequest
from gsend.services import (
    open_session,
    parse_args,
    read_password,
    select_location,
    upload_file,
    validate_source,
)
from gsend.utils.console import configure_logging

logger = logging.getLogger(__name__)


def prepare_request(argv: Sequence[str], settings: Settings) -> UploadRequest:
    """Run every local step before the network is touched.

    Arguments are checked before the config is read, and the source and
    destination are checked before the password prompt.

    Raises:
        GsendError: On the first failing step
    """
    source, location_name = parse_args(argv)

    path = config_path(settings)
    logger.debug("Config file: %s", path)
    config = load_config(path)

    validate_source(source)
    location = select_location(config, location_name)

    return UploadRequest(
        config=config,
        source=source,
        location_name=location_name,
        location=location,
    )


async def send(
    request: UploadRequest,
    host_keys: HostKeyVerifier,
    agent_path: str | None = None,
) -> TransferResult:
    """Connect to the request's location and upload its source file."""
    async with open_session(request, host_keys, agent_path) as conn:
        return await upload_file(conn, request.source, request.location)


def main(argv: Sequence[str] | None = None) -> int:
    """Run gsend and return the process exit code.

    Args:
        argv: Arguments without the program name (default: sys.argv[1:])

    Returns:
        0 on a complete upload, non-zero on any failure
    """
    settings = Settings.from_env()
    configure_logging(settings.log_level, settings.log_colors)
    args = sys.argv[1:] if argv is None else list(argv)

    try:
        request = prepare_request(args, settings)
        host_keys = HostKeyVerifier(
            known_hosts_path=settings.known_hosts,
            strict_checking=settings.strict_host_key_checking,
        )
        request.password = read_password()
        result = asyncio.run(send(request, host_keys, settings.agent_path))
    except ConfigNotFoundError as e:
        logger.error("%s: %s", e.step, e)
        if not isinstance(e, ConfigWriteError):
            logger.info(
                "Wrote a default config to %s; add your username and "
                "locations, then run gsend again",
                e.path,
            )
        return e.exit_code
    except GsendError as e:
        logger.error("%s: %s", e.step, e)
        return e.exit_code
    except KeyboardInterrupt:
        logger.error("Interrupted")
        return 130

    logger.info(
        "Uploaded %s to %s:%s (%d bytes)",
        result.source,
        request.location_name,
        result.remote_path,
        result.bytes_written,
    )
    return 0


def run() -> None:
    """Console script entry point."""
    sys.exit(main())
