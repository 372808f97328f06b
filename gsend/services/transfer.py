"""SFTP upload of a single local file."""

import logging
import os
import posixpath

import asyncssh

from gsend.errors import CopyError, RemoteCreateError, TransferError
from gsend.models import Location, TransferResult

logger = logging.getLogger(__name__)

# Largest SFTP read/write request; also the local read chunk size
MAX_PACKET = 32768


def remote_target(location: Location, source: str) -> str:
    """Remote path for source: <location.path>/<basename(source)>."""
    return posixpath.join(location.path, os.path.basename(source))


async def upload_file(
    conn: asyncssh.SSHClientConnection,
    source: str,
    location: Location,
) -> TransferResult:
    """Stream a local file to the location over SFTP.

    The remote file is created or truncated. The local file is read in
    MAX_PACKET chunks and never loaded whole.

    Args:
        conn: Authenticated SSH connection
        source: Local file path
        location: Destination whose path is the remote directory

    Returns:
        TransferResult with the number of bytes written

    Raises:
        TransferError: If the SFTP subsystem cannot be started
        RemoteCreateError: If the remote file cannot be created
        CopyError: If reading the source or writing the remote file fails
    """
    remote_path = remote_target(location, source)

    try:
        sftp = await conn.start_sftp_client()
    except (OSError, asyncssh.Error) as e:
        raise TransferError(f"unable to start sftp subsystem: {e}") from e

    async with sftp:
        logger.info("Sending %s to %s:%s", source, location.address, remote_path)
        try:
            remote_file = await sftp.open(remote_path, "wb", block_size=MAX_PACKET)
        except (OSError, asyncssh.Error) as e:
            raise RemoteCreateError(f"unable to create {remote_path}: {e}") from e

        written = 0
        async with remote_file:
            try:
                with open(source, "rb") as local_file:
                    while chunk := local_file.read(MAX_PACKET):
                        await remote_file.write(chunk)
                        written += len(chunk)
            except (OSError, asyncssh.Error) as e:
                raise CopyError(
                    f"copy to {remote_path} failed after {written} bytes: {e}"
                ) from e

    logger.info("Wrote %d bytes", written)
    return TransferResult(source=source, remote_path=remote_path, bytes_written=written)
