"""SSH session establishment.

Authentication methods are offered in a fixed order: keys held by a
running ssh-agent first, then the typed password. Host key checking
follows the HostKeyVerifier; there is no retry on failure.
"""

import logging
import os
import stat
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

import asyncssh

from gsend.config import HostKeyVerifier
from gsend.errors import AuthenticationError, ConnectionError
from gsend.models import AuthPlan, UploadRequest

logger = logging.getLogger(__name__)


def build_auth_plan(password: str | None, agent_keys: list[Any] | None = None) -> AuthPlan:
    """Build the ordered list of authentication methods.

    Args:
        password: Typed password (empty or None to skip password auth)
        agent_keys: Signers fetched from the ssh-agent

    Returns:
        AuthPlan with publickey before password
    """
    methods: list[str] = []
    keys = list(agent_keys or [])
    if keys:
        methods.append("publickey")
    if password:
        methods.append("password")
    return AuthPlan(methods=tuple(methods), agent_keys=keys, password=password or None)


def agent_socket_reachable(agent_path: str | None) -> bool:
    """Check the agent path names an existing Unix socket."""
    if not agent_path:
        return False
    try:
        return stat.S_ISSOCK(os.stat(agent_path).st_mode)
    except OSError:
        return False


@asynccontextmanager
async def agent_keys(agent_path: str | None) -> AsyncIterator[list[Any]]:
    """Yield the signers held by the ssh-agent, or [] if none is reachable.

    The agent connection stays open for the lifetime of the context so
    asyncssh can ask it to sign during authentication.
    """
    if not agent_socket_reachable(agent_path):
        logger.debug("No ssh-agent at %s, skipping key authentication", agent_path)
        yield []
        return

    try:
        agent = await asyncssh.connect_agent(agent_path)
    except (OSError, asyncssh.Error) as e:
        logger.debug("Cannot connect to ssh-agent at %s: %s", agent_path, e)
        agent = None

    if agent is None:
        yield []
        return

    try:
        try:
            keys = list(await agent.get_keys())
        except (OSError, ValueError, asyncssh.Error) as e:
            logger.debug("ssh-agent at %s did not list keys: %s", agent_path, e)
            keys = []
        logger.debug("ssh-agent offered %d keys", len(keys))
        yield keys
    finally:
        agent.close()
        await agent.wait_closed()


async def _connect(
    request: UploadRequest,
    plan: AuthPlan,
    known_hosts: str | None,
) -> asyncssh.SSHClientConnection:
    """Dial the location with the given auth plan and known_hosts."""
    location = request.location
    return await asyncssh.connect(
        location.host,
        port=location.port,
        username=request.username,
        password=plan.password,
        client_keys=plan.agent_keys or None,
        agent_path=None,
        known_hosts=known_hosts,
        preferred_auth=list(plan.methods),
    )


async def connect(
    request: UploadRequest,
    plan: AuthPlan,
    host_keys: HostKeyVerifier,
) -> asyncssh.SSHClientConnection:
    """Open an authenticated SSH connection to the request's location.

    Args:
        request: Upload request with username and location
        plan: Ordered authentication methods
        host_keys: Host key verification settings

    Returns:
        Authenticated connection

    Raises:
        AuthenticationError: If the server rejects every offered method
        ConnectionError: If the connection cannot be established
    """
    address = request.location.address
    if plan.is_empty:
        raise AuthenticationError(
            address, ValueError("no authentication methods available")
        )

    known_hosts = host_keys.get_known_hosts_path()
    logger.info(
        "Connecting to %s@%s (auth=%s, host_key_check=%s)",
        request.username,
        address,
        ",".join(plan.methods),
        "on" if host_keys.is_enabled() else "off",
    )

    try:
        try:
            conn = await _connect(request, plan, known_hosts)
        except asyncssh.HostKeyNotVerifiable as e:
            if host_keys.strict_checking:
                logger.error(
                    "Host key verification failed for %s: %s. "
                    "Add the host key to %s or set "
                    "GSEND_STRICT_HOST_KEY_CHECKING=false",
                    address,
                    e,
                    known_hosts,
                )
                raise
            logger.warning(
                "Host key not verified for %s (strict mode disabled): %s",
                address,
                e,
            )
            conn = await _connect(request, plan, None)
    except asyncssh.PermissionDenied as e:
        raise AuthenticationError(address, e) from e
    except (OSError, asyncssh.Error) as e:
        raise ConnectionError(address, e) from e

    logger.info("Connected to %s", address)
    return conn


@asynccontextmanager
async def open_session(
    request: UploadRequest,
    host_keys: HostKeyVerifier,
    agent_path: str | None = None,
) -> AsyncIterator[asyncssh.SSHClientConnection]:
    """Connect, authenticate and yield the SSH connection.

    The agent connection and the SSH connection are both closed on exit,
    whether the body succeeds or raises.

    Args:
        request: Upload request with username, password and location
        host_keys: Host key verification settings
        agent_path: ssh-agent socket path (usually SSH_AUTH_SOCK)
    """
    async with agent_keys(agent_path) as keys:
        plan = build_auth_plan(request.password, keys)
        conn = await connect(request, plan, host_keys)
        try:
            yield conn
        finally:
            logger.debug("Closing connection to %s", request.location.address)
            conn.close()
            await conn.wait_closed()
