"""SSH host key verification.

Host identity checking is an explicit choice: either a known_hosts file
is used, or verification is switched off with GSEND_KNOWN_HOSTS=none.
"""

import logging
import os
from pathlib import Path

from gsend.errors import HostKeyConfigError

logger = logging.getLogger(__name__)


class HostKeyVerifier:
    """SSH host key verification manager.

    Resolves which known_hosts file asyncssh should check against.
    """

    def __init__(
        self,
        known_hosts_path: str | None = None,
        strict_checking: bool = True,
    ):
        """Initialize host key verifier.

        Args:
            known_hosts_path: Path to known_hosts file or 'none' to disable
            strict_checking: Reject unknown host keys

        Raises:
            HostKeyConfigError: If strict mode and file missing
        """
        self.strict_checking = strict_checking
        self._known_hosts = self._resolve_known_hosts(known_hosts_path)

    def _resolve_known_hosts(self, env_value: str | None) -> str | None:
        """Resolve known_hosts path.

        Returns:
            Path to known_hosts file or None to disable verification

        Raises:
            HostKeyConfigError: If strict mode and file missing
        """
        if env_value and env_value.lower() == "none":
            logger.critical(
                "SSH HOST KEY VERIFICATION DISABLED (GSEND_KNOWN_HOSTS=none). "
                "The server identity will not be checked."
            )
            return None

        if env_value:
            path = Path(os.path.expanduser(env_value))
        else:
            path = Path.home() / ".ssh" / "known_hosts"

        if not path.exists():
            if self.strict_checking:
                raise HostKeyConfigError(
                    f"host key verification required but known_hosts "
                    f"not found at {path}. Add the host key with "
                    f"'ssh-keyscan -p <port> <host> >> {path}', point "
                    f"GSEND_KNOWN_HOSTS at another file, or set "
                    f"GSEND_KNOWN_HOSTS=none to disable verification"
                )
            logger.warning(
                "known_hosts not found at %s, verification disabled. "
                "This is insecure!",
                path,
            )
            return None

        return str(path)

    def get_known_hosts_path(self) -> str | None:
        """Get path to known_hosts file.

        Returns:
            Path string or None if verification disabled
        """
        return self._known_hosts

    def is_enabled(self) -> bool:
        """Check if host key verification is enabled."""
        return self._known_hosts is not None
