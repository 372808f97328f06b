"""Application settings from environment variables.

Centralized environment variable parsing and validation.
"""

import logging
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)


def user_config_dir() -> Path:
    """Get the per-user configuration directory for this platform.

    Returns:
        $XDG_CONFIG_HOME or ~/.config on Unix, ~/Library/Application Support
        on macOS, %APPDATA% on Windows
    """
    if sys.platform == "win32":
        appdata = os.getenv("APPDATA")
        if appdata:
            return Path(appdata)
        return Path.home() / "AppData" / "Roaming"

    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support"

    xdg = os.getenv("XDG_CONFIG_HOME")
    # Relative XDG_CONFIG_HOME values are ignored
    if xdg and os.path.isabs(xdg):
        return Path(xdg)
    return Path.home() / ".config"


@dataclass
class Settings:
    """Application settings from environment.

    Handles parsing, validation, and defaults for all env vars.
    """

    # Destinations file
    config_file: str | None = field(default=None)

    # Logging
    log_level: str = field(default="INFO")
    log_colors: bool = field(default=True)

    # Security
    known_hosts: str | None = field(default=None)
    strict_host_key_checking: bool = field(default=True)

    # Agent
    agent_path: str | None = field(default=None)

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from environment variables.

        Returns:
            Settings instance with values from environment
        """
        return cls(
            config_file=os.getenv("GSEND_CONFIG") or None,
            log_level=cls._get_log_level(),
            log_colors=cls._get_bool("GSEND_LOG_COLORS", True),
            known_hosts=os.getenv("GSEND_KNOWN_HOSTS") or None,
            strict_host_key_checking=cls._get_bool(
                "GSEND_STRICT_HOST_KEY_CHECKING", True
            ),
            agent_path=os.getenv("SSH_AUTH_SOCK") or None,
        )

    @staticmethod
    def _get_bool(key: str, default: bool) -> bool:
        """Get boolean from environment.

        Args:
            key: Environment variable key
            default: Default value if not set

        Returns:
            Boolean value from environment or default
        """
        value = os.getenv(key)
        if value is None:
            return default
        return value.lower() in ("1", "true", "yes", "on")

    @staticmethod
    def _get_log_level() -> str:
        """Get log level from environment with validation.

        Returns:
            Upper-cased level name, INFO if unset or unknown
        """
        value = os.getenv("GSEND_LOG_LEVEL", "INFO").upper()
        if value not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            logger.warning("Invalid GSEND_LOG_LEVEL: %s, using INFO", value)
            return "INFO"
        return value
