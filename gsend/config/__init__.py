"""Configuration module for gsend.

Provides focused classes for different configuration concerns:
- Config: Destinations file (username and named locations)
- HostKeyVerifier: Manages SSH host key verification
- Settings: Environment variable configuration
"""

from gsend.config.host_keys import HostKeyVerifier
from gsend.config.main import (
    CONFIG_FILE_NAME,
    Config,
    config_path,
    load_config,
    write_default_config,
)
from gsend.config.settings import Settings, user_config_dir

__all__ = [
    "CONFIG_FILE_NAME",
    "Config",
    "HostKeyVerifier",
    "Settings",
    "config_path",
    "load_config",
    "user_config_dir",
    "write_default_config",
]
