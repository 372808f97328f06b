"""Destinations file: username plus named upload locations.

The file lives at <user config dir>/gsend/gsend.yaml:

    username: alice
    locations:
      backup:
        path: /srv/backup
        host: nas.local
        port: 22
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from gsend.config.settings import Settings, user_config_dir
from gsend.errors import ConfigNotFoundError, ConfigParseError, ConfigWriteError
from gsend.models import Location

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "gsend.yaml"


@dataclass
class Config:
    """Parsed destinations file."""

    username: str = ""
    locations: dict[str, Location] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> "Config":
        """Build config from a parsed YAML document.

        Args:
            data: Result of yaml.safe_load (None for an empty file)

        Returns:
            Config instance

        Raises:
            ConfigParseError: If the document does not have the config shape
        """
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ConfigParseError("config must be a mapping at the top level")

        username = data.get("username") or ""
        raw_locations = data.get("locations") or {}
        if not isinstance(raw_locations, dict):
            raise ConfigParseError("'locations' must be a mapping of name to location")

        locations: dict[str, Location] = {}
        for name, raw in raw_locations.items():
            locations[str(name)] = _parse_location(str(name), raw)

        return cls(username=str(username), locations=locations)

    def to_dict(self) -> dict[str, Any]:
        """Serialize in config file field order."""
        return {
            "username": self.username,
            "locations": {
                name: location.to_dict() for name, location in self.locations.items()
            },
        }


def _parse_location(name: str, raw: Any) -> Location:
    """Parse a single location entry."""
    if raw is None:
        return Location()
    if not isinstance(raw, dict):
        raise ConfigParseError(f"location '{name}' must be a mapping")

    port = raw.get("port")
    if port is None:
        port = 22
    # bool is an int subclass; 'port: yes' is not a port
    if isinstance(port, bool) or not isinstance(port, int):
        raise ConfigParseError(f"location '{name}': port must be an integer, got {port!r}")

    return Location(
        path=str(raw.get("path") or ""),
        host=str(raw.get("host") or ""),
        port=port,
    )


def config_path(settings: Settings | None = None) -> Path:
    """Resolve the config file location.

    Args:
        settings: Settings with an optional GSEND_CONFIG override

    Returns:
        Path to the config file (may not exist yet)
    """
    if settings is not None and settings.config_file:
        return Path(settings.config_file).expanduser()
    return user_config_dir() / "gsend" / CONFIG_FILE_NAME


def write_default_config(path: Path) -> Path:
    """Write an empty config, creating parent directories.

    Args:
        path: Where to write the config

    Returns:
        The path written

    Raises:
        OSError: If the directory or file cannot be created
    """
    logger.info("Writing new config: %s", path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        yaml.safe_dump(Config().to_dict(), f, default_flow_style=False, sort_keys=False)
    return path


def load_config(path: Path) -> Config:
    """Read and parse the config file.

    A missing file is replaced by an empty default and the run is aborted
    so the user can fill it in.

    Args:
        path: Config file path

    Returns:
        Parsed Config

    Raises:
        ConfigNotFoundError: If the file did not exist (default written)
        ConfigWriteError: If the file did not exist and writing failed
        ConfigParseError: If the file is not valid YAML or has the wrong shape
    """
    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        try:
            write_default_config(path)
        except OSError as e:
            raise ConfigWriteError(str(path), e) from e
        raise ConfigNotFoundError(str(path)) from None
    except OSError as e:
        raise ConfigParseError(f"cannot read config {path}: {e}") from e

    logger.info("Found config: %s", path)
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigParseError(f"invalid YAML in {path}: {e}") from e

    config = Config.from_dict(data)
    logger.info("Config parsed (%d locations)", len(config.locations))
    return config
