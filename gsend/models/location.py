"""Destination data models."""

from dataclasses import dataclass


@dataclass
class Location:
    """Named remote endpoint from the config file."""

    path: str = ""
    host: str = ""
    port: int = 22

    @property
    def address(self) -> str:
        """Get host:port for logging and error messages."""
        return f"{self.host}:{self.port}"

    def to_dict(self) -> dict[str, str | int]:
        """Serialize in config file field order."""
        return {"path": self.path, "host": self.host, "port": self.port}
