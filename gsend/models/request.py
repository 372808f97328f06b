"""Per-run context passed between upload steps."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from gsend.config import Config
    from gsend.models.location import Location


@dataclass
class UploadRequest:
    """Everything one gsend invocation needs, gathered step by step."""

    config: "Config"
    source: str
    location_name: str
    location: "Location"
    password: str = field(default="", repr=False)

    @property
    def username(self) -> str:
        """Remote username from the config file."""
        return self.config.username


@dataclass
class AuthPlan:
    """Ordered SSH authentication methods to offer."""

    methods: tuple[str, ...] = ()
    agent_keys: list[Any] = field(default_factory=list, repr=False)
    password: str | None = field(default=None, repr=False)

    @property
    def is_empty(self) -> bool:
        """Check if no authentication method is available."""
        return not self.methods
