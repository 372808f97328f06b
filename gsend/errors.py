"""Error taxonomy for gsend.

Every failure in the upload flow is a GsendError. Each subclass names the
step that failed and the exit code the CLI reports for it.
"""


class GsendError(Exception):
    """Base class for all gsend failures."""

    step: str = "gsend"
    exit_code: int = 1


class InvalidUsageError(GsendError):
    """Fewer than two command-line arguments were given."""

    step = "usage"
    exit_code = 2


class ConfigNotFoundError(GsendError):
    """Config file did not exist; a default one has been written."""

    step = "load config"

    def __init__(self, path: str, message: str | None = None):
        """Initialize config-not-found error.

        Args:
            path: Config file path that was missing
            message: Optional override for the error text
        """
        self.path = path
        super().__init__(message or f"config not found: {path}")


class ConfigWriteError(ConfigNotFoundError):
    """Config file did not exist and the default could not be written."""

    step = "write config"

    def __init__(self, path: str, original_error: Exception):
        """Initialize config write error.

        Args:
            path: Config file path that could not be written
            original_error: OS error raised while writing
        """
        self.original_error = original_error
        super().__init__(
            path, f"config not found: {path}; writing default failed: {original_error}"
        )


class ConfigParseError(GsendError):
    """Config file exists but is not a valid gsend config."""

    step = "parse config"


class SourceNotFoundError(GsendError):
    """Local source file does not exist."""

    step = "validate source"

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"source file not found: {path}")


class DestinationNotFoundError(GsendError):
    """Destination name is not a key in the config locations."""

    step = "select destination"

    def __init__(self, name: str, available: list[str]):
        """Initialize destination-not-found error.

        Args:
            name: Requested destination name
            available: Destination names present in the config
        """
        self.name = name
        self.available = available
        known = ", ".join(available) if available else "none configured"
        super().__init__(
            f"destination not found in config: '{name}'. Available: {known}"
        )


class InvalidDestinationError(GsendError):
    """Destination exists but its host or port cannot be used."""

    step = "select destination"


class CredentialError(GsendError):
    """Password could not be read from the terminal."""

    step = "read password"


class HostKeyConfigError(GsendError):
    """Host key verification is required but cannot be set up."""

    step = "host keys"


class ConnectionError(GsendError):
    """Failed to establish the SSH connection."""

    step = "connect"

    def __init__(self, address: str, original_error: Exception):
        """Initialize connection error.

        Args:
            address: host:port that was dialed
            original_error: Original exception that caused the failure
        """
        self.address = address
        self.original_error = original_error
        super().__init__(f"unable to connect to [{address}]: {original_error}")


class AuthenticationError(ConnectionError):
    """Server rejected every offered authentication method."""

    step = "authenticate"


class TransferError(GsendError):
    """SFTP session could not be used for the upload."""

    step = "transfer"


class RemoteCreateError(TransferError):
    """Remote file could not be created or truncated."""

    step = "create remote file"


class CopyError(TransferError):
    """Copying bytes from the local file to the remote file failed."""

    step = "copy"
