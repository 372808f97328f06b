"""Transfer result data models."""

from dataclasses import dataclass


@dataclass
class TransferResult:
    """Outcome of a completed upload."""

    source: str
    remote_path: str
    bytes_written: int
