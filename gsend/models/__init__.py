"""Data models for gsend."""

from gsend.models.location import Location
from gsend.models.request import AuthPlan, UploadRequest
from gsend.models.transfer import TransferResult

__all__ = [
    "AuthPlan",
    "Location",
    "TransferResult",
    "UploadRequest",
]
