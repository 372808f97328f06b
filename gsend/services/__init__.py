"""Services for gsend."""

from gsend.services.connection import (
    agent_keys,
    build_auth_plan,
    connect,
    open_session,
)
from gsend.services.credentials import read_password
from gsend.services.transfer import MAX_PACKET, remote_target, upload_file
from gsend.services.validation import (
    parse_args,
    print_usage,
    select_location,
    validate_location,
    validate_source,
)

__all__ = [
    "MAX_PACKET",
    "agent_keys",
    "build_auth_plan",
    "connect",
    "open_session",
    "parse_args",
    "print_usage",
    "read_password",
    "remote_target",
    "select_location",
    "upload_file",
    "validate_location",
    "validate_source",
]
