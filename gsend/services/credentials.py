"""Interactive password prompt."""

import getpass
import logging

from gsend.errors import CredentialError

logger = logging.getLogger(__name__)

PROMPT = "enter password"


def read_password() -> str:
    """Prompt for a password on the controlling terminal with echo off.

    The password is only held in memory and never logged.

    Returns:
        Password as typed (may be empty)

    Raises:
        CredentialError: If the terminal cannot be read
    """
    print(PROMPT, flush=True)
    try:
        password = getpass.getpass(prompt="")
    except (EOFError, OSError) as e:
        raise CredentialError(f"unable to read password: {str(e) or type(e).__name__}") from e
    logger.info("Got password")
    return password
