"""factory.py — On-demand values for dynamic endpoints.

Login tokens and record timestamps are generated per call; everything
else comes from fixtures.

Called by: api/routes/auth.py, api/routes/students.py
Depends on: Nothing
"""

from __future__ import annotations

import secrets
from datetime import datetime

# Lowercase base-32 digits.
_TOKEN_ALPHABET = "0123456789abcdefghijklmnopqrstuv"
_TOKEN_LENGTH = 11

TOKEN_SEPARATOR = "~"

# yyyy-MM-dd hh:mm:ss, on the 12-hour clock the frontend renders as-is.
TIMESTAMP_FORMAT = "%Y-%m-%d %I:%M:%S"


def create_token(login_type: str) -> str:
    """Return a random token carrying the login type after ``~``.

    Example: ``'k3v9q0m1d2a~manager'``.
    """
    body = "".join(secrets.choice(_TOKEN_ALPHABET) for _ in range(_TOKEN_LENGTH))
    return f"{body}{TOKEN_SEPARATOR}{login_type}"


def parse_login_type(token: str | None) -> str | None:
    """Extract the login type from a token, or None if there isn't one."""
    if not token or TOKEN_SEPARATOR not in token:
        return None
    login_type = token.split(TOKEN_SEPARATOR)[1]
    return login_type or None


def timestamp(now: datetime | None = None) -> str:
    """Format ``now`` (default: current local time) for ``ctime``/``updateAt``."""
    return (now or datetime.now()).strftime(TIMESTAMP_FORMAT)
