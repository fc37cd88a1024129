"""Credential checks for the admin session."""

from __future__ import annotations

import secrets
from dataclasses import dataclass, field


def verify_credentials(username: str | None, password: str | None, expected_username: str, expected_password: str) -> bool:
    """Compare a submitted username/password pair against the expected one."""
    user_ok = secrets.compare_digest((username or "").encode(), expected_username.encode())
    pass_ok = secrets.compare_digest((password or "").encode(), expected_password.encode())
    return user_ok and pass_ok


@dataclass(frozen=True)
class FixedCredentials:
    """The single configured admin username/password pair."""

    username: str
    password: str = field(repr=False)

    def check(self, username: str | None, password: str | None) -> bool:
        return verify_credentials(username, password, self.username, self.password)
