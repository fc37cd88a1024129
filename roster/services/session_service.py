"""Admin session gate (credential check, login flag)."""
from __future__ import annotations

import logging
from typing import Optional, Protocol

from roster.core.config import Settings, get_settings
from roster.core.errors import UnauthorizedError
from roster.core.security import FixedCredentials

logger = logging.getLogger(__name__)


class CredentialChecker(Protocol):
    def check(self, username: str | None, password: str | None) -> bool: ...


class SessionGate:
    """Tracks whether an admin is currently authenticated."""

    def __init__(self, checker: CredentialChecker):
        self._checker = checker
        self._authenticated = False

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "SessionGate":
        settings = settings or get_settings()
        return cls(FixedCredentials(settings.admin_username, settings.admin_password))

    def authenticate(self, username: str | None, password: str | None) -> bool:
        """Set the session flag when the credentials match; a mismatch changes nothing."""
        if self._checker.check(username, password):
            self._authenticated = True
            logger.info("Admin '%s' logged in", username)
            return True
        logger.warning("Rejected login attempt for '%s'", username)
        return False

    def deauthenticate(self) -> None:
        if self._authenticated:
            logger.info("Admin logged out")
        self._authenticated = False

    def is_authenticated(self) -> bool:
        return self._authenticated

    def require(self, action: str) -> None:
        """Raise UnauthorizedError unless an admin is logged in."""
        if not self._authenticated:
            logger.warning("Refused '%s' without an admin session", action)
            raise UnauthorizedError()
