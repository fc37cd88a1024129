from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from roster.core import config as core_config  # noqa: E402
from roster.core.errors import UnauthorizedError  # noqa: E402
from roster.core.security import FixedCredentials, verify_credentials  # noqa: E402
from roster.services.session_service import SessionGate  # noqa: E402


def test_verify_credentials():
    assert verify_credentials("admin", "admin123", "admin", "admin123")
    assert not verify_credentials("admin", "wrong", "admin", "admin123")
    assert not verify_credentials(None, None, "admin", "admin123")


def test_credentials_repr_hides_password():
    assert "admin123" not in repr(FixedCredentials("admin", "admin123"))


def test_authenticate_and_deauthenticate():
    gate = SessionGate(FixedCredentials("admin", "admin123"))
    assert gate.is_authenticated() is False

    assert gate.authenticate("admin", "nope") is False
    assert gate.is_authenticated() is False

    assert gate.authenticate("admin", "admin123") is True
    assert gate.is_authenticated() is True

    gate.deauthenticate()
    assert gate.is_authenticated() is False
    gate.deauthenticate()
    assert gate.is_authenticated() is False


def test_failed_attempt_keeps_existing_session():
    gate = SessionGate(FixedCredentials("admin", "admin123"))
    gate.authenticate("admin", "admin123")
    assert gate.authenticate("admin", "bad") is False
    assert gate.is_authenticated() is True


def test_require_raises_when_logged_out():
    gate = SessionGate(FixedCredentials("admin", "admin123"))
    with pytest.raises(UnauthorizedError):
        gate.require("add_employee")
    gate.authenticate("admin", "admin123")
    gate.require("add_employee")


def test_custom_checker_is_used():
    class AcceptAll:
        def check(self, username, password):
            return True

    gate = SessionGate(AcceptAll())
    assert gate.authenticate("anyone", "") is True


def test_from_settings_reads_env(monkeypatch):
    monkeypatch.setenv("ROSTER_ADMIN_USERNAME", "boss")
    monkeypatch.setenv("ROSTER_ADMIN_PASSWORD", "s3cret")
    core_config.get_settings.cache_clear()
    try:
        gate = SessionGate.from_settings()
        assert gate.authenticate("admin", "admin123") is False
        assert gate.authenticate("boss", "s3cret") is True
    finally:
        core_config.get_settings.cache_clear()
