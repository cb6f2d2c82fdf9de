"""In-memory authentication service."""

from __future__ import annotations

import hmac
import logging
import threading
from collections.abc import Mapping

from concourse.interfaces.errors import PreconditionViolation
from concourse.interfaces.observability import EventLog
from concourse.login_api.auth import ANONYMOUS, AuthService, SessionState

logger = logging.getLogger(__name__)


class InMemoryAuthService(AuthService):
    """Authenticates against an in-memory account table.

    When `accounts` is None every well-formed login succeeds, which is what the
    demo wiring uses. Otherwise the password must match the account's entry.
    A rejected attempt ends any current session. Passwords are never logged
    and never stored on the session.

    Args:
        accounts: Mapping of username to password, or None to accept any login.
        event_logger: Logger for the per-operation log records.
    """

    def __init__(
        self,
        accounts: Mapping[str, str] | None = None,
        event_logger: logging.Logger | None = None,
    ) -> None:
        self._accounts = dict(accounts) if accounts is not None else None
        self._log = EventLog(event_logger or logger)
        self._session = ANONYMOUS
        self._lock = threading.Lock()

    @property
    def session(self) -> SessionState:
        """The current session."""
        return self._session

    def login(self, username: str, password: str) -> SessionState:
        if not username or not username.strip():
            raise PreconditionViolation(
                "login", "username", username, "must be a non-empty string"
            )
        with self._lock:
            if not self._check_password(username, password):
                self._session = ANONYMOUS
                self._log.warning("Login rejected for user %s", username)
                return self._session
            self._session = SessionState(username=username, authenticated=True)
        self._log.info("User %s logged in", username)
        return self._session

    def logout(self) -> SessionState:
        with self._lock:
            previous, self._session = self._session, ANONYMOUS
        if previous.authenticated:
            self._log.info("User %s logged out", previous.username)
        else:
            self._log.debug("Logout requested with no active session")
        return self._session

    def is_logged_in(self) -> bool:
        logged_in = self._session.authenticated
        self._log.debug("Session active: %s", logged_in)
        return logged_in

    def _check_password(self, username: str, password: str) -> bool:
        if self._accounts is None:
            return True
        if (expected := self._accounts.get(username)) is None:
            return False
        return hmac.compare_digest(expected.encode(), password.encode())
