"""Authentication capability."""

from __future__ import annotations

import abc
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SessionState:
    """The authentication state of the current session.

    Attributes:
        username: The authenticated user, or None for an anonymous session.
        authenticated: True when a user is logged in.
    """

    username: str | None = None
    authenticated: bool = False


ANONYMOUS = SessionState()


class AuthService(abc.ABC):
    """Logs users in and out and reports the session state."""

    @abc.abstractmethod
    def login(self, username: str, password: str) -> SessionState:
        """Attempt to log `username` in.

        Returns:
            The resulting session. A rejected attempt returns an
            unauthenticated session rather than raising.

        Raises:
            PreconditionViolation: If `username` is empty.
        """

    @abc.abstractmethod
    def logout(self) -> SessionState:
        """End the current session and return the (anonymous) session state."""

    @abc.abstractmethod
    def is_logged_in(self) -> bool:
        """Return True when a user is logged in."""
