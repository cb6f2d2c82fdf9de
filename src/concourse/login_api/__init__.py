"""Login API: the authentication capabilities the home module depends on.

Owned by the consumer side. The login module implements these interfaces;
the home module consumes them. Neither imports the other.
"""

from .auth import ANONYMOUS, AuthService, SessionState
from .navigation import LoginNavigation, LoginScreen

__all__ = ["ANONYMOUS", "AuthService", "LoginNavigation", "LoginScreen", "SessionState"]
