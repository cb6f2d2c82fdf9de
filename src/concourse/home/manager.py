"""Authentication flow behind the home screen."""

from __future__ import annotations

import logging

from concourse.interfaces.errors import CapabilityError
from concourse.interfaces.outcome import OperationState, Outcome
from concourse.login_api.auth import AuthService, SessionState
from concourse.login_api.navigation import LoginNavigation

logger = logging.getLogger(__name__)


class HomeManager:
    """Logs the user in and out and routes them to the matching screen.

    Login and logout walk the same states as a seat selection. Nothing is
    checked locally in VALIDATING (the auth provider validates its own input),
    so the step always passes.

    A login only completes once the user has been sent to the matching screen.
    If navigation fails after the credentials were accepted, the new session
    is ended again so a FAILED login never leaves a user logged in.

    Args:
        auth: Authentication capability.
        navigation: Navigation capability used after each authentication change.
    """

    def __init__(self, auth: AuthService, navigation: LoginNavigation) -> None:
        self._auth = auth
        self._navigation = navigation
        self._state = OperationState.IDLE

    @property
    def state(self) -> OperationState:
        """State reached by the most recent login or logout."""
        return self._state

    def login(self, username: str, password: str) -> Outcome[SessionState]:
        """Log `username` in, then show home (or the login screen if rejected).

        A rejected password is a COMPLETED outcome with an unauthenticated
        session; FAILED is reserved for capability errors.
        """
        self._transition(OperationState.VALIDATING, "login")
        self._transition(OperationState.DELEGATING, "login")
        try:
            session = self._auth.login(username, password)
        except CapabilityError as exc:
            return self._fail("login", exc)

        try:
            if session.authenticated:
                self._navigation.navigate_to_home()
            else:
                self._navigation.navigate_to_login()
        except CapabilityError as exc:
            if session.authenticated:
                self._end_session()
            return self._fail("login", exc)

        self._transition(OperationState.COMPLETED, "login")
        return Outcome.completed(session)

    def logout(self) -> Outcome[SessionState]:
        """End the session and show the login screen."""
        self._transition(OperationState.VALIDATING, "logout")
        self._transition(OperationState.DELEGATING, "logout")
        try:
            session = self._auth.logout()
            self._navigation.navigate_to_login()
        except CapabilityError as exc:
            return self._fail("logout", exc)

        self._transition(OperationState.COMPLETED, "logout")
        return Outcome.completed(session)

    def is_authenticated(self) -> bool:
        """Return True when a user is logged in."""
        return self._auth.is_logged_in()

    def check_authentication(self) -> bool:
        """Send the user to the login screen if nobody is logged in.

        Returns:
            True if a user is logged in.
        """
        logged_in = self._auth.is_logged_in()
        logger.debug("User is logged in: %s", logged_in)
        if not logged_in:
            self._navigation.navigate_to_login()
        return logged_in

    def _end_session(self) -> None:
        try:
            self._auth.logout()
        except CapabilityError as exc:
            logger.error("Session left open after failed login: %s", exc)
        else:
            logger.info("Session ended after failed navigation")

    def _transition(self, state: OperationState, operation: str) -> None:
        logger.debug("%s: %s -> %s", operation.capitalize(), self._state.name, state.name)
        self._state = state

    def _fail(self, operation: str, cause: CapabilityError) -> Outcome[SessionState]:
        self._transition(OperationState.FAILED, operation)
        logger.warning("%s failed: %s", operation.capitalize(), cause)
        return Outcome.failed(cause)
