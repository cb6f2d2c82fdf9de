"""Screen navigation for the login flow."""

from __future__ import annotations

import logging
import threading

from concourse.interfaces.observability import EventLog
from concourse.login_api.navigation import LoginNavigation, LoginScreen

logger = logging.getLogger(__name__)


class LoginNavigator(LoginNavigation):
    """Keeps a back stack of the screens shown to the user.

    There is no UI here; the navigator records where the user was sent so
    presentation code (or a test) can act on it.
    """

    def __init__(self, event_logger: logging.Logger | None = None) -> None:
        self._log = EventLog(event_logger or logger)
        self._stack: list[LoginScreen] = []
        self._history: list[LoginScreen] = []
        self._lock = threading.Lock()

    @property
    def current(self) -> LoginScreen | None:
        """The screen currently shown, if any."""
        with self._lock:
            return self._stack[-1] if self._stack else None

    @property
    def history(self) -> list[LoginScreen]:
        """Every screen navigated to, oldest first (a copy)."""
        with self._lock:
            return list(self._history)

    def navigate_to_login(self) -> None:
        self._push(LoginScreen.LOGIN)

    def navigate_to_home(self) -> None:
        self._push(LoginScreen.HOME)

    def navigate_back(self) -> LoginScreen | None:
        with self._lock:
            if len(self._stack) < 2:
                self._log.debug("Nothing to navigate back to")
                return self._stack[-1] if self._stack else None
            self._stack.pop()
            screen = self._stack[-1]
            self._history.append(screen)
        self._log.info("Navigated back to %s", screen.value)
        return screen

    def _push(self, screen: LoginScreen) -> None:
        with self._lock:
            if self._stack and self._stack[-1] is screen:
                self._log.debug("Already on %s", screen.value)
                return
            self._stack.append(screen)
            self._history.append(screen)
        self._log.info("Navigated to %s", screen.value)
