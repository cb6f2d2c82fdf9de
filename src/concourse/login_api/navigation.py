"""Navigation capability driven by authentication state."""

from __future__ import annotations

import abc
from enum import Enum


class LoginScreen(Enum):
    """Screens reachable through `LoginNavigation`."""

    LOGIN = "login"
    HOME = "home"


class LoginNavigation(abc.ABC):
    """Moves the user between the login and home screens."""

    @abc.abstractmethod
    def navigate_to_login(self) -> None:
        """Show the login screen."""

    @abc.abstractmethod
    def navigate_to_home(self) -> None:
        """Show the home screen."""

    @abc.abstractmethod
    def navigate_back(self) -> LoginScreen | None:
        """Return to the previous screen.

        Returns:
            The screen now shown, or None if there was nothing to go back to.
        """
