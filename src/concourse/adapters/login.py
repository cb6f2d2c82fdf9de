"""Adapters giving the home module its login capabilities.

The login module implements `concourse.login_api` itself, so these adapters
translate no method names; they only turn the provider's unexpected failures
into `DelegationFailure`, as every other capability crossing does.
"""

from concourse.login_api.auth import AuthService, SessionState
from concourse.login_api.navigation import LoginNavigation, LoginScreen

from .delegation import delegating


class AuthServiceAdapter(AuthService):
    """Implements `AuthService` by forwarding to the login module's service."""

    def __init__(self, service: AuthService) -> None:
        self._service = service

    def login(self, username: str, password: str) -> SessionState:
        with delegating(AuthService, "login"):
            return self._service.login(username, password)

    def logout(self) -> SessionState:
        with delegating(AuthService, "logout"):
            return self._service.logout()

    def is_logged_in(self) -> bool:
        with delegating(AuthService, "is_logged_in"):
            return self._service.is_logged_in()


class LoginNavigationAdapter(LoginNavigation):
    """Implements `LoginNavigation` by forwarding to the login module's navigator."""

    def __init__(self, navigator: LoginNavigation) -> None:
        self._navigator = navigator

    def navigate_to_login(self) -> None:
        with delegating(LoginNavigation, "navigate_to_login"):
            self._navigator.navigate_to_login()

    def navigate_to_home(self) -> None:
        with delegating(LoginNavigation, "navigate_to_home"):
            self._navigator.navigate_to_home()

    def navigate_back(self) -> LoginScreen | None:
        with delegating(LoginNavigation, "navigate_back"):
            return self._navigator.navigate_back()
