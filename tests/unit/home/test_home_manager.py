"""Unit tests for HomeManager."""

import logging
from unittest import mock

import pytest

from concourse.home.manager import HomeManager
from concourse.interfaces.errors import DelegationFailure, PreconditionViolation
from concourse.interfaces.outcome import OperationState
from concourse.login.service import InMemoryAuthService
from concourse.login_api.auth import ANONYMOUS, AuthService, SessionState
from concourse.login_api.navigation import LoginNavigation

# pylint: disable=redefined-outer-name

ALICE = SessionState("alice", True)


@pytest.fixture
def auth() -> mock.Mock:
    auth = mock.create_autospec(AuthService, instance=True)
    auth.login.return_value = ALICE
    auth.logout.return_value = ANONYMOUS
    auth.is_logged_in.return_value = False
    return auth


@pytest.fixture
def navigation() -> mock.Mock:
    return mock.create_autospec(LoginNavigation, instance=True)


@pytest.fixture
def home(auth: mock.Mock, navigation: mock.Mock) -> HomeManager:
    return HomeManager(auth, navigation)


def test_successful_login_goes_home(
    home: HomeManager, auth: mock.Mock, navigation: mock.Mock
) -> None:
    outcome = home.login("alice", "secret")

    assert outcome.unwrap() == ALICE
    assert home.state is OperationState.COMPLETED
    auth.login.assert_called_once_with("alice", "secret")
    navigation.navigate_to_home.assert_called_once_with()
    navigation.navigate_to_login.assert_not_called()


def test_rejected_login_shows_login_screen(
    home: HomeManager, auth: mock.Mock, navigation: mock.Mock
) -> None:
    auth.login.return_value = ANONYMOUS

    outcome = home.login("alice", "wrong")

    assert outcome.state is OperationState.COMPLETED
    assert not outcome.unwrap().authenticated
    navigation.navigate_to_login.assert_called_once_with()
    navigation.navigate_to_home.assert_not_called()


@pytest.mark.parametrize(
    "error",
    [
        PreconditionViolation("login", "username", "", "must be a non-empty string"),
        DelegationFailure("AuthService", "login", ConnectionError("offline")),
    ],
)
def test_capability_error_fails_login(
    home: HomeManager, auth: mock.Mock, navigation: mock.Mock, error: Exception
) -> None:
    auth.login.side_effect = error

    outcome = home.login("", "secret")

    assert outcome.state is OperationState.FAILED
    assert outcome.cause is error
    assert home.state is OperationState.FAILED
    navigation.navigate_to_home.assert_not_called()
    navigation.navigate_to_login.assert_not_called()


def test_logout_shows_login_screen(
    home: HomeManager, auth: mock.Mock, navigation: mock.Mock
) -> None:
    outcome = home.logout()

    assert outcome.unwrap() is ANONYMOUS
    auth.logout.assert_called_once_with()
    navigation.navigate_to_login.assert_called_once_with()


def test_logout_failure(home: HomeManager, auth: mock.Mock) -> None:
    auth.logout.side_effect = DelegationFailure("AuthService", "logout", OSError())
    assert home.logout().state is OperationState.FAILED


def test_check_authentication_redirects_when_logged_out(
    home: HomeManager, navigation: mock.Mock
) -> None:
    assert not home.check_authentication()
    navigation.navigate_to_login.assert_called_once_with()


def test_check_authentication_stays_put_when_logged_in(
    home: HomeManager, auth: mock.Mock, navigation: mock.Mock
) -> None:
    auth.is_logged_in.return_value = True
    assert home.check_authentication()
    assert home.is_authenticated()
    navigation.navigate_to_login.assert_not_called()


class TestNavigationFailureAfterLogin:
    """A login whose navigation fails leaves nobody logged in."""

    @staticmethod
    def test_session_is_ended(navigation: mock.Mock) -> None:
        auth = InMemoryAuthService()
        navigation.navigate_to_home.side_effect = DelegationFailure(
            "LoginNavigation", "navigate_to_home", RuntimeError("screen gone")
        )
        home = HomeManager(auth, navigation)

        outcome = home.login("alice", "secret")

        assert outcome.state is OperationState.FAILED
        assert outcome.cause is navigation.navigate_to_home.side_effect
        assert not home.is_authenticated()
        assert home.state is OperationState.FAILED

    @staticmethod
    def test_failed_logout_is_reported(
        home: HomeManager, auth: mock.Mock, navigation: mock.Mock, caplog
    ) -> None:
        navigation.navigate_to_home.side_effect = DelegationFailure(
            "LoginNavigation", "navigate_to_home", RuntimeError("screen gone")
        )
        auth.logout.side_effect = DelegationFailure("AuthService", "logout", OSError())

        with caplog.at_level(logging.ERROR, logger="concourse.home.manager"):
            outcome = home.login("alice", "secret")

        assert outcome.state is OperationState.FAILED
        auth.logout.assert_called_once_with()
        assert "Session left open after failed login" in caplog.text

    @staticmethod
    def test_rejected_login_is_not_logged_out(
        home: HomeManager, auth: mock.Mock, navigation: mock.Mock
    ) -> None:
        auth.login.return_value = ANONYMOUS
        navigation.navigate_to_login.side_effect = DelegationFailure(
            "LoginNavigation", "navigate_to_login", RuntimeError("screen gone")
        )

        assert home.login("alice", "wrong").state is OperationState.FAILED
        auth.logout.assert_not_called()


@pytest.mark.parametrize(
    ("operation", "args", "final"),
    [
        ("login", ("alice", "secret"), "COMPLETED"),
        ("logout", (), "COMPLETED"),
    ],
)
def test_state_walks_validating_then_delegating(
    home: HomeManager, caplog, operation: str, args: tuple, final: str
) -> None:
    with caplog.at_level(logging.DEBUG, logger="concourse.home.manager"):
        getattr(home, operation)(*args)

    label = operation.capitalize()
    assert [m for m in caplog.messages if m.startswith(f"{label}: ")] == [
        f"{label}: IDLE -> VALIDATING",
        f"{label}: VALIDATING -> DELEGATING",
        f"{label}: DELEGATING -> {final}",
    ]


def test_failed_login_walks_to_failed(home: HomeManager, auth: mock.Mock, caplog) -> None:
    auth.login.side_effect = DelegationFailure("AuthService", "login", OSError())

    with caplog.at_level(logging.DEBUG, logger="concourse.home.manager"):
        home.login("alice", "secret")

    assert "Login: VALIDATING -> DELEGATING" in caplog.messages
    assert "Login: DELEGATING -> FAILED" in caplog.messages
