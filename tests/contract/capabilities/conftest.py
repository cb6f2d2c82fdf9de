"""Fixtures for capability contract tests.

Each fixture resolves a capability from a freshly bootstrapped application, so
the contracts are checked against whatever the composition root wires.
"""

import pytest

from concourse.bootstrap import AppContainer
from concourse.flightlist.ports import PassengerNavigator
from concourse.login_api.auth import AuthService
from concourse.login_api.navigation import LoginNavigation
from concourse.seat.ports import BaggageRecorder


@pytest.fixture
def baggage_recorder(app: AppContainer) -> BaggageRecorder:
    return app.capabilities.resolve(BaggageRecorder)


@pytest.fixture
def auth_service(app: AppContainer) -> AuthService:
    return app.capabilities.resolve(AuthService)


@pytest.fixture
def login_navigation(app: AppContainer) -> LoginNavigation:
    return app.capabilities.resolve(LoginNavigation)


@pytest.fixture
def passenger_navigator(app: AppContainer) -> PassengerNavigator:
    return app.capabilities.resolve(PassengerNavigator)
