"""Global pytest fixtures for CONCOURSE."""

import pytest

from concourse.bootstrap import AppContainer, bootstrap
from concourse.config import Settings


@pytest.fixture
def settings() -> Settings:
    """Default settings with predictable ids (``BAG-000001``, ``PAX-000001``...)."""
    return Settings(id_generator="sequential")


@pytest.fixture
def app(settings: Settings) -> AppContainer:
    """A freshly composed application."""
    return bootstrap(settings)
