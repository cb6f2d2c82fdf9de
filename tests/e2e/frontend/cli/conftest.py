"""Fixtures for end-to-end CLI tests.

Every invocation runs inside an isolated filesystem with the flight recorder
pointed at a relative ``latest.log`` and sequential ids, so output is
predictable and nothing is written to the user's log directory.
"""

import logging
from logging.handlers import MemoryHandler

import pytest
from click.testing import CliRunner
from rich.logging import RichHandler

# pylint: disable=redefined-outer-name

CLI_ENV = {
    "CONCOURSE_LOG_PATH": "latest.log",
    "CONCOURSE_ID_GENERATOR": "sequential",
}


@pytest.fixture
def runner():
    """Return a Click CliRunner with the test environment."""
    return CliRunner(env=CLI_ENV)


@pytest.fixture
def fs(runner):
    """Run the test inside an isolated filesystem."""
    with runner.isolated_filesystem():
        yield


@pytest.fixture(autouse=True)
def restore_logging():
    """Remove the handlers and levels each CLI invocation installs."""
    root = logging.getLogger()
    level = root.level
    levels = {
        name: logger.level
        for name, logger in logging.root.manager.loggerDict.items()
        if isinstance(logger, logging.Logger)
    }
    yield
    for handler in root.handlers[:]:
        if isinstance(handler, (RichHandler, MemoryHandler)):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
    for name, logger in logging.root.manager.loggerDict.items():
        if isinstance(logger, logging.Logger):
            logger.setLevel(levels.get(name, logging.NOTSET))
