"""Fixtures for id_generator contract tests."""

from collections.abc import Iterable

import pytest

from concourse.adapters.id_generators import SequentialIdGenerator, ULIDGenerator
from concourse.interfaces.id_generator import IdGenerator


@pytest.fixture(params=["ulid", "sequential"])
def id_generator(request: pytest.FixtureRequest) -> Iterable[IdGenerator]:
    """Yield a fresh IdGenerator for each backend.

    Extend by adding a name to `params` and a branch below.
    """
    match request.param:
        case "ulid":
            yield ULIDGenerator()
        case "sequential":
            yield SequentialIdGenerator()
        case _:
            raise ValueError(f"unknown id generator type: {request.param}")


@pytest.fixture(params=["ulid", "sequential"])
def prefixed_id_generator(request: pytest.FixtureRequest) -> Iterable[IdGenerator]:
    """Yield a generator configured with the ``BAG-`` prefix."""
    match request.param:
        case "ulid":
            yield ULIDGenerator(prefix="BAG-")
        case "sequential":
            yield SequentialIdGenerator(prefix="BAG-")
        case _:
            raise ValueError(f"unknown id generator type: {request.param}")
