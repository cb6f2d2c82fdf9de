"""Failure translation shared by the capability adapters."""

from collections.abc import Iterator
from contextlib import contextmanager

from concourse.interfaces.errors import CapabilityError, DelegationFailure


@contextmanager
def delegating(capability: type, operation: str) -> Iterator[None]:
    """Re-raise provider exceptions as typed capability errors.

    `CapabilityError`s (e.g. `PreconditionViolation`) propagate unchanged; any
    other `Exception` is wrapped in `DelegationFailure` chained to the original.
    """
    try:
        yield
    except CapabilityError:
        raise
    except Exception as exc:  # pylint: disable=broad-except
        raise DelegationFailure(capability.__name__, operation, exc) from exc
