"""Result type returned by consumer commands.

Consumer commands walk a small state machine::

    IDLE -> VALIDATING -> DELEGATING -> COMPLETED
                 |             |
                 +-> FAILED <--+

and report where they ended as an `Outcome`. Failures are values, not
exceptions: the cause is retained on the outcome for the caller.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class OperationState(Enum):
    """States of a consumer operation."""

    IDLE = "idle"
    VALIDATING = "validating"
    DELEGATING = "delegating"
    COMPLETED = "completed"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        """Return True for COMPLETED and FAILED."""
        return self in (OperationState.COMPLETED, OperationState.FAILED)


@dataclass(frozen=True, slots=True)
class Outcome(Generic[T]):
    """Terminal result of a consumer operation.

    Attributes:
        state: COMPLETED or FAILED.
        value: The operation's result when completed, otherwise None.
        cause: The exception that moved the operation to FAILED, otherwise None.
    """

    state: OperationState
    value: T | None = None
    cause: Exception | None = None

    def __post_init__(self) -> None:
        if not self.state.is_terminal:
            raise ValueError(f"Outcome state must be terminal, got {self.state.name}")
        if self.state is OperationState.FAILED and self.cause is None:
            raise ValueError("A failed outcome must carry its cause")

    @classmethod
    def completed(cls, value: T) -> Outcome[T]:
        """Build a COMPLETED outcome carrying `value`."""
        return cls(OperationState.COMPLETED, value=value)

    @classmethod
    def failed(cls, cause: Exception) -> Outcome[T]:
        """Build a FAILED outcome carrying `cause`."""
        return cls(OperationState.FAILED, cause=cause)

    @property
    def ok(self) -> bool:
        """Return True when the operation completed."""
        return self.state is OperationState.COMPLETED

    def unwrap(self) -> T | None:
        """Return the value, or raise the retained cause if the operation failed."""
        if self.cause is not None:
            raise self.cause
        return self.value
