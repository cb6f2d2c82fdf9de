"""Shared kernel for CONCOURSE modules.

Holds the few framework-free contracts every module may use: the capability
error taxonomy, the `Outcome` result type returned by consumer commands, the
ID generator port and the `EventLog` sink providers log through.

Dependency rule: this package is independent and must not import any other
`concourse.*` module. Feature modules (`seat`, `baggage`, `login`, ...) may
import it; they must not import each other.
"""

from .errors import CapabilityError, DelegationFailure, PreconditionViolation
from .id_generator import IdGenerator
from .observability import EventLog
from .outcome import OperationState, Outcome

__all__ = [
    "CapabilityError",
    "DelegationFailure",
    "EventLog",
    "IdGenerator",
    "OperationState",
    "Outcome",
    "PreconditionViolation",
]
