"""Errors that cross a capability boundary.

Providers raise these; adapters pass them through unchanged (or wrap any
other provider exception in `DelegationFailure`); consumers turn them into a
failed `Outcome` for their callers.
"""

# ============================================================================
#                           Capability errors
# ============================================================================


class CapabilityError(Exception):
    """Base class for errors raised while a capability is being exercised."""


class PreconditionViolation(CapabilityError, ValueError):
    """Raised when a provider operation receives malformed input.

    Attributes:
        operation (str): Name of the provider operation that rejected the input.
        argument (str): Name of the offending argument.
        value (object): The rejected value.
    """

    def __init__(self, operation: str, argument: str, value: object, reason: str):
        super().__init__(
            f"{operation}() rejected {argument}={value!r}: {reason}."
        )
        self.operation = operation
        self.argument = argument
        self.value = value
        self.reason = reason


class DelegationFailure(CapabilityError):
    """Raised when the provider behind a capability fails to perform an operation.

    The triggering exception is retained as `cause` (and chained as
    `__cause__` when raised with ``from``).

    Attributes:
        capability (str): Name of the capability interface being exercised.
        operation (str): Name of the interface operation that failed.
        cause (BaseException): The exception raised by the provider.
    """

    def __init__(self, capability: str, operation: str, cause: BaseException):
        super().__init__(
            f"Capability {capability}.{operation} failed: "
            f"{type(cause).__name__}: {cause}"
        )
        self.capability = capability
        self.operation = operation
        self.cause = cause
