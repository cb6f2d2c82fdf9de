"""Capability registry and consumer composition."""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

# ============================================================================
#                               Wiring errors
# ============================================================================


class WiringError(Exception):
    """Base class for errors detected while composing the application."""


class MissingCapabilityError(WiringError):
    """Raised when consumers require capabilities nothing was registered for.

    Attributes:
        missing (tuple[tuple[str, str, type], ...]): One
            ``(consumer, parameter, capability)`` triple per unmet requirement.
    """

    def __init__(self, missing: Iterable[tuple[str, str, type]]) -> None:
        self.missing = tuple(missing)
        details = ", ".join(
            f"{consumer}.{param} needs {capability.__name__}"
            for consumer, param, capability in self.missing
        )
        super().__init__(f"No provider registered for: {details}")


class DuplicateConsumerError(WiringError):
    """Raised when two consumer specs share a name.

    Attributes:
        names (tuple[str, ...]): Each name declared more than once.
    """

    def __init__(self, names: Iterable[str]) -> None:
        self.names = tuple(names)
        super().__init__(f"Consumer declared more than once: {', '.join(self.names)}")


class DuplicateCapabilityError(WiringError):
    """Raised when a capability is registered twice."""

    def __init__(self, capability: type) -> None:
        super().__init__(f"Capability {capability.__name__} is already registered.")
        self.capability = capability


class IncompatibleCapabilityError(WiringError):
    """Raised when the registered object does not implement the capability."""

    def __init__(self, capability: type, implementation: object) -> None:
        super().__init__(
            f"{type(implementation).__name__} does not implement {capability.__name__}."
        )
        self.capability = capability
        self.implementation = implementation


# ============================================================================
#                                 Registry
# ============================================================================


class CapabilityRegistry:
    """Maps each capability interface to the single object satisfying it."""

    def __init__(self) -> None:
        self._implementations: dict[type, object] = {}

    def register(self, capability: type[T], implementation: T) -> None:
        """Register `implementation` as the object satisfying `capability`.

        Raises:
            DuplicateCapabilityError: If `capability` is already registered.
            IncompatibleCapabilityError: If `implementation` is not an instance
                of `capability`.
        """
        if capability in self._implementations:
            raise DuplicateCapabilityError(capability)
        if not isinstance(implementation, capability):
            raise IncompatibleCapabilityError(capability, implementation)
        self._implementations[capability] = implementation
        logger.debug(
            "Registered %s -> %s", capability.__name__, type(implementation).__name__
        )

    def resolve(self, capability: type[T]) -> T:
        """Return the object registered for `capability`.

        Raises:
            MissingCapabilityError: If nothing is registered for it.
        """
        try:
            return self._implementations[capability]  # type: ignore[return-value]
        except KeyError:
            raise MissingCapabilityError([("<resolve>", "-", capability)]) from None

    def capabilities(self) -> dict[type, object]:
        """Return a copy of the capability -> implementation mapping."""
        return dict(self._implementations)

    def __contains__(self, capability: object) -> bool:
        return capability in self._implementations

    def __len__(self) -> int:
        return len(self._implementations)


# ============================================================================
#                               Composition
# ============================================================================


@dataclass(frozen=True)
class ConsumerSpec:
    """Declares a consumer and the capabilities it needs.

    Attributes:
        name: Key of the built consumer in the mapping returned by `compose`.
        factory: Callable building the consumer; receives one keyword argument
            per entry of `requires`.
        requires: Constructor parameter name -> capability interface.
    """

    name: str
    factory: Callable[..., Any]
    requires: Mapping[str, type] = field(default_factory=dict)


def compose(
    specs: Iterable[ConsumerSpec], registry: CapabilityRegistry
) -> dict[str, Any]:
    """Build every consumer in `specs`, injecting capabilities from `registry`.

    All names and requirements are checked before the first consumer is built,
    so a wiring mistake leaves nothing half-constructed.

    Raises:
        DuplicateConsumerError: If two specs share a name.
        MissingCapabilityError: Listing every unmet requirement.
    """
    specs = tuple(specs)
    names = Counter(spec.name for spec in specs)
    if duplicates := [name for name, count in names.items() if count > 1]:
        logger.error("Consumer declared more than once: %s", ", ".join(duplicates))
        raise DuplicateConsumerError(duplicates)

    missing = [
        (spec.name, param, capability)
        for spec in specs
        for param, capability in spec.requires.items()
        if capability not in registry
    ]
    if missing:
        error = MissingCapabilityError(missing)
        logger.error("%s", error)
        raise error

    consumers: dict[str, Any] = {}
    for spec in specs:
        kwargs = {
            param: registry.resolve(capability)
            for param, capability in spec.requires.items()
        }
        consumers[spec.name] = spec.factory(**kwargs)
        logger.debug(
            "Built consumer %s with %s",
            spec.name,
            {param: type(dep).__name__ for param, dep in kwargs.items()},
        )
    return consumers
