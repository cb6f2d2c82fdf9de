"""Bootstrap (composition root) for CONCOURSE.

The only place that knows every module at once: builds each provider once,
wraps providers in the adapters that satisfy each consumer's declared
capability interfaces, and constructs the consumers with those adapters
injected.

Import rules:
- Entry points import *this* package (not adapters or feature modules).
- This package may import every `concourse.*` package except `entrypoints`.
- Nothing else imports `concourse.bootstrap`.

Public surface:
- `bootstrap()` and the `AppContainer` it returns.
- The registry types, for callers composing their own graphs.
- No business rules live here; this is assembly and lifecycle only.
"""

from .bootstrap import (
    AppContainer,
    ProviderFactories,
    Providers,
    WiringEntry,
    bootstrap,
    build_capabilities,
    build_providers,
    consumer_specs,
)
from .registry import (
    CapabilityRegistry,
    ConsumerSpec,
    DuplicateCapabilityError,
    DuplicateConsumerError,
    IncompatibleCapabilityError,
    MissingCapabilityError,
    WiringError,
    compose,
)

__all__ = [
    "AppContainer",
    "CapabilityRegistry",
    "ConsumerSpec",
    "DuplicateCapabilityError",
    "DuplicateConsumerError",
    "IncompatibleCapabilityError",
    "MissingCapabilityError",
    "ProviderFactories",
    "Providers",
    "WiringEntry",
    "WiringError",
    "bootstrap",
    "build_capabilities",
    "build_providers",
    "compose",
    "consumer_specs",
]
