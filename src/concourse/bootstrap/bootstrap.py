"""Bootstrap the providers, adapters and consumers of CONCOURSE."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from functools import partial

from concourse.adapters.baggage import BaggageRecorderAdapter
from concourse.adapters.id_generators import SequentialIdGenerator, ULIDGenerator
from concourse.adapters.login import AuthServiceAdapter, LoginNavigationAdapter
from concourse.adapters.passenger import PassengerNavigatorAdapter
from concourse.baggage.service import BaggageService
from concourse.config import Settings
from concourse.flightlist.manager import FlightListManager
from concourse.flightlist.ports import PassengerNavigator
from concourse.home.manager import HomeManager
from concourse.interfaces.id_generator import IdGenerator
from concourse.login.navigation import LoginNavigator
from concourse.login.service import InMemoryAuthService
from concourse.login_api.auth import AuthService
from concourse.login_api.navigation import LoginNavigation
from concourse.passenger.manager import PassengerManager
from concourse.seat.manager import SeatManager
from concourse.seat.ports import BaggageRecorder

from .registry import CapabilityRegistry, ConsumerSpec, compose

logger = logging.getLogger(__name__)


# ============================================================================
#                               Providers
# ============================================================================


def build_id_generator(settings: Settings, prefix: str) -> IdGenerator:
    """Build the ID generator selected by `settings`."""
    match settings.id_generator:
        case "ulid":
            return ULIDGenerator(prefix=prefix)
        case "sequential":
            return SequentialIdGenerator(prefix=prefix)
        case _:
            raise ValueError(f"unknown id generator kind: {settings.id_generator}")


def build_baggage_service(settings: Settings) -> BaggageService:
    return BaggageService(
        id_generator=build_id_generator(settings, "BAG-"),
        fee_per_kg=settings.fee_per_kg,
    )


def build_auth_service(settings: Settings) -> AuthService:  # pylint: disable=unused-argument
    return InMemoryAuthService()


def build_login_navigation(settings: Settings) -> LoginNavigation:  # pylint: disable=unused-argument
    return LoginNavigator()


def build_passenger_manager(settings: Settings) -> PassengerManager:
    return PassengerManager(id_generator=build_id_generator(settings, "PAX-"))


@dataclass(frozen=True)
class ProviderFactories:
    """Build-time selection of the concrete providers to wire.

    Each factory receives the `Settings` and is called exactly once per
    `bootstrap()`.
    """

    baggage: Callable[[Settings], BaggageService] = build_baggage_service
    auth: Callable[[Settings], AuthService] = build_auth_service
    login_navigation: Callable[[Settings], LoginNavigation] = build_login_navigation
    passengers: Callable[[Settings], PassengerManager] = build_passenger_manager


@dataclass(frozen=True)
class Providers:
    """The provider instances shared by every consumer of one container."""

    baggage: BaggageService
    auth: AuthService
    login_navigation: LoginNavigation
    passengers: PassengerManager


def build_providers(settings: Settings, factories: ProviderFactories) -> Providers:
    """Construct each provider once."""
    providers = Providers(
        baggage=factories.baggage(settings),
        auth=factories.auth(settings),
        login_navigation=factories.login_navigation(settings),
        passengers=factories.passengers(settings),
    )
    logger.debug(
        "Providers built: %s",
        {name: type(p).__name__ for name, p in vars(providers).items()},
    )
    return providers


# ============================================================================
#                         Capabilities and consumers
# ============================================================================


def build_capabilities(providers: Providers) -> CapabilityRegistry:
    """Wrap providers in adapters and register them under the consumers' interfaces.

    Every provider reaches its consumer through an adapter, including the login
    providers that implement `concourse.login_api` themselves.
    """
    registry = CapabilityRegistry()
    registry.register(BaggageRecorder, BaggageRecorderAdapter(providers.baggage))
    registry.register(AuthService, AuthServiceAdapter(providers.auth))
    registry.register(
        LoginNavigation, LoginNavigationAdapter(providers.login_navigation)
    )
    registry.register(
        PassengerNavigator, PassengerNavigatorAdapter(providers.passengers.navigation)
    )
    return registry


def consumer_specs(settings: Settings) -> tuple[ConsumerSpec, ...]:
    """Declare the application's consumers and what each of them needs."""
    return (
        ConsumerSpec(
            name="seats",
            factory=partial(
                SeatManager,
                seat_map=settings.seat_map,
                default_baggage_kg=settings.default_baggage_kg,
            ),
            requires={"baggage": BaggageRecorder},
        ),
        ConsumerSpec(
            name="home",
            factory=HomeManager,
            requires={"auth": AuthService, "navigation": LoginNavigation},
        ),
        ConsumerSpec(
            name="flights",
            factory=partial(FlightListManager, flights=settings.flights),
            requires={"navigation": PassengerNavigator},
        ),
    )


@dataclass(frozen=True, slots=True)
class WiringEntry:
    """One consumer requirement and the object that satisfies it."""

    consumer: str
    parameter: str
    capability: type
    implementation: object

    def __str__(self) -> str:
        return (
            f"{self.consumer}.{self.parameter}: {self.capability.__name__} "
            f"<- {type(self.implementation).__name__}"
        )


@dataclass(frozen=True)
class AppContainer:
    """Everything built by `bootstrap()`, owned for the application's lifetime."""

    settings: Settings
    providers: Providers
    capabilities: CapabilityRegistry
    seats: SeatManager
    home: HomeManager
    flights: FlightListManager

    def wiring(self) -> list[WiringEntry]:
        """List every consumer requirement with the implementation injected for it."""
        return [
            WiringEntry(spec.name, param, capability, self.capabilities.resolve(capability))
            for spec in consumer_specs(self.settings)
            for param, capability in spec.requires.items()
        ]


def bootstrap(
    settings: Settings | None = None, factories: ProviderFactories | None = None
) -> AppContainer:
    """Compose the application: providers, then adapters, then consumers.

    Raises:
        WiringError: If a consumer needs a capability that was not registered.
    """
    settings = settings or Settings()
    providers = build_providers(settings, factories or ProviderFactories())
    capabilities = build_capabilities(providers)
    consumers = compose(consumer_specs(settings), capabilities)
    logger.info(
        "Composed %d consumers over %d capabilities", len(consumers), len(capabilities)
    )
    return AppContainer(
        settings=settings,
        providers=providers,
        capabilities=capabilities,
        **consumers,
    )
