"""Passenger records."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import TYPE_CHECKING

from concourse.interfaces.errors import PreconditionViolation
from concourse.interfaces.observability import EventLog

from .navigation import PassengerNavigationService

if TYPE_CHECKING:
    from concourse.interfaces.id_generator import IdGenerator

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Passenger:
    """A registered passenger."""

    passenger_id: str
    name: str
    age: int


class PassengerManager:
    """Keeps the passengers of a booking and owns the passenger-flow navigation.

    Args:
        id_generator: Source of passenger ids.
        navigation: Navigation service to own; a new one is created if omitted.
        event_logger: Logger for the per-operation log records.
    """

    def __init__(
        self,
        id_generator: IdGenerator,
        navigation: PassengerNavigationService | None = None,
        event_logger: logging.Logger | None = None,
    ) -> None:
        self._id_generator = id_generator
        self._navigation = navigation or PassengerNavigationService()
        self._log = EventLog(event_logger or logger)
        self._passengers: dict[str, Passenger] = {}
        self._lock = threading.Lock()

    @property
    def navigation(self) -> PassengerNavigationService:
        """The passenger-flow navigation owned by this manager."""
        return self._navigation

    def add_passenger(self, name: str, age: int) -> str:
        """Register a passenger and return their new id.

        Raises:
            PreconditionViolation: If `name` is blank or `age` is negative.
        """
        if not name or not name.strip():
            raise PreconditionViolation(
                "add_passenger", "name", name, "must be a non-empty string"
            )
        if age < 0:
            raise PreconditionViolation(
                "add_passenger", "age", age, "must not be negative"
            )
        with self._lock:
            passenger = Passenger(self._id_generator.new_id(), name, age)
            self._passengers[passenger.passenger_id] = passenger
        self._log.info("Passenger %s added (%s, age %d)", passenger.passenger_id, name, age)
        return passenger.passenger_id

    def remove_passenger(self, passenger_id: str) -> bool:
        """Remove a passenger. Returns False if the id is unknown."""
        with self._lock:
            removed = self._passengers.pop(passenger_id, None)
        if removed is None:
            self._log.debug("Passenger %s not found; nothing removed", passenger_id)
            return False
        self._log.info("Passenger %s removed", passenger_id)
        return True

    def get_passenger(self, passenger_id: str) -> Passenger | None:
        with self._lock:
            return self._passengers.get(passenger_id)

    def list_passengers(self) -> list[Passenger]:
        """Return the registered passengers in registration order."""
        with self._lock:
            return list(self._passengers.values())
