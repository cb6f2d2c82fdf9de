"""Seat selection."""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable

from concourse.interfaces.errors import CapabilityError
from concourse.interfaces.outcome import OperationState, Outcome

from .errors import SeatSelectionError, SeatUnavailableError, UnknownSeatError
from .ports import BaggageRecorder

logger = logging.getLogger(__name__)

DEFAULT_SEAT_MAP: tuple[str, ...] = ("1A", "1B", "1C", "2A", "2B", "2C")
DEFAULT_BAGGAGE_KG = 23.5


class SeatManager:
    """Assigns seats to passengers and records their baggage allowance.

    Selecting a seat validates it against the seat map and current holders,
    then delegates to the injected `BaggageRecorder` to record the default
    baggage allowance for the passenger. The seat is only assigned once the
    delegation returns, so a failed delegation leaves the seat free.

    Args:
        baggage: Capability used to record baggage for a newly seated passenger.
        seat_map: Seats that exist on the aircraft, in display order.
        default_baggage_kg: Allowance recorded with every selection.
    """

    def __init__(
        self,
        baggage: BaggageRecorder,
        seat_map: Iterable[str] = DEFAULT_SEAT_MAP,
        default_baggage_kg: float = DEFAULT_BAGGAGE_KG,
    ) -> None:
        self._baggage = baggage
        self._seat_map = tuple(seat_map)
        self._default_baggage_kg = default_baggage_kg
        self._holders: dict[str, str] = {}  # seat_id: passenger_id
        self._state = OperationState.IDLE
        self._lock = threading.RLock()

    @property
    def state(self) -> OperationState:
        """State reached by the most recent selection."""
        return self._state

    def select_seat(
        self, seat_id: str, passenger_id: str
    ) -> Outcome[tuple[str, ...]]:
        """Select `seat_id` for `passenger_id`.

        Returns:
            A COMPLETED outcome carrying the updated selected seats, or a FAILED
            outcome carrying a `SeatSelectionError` (validation) or a
            `CapabilityError` (baggage could not be recorded).
        """
        with self._lock:
            self._transition(OperationState.VALIDATING, seat_id)
            try:
                self._validate(seat_id)
            except SeatSelectionError as exc:
                return self._fail(seat_id, exc)

            self._transition(OperationState.DELEGATING, seat_id)
            try:
                self._baggage.record_baggage_for_seat(
                    passenger_id, self._default_baggage_kg
                )
            except CapabilityError as exc:
                return self._fail(seat_id, exc)

            self._holders[seat_id] = passenger_id
            self._transition(OperationState.COMPLETED, seat_id)
            logger.info("Seat %s selected for passenger %s", seat_id, passenger_id)
            return Outcome.completed(tuple(self.selected_seats()))

    def release_seat(self, seat_id: str) -> bool:
        """Free `seat_id`. Returns False if it was not held.

        Baggage recorded at selection time is left in place.
        """
        with self._lock:
            passenger_id = self._holders.pop(seat_id, None)
        if passenger_id is None:
            return False
        logger.info("Seat %s released by passenger %s", seat_id, passenger_id)
        return True

    def selected_seats(self) -> list[str]:
        """Return the seats selected so far, in seat-map order."""
        with self._lock:
            return [seat for seat in self._seat_map if seat in self._holders]

    def seat_map(self) -> list[str]:
        """Return every seat on the aircraft."""
        return list(self._seat_map)

    def is_seat_available(self, seat_id: str) -> bool:
        """Return True if `seat_id` exists and nobody holds it."""
        with self._lock:
            return seat_id in self._seat_map and seat_id not in self._holders

    def seat_holder(self, seat_id: str) -> str | None:
        """Return the passenger holding `seat_id`, if any."""
        with self._lock:
            return self._holders.get(seat_id)

    def _validate(self, seat_id: str) -> None:
        if seat_id not in self._seat_map:
            raise UnknownSeatError(seat_id)
        if (holder := self._holders.get(seat_id)) is not None:
            raise SeatUnavailableError(seat_id, holder)

    def _transition(self, state: OperationState, seat_id: str) -> None:
        logger.debug("Seat %s selection: %s -> %s", seat_id, self._state.name, state.name)
        self._state = state

    def _fail(self, seat_id: str, cause: Exception) -> Outcome[tuple[str, ...]]:
        self._transition(OperationState.FAILED, seat_id)
        logger.warning("Seat %s selection failed: %s", seat_id, cause)
        return Outcome.failed(cause)
