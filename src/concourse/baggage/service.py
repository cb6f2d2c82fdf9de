"""In-memory baggage accounting service."""

from __future__ import annotations

import logging
import math
import threading
from dataclasses import dataclass
from typing import TYPE_CHECKING

from concourse.interfaces.errors import PreconditionViolation
from concourse.interfaces.observability import EventLog

if TYPE_CHECKING:
    from concourse.interfaces.id_generator import IdGenerator

logger = logging.getLogger(__name__)

DEFAULT_FEE_PER_KG = 10.0


@dataclass(frozen=True, slots=True)
class BaggageRecord:
    """A single checked item of baggage."""

    baggage_id: str
    passenger_id: str
    weight_kg: float


def _check_weight(operation: str, weight_kg: float) -> None:
    if not math.isfinite(weight_kg) or weight_kg < 0:
        raise PreconditionViolation(
            operation, "weight_kg", weight_kg, "must be a finite, non-negative number"
        )


class BaggageService:
    """Records baggage per passenger and prices it by weight.

    Records are kept per passenger in insertion order. Mutations are
    serialized with a lock so a single instance can be shared by every
    consumer wired to it; `calculate_fee` reads no shared state and needs no
    locking.

    Args:
        id_generator: Source of baggage ids.
        fee_per_kg: Price charged per kilogram.
        event_logger: Logger for the per-operation log records. Defaults to
            this module's logger.
    """

    def __init__(
        self,
        id_generator: IdGenerator,
        fee_per_kg: float = DEFAULT_FEE_PER_KG,
        event_logger: logging.Logger | None = None,
    ) -> None:
        self._id_generator = id_generator
        self._fee_per_kg = fee_per_kg
        self._log = EventLog(event_logger or logger)
        self._records: dict[str, list[BaggageRecord]] = {}
        self._lock = threading.Lock()

    @property
    def fee_per_kg(self) -> float:
        """Price charged per kilogram."""
        return self._fee_per_kg

    def add_baggage(self, passenger_id: str, weight_kg: float) -> None:
        """Append a baggage record for `passenger_id`.

        Passenger existence is not checked here.

        Raises:
            PreconditionViolation: If `weight_kg` is negative or not finite.
        """
        _check_weight("add_baggage", weight_kg)
        with self._lock:
            record = BaggageRecord(
                baggage_id=self._id_generator.new_id(),
                passenger_id=passenger_id,
                weight_kg=weight_kg,
            )
            self._records.setdefault(passenger_id, []).append(record)
        self._log.info(
            "Baggage %s added for passenger %s (%.1f kg)",
            record.baggage_id,
            passenger_id,
            weight_kg,
        )

    def remove_baggage(self, baggage_id: str) -> bool:
        """Remove the record with `baggage_id`.

        Returns:
            True if a record was removed, False if no record had that id.
        """
        with self._lock:
            for passenger_id, records in self._records.items():
                for index, record in enumerate(records):
                    if record.baggage_id == baggage_id:
                        del records[index]
                        if not records:
                            del self._records[passenger_id]
                        self._log.info("Baggage %s removed", baggage_id)
                        return True
        self._log.debug("Baggage %s not found; nothing removed", baggage_id)
        return False

    def calculate_fee(self, weight_kg: float) -> float:
        """Return the fee for `weight_kg` kilograms of baggage.

        Raises:
            PreconditionViolation: If `weight_kg` is negative or not finite.
        """
        _check_weight("calculate_fee", weight_kg)
        fee = weight_kg * self._fee_per_kg
        self._log.debug("Baggage fee for %.2f kg is %.2f", weight_kg, fee)
        return fee

    def list_baggage(self, passenger_id: str) -> list[str]:
        """Return the baggage ids recorded for `passenger_id` (a copy; may be empty)."""
        return [record.baggage_id for record in self.records(passenger_id)]

    def records(self, passenger_id: str) -> tuple[BaggageRecord, ...]:
        """Return a snapshot of the records for `passenger_id`."""
        with self._lock:
            return tuple(self._records.get(passenger_id, ()))
