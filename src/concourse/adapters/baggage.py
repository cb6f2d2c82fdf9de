"""Adapter giving the seat module its baggage capability."""

from concourse.baggage.service import BaggageService
from concourse.seat.ports import BaggageRecorder

from .delegation import delegating

# pylint: disable=too-few-public-methods


class BaggageRecorderAdapter(BaggageRecorder):
    """Implements `BaggageRecorder` by forwarding to a `BaggageService`."""

    def __init__(self, service: BaggageService) -> None:
        self._service = service

    def record_baggage_for_seat(self, passenger_id: str, weight_kg: float) -> None:
        with delegating(BaggageRecorder, "record_baggage_for_seat"):
            self._service.add_baggage(passenger_id, weight_kg)
