"""Capabilities the seat module needs from elsewhere."""

import abc

# pylint: disable=too-few-public-methods


class BaggageRecorder(abc.ABC):
    """Records baggage on behalf of a passenger who has just taken a seat."""

    @abc.abstractmethod
    def record_baggage_for_seat(self, passenger_id: str, weight_kg: float) -> None:
        """Record `weight_kg` kilograms of baggage for `passenger_id`.

        Raises:
            PreconditionViolation: If the weight is rejected.
            DelegationFailure: If the baggage could not be recorded.
        """
