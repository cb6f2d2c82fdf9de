"""Unit tests for BaggageService."""

import concurrent.futures as cf
import logging
import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from concourse.adapters.id_generators import SequentialIdGenerator
from concourse.baggage.service import BaggageRecord, BaggageService
from concourse.interfaces.errors import PreconditionViolation

# pylint: disable=redefined-outer-name


@pytest.fixture
def service() -> BaggageService:
    """A baggage service with predictable ids."""
    return BaggageService(SequentialIdGenerator(prefix="BAG-"))


class TestAddBaggage:
    """Tests for add_baggage and the read operations."""

    @staticmethod
    def test_appends_one_record_per_call(service: BaggageService) -> None:
        """Each call appends exactly one record for the passenger."""
        service.add_baggage("passenger123", 23.5)
        assert service.records("passenger123") == (
            BaggageRecord("BAG-000001", "passenger123", 23.5),
        )

    @staticmethod
    def test_records_are_kept_per_passenger_in_order(service: BaggageService) -> None:
        """Records for different passengers do not mix."""
        service.add_baggage("p1", 10.0)
        service.add_baggage("p2", 12.0)
        service.add_baggage("p1", 8.0)
        assert service.list_baggage("p1") == ["BAG-000001", "BAG-000003"]
        assert service.list_baggage("p2") == ["BAG-000002"]

    @staticmethod
    def test_unknown_passenger_has_no_baggage(service: BaggageService) -> None:
        """Listing baggage for an unknown passenger returns an empty list."""
        assert not service.list_baggage("nobody")
        assert service.records("nobody") == ()

    @staticmethod
    def test_list_is_a_snapshot(service: BaggageService) -> None:
        """Mutating the returned list does not touch the service."""
        service.add_baggage("p1", 10.0)
        listing = service.list_baggage("p1")
        listing.clear()
        assert service.list_baggage("p1") == ["BAG-000001"]

    @staticmethod
    @pytest.mark.parametrize("weight", [-0.1, math.inf, math.nan])
    def test_rejects_malformed_weight(service: BaggageService, weight: float) -> None:
        """Negative or non-finite weights are a precondition violation."""
        with pytest.raises(PreconditionViolation) as excinfo:
            service.add_baggage("p1", weight)
        assert excinfo.value.argument == "weight_kg"
        assert service.records("p1") == ()

    @staticmethod
    def test_logs_each_addition(service: BaggageService, caplog) -> None:
        """An INFO record is emitted per addition."""
        with caplog.at_level(logging.INFO, logger="concourse.baggage"):
            service.add_baggage("p1", 20.0)
        assert "Baggage BAG-000001 added for passenger p1 (20.0 kg)" in caplog.messages

    @staticmethod
    def test_failing_log_handler_does_not_fail_the_operation() -> None:
        """A broken observability sink never fails the operation."""

        class ExplodingHandler(logging.Handler):
            """A handler that always fails to emit."""

            def emit(self, record: logging.LogRecord) -> None:
                raise OSError("log sink unavailable")

        event_logger = logging.getLogger("tests.baggage.exploding")
        event_logger.addHandler(ExplodingHandler())
        event_logger.setLevel(logging.DEBUG)
        try:
            service = BaggageService(SequentialIdGenerator(), event_logger=event_logger)
            service.add_baggage("p1", 5.0)
        finally:
            event_logger.handlers.clear()
        assert service.list_baggage("p1") == ["000001"]

    @staticmethod
    def test_concurrent_additions_are_all_recorded(service: BaggageService) -> None:
        """Concurrent additions from many threads lose no record."""
        n = 400
        with cf.ThreadPoolExecutor(max_workers=16) as ex:
            list(ex.map(lambda i: service.add_baggage(f"p{i % 4}", 1.0), range(n)))
        ids = [bid for p in range(4) for bid in service.list_baggage(f"p{p}")]
        assert len(ids) == n
        assert len(set(ids)) == n


class TestRemoveBaggage:
    """Tests for remove_baggage."""

    @staticmethod
    def test_removes_record(service: BaggageService) -> None:
        """Removing a known id drops only that record."""
        service.add_baggage("p1", 10.0)
        service.add_baggage("p1", 11.0)
        assert service.remove_baggage("BAG-000001") is True
        assert service.list_baggage("p1") == ["BAG-000002"]

    @staticmethod
    def test_unknown_id_returns_false(service: BaggageService) -> None:
        """Removing an unknown id is not an error."""
        assert service.remove_baggage("BAG-999999") is False


class TestCalculateFee:
    """Tests for calculate_fee."""

    @staticmethod
    def test_default_rate(service: BaggageService) -> None:
        """25 kg at the default rate costs 250."""
        assert service.calculate_fee(25.0) == 250.0

    @staticmethod
    def test_custom_rate() -> None:
        """The rate is configurable."""
        service = BaggageService(SequentialIdGenerator(), fee_per_kg=4.0)
        assert service.fee_per_kg == 4.0
        assert service.calculate_fee(2.5) == 10.0

    @staticmethod
    def test_rejects_negative_weight(service: BaggageService) -> None:
        """Negative weights cannot be priced."""
        with pytest.raises(PreconditionViolation):
            service.calculate_fee(-1.0)

    @staticmethod
    def test_does_not_record_anything(service: BaggageService) -> None:
        """Pricing has no side effect on the records."""
        service.calculate_fee(30.0)
        assert service.records("p1") == ()

    @staticmethod
    def test_same_result_across_threads(service: BaggageService) -> None:
        """Concurrent callers all see the same fee."""
        with cf.ThreadPoolExecutor(max_workers=8) as ex:
            fees = set(ex.map(service.calculate_fee, [25.0] * 200))
        assert fees == {250.0}


@pytest.mark.property
@given(weight=st.floats(min_value=0, max_value=1e6, allow_nan=False, allow_infinity=False))
def test_fee_is_deterministic(weight: float) -> None:
    """calculate_fee(q) returns the same value on every call."""
    service = BaggageService(SequentialIdGenerator())
    first = service.calculate_fee(weight)
    assert all(service.calculate_fee(weight) == first for _ in range(3))
    assert first == weight * 10.0
