"""Navigation within the passenger flow."""

from __future__ import annotations

import logging
import threading
from enum import Enum

from concourse.interfaces.observability import EventLog

logger = logging.getLogger(__name__)


class PassengerScreen(Enum):
    """Screens reachable through `PassengerNavigationService`."""

    PASSENGER_DETAILS = "passenger-details"
    SEAT_SELECTION = "seat-selection"


class PassengerNavigationService:
    """Records the passenger-flow screens the user is sent to."""

    def __init__(self, event_logger: logging.Logger | None = None) -> None:
        self._log = EventLog(event_logger or logger)
        self._history: list[PassengerScreen] = []
        self._lock = threading.Lock()

    @property
    def history(self) -> list[PassengerScreen]:
        """Screens navigated to, oldest first (a copy)."""
        with self._lock:
            return list(self._history)

    def navigate_to_passenger_details(self) -> None:
        self._go(PassengerScreen.PASSENGER_DETAILS)

    def navigate_to_seat_selection(self) -> None:
        self._go(PassengerScreen.SEAT_SELECTION)

    def _go(self, screen: PassengerScreen) -> None:
        with self._lock:
            self._history.append(screen)
        self._log.info("Navigated to %s", screen.value)
