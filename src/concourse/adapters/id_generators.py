"""ID generators for CONCOURSE."""

import threading

from ulid import monotonic

from concourse.interfaces.id_generator import IdGenerator

# pylint: disable=too-few-public-methods


class ULIDGenerator(IdGenerator):
    """Thread-safe monotonic ULID generator.

    ULIDs sort lexicographically in creation order, so records labelled with
    them list in the order they were made. An optional prefix is prepended to
    each id (e.g. ``"BAG-01J..."``).
    """

    def __init__(self, prefix: str = "") -> None:
        self._prefix = prefix
        self._lock = threading.Lock()

    def new_id(self) -> str:
        """Generate a new ULID (serialized across threads)."""
        with self._lock:
            return f"{self._prefix}{monotonic.new()}"


class SequentialIdGenerator(IdGenerator):
    """Prefixed, zero-padded counter ids (``BAG-000001``, ``BAG-000002``...).

    Note:
        Not suitable for production use; primarily for demos and tests.
    """

    def __init__(self, prefix: str = "", width: int = 6) -> None:
        self._prefix = prefix
        self._width = width
        self._counter = 0
        self._lock = threading.Lock()

    def new_id(self) -> str:
        with self._lock:
            self._counter += 1
            return f"{self._prefix}{self._counter:0{self._width}d}"
