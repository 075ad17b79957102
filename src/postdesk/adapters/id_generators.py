"""ID generators for access-token ids."""

import threading

from ulid import monotonic

from postdesk.interfaces.id_generator import IdGenerator

# pylint: disable=too-few-public-methods


class ULIDGenerator(IdGenerator):
    """Thread-safe monotonic ULID generator.

    ULIDs are 26-character, lexicographically sortable identifiers made of a
    timestamp and a random component (via `ulid-py`). Being sortable, token
    ids issued later compare greater.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()

    def new_id(self) -> str:
        """Generate a new ULID (serialized across threads)."""
        with self._lock:
            return str(monotonic.new())


class SimpleIdGenerator(IdGenerator):
    """Sequential, zero-padded IDs for tests and demos."""

    def __init__(self, length: int = 26) -> None:
        self._counter = 0
        self._length = length
        self._lock = threading.Lock()

    def new_id(self) -> str:
        with self._lock:
            self._counter += 1
            return f"{self._counter:0{self._length}d}"
