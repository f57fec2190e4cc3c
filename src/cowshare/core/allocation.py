"""Shared allocation cell.

Allocation is the immutable box that SharedValue handles point at. It tracks
how many handles currently hold it so sharing can be observed and asserted.
"""

from __future__ import annotations

import itertools
import threading
from typing import Generic, TypeVar

from cowshare.core.errors import AllocationError

T = TypeVar("T")

_next_allocation_id = itertools.count(1)
_id_lock = threading.Lock()


def _allocate_id() -> int:
    with _id_lock:
        return next(_next_allocation_id)


class Allocation(Generic[T]):
    """Holds one value shared by any number of handles.

    The value is never replaced or edited through the allocation; handles
    that change their value bind to a new Allocation instead. The holder
    count is guarded by a lock so handles may be cloned and dropped from
    several threads.

    Args:
        value: Value stored for the lifetime of the allocation.
    """

    __slots__ = ("_value", "_allocation_id", "_refs", "_lock")

    def __init__(self, value: T) -> None:
        self._value = value
        self._allocation_id = _allocate_id()
        self._refs = 0
        self._lock = threading.Lock()

    @property
    def value(self) -> T:
        """Return the stored value."""
        return self._value

    @property
    def allocation_id(self) -> int:
        """Return the process-unique id of this allocation."""
        return self._allocation_id

    @property
    def ref_count(self) -> int:
        """Return the number of handles currently holding this allocation."""
        with self._lock:
            return self._refs

    def acquire(self) -> int:
        """Register one more holder.

        Returns:
            Holder count after the increment.
        """
        with self._lock:
            self._refs += 1
            return self._refs

    def release(self) -> int:
        """Drop one holder.

        Returns:
            Holder count after the decrement.

        Raises:
            AllocationError: If the allocation has no holders left.
        """
        with self._lock:
            if self._refs == 0:
                raise AllocationError(
                    f"Cannot release allocation {self._allocation_id}: no holders left"
                )
            self._refs -= 1
            return self._refs

    def is_alive(self) -> bool:
        """Check if at least one handle still holds this allocation.

        Returns:
            True if the holder count is positive, False otherwise.
        """
        return self.ref_count > 0

    def __repr__(self) -> str:
        return f"Allocation(id={self._allocation_id}, refs={self.ref_count})"
