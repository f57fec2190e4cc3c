"""Copy-on-write handle over a shared allocation.

Usage:
    config = SharedValue({"retries": 3, "hosts": ["a", "b"]})
    fanned_out = [config.clone() for _ in range(100)]  # no copies made

    custom = fanned_out[0]
    custom.update(lambda cfg: cfg["hosts"].append("c"))  # only this handle diverges

    assert config.shares_with(fanned_out[1])
    assert not config.shares_with(custom)
    assert config.get()["hosts"] == ["a", "b"]
"""

from __future__ import annotations

import copy
import logging
import weakref
from typing import Any, Generic, TypeVar, cast

from cowshare.core.allocation import Allocation
from cowshare.core.models import DuplicateMode
from cowshare.core.operations import make_duplicator, run_duplicator
from cowshare.core.types import Duplicator, Mutator, Transform

logger = logging.getLogger(__name__)

T = TypeVar("T")


# Deep duplication keeps nested data private to the handle that edits it
_DEFAULT_DUPLICATOR: Duplicator[Any] = make_duplicator(DuplicateMode.DEEP)


class SharedValue(Generic[T]):
    """Handle sharing one immutable allocation until its value changes.

    Clones point at the same Allocation. `set()`, `update()` and
    `transform()` never touch the shared allocation: they build a new one
    and rebind only the handle they were called on, so sibling handles keep
    reading the old value.

    Values returned by `get()` belong to the shared allocation and must not
    be mutated. Use `update()` to edit a private copy instead.

    Args:
        value: Initial value.
        duplicator: Callable producing an independent copy of a value. Defaults
            to deep duplication. Construction never reads settings or the
            environment, so it cannot fail for configuration reasons.
    """

    __slots__ = ("_allocation", "_duplicator", "_finalizer", "__weakref__")

    def __init__(self, value: T, *, duplicator: Duplicator[T] | None = None) -> None:
        if duplicator is None:
            duplicator = _DEFAULT_DUPLICATOR
        self._duplicator: Duplicator[T] = duplicator
        self._finalizer: weakref.finalize | None = None
        self._bind(Allocation(value))

    def _bind(self, allocation: Allocation[T]) -> None:
        """Point this handle at allocation, releasing the previous one last."""
        allocation.acquire()
        previous = self._finalizer
        self._allocation = allocation
        self._finalizer = weakref.finalize(self, allocation.release)
        self._finalizer.atexit = False
        if previous is not None:
            previous()  # releases the old allocation exactly once

    def _rebind(self, value: T) -> None:
        old_id = self._allocation.allocation_id
        self._bind(Allocation(value))
        logger.debug(
            "Handle diverged from allocation %d to %d", old_id, self._allocation.allocation_id
        )

    @classmethod
    def _from_allocation(
        cls, allocation: Allocation[T], duplicator: Duplicator[T]
    ) -> SharedValue[T]:
        handle = cls.__new__(cls)
        handle._duplicator = duplicator
        handle._finalizer = None
        handle._bind(allocation)
        return handle

    # Reading

    def get(self) -> T:
        """Return the current value without copying it."""
        return self._allocation.value

    @property
    def value(self) -> T:
        """Current value. Alias for get()."""
        return self._allocation.value

    @property
    def value_type(self) -> type[T]:
        """Return the type of the current value."""
        return type(self._allocation.value)

    # Sharing

    def clone(self) -> SharedValue[T]:
        """Return a new handle bound to the same allocation.

        Returns:
            Handle sharing this handle's allocation and duplicator.
        """
        return self._from_allocation(self._allocation, self._duplicator)

    def __copy__(self) -> SharedValue[T]:
        return self.clone()

    def __deepcopy__(self, memo: dict[int, Any]) -> SharedValue[T]:
        return SharedValue(
            copy.deepcopy(self._allocation.value, memo), duplicator=self._duplicator
        )

    def shares_with(self, other: SharedValue[Any]) -> bool:
        """Check if both handles reference the same allocation.

        Args:
            other: Handle to compare with.

        Returns:
            True if identity-equal, False otherwise (even when values are equal).
        """
        return self._allocation is other._allocation

    @property
    def allocation_id(self) -> int:
        """Return the id of the allocation this handle is bound to."""
        return self._allocation.allocation_id

    @property
    def ref_count(self) -> int:
        """Return the number of live handles bound to the same allocation."""
        return self._allocation.ref_count

    def is_shared(self) -> bool:
        """Check if another live handle is bound to the same allocation."""
        return self._allocation.ref_count > 1

    # Changing the value

    def set(self, value: T) -> None:
        """Replace the value, diverging from every other handle.

        Args:
            value: New value, stored in a fresh allocation.
        """
        self._rebind(value)

    def update(self, mutator: Mutator[T]) -> None:
        """Edit a private copy of the value and rebind to it.

        The value is always duplicated, even if mutator ends up changing
        nothing. If mutator raises, the exception propagates and the handle
        stays bound to its previous allocation.

        Args:
            mutator: Called with the private copy. Its return value is ignored.

        Raises:
            DuplicationError: If the value cannot be duplicated.
        """
        private = run_duplicator(self._duplicator, self._allocation.value)
        mutator(private)
        self._rebind(private)

    def transform(self, fn: Transform[T]) -> None:
        """Replace the value with fn(current value).

        For immutable values that cannot be edited in place. The current value
        is passed without copying, so fn must not mutate it.

        Args:
            fn: Function building the new value.
        """
        self._rebind(fn(self._allocation.value))

    # Comparison

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SharedValue):
            return cast(bool, self._allocation.value == other._allocation.value)
        return cast(bool, self._allocation.value == other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._allocation.value!r})"


def unwrap(obj: Any | SharedValue[Any]) -> Any:
    """Get the underlying value, unwrapping if necessary."""
    if isinstance(obj, SharedValue):
        return obj.get()
    return obj


def share(obj: T | SharedValue[T]) -> SharedValue[T]:
    """Clone a handle, or wrap a plain value in a new one."""
    if isinstance(obj, SharedValue):
        return obj.clone()
    return SharedValue(obj)
