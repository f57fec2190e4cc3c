"""Core type definitions for cowshare."""

from collections.abc import Callable
from typing import TypeAlias, TypeVar

T = TypeVar("T")

Mutator: TypeAlias = Callable[[T], None]
"""Callable that edits a private copy of a value in place.

The return value is ignored. Used by `SharedValue.update()`.
"""

Transform: TypeAlias = Callable[[T], T]
"""Callable that builds a new value from the current one.

Used by `SharedValue.transform()` for immutable values.
"""

Duplicator: TypeAlias = Callable[[T], T]
"""Callable returning an independent copy of a value."""
