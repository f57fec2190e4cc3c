"""Duplication models: protocol and modes.

Values stored in a SharedValue may implement `Duplicable` to control how
copy-on-write produces their private copy. Everything else falls back to the
`copy` module; handles use DEEP unless given an explicit duplicator.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Protocol, Self, runtime_checkable


class DuplicateMode(StrEnum):
    """How values without their own duplication hook are copied."""

    DEEP = "deep"  # copy.deepcopy, nested containers are not shared
    SHALLOW = "shallow"  # copy.copy, nested members stay shared with the source


@runtime_checkable
class Duplicable(Protocol):
    """One instance → an independent instance with equal value."""

    def __duplicate__(self) -> Self: ...
