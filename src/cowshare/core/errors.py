"""Exceptions raised by cowshare.

Errors raised by caller-supplied mutators and transforms are never wrapped.
"""


class CowShareError(Exception):
    """Base class for cowshare errors."""

    pass


class DuplicationError(CowShareError, TypeError):
    """Raised when a value cannot be duplicated for copy-on-write."""

    def __init__(self, value_type: type, reason: str) -> None:
        self.value_type = value_type
        super().__init__(f"Cannot duplicate value of type {value_type.__name__}: {reason}")


class AllocationError(CowShareError, RuntimeError):
    """Raised when an allocation's holder count is misused."""

    pass
