"""Core functionalities: the copy-on-write handle and its building blocks.

Architecture Note:
    operations.py and models.py are pure and stateless. allocation.py and
    handle.py hold the only runtime state: the shared cell and the handles
    bound to it.
"""

from cowshare.core.allocation import Allocation
from cowshare.core.errors import AllocationError, CowShareError, DuplicationError
from cowshare.core.handle import SharedValue, share, unwrap
from cowshare.core.models import Duplicable, DuplicateMode
from cowshare.core.operations import (
    duplicate_model,
    duplicate_value,
    duplicate_with_protocol,
    make_duplicator,
    run_duplicator,
)
from cowshare.core.types import Duplicator, Mutator, Transform

__all__ = [
    # Types
    "Mutator",
    "Transform",
    "Duplicator",
    # Handle
    "SharedValue",
    "share",
    "unwrap",
    "Allocation",
    # Duplication
    "Duplicable",
    "DuplicateMode",
    "duplicate_value",
    "duplicate_with_protocol",
    "duplicate_model",
    "make_duplicator",
    "run_duplicator",
    # Errors
    "CowShareError",
    "DuplicationError",
    "AllocationError",
]
