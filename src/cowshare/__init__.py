"""cowshare: copy-on-write shared values.

Usage:
    from cowshare import SharedValue

    source = SharedValue([1, 2, 3])
    changed = source.clone()          # same allocation, nothing copied
    assert source.shares_with(changed)

    changed.set([1, 2, 3, 4])         # new allocation for this handle only
    assert not source.shares_with(changed)
    assert source == [1, 2, 3]
"""

__version__ = "0.1.0"

# Core primitives
from cowshare.core import (
    Allocation,
    AllocationError,
    CowShareError,
    Duplicable,
    DuplicateMode,
    DuplicationError,
    Duplicator,
    Mutator,
    SharedValue,
    Transform,
    duplicate_value,
    make_duplicator,
    share,
    unwrap,
)

# Configuration
from cowshare.config import (
    CowSettings,
    configure_logging,
    get_settings,
    reset_settings,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "SharedValue",
    "share",
    "unwrap",
    "Allocation",
    "Duplicable",
    "DuplicateMode",
    "duplicate_value",
    "make_duplicator",
    "Mutator",
    "Transform",
    "Duplicator",
    # Errors
    "CowShareError",
    "DuplicationError",
    "AllocationError",
    # Config
    "CowSettings",
    "get_settings",
    "reset_settings",
    "configure_logging",
]
