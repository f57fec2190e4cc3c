"""Pure functions for duplicating values.

Stateless helpers used by SharedValue when a mutation needs a private copy
of the shared value.
"""

from __future__ import annotations

import copy
import logging
from functools import partial
from typing import Any, TypeVar, cast

from pydantic import BaseModel

from cowshare.core.errors import DuplicationError
from cowshare.core.models import Duplicable, DuplicateMode
from cowshare.core.types import Duplicator

logger = logging.getLogger(__name__)

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)


def duplicate_with_protocol(value: T) -> T:
    """Duplicate a value using the Duplicable protocol.

    Args:
        value: Value to duplicate (must implement Duplicable).

    Returns:
        Copy produced by __duplicate__.

    Raises:
        TypeError: If value doesn't implement Duplicable.
    """
    if not isinstance(value, Duplicable):
        raise TypeError(f"{type(value).__name__} does not implement Duplicable protocol")
    return cast(T, value.__duplicate__())


def duplicate_model(model: M, mode: DuplicateMode = DuplicateMode.DEEP) -> M:
    """Duplicate a Pydantic model with model_copy."""
    return model.model_copy(deep=mode is DuplicateMode.DEEP)


def duplicate_value(value: T, mode: DuplicateMode = DuplicateMode.DEEP) -> T:
    """Return an independent copy of value.

    Tries in order:
    1. __duplicate__ if value implements Duplicable
    2. model_copy if value is a Pydantic model
    3. copy.deepcopy (DEEP) or copy.copy (SHALLOW)

    Args:
        value: Value to duplicate.
        mode: Depth used by steps 2 and 3.

    Returns:
        Duplicated value.

    Raises:
        DuplicationError: If any step fails.
    """
    try:
        if isinstance(value, Duplicable):
            return duplicate_with_protocol(value)
        if isinstance(value, BaseModel):
            return cast(T, duplicate_model(value, mode))
        if mode is DuplicateMode.SHALLOW:
            return copy.copy(value)
        return copy.deepcopy(value)
    except DuplicationError:
        raise
    except Exception as e:
        raise DuplicationError(type(value), str(e)) from e


def make_duplicator(mode: DuplicateMode | str = DuplicateMode.DEEP) -> Duplicator[Any]:
    """Build a one-argument duplicator bound to a mode.

    A shallow duplicator, passed explicitly as `SharedValue(..., duplicator=...)`,
    gives up isolation for nested data: update() on one handle can then change
    lists or dicts still reachable from its siblings. Only use it for values
    whose nested members are immutable.

    Args:
        mode: DuplicateMode or its string value ("deep", "shallow").

    Returns:
        Callable taking a value and returning its copy.

    Raises:
        ValueError: If mode is not a known DuplicateMode.
    """
    return partial(duplicate_value, mode=DuplicateMode(mode))


def run_duplicator(duplicator: Duplicator[T], value: T) -> T:
    """Call a duplicator, normalizing its failures to DuplicationError.

    Args:
        duplicator: Duplicator to call (built-in or user supplied).
        value: Value to duplicate.

    Returns:
        The duplicator's result.

    Raises:
        DuplicationError: If the duplicator raises.
    """
    try:
        duplicated = duplicator(value)
    except DuplicationError:
        raise
    except Exception as e:
        raise DuplicationError(type(value), str(e)) from e
    logger.debug("Duplicated %s value", type(value).__name__)
    return duplicated
