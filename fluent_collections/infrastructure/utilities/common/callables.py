"""Callback signature helpers."""

import inspect
from typing import Any, Callable, Hashable, Optional

from fluent_collections.domain.core.exceptions import ArityError
from fluent_collections.helpers.logger import get_logger

logger = get_logger(__name__)

POSITIONAL_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def count_parameters(callback: Callable[..., Any]) -> Optional[int]:
    """
    Count the positional parameters a callback declares.

    Args:
        callback: Function, method, lambda or other callable

    Returns:
        Number of positional parameters (defaults included), at least 2
        when the callback takes ``*args``, or None when the signature
        cannot be inspected
    """
    try:
        sig = inspect.signature(callback)
    except (TypeError, ValueError) as e:
        logger.debug("Could not get signature for callback", callback=repr(callback), error=str(e))
        return None

    count = sum(1 for param in sig.parameters.values() if param.kind in POSITIONAL_KINDS)
    if any(param.kind == inspect.Parameter.VAR_POSITIONAL for param in sig.parameters.values()):
        count = max(count, 2)
    return count


def accepts_key(callback: Callable[..., Any], operation: str, with_key: Optional[bool] = None) -> bool:
    """
    Decide whether a callback is called with (value) or (value, key).

    Args:
        callback: Callback supplied to a collection operation
        operation: Operation name used in error messages, e.g. "filter"
        with_key: Explicit choice; skips inspection when not None

    Returns:
        True when the callback takes the key as second argument

    Raises:
        ArityError: If the callback declares 0 or more than 2 parameters
    """
    if with_key is not None:
        return with_key

    count = count_parameters(callback)
    if count is None:
        return False
    if count < 1 or count > 2:
        logger.debug("Rejecting callback", operation=operation, parameter_count=count)
        raise ArityError(operation, count)
    return count == 2


def bind_callback(
    callback: Callable[..., Any], operation: str, with_key: Optional[bool] = None
) -> Callable[[Any, Hashable], Any]:
    """Wrap a callback so it can always be called as ``fn(value, key)``."""
    if accepts_key(callback, operation, with_key):
        return callback
    return lambda value, key: callback(value)
