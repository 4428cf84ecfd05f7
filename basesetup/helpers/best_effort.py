"""
Swallow-and-log policy for interaction helpers.

A failed helper call never aborts the calling step: the error is logged and
a default is returned instead. Verification belongs to the assertion helpers.
"""

import copy
from functools import wraps
from typing import Any, Callable

from loguru import logger


def best_effort(action: str, default: Any = None):
    """
    Decorator that logs and swallows any exception raised by a helper.

    Args:
        action: Short description used in the error log ("click element")
        default: Value returned on failure (copied, so mutable defaults are safe)
    """

    def decorator(func: Callable):
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except Exception as e:
                logger.error(f"❌ Failed to {action}: {e}")
                return copy.copy(default)

        return wrapper

    return decorator


__all__ = [
    "best_effort",
]
