"""
Contract Programming implementation with preconditions and postconditions.

This module provides decorators for Design by Contract checks on the
service implementations. Conditions receive exactly the arguments of the
decorated call, so conditions on methods take ``self`` first.
"""

import functools
import inspect
from typing import Any, Callable, Type, TypeVar, Union

import structlog

from restaurant_dip.shared.exceptions import (
    ContractViolationError,
    PreconditionError,
    PostconditionError
)

logger = structlog.get_logger(__name__)

F = TypeVar('F', bound=Callable[..., Any])

Condition = Union[bool, Callable[..., bool]]


def _holds(condition: Condition, error_type: Type[ContractViolationError], func: Callable, *args, **kwargs) -> bool:
    """Evaluate a condition, turning errors raised by the condition itself into contract errors."""
    if not callable(condition):
        return bool(condition)

    try:
        return bool(condition(*args, **kwargs))
    except Exception as e:
        kind = "Precondition" if error_type is PreconditionError else "Postcondition"
        logger.error(f"{kind} evaluation failed", function=func.__name__, error=str(e))
        raise error_type(f"{kind} evaluation error in {func.__name__}: {e}") from e


def require(condition: Condition, message: str = "") -> Callable[[F], F]:
    """
    Precondition decorator - validates input parameters.

    Args:
        condition: Boolean expression or callable that takes function arguments
        message: Custom error message for contract violation

    Returns:
        Decorated function with precondition checking

    Raises:
        PreconditionError: If precondition is not met
    """
    def decorator(func: F) -> F:
        signature = inspect.signature(func)
        error_msg = message or f"Precondition failed in {func.__name__}"

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            if not _holds(condition, PreconditionError, func, *args, **kwargs):
                bound = signature.bind(*args, **kwargs)
                bound.apply_defaults()
                logger.warning(
                    "Precondition violation",
                    function=func.__name__,
                    message=error_msg,
                    args=str(bound.arguments)
                )
                raise PreconditionError(error_msg)

            return func(*args, **kwargs)

        return wrapper
    return decorator


def ensure(condition: Condition, message: str = "") -> Callable[[F], F]:
    """
    Postcondition decorator - validates return values.

    Args:
        condition: Boolean expression or callable that takes the result
            followed by the function arguments
        message: Custom error message for contract violation

    Returns:
        Decorated function with postcondition checking

    Raises:
        PostconditionError: If postcondition is not met
    """
    def decorator(func: F) -> F:
        error_msg = message or f"Postcondition failed in {func.__name__}"

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            result = func(*args, **kwargs)

            if not _holds(condition, PostconditionError, func, result, *args, **kwargs):
                logger.warning(
                    "Postcondition violation",
                    function=func.__name__,
                    message=error_msg,
                    result=str(result)
                )
                raise PostconditionError(error_msg)

            return result

        return wrapper
    return decorator


# Common contract conditions

def non_negative(value: Union[int, float]) -> bool:
    """Check if value is non-negative."""
    return value >= 0
