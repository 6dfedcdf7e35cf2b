"""
Service guard
=============

Catch-all applied to every Result-returning service operation.
"""
import functools
import logging
from typing import Callable, TypeVar

from taskia.domain.common.result import Result

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Result])


def guarded(error_message: str) -> Callable[[F], F]:
    """
    Turn unexpected exceptions into a failure Result.

    The failure message is ``"<error_message>: <exception text>"``. Any
    change still staged in the service's unit of work is discarded.
    """
    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(self, *args, **kwargs) -> Result:
            try:
                return func(self, *args, **kwargs)
            except Exception as e:
                logger.exception(f"{type(self).__name__}.{func.__name__} failed")
                unit_of_work = getattr(self, "_unit_of_work", None)
                if unit_of_work is not None:
                    unit_of_work.rollback()
                return Result.failure(f"{error_message}: {e}")
        return wrapper  # type: ignore[return-value]
    return decorator
