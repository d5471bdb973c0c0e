"""
Error handling utilities for geohash coverage.

Provides a decorator that turns collaborator failures inside a coverage
stage into a single terminal CoverageError.
"""
from functools import wraps
from typing import Callable, Tuple, Type

from geohash_poly.utils.logging_config import get_logger
from geohash_poly.utils.exceptions import CoverageError

logger = get_logger(__name__)


def coverage_stage(
    stage: str,
    catch: Tuple[Type[BaseException], ...] = (ValueError,)
):
    """
    Decorator that re-raises collaborator errors as CoverageError.

    Parameters
    ----------
    stage : str
        Name of the coverage stage, recorded on the raised error
    catch : tuple of exception types
        Exceptions treated as collaborator failures (default: ValueError,
        which the geohash codec raises for out-of-range coordinates)

    Returns
    -------
    Callable
        Decorated function; CoverageError passes through untouched

    Raises
    ------
    CoverageError
        If the wrapped call raises one of ``catch``
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except CoverageError:
                raise
            except catch as e:
                logger.error(
                    "coverage_stage_failed",
                    stage=stage,
                    function=func.__name__,
                    error=str(e),
                )
                raise CoverageError(
                    f"{func.__name__} failed: {e}",
                    stage=stage,
                    details={'error_type': type(e).__name__},
                ) from e
        return wrapper
    return decorator
