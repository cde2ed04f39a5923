from functools import wraps
from typing import Callable

from pymongo.errors import PyMongoError

from foldersync.core.exceptions import StoreFailureError
from foldersync.utils.logging import get_logger

logger = get_logger(__name__)


def store_guard(operation: str):
    """
    Decorator translating MongoDB driver errors into StoreFailureError

    Writes that completed before the failure are kept; callers retry the
    whole operation.

    Args:
        operation: Human readable name used in the error message
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        async def wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except PyMongoError as e:
                logger.error(f"Store failure during {operation}: {str(e)}", exc_info=True)
                raise StoreFailureError(f"Failed to {operation}") from e

        return wrapper
    return decorator
