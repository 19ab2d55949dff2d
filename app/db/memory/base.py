"""
Base in-memory repository.

Provides a keyed map behind an asyncio lock. Derived repositories expose
only the capabilities their domain needs (get / list / upsert).
"""

import asyncio
import copy
import functools
import logging
from typing import Callable, Dict, Generic, List, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def log_operation(operation_name: str = None) -> Callable:
    """
    Decorator for logging repository operations.

    Args:
        operation_name: Optional custom name for the operation

    Returns:
        Decorated function with logging
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        async def wrapper(self, *args, **kwargs):
            op_name = operation_name or f"{self.__class__.__name__}.{func.__name__}"
            logger.debug(f"Starting operation: {op_name}")

            try:
                result = await func(self, *args, **kwargs)
                logger.debug(f"Operation successful: {op_name}")
                return result
            except Exception as e:
                logger.error(f"Operation failed: {op_name} - {e}")
                raise

        return wrapper

    return decorator


class BaseMemoryRepository(Generic[T]):
    """
    Lock-guarded keyed store shared by concurrent request handlers.

    Writes replace any existing entry under the same key (last write wins).
    Values are copied on the way in so later mutations by the caller do
    not leak into the store.
    """

    def __init__(self):
        """Initialize an empty store."""
        self._items: Dict[str, T] = {}
        self._lock = asyncio.Lock()
        self._repository_name: str = self.__class__.__name__
        logger.info(f"{self._repository_name} instantiated")

    async def _get(self, key: str) -> Optional[T]:
        async with self._lock:
            return self._items.get(key)

    async def _list(self) -> List[T]:
        async with self._lock:
            return list(self._items.values())

    async def _upsert(self, key: str, value: T) -> None:
        async with self._lock:
            self._items[key] = copy.deepcopy(value)

    async def count(self) -> int:
        """Number of stored entries."""
        async with self._lock:
            return len(self._items)
