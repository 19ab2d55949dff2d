"""
OrderRepository: in-memory storage for accepted orders.
"""

import logging
from typing import List, Optional

from app.db.memory.base import BaseMemoryRepository, log_operation
from app.domain.models import OrderDomain

logger = logging.getLogger(__name__)


class OrderRepository(BaseMemoryRepository[OrderDomain]):
    """Repository for accepted orders, keyed by order id."""

    @log_operation()
    async def upsert(self, order: OrderDomain) -> None:
        """
        Insert or overwrite the order stored under ``order.id``.

        There is no version check: concurrent writes for the same id
        resolve to whichever lands last.

        Args:
            order: Validated order
        """
        await self._upsert(order.id, order)
        logger.info(f"Order {order.id} stored ({order.items_count} line items)")

    async def get(self, order_id: str) -> Optional[OrderDomain]:
        """Get an order by id, or None."""
        return await self._get(order_id)

    async def list(self) -> List[OrderDomain]:
        """All stored orders, in insertion order of their first write."""
        return await self._list()
