"""OrderCreator service - SRP compliance."""

import logging

from app.db.memory.order_repository import OrderRepository
from app.domain.models import OrderDomain

logger = logging.getLogger(__name__)


class OrderCreator:
    """Accepts validated orders (SRP: order storage only)."""

    def __init__(self, order_repo: OrderRepository):
        """
        Initialize with SOLID dependencies (DIP).

        Args:
            order_repo: Repository for order operations
        """
        self.order_repo = order_repo

    async def accept(self, order: OrderDomain) -> None:
        """
        Store a validated order, replacing any order with the same id.

        Args:
            order: Domain model that passed validation
        """
        existing = await self.order_repo.get(order.id)
        if existing is not None:
            logger.warning(f"Order {order.id} already exists, overwriting")

        await self.order_repo.upsert(order)
        logger.info(f"Order {order.id} accepted with {order.items_count} line items")
