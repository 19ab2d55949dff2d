"""
OrderCreationOrchestrator - Main coordinator (SOLID compliant).

This orchestrator follows:
- SRP: Only coordinates the order creation flow
- OCP: Open for extension via new services
- DIP: Depends on abstractions (interfaces), not concrete implementations
"""

import logging

from app.db.memory.order_repository import OrderRepository
from app.domain.models import OrderDomain
from app.services.orders.interfaces import IOrderCreator, IOrderValidator
from app.utils.error_handler import AppException, ValidationException, log_error

logger = logging.getLogger(__name__)


class OrderCreationOrchestrator:
    """
    Orchestrates order creation: validation first, then acceptance.

    A rejected order never reaches the repository.
    """

    def __init__(self, validator: IOrderValidator, order_creator: IOrderCreator, order_repo: OrderRepository):
        """
        Initialize orchestrator with service dependencies (DIP).

        Args:
            validator: Service for order validation
            order_creator: Service for storing accepted orders
            order_repo: Repository used for listing orders
        """
        self.validator = validator
        self.order_creator = order_creator
        self.order_repo = order_repo

    async def create_order(self, order: OrderDomain) -> OrderDomain:
        """
        Validate and store a single candidate order.

        Args:
            order: Candidate order

        Returns:
            OrderDomain: The accepted, normalized order

        Raises:
            AppException: Any validation or lookup failure, unchanged
        """
        logger.info(f"Starting order creation for order {order.id}")

        try:
            prepared = await self.validator.validate_and_prepare(order)
        except ValidationException as e:
            log_error(e, context={"order_id": order.id}, level=logging.WARNING)
            raise
        except AppException as e:
            log_error(e, context={"order_id": order.id})
            raise

        await self.order_creator.accept(prepared)

        logger.info(
            f"Order {prepared.id} created → {prepared.shipping_address.street_address}, "
            f"{prepared.shipping_address.postal_code} {prepared.shipping_address.city}"
        )
        return prepared

    async def list_orders(self) -> list[OrderDomain]:
        """All accepted orders."""
        return await self.order_repo.list()
