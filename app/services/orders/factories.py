"""
Factories for order services and domain objects (OCP).

These factories encapsulate object creation logic, making it easier
to modify without changing client code.
"""

from app.db.memory.order_repository import OrderRepository
from app.db.memory.product_repository import ProductRepository
from app.domain.models import CustomerDomain, LineItemDomain, OrderDomain, ShippingAddressDomain
from app.services.orders.interfaces import IGeocodingClient
from app.services.orders.managers import OrderCreator
from app.services.orders.orchestrator import OrderCreationOrchestrator
from app.services.orders.resolvers import AddressResolver, ProductResolver
from app.services.orders.validators import OrderValidator


class OrderFactory:
    """Factory for creating domain objects with proper defaults."""

    @staticmethod
    def create_order(
        order_id: str,
        customer: CustomerDomain | None = None,
        shipping_address: ShippingAddressDomain | None = None,
        line_items: list[LineItemDomain] | None = None,
    ) -> OrderDomain:
        """Create an OrderDomain, filling missing parts with empty values."""
        return OrderDomain(
            id=order_id,
            customer=customer or CustomerDomain(),
            shipping_address=shipping_address or ShippingAddressDomain(),
            line_items=list(line_items or []),
        )

    @staticmethod
    def create_customer(first_name: str = "", last_name: str = "") -> CustomerDomain:
        """Create a CustomerDomain."""
        return CustomerDomain(first_name=first_name, last_name=last_name)

    @staticmethod
    def create_line_item(product_id: str, quantity: int = 0) -> LineItemDomain:
        """Create a LineItemDomain."""
        return LineItemDomain(product_id=product_id, quantity=quantity)


def create_orchestrator(
    order_repo: OrderRepository,
    product_repo: ProductRepository,
    geocoding_client: IGeocodingClient,
) -> OrderCreationOrchestrator:
    """
    Factory function to create a fully initialized orchestrator.

    This function encapsulates dependency creation and injection following DIP.

    Args:
        order_repo: OrderRepository for accepted orders
        product_repo: ProductRepository for catalog lookups
        geocoding_client: Client for the address search API

    Returns:
        OrderCreationOrchestrator: Fully configured orchestrator
    """
    validator = OrderValidator(
        product_resolver=ProductResolver(product_repo=product_repo),
        address_resolver=AddressResolver(geocoding_client=geocoding_client),
    )
    order_creator = OrderCreator(order_repo=order_repo)

    return OrderCreationOrchestrator(validator=validator, order_creator=order_creator, order_repo=order_repo)
