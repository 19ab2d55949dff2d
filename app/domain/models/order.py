"""
Order domain model (Aggregate Root).

Represents a candidate order while it goes through validation, and the
accepted order once it has been stored.
"""

from dataclasses import dataclass, field
from typing import Any

from .customer import CustomerDomain
from .line_item import LineItemDomain
from .shipping_address import ShippingAddressDomain


@dataclass
class OrderDomain:
    """
    Domain model representing an order (Aggregate Root).

    The validator mutates ``shipping_address`` in place; nothing else
    changes between submission and acceptance.

    Attributes:
        id: Caller-supplied identifier, used as the repository key
        customer: Customer the order is placed for
        shipping_address: Destination address
        line_items: Ordered list of product/quantity pairs
    """

    id: str
    customer: CustomerDomain = field(default_factory=CustomerDomain)
    shipping_address: ShippingAddressDomain = field(default_factory=ShippingAddressDomain)
    line_items: list[LineItemDomain] = field(default_factory=list)

    @property
    def items_count(self) -> int:
        """Get total number of line items."""
        return len(self.line_items)

    @property
    def total_quantity(self) -> int:
        """Get total quantity of all items."""
        return sum(item.quantity for item in self.line_items)

    def to_dict(self) -> dict[str, Any]:
        """Convert order to dictionary."""
        return {
            "id": self.id,
            "customer": self.customer.to_dict(),
            "shipping_address": self.shipping_address.to_dict(),
            "line_items": [item.to_dict() for item in self.line_items],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "OrderDomain":
        """Create order from dictionary."""
        return cls(
            id=data.get("id", ""),
            customer=CustomerDomain.from_dict(data.get("customer") or {}),
            shipping_address=ShippingAddressDomain.from_dict(data.get("shipping_address") or {}),
            line_items=[LineItemDomain.from_dict(item) for item in data.get("line_items") or []],
        )
