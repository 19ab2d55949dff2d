"""
Line item domain model.

One product/quantity pair of an order.
"""

from dataclasses import dataclass
from typing import Any


@dataclass
class LineItemDomain:
    """
    Domain model representing an order line.

    Attributes:
        product_id: Catalog identifier (e.g. "PIPR-JACKET-SIZM")
        quantity: Ordered quantity
    """

    product_id: str
    quantity: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Convert line item to dictionary."""
        return {"product_id": self.product_id, "quantity": self.quantity}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LineItemDomain":
        """Create line item from dictionary."""
        return cls(product_id=data.get("product_id", ""), quantity=data.get("quantity", 0))
