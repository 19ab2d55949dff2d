"""
Product domain model.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from app.domain.value_objects.money import Money


@dataclass
class ProductDomain:
    """
    Catalog product.

    Attributes:
        id: Catalog identifier
        name: Display name
        price: Unit price
    """

    id: str
    name: str
    price: Money

    def __post_init__(self) -> None:
        """Validate product data after initialization."""
        if not self.id:
            raise ValueError("Product id is required")

    def to_dict(self) -> dict[str, Any]:
        """Convert product to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "price": self.price.amount,
            "currency": self.price.currency,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ProductDomain":
        """Create product from dictionary."""
        return cls(
            id=data["id"],
            name=data.get("name", ""),
            price=Money(amount=Decimal(str(data.get("price", "0"))), currency=data.get("currency", "EUR")),
        )
