"""
Interfaces/Protocols for order services (Dependency Inversion Principle).

These protocols define contracts that services must implement,
allowing for loose coupling and easy testing.
"""

from typing import Any, Protocol

from app.domain.models import OrderDomain
from app.domain.value_objects import ResolvedAddress


class IGeocodingClient(Protocol):
    """Protocol for the address search transport."""

    async def search(self, query: str, city: str, postcode: str) -> dict[str, Any]:
        """Run one address search and return the decoded body."""
        ...


class IAddressResolver(Protocol):
    """Protocol for address resolution services."""

    async def resolve(self, street_address: str, city: str, postal_code: str) -> ResolvedAddress:
        """Resolve a free-text address to its canonical form."""
        ...


class IProductResolver(Protocol):
    """Protocol for product catalog lookups."""

    async def exists(self, product_id: str) -> bool:
        """Check whether a product exists."""
        ...


class IOrderValidator(Protocol):
    """Protocol for order validation services."""

    async def validate_and_prepare(self, order: OrderDomain) -> OrderDomain:
        """Validate an order and normalize it in place."""
        ...


class IOrderCreator(Protocol):
    """Protocol for order acceptance services."""

    async def accept(self, order: OrderDomain) -> None:
        """Store a validated order."""
        ...
