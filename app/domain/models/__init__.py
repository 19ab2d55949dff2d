"""
Domain models for business entities.

These models represent core business concepts and contain
business logic and invariants.
"""

from .customer import CustomerDomain
from .line_item import LineItemDomain
from .order import OrderDomain
from .product import ProductDomain
from .shipping_address import ShippingAddressDomain

__all__ = ["OrderDomain", "LineItemDomain", "CustomerDomain", "ShippingAddressDomain", "ProductDomain"]
