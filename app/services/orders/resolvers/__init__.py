"""
Resolver services for looking up external references of an order.
"""

from .address_resolver import AddressResolver
from .product_resolver import ProductResolver

__all__ = ["AddressResolver", "ProductResolver"]
