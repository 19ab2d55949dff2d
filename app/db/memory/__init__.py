"""
In-memory repositories.

- OrderRepository: accepted orders (upsert / get / list)
- ProductRepository: product catalog (get / list / upsert)
"""

from .base import BaseMemoryRepository
from .order_repository import OrderRepository
from .product_repository import ProductRepository

__all__ = ["BaseMemoryRepository", "OrderRepository", "ProductRepository"]
