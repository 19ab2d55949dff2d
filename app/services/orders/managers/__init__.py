"""
Manager services for business operations.
"""

from .order_creator import OrderCreator

__all__ = ["OrderCreator"]
