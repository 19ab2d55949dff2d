"""
Order services package for order creation and validation.

This package contains all services related to order processing,
following SOLID principles for better maintainability.
"""
