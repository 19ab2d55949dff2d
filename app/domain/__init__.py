"""
Domain layer for the Order Validation Service.

This layer contains business entities, value objects, and domain logic
following Domain-Driven Design principles.
"""
