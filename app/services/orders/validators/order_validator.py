"""
OrderValidator service for validating candidate orders before acceptance.

This service follows SRP (Single Responsibility Principle) by focusing only on
the business rules a candidate order must satisfy. It does not store anything.
"""

import logging

from app.domain.models import OrderDomain
from app.services.orders.interfaces import IAddressResolver, IProductResolver
from app.utils.error_handler import (
    IncompleteAddressException,
    IncompleteCustomerException,
    ProductNotFoundException,
    UnsupportedCountryException,
)

logger = logging.getLogger(__name__)

SUPPORTED_COUNTRY = "France"
SUPPORTED_COUNTRY_ALIASES = frozenset({"", "france", "fr"})


class OrderValidator:
    """
    Validates a candidate order and normalizes its shipping address.

    Responsibilities:
    - Customer name completeness
    - Product existence, in line item order
    - Destination country
    - Address completeness and resolution
    """

    def __init__(self, product_resolver: IProductResolver, address_resolver: IAddressResolver):
        """
        Initialize validator with its lookups (DIP).

        Args:
            product_resolver: Catalog lookup
            address_resolver: Geocoding-backed address resolution
        """
        self.product_resolver = product_resolver
        self.address_resolver = address_resolver

    async def validate_and_prepare(self, order: OrderDomain) -> OrderDomain:
        """
        Validates a candidate order and returns it with a canonical address.

        Stages run in order and the first failure aborts the rest. The order's
        shipping address is mutated in place on success.

        Args:
            order: Candidate order

        Returns:
            OrderDomain: The same order, normalized

        Raises:
            IncompleteCustomerException: Empty first or last name
            ProductNotFoundException: First line item whose product is unknown
            UnsupportedCountryException: Destination outside France
            IncompleteAddressException: Empty street, city or postal code
            AddressNotFoundException: Geocoder found no candidate
            AddressLookupException: Geocoder call failed
        """
        self._validate_customer(order)
        await self._validate_products(order)
        await self._verify_address(order)

        logger.info(f"Order {order.id} validation passed successfully")
        return order

    def _validate_customer(self, order: OrderDomain) -> None:
        if not order.customer.is_complete:
            raise IncompleteCustomerException()

    async def _validate_products(self, order: OrderDomain) -> None:
        """
        Checks every line item against the catalog, stopping at the first miss.

        A failing lookup is reported the same way as an unknown product.
        """
        for item in order.line_items:
            try:
                found = await self.product_resolver.exists(item.product_id)
            except Exception as e:
                logger.warning(f"Product lookup failed for {item.product_id}: {str(e)}")
                raise ProductNotFoundException(item.product_id) from e

            if not found:
                raise ProductNotFoundException(item.product_id)

    async def _verify_address(self, order: OrderDomain) -> None:
        address = order.shipping_address

        if address.country.lower() not in SUPPORTED_COUNTRY_ALIASES:
            raise UnsupportedCountryException(address.country)
        address.country = SUPPORTED_COUNTRY

        if not address.is_complete:
            raise IncompleteAddressException()

        resolved = await self.address_resolver.resolve(
            address.street_address, address.city, address.postal_code
        )
        address.apply_resolution(resolved)
