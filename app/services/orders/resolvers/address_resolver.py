"""AddressResolver service - SRP compliance."""

import logging

from app.domain.value_objects import ResolvedAddress
from app.services.orders.interfaces import IGeocodingClient
from app.utils.error_handler import AddressLookupException, AddressNotFoundException
from app.utils.text_utils import remove_diacritics

logger = logging.getLogger(__name__)


class AddressResolver:
    """Resolves a free-text address to its canonical form (SRP: address lookup only)."""

    def __init__(self, geocoding_client: IGeocodingClient):
        """
        Initialize with SOLID dependencies (DIP).

        Args:
            geocoding_client: Client for the address search API
        """
        self.geocoding_client = geocoding_client

    async def resolve(self, street_address: str, city: str, postal_code: str) -> ResolvedAddress:
        """
        Resolve an address through the geocoding service.

        The geocoder's own ranking is trusted: the first feature wins and
        may differ arbitrarily from the input.

        Args:
            street_address: Free-text street line (accents allowed)
            city: City name (accents allowed)
            postal_code: Postal code, sent as-is

        Returns:
            ResolvedAddress: Canonical label, postal code and city

        Raises:
            AddressNotFoundException: If the geocoder returns no candidate
            AddressLookupException: If the call fails or the body is malformed
        """
        query = remove_diacritics(street_address)
        city_filter = remove_diacritics(city)

        body = await self.geocoding_client.search(query, city_filter, postal_code)

        features = body.get("features")
        if not isinstance(features, list):
            raise AddressLookupException("Malformed response body: 'features' is not a list")

        if not features:
            logger.info(f"No address candidate for '{query}' ({postal_code} {city_filter})")
            raise AddressNotFoundException(query=query)

        try:
            resolved = ResolvedAddress.from_feature(features[0])
        except (KeyError, TypeError) as e:
            raise AddressLookupException(f"Malformed feature in geocoding response: {str(e)}") from e

        logger.info(
            f"Address '{query}' resolved to '{resolved.canonical_label}, "
            f"{resolved.canonical_postal_code} {resolved.canonical_city}' (score={resolved.score})"
        )
        return resolved
