"""
Geocoding HTTP client.

Thin aiohttp wrapper around the address search endpoint
(``https://api-adresse.data.gouv.fr/search/`` by default). It performs a
single GET per call, with no retry and no timeout beyond aiohttp's
defaults, and reports every transport-level problem as
``AddressLookupException``.
"""

import asyncio
import logging
import time
from typing import Any, Dict, Optional

import aiohttp

from app.core.config import get_settings
from app.core.logging_config import log_api_call
from app.utils.error_handler import AddressLookupException

logger = logging.getLogger(__name__)


class GeocodingClient:
    """
    Client for the address search API.

    The session is created by ``initialize()`` (or on entering the client as
    an async context manager) and shared by all lookups of the process.
    """

    def __init__(self, base_url: Optional[str] = None):
        """
        Initialize the geocoding client.

        Args:
            base_url: Search endpoint. Defaults to ``GEOCODING_API_URL``.
        """
        self.settings = get_settings()
        self.base_url = base_url or self.settings.GEOCODING_API_URL
        self.session: Optional[aiohttp.ClientSession] = None

        logger.info(f"Initialized geocoding client for {self.base_url}")

    async def initialize(self):
        """Create the HTTP session."""
        if self.session:
            return

        self.session = aiohttp.ClientSession(
            headers={
                "Accept": "application/json",
                "User-Agent": f"{self.settings.APP_NAME}/{self.settings.APP_VERSION}",
            },
        )
        logger.info("✅ Geocoding client session opened")

    async def close(self):
        """Close the HTTP session and clean up resources."""
        if self.session:
            await self.session.close()
            self.session = None
            logger.info("Geocoding client closed")

    async def __aenter__(self) -> "GeocodingClient":
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def search(self, query: str, city: str, postcode: str) -> Dict[str, Any]:
        """
        Search an address.

        Args:
            query: Free-text street address
            city: City filter
            postcode: Postal code filter

        Returns:
            Dict: Decoded JSON body (a GeoJSON feature collection)

        Raises:
            AddressLookupException: On connection error, non-2xx status or
                a body that is not a JSON object
        """
        if not self.session:
            raise AddressLookupException("Client not initialized. Call initialize() first.", endpoint=self.base_url)

        params = {"q": query, "city": city, "postcode": postcode}
        logger.debug(f"Geocoding request: {self.base_url} params={params}")

        start_time = time.monotonic()
        try:
            async with self.session.get(self.base_url, params=params) as response:
                log_api_call("GET", str(response.url), response.status, time.monotonic() - start_time)

                if not 200 <= response.status < 300:
                    raise AddressLookupException(
                        f"HTTP {response.status} from geocoding service",
                        api_response_code=response.status,
                        endpoint=self.base_url,
                    )

                body = await response.json(content_type=None)

        except aiohttp.ClientError as e:
            raise AddressLookupException(f"Network error: {str(e)}", endpoint=self.base_url) from e
        except asyncio.TimeoutError as e:
            raise AddressLookupException("Geocoding request timed out", endpoint=self.base_url) from e
        except ValueError as e:
            raise AddressLookupException(f"Malformed response body: {str(e)}", endpoint=self.base_url) from e

        if not isinstance(body, dict):
            raise AddressLookupException("Malformed response body: expected a JSON object", endpoint=self.base_url)

        return body
