"""
Shipping address domain model.
"""

from dataclasses import dataclass
from typing import Any

from app.domain.value_objects.resolved_address import ResolvedAddress


@dataclass
class ShippingAddressDomain:
    """
    Mutable shipping address of a candidate order.

    ``street_address``, ``postal_code`` and ``city`` are replaced by the
    geocoder's canonical values once the address has been resolved.

    Attributes:
        street_address: Free-text street line
        postal_code: Postal code
        city: City name
        country: Destination country
    """

    street_address: str = ""
    postal_code: str = ""
    city: str = ""
    country: str = ""

    @property
    def is_complete(self) -> bool:
        """Street, city and postal code are all non-empty."""
        return self.street_address != "" and self.city != "" and self.postal_code != ""

    def apply_resolution(self, resolved: ResolvedAddress) -> None:
        """Overwrite the free-text fields with the resolved canonical values."""
        self.street_address = resolved.canonical_label
        self.postal_code = resolved.canonical_postal_code
        self.city = resolved.canonical_city

    def to_dict(self) -> dict[str, Any]:
        """Convert address to dictionary."""
        return {
            "street_address": self.street_address,
            "postal_code": self.postal_code,
            "city": self.city,
            "country": self.country,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ShippingAddressDomain":
        """Create address from dictionary."""
        return cls(
            street_address=data.get("street_address", ""),
            postal_code=data.get("postal_code", ""),
            city=data.get("city", ""),
            country=data.get("country", ""),
        )
