"""
ResolvedAddress value object.

Flat projection of the best candidate returned by the geocoding service.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ResolvedAddress:
    """
    Canonical address returned by the geocoder.

    Attributes:
        canonical_label: Street line as named by the geocoder (e.g. "20 Avenue de Segur")
        canonical_postal_code: Postal code of the candidate
        canonical_city: City of the candidate
        score: Relevance score reported by the geocoder, if any
    """

    canonical_label: str
    canonical_postal_code: str
    canonical_city: str
    score: float | None = None

    @classmethod
    def from_feature(cls, feature: dict[str, Any]) -> "ResolvedAddress":
        """
        Build a ResolvedAddress from a GeoJSON feature.

        Args:
            feature: One element of the ``features`` array

        Returns:
            ResolvedAddress: Projection of ``feature["properties"]``

        Raises:
            KeyError, TypeError: If the feature is not shaped as expected
        """
        properties = feature["properties"]
        if any(properties[key] is None for key in ("name", "postcode", "city")):
            raise TypeError("feature properties name/postcode/city must not be null")

        return cls(
            canonical_label=str(properties["name"]),
            canonical_postal_code=str(properties["postcode"]),
            canonical_city=str(properties["city"]),
            score=properties.get("score"),
        )
