"""
Customer domain model.

Represents the person an order is placed for.
"""

from dataclasses import dataclass
from typing import Any


@dataclass
class CustomerDomain:
    """
    Domain model representing a customer.

    Completeness is a business rule checked by the order validator,
    so empty names are allowed at construction time.

    Attributes:
        first_name: Customer first name
        last_name: Customer last name
    """

    first_name: str = ""
    last_name: str = ""

    @property
    def is_complete(self) -> bool:
        """Both names are present (raw emptiness, no trimming)."""
        return self.first_name != "" and self.last_name != ""

    def to_dict(self) -> dict[str, Any]:
        """Convert customer to dictionary."""
        return {"first_name": self.first_name, "last_name": self.last_name}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CustomerDomain":
        """Create customer from dictionary."""
        return cls(
            first_name=data.get("first_name", ""),
            last_name=data.get("last_name", ""),
        )
