"""
Money value object for handling monetary amounts with currency.

This value object ensures type safety and provides clear semantics
for monetary operations in the domain.
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal


@dataclass(frozen=True)
class Money:
    """
    Immutable value object representing a monetary amount with currency.

    Attributes:
        amount: The monetary amount as Decimal for precision
        currency: Currency code (e.g., "EUR")

    Example:
        >>> Money.from_string("49.9").amount
        Decimal('49.90')
    """

    amount: Decimal
    currency: str = "EUR"

    def __post_init__(self) -> None:
        """Validate money object after initialization."""
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, "amount", Decimal(str(self.amount)))

        # Catalog prices are expressed in cents
        normalized_amount = self.amount.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
        object.__setattr__(self, "amount", normalized_amount)

        if self.amount < 0:
            raise ValueError(f"Money amount cannot be negative: {self.amount}")

        if not self.currency or len(self.currency) != 3:
            raise ValueError(f"Invalid currency code: {self.currency}")

    def __str__(self) -> str:
        """String representation of Money."""
        return f"{self.currency} {self.amount:.2f}"

    @classmethod
    def from_string(cls, amount: str, currency: str = "EUR") -> "Money":
        """Create Money from string representation."""
        return cls(amount=Decimal(amount), currency=currency)
