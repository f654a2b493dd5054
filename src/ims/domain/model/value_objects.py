"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, DecimalException, InvalidOperation

from ims.domain.exceptions import InvalidQuantityError, ValidationError

# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
MAX_PRICE = Decimal("1000000000000")


@dataclass(frozen=True)
class Money:
    """Monetary amount with currency.

    Zero is a legal amount (free items, empty ledgers); negative is not.
    """

    amount: Decimal
    currency: str = "USD"

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Money amount must be finite, got {self.amount}")
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )
        if self.amount.is_zero() and self.amount.is_signed():
            object.__setattr__(self, "amount", self.amount.copy_abs())

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        try:
            return Money(self.amount + other.amount, self.currency)
        except DecimalException as exc:
            raise ValidationError(f"Money amount out of range: {exc!r}") from exc

    def __mul__(self, factor: int) -> Money:
        if isinstance(factor, bool) or not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        try:
            return Money(self.amount * factor, self.currency)
        except DecimalException as exc:
            raise ValidationError(f"Money amount out of range: {exc!r}") from exc

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"${self.amount:.2f}"

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def zero(currency: str = "USD") -> Money:
        return Money(Decimal("0.00"), currency)

    @staticmethod
    def of(amount: str | float | int | Decimal, currency: str = "USD") -> Money:
        """Coerce a unit price to Money, rejecting anything above MAX_PRICE."""
        if isinstance(amount, Decimal):
            value = amount
        else:
            try:
                value = Decimal(str(amount).strip())
            except (InvalidOperation, ValueError) as exc:
                raise ValidationError(f"Invalid money amount: {amount!r}") from exc
        money = Money(value, currency)
        if money.amount > MAX_PRICE:
            raise ValidationError(
                f"Money amount {value} exceeds the maximum of {MAX_PRICE}"
            )
        return money


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity.

    Enforces the invariant that you cannot sell zero or negative items.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise InvalidQuantityError("Quantity must be positive")


def require_stock_level(quantity: int) -> int:
    """Validate a stock level: a non-negative integer."""
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        raise ValidationError(
            f"Stock quantity must be an integer, got {type(quantity).__name__}"
        )
    if quantity < 0:
        raise ValidationError(f"Stock quantity cannot be negative, got {quantity}")
    return quantity


def require_text(value: str, field_name: str) -> str:
    """Return *value* stripped, rejecting blank or non-string input."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"Product {field_name} is required")
    return value.strip()
