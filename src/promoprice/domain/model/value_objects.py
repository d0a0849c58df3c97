"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation

from promoprice.domain.exceptions import ValidationError

DEFAULT_CURRENCY = "VND"
ACTIVE_STATUS = "ACTIVE"

_ZERO = Decimal("0")


def is_active_status(status: str | None) -> bool:
    """True when a backend status flag does not switch something off.

    The promotions schema allows the field to be omitted; omission means
    "not explicitly turned off", never "inactive".
    """
    if not status:
        return True
    return status.strip().upper() == ACTIVE_STATUS


def as_utc(moment: datetime) -> datetime:
    """Interpret naive datetimes as UTC so they compare with aware ones."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment


@dataclass(frozen=True)
class Money:
    """Non-negative monetary amount with currency.

    Uses Decimal to avoid floating-point rounding errors. The pricing
    engine never produces a negative amount: subtraction goes through
    ``minus_clamped`` which floors at zero.
    """

    amount: Decimal
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Money amount must be finite, got {self.amount}")
        if self.amount < _ZERO:
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def minus_clamped(self, amount: Decimal) -> Money:
        """Subtract a raw amount, clamping the result to zero."""
        return Money(max(_ZERO, self.amount - amount), self.currency)

    def clamp(self, ceiling: Money) -> Money:
        """Return this amount, or *ceiling* when this one is larger."""
        return ceiling if self > ceiling else self

    @property
    def is_zero(self) -> bool:
        return self.amount == _ZERO

    def __lt__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount < other.amount

    def __le__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount <= other.amount

    def __gt__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount > other.amount

    def __ge__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount >= other.amount

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.amount.normalize():f} {self.currency}"

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal, currency: str = DEFAULT_CURRENCY) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        try:
            return Money(Decimal(str(amount)), currency)
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc

    @staticmethod
    def zero(currency: str = DEFAULT_CURRENCY) -> Money:
        return Money(_ZERO, currency)


@dataclass(frozen=True)
class TimeWindow:
    """An optional ``[start, end]`` pair of instants.

    A missing ``start`` means "always started" and a missing ``end`` means
    "never ends". Both boundaries are inclusive.
    """

    start: datetime | None = None
    end: datetime | None = None

    @property
    def is_bounded(self) -> bool:
        """True when at least one bound is declared."""
        return self.start is not None or self.end is not None

    def contains(self, now: datetime) -> bool:
        now = as_utc(now)
        if self.start is not None and now < as_utc(self.start):
            return False
        if self.end is not None and now > as_utc(self.end):
            return False
        return True


@dataclass(frozen=True)
class SlotWindow:
    """A flash-sale time slot with its own status flag.

    A slot is only *exposed* when both its open and close instants are
    known; a half-specified slot is ignored by the activity rules.
    """

    window: TimeWindow
    status: str | None = None

    @property
    def is_exposed(self) -> bool:
        return self.window.start is not None and self.window.end is not None

    @property
    def is_enabled(self) -> bool:
        return self.is_exposed and is_active_status(self.status)

    @property
    def close_time(self) -> datetime | None:
        return self.window.end


@dataclass(frozen=True)
class PriceRange:
    """Min/max over a product's price set. Never degenerate."""

    min: Money
    max: Money

    def __post_init__(self) -> None:
        if self.min >= self.max:
            raise ValidationError(
                f"Price range must span distinct values, got {self.min} - {self.max}"
            )

    def __str__(self) -> str:
        return f"{self.min} - {self.max}"
