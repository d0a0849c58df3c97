"""Domain service: apply one voucher to one unit price."""

from __future__ import annotations

from decimal import Decimal

from promoprice.domain.model.campaign import Voucher, VoucherType
from promoprice.domain.model.value_objects import Money

_HUNDRED = Decimal("100")
_ZERO = Decimal("0")


def discount_amount(unit_price: Money, voucher: Voucher) -> Decimal:
    """Absolute amount *voucher* takes off *unit_price*, before clamping."""
    if voucher.type is VoucherType.PERCENT:
        amount = unit_price.amount * voucher.discount_percent / _HUNDRED  # type: ignore[operator]
        if voucher.max_discount_value is not None:
            amount = min(amount, max(_ZERO, voucher.max_discount_value))
        return amount
    return voucher.discount_value  # type: ignore[return-value]


def apply_discount(unit_price: Money, voucher: Voucher | None) -> Money:
    """Return the discounted unit price, never below zero.

    No voucher, a voucher without a usable amount, or a non-positive
    price leave the price unchanged.
    """
    if voucher is None or not voucher.is_usable or unit_price.is_zero:
        return unit_price
    return unit_price.minus_clamped(discount_amount(unit_price, voucher))
