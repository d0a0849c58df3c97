"""Domain service: Price Aggregator.

Collapses a product's price set (one price, or one per variant) into the
figures a card shows: the cheapest original price, the cheapest
discounted price, and min-max ranges when the variants differ.
"""

from __future__ import annotations

from dataclasses import dataclass

from promoprice.domain.model.campaign import Voucher
from promoprice.domain.model.value_objects import DEFAULT_CURRENCY, Money, PriceRange
from promoprice.domain.service.discount_calculator import apply_discount


@dataclass(frozen=True)
class PriceAggregate:
    original_price: Money
    display_price: Money
    original_range: PriceRange | None = None
    discounted_range: PriceRange | None = None

    @property
    def is_discounted(self) -> bool:
        return self.display_price < self.original_price


def price_range(prices: list[Money]) -> PriceRange | None:
    if len(prices) < 2:
        return None
    low, high = min(prices), max(prices)
    if low == high:
        return None
    return PriceRange(min=low, max=high)


def aggregate(unit_prices: list[Money], voucher: Voucher | None) -> PriceAggregate:
    """Apply *voucher* (if any) to every unit price and summarize.

    A display price wiped out to zero while the original is positive is
    treated as malformed promotion data: the original price is shown and
    no discounted range is emitted.
    """
    if not unit_prices:
        zero = Money.zero(DEFAULT_CURRENCY)
        return PriceAggregate(original_price=zero, display_price=zero)

    discounted = [apply_discount(p, voucher) for p in unit_prices]
    original_price = min(unit_prices)
    display_price = min(discounted)
    original_range = price_range(unit_prices)

    if display_price.is_zero and not original_price.is_zero:
        return PriceAggregate(
            original_price=original_price,
            display_price=original_price,
            original_range=original_range,
        )

    discounted_range = price_range(discounted)
    if discounted_range == original_range:
        discounted_range = None

    return PriceAggregate(
        original_price=original_price,
        display_price=display_price,
        original_range=original_range,
        discounted_range=discounted_range,
    )
