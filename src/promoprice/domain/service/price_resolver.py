"""Domain service: Server-Precedence Price Resolver.

Entry point of the pricing engine. Decides whether the backend already
supplied a trustworthy discounted price or whether the discount must be
computed from the active campaign, then packages a PriceResolution.

The resolver is pure: given the same input and the same ``now`` it
returns the same result, and it never raises for malformed promotion
data. Broken promotions degrade to "no discount" so a shopper always
sees *a* price.
"""

from __future__ import annotations

import logging
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal

from promoprice.domain.model.campaign import Campaign, CampaignKind
from promoprice.domain.model.pricing import (
    CartLine,
    PriceResolution,
    PriceSource,
    PricingInput,
)
from promoprice.domain.model.value_objects import DEFAULT_CURRENCY, Money, PriceRange
from promoprice.domain.service.activity import select_active_voucher
from promoprice.domain.service.price_aggregator import aggregate, price_range

logger = logging.getLogger(__name__)


def discount_percent(original_price: Money, display_price: Money) -> int:
    """Percentage off, rounded half-up, for a shown discount.

    Returns 0 when nothing is taken off. A discount that rounds to 0%
    is reported as 1% so a shown markdown never reads "-0%".
    """
    if original_price.is_zero or display_price >= original_price:
        return 0
    ratio = (original_price.amount - display_price.amount) / original_price.amount * 100
    percent = int(ratio.quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    return min(100, max(1, percent))


class PriceResolver:

    def resolve(self, pricing_input: PricingInput, now: datetime) -> PriceResolution:
        """Resolve the price to show for one product card or line.

        Steps:
        1. No unit price at all -> "unavailable" resolution.
        2. Campaign usage exceeded -> plain price, every discount withheld.
        3. A server price that differs from the original is trusted.
        4. Otherwise the first active voucher of the first active campaign
           is applied across the price set.
        """
        unit_prices = list(pricing_input.unit_prices)
        if not unit_prices:
            zero = Money.zero(DEFAULT_CURRENCY)
            return PriceResolution(original_price=zero, display_price=zero, available=False)

        campaigns = pricing_input.campaigns
        original_price = min(unit_prices)

        if pricing_input.campaign_usage_exceeded:
            logger.debug("Campaign usage exceeded; withholding discount")
            return PriceResolution(
                original_price=original_price,
                display_price=original_price,
                original_range=price_range(unit_prices),
                campaign_kind=self._first_kind(campaigns),
                usage_exceeded=True,
            )

        selected_campaign, voucher = select_active_voucher(now, campaigns)
        server_price = pricing_input.server_discount_price

        if server_price is not None and server_price != original_price:
            logger.debug(
                "Trusting server price %s over original %s", server_price, original_price
            )
            display_price = server_price.clamp(original_price)
            if display_price.is_zero:
                display_price = original_price
            return self._package(
                original_price=original_price,
                display_price=display_price,
                original_range=price_range(unit_prices),
                discounted_range=None,
                badge_campaign=selected_campaign or self._first(campaigns),
                campaign_kind=self._kind_of(selected_campaign, campaigns),
                source=PriceSource.SERVER,
            )

        result = aggregate(unit_prices, voucher)
        return self._package(
            original_price=result.original_price,
            display_price=result.display_price,
            original_range=result.original_range,
            discounted_range=result.discounted_range,
            badge_campaign=selected_campaign or self._first(campaigns),
            campaign_kind=self._kind_of(selected_campaign, campaigns),
            source=PriceSource.CAMPAIGN,
        )

    def resolve_cart_line(self, line: CartLine, now: datetime) -> PriceResolution:
        """Resolve a cart line priced by the cart service.

        When the shopper has used up the campaign, the campaign price is
        never shown even if the backend still sends it.
        """
        return self.resolve(line.to_pricing_input(), now)

    # --- Internal helpers -----------------------------------------------------

    def _package(
        self,
        original_price: Money,
        display_price: Money,
        original_range: PriceRange | None,
        discounted_range: PriceRange | None,
        badge_campaign: Campaign | None,
        campaign_kind: CampaignKind | None,
        source: PriceSource,
    ) -> PriceResolution:
        has_discount = display_price < original_price and not display_price.is_zero
        if not has_discount:
            return PriceResolution(
                original_price=original_price,
                display_price=original_price,
                original_range=original_range,
                campaign_kind=campaign_kind,
            )
        return PriceResolution(
            original_price=original_price,
            display_price=display_price,
            has_discount=True,
            discount_percent=discount_percent(original_price, display_price),
            original_range=original_range,
            discounted_range=discounted_range,
            campaign_badge=badge_campaign.badge if badge_campaign is not None else None,
            campaign_kind=campaign_kind,
            source=source,
        )

    @staticmethod
    def _first(campaigns: tuple[Campaign, ...]) -> Campaign | None:
        return campaigns[0] if campaigns else None

    def _kind_of(
        self, selected: Campaign | None, campaigns: tuple[Campaign, ...]
    ) -> CampaignKind | None:
        if selected is not None:
            return selected.kind
        return self._first_kind(campaigns)

    def _first_kind(self, campaigns: tuple[Campaign, ...]) -> CampaignKind | None:
        first = self._first(campaigns)
        return first.kind if first is not None else None
