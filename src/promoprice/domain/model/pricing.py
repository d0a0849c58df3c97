"""Input and output shapes of the price resolver."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from promoprice.domain.model.campaign import Campaign, CampaignBadge, CampaignKind
from promoprice.domain.model.product import Product, ProductVariant
from promoprice.domain.model.value_objects import Money, PriceRange


class PriceSource(Enum):
    SERVER = "SERVER"
    CAMPAIGN = "CAMPAIGN"
    NONE = "NONE"


@dataclass(frozen=True)
class PricingInput:
    """Everything the resolver needs for one product card or line.

    ``unit_prices`` may be empty, which the resolver reports as
    "pricing unavailable" rather than raising.
    """

    unit_prices: tuple[Money, ...]
    campaigns: tuple[Campaign, ...] = field(default_factory=tuple)
    server_discount_price: Money | None = None
    campaign_usage_exceeded: bool = False

    @staticmethod
    def for_product(
        product: Product,
        campaigns: list[Campaign] | tuple[Campaign, ...],
        selected_variant: ProductVariant | None = None,
    ) -> PricingInput:
        return PricingInput(
            unit_prices=tuple(product.unit_prices(selected_variant)),
            campaigns=tuple(campaigns),
            server_discount_price=product.server_discount_price,
        )


@dataclass(frozen=True)
class CartLine:
    """A cart line as priced by the cart service.

    ``unit_price`` is the price the backend currently charges,
    ``base_unit_price`` the price before any platform campaign, and
    ``platform_campaign_price`` the campaign price when the line is in one.
    """

    line_id: str
    name: str
    unit_price: Money
    base_unit_price: Money | None = None
    platform_campaign_price: Money | None = None
    in_platform_campaign: bool = False
    campaign_usage_exceeded: bool = False

    @property
    def shows_campaign_price(self) -> bool:
        return (
            self.in_platform_campaign
            and self.platform_campaign_price is not None
            and not self.campaign_usage_exceeded
        )

    def to_pricing_input(self) -> PricingInput:
        """Map the line onto the resolver's input.

        Only a shown campaign price is compared against the pre-campaign
        base price. Every other line displays the charged ``unit_price``.
        """
        if self.shows_campaign_price:
            base = self.base_unit_price if self.base_unit_price is not None else self.unit_price
            return PricingInput(
                unit_prices=(base,),
                server_discount_price=self.platform_campaign_price,
            )
        return PricingInput(
            unit_prices=(self.unit_price,),
            campaign_usage_exceeded=self.campaign_usage_exceeded,
        )


@dataclass(frozen=True)
class PriceResolution:
    """What a screen renders for one product or line.

    Invariants:
    - ``display_price <= original_price``
    - ``has_discount`` is False whenever the two prices are equal
    - ``discount_percent`` is 0 exactly when there is no discount
    - ``campaign_badge`` is only set while a discount is shown
    """

    original_price: Money
    display_price: Money
    has_discount: bool = False
    discount_percent: int = 0
    original_range: PriceRange | None = None
    discounted_range: PriceRange | None = None
    campaign_badge: CampaignBadge | None = None
    campaign_kind: CampaignKind | None = None
    source: PriceSource = PriceSource.NONE
    usage_exceeded: bool = False
    available: bool = True
