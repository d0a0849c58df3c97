"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world. Amounts are rendered
with ``str(Money)``; localized formatting belongs to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass

from promoprice.domain.model.pricing import PriceResolution


@dataclass(frozen=True)
class PriceQuoteDTO:
    """Output: the price block of one product card."""

    product_id: str
    name: str
    variant_id: str | None
    original_price: str
    display_price: str
    has_discount: bool
    discount_percent: int
    original_range: str | None
    discounted_range: str | None
    badge_label: str | None
    badge_color: str | None
    campaign_kind: str | None
    source: str
    available: bool


@dataclass(frozen=True)
class CartLineQuoteDTO:
    """Output: the price block of one cart line."""

    line_id: str
    name: str
    original_price: str
    display_price: str
    has_discount: bool
    discount_percent: int
    usage_exceeded: bool


@dataclass(frozen=True)
class FlashSaleFeedDTO:
    """Output: the home feed's flash-sale section."""

    items: list[PriceQuoteDTO]
    countdown_seconds: int | None


def to_quote_dto(
    product_id: str,
    name: str,
    variant_id: str | None,
    resolution: PriceResolution,
) -> PriceQuoteDTO:
    badge = resolution.campaign_badge
    return PriceQuoteDTO(
        product_id=product_id,
        name=name,
        variant_id=variant_id,
        original_price=str(resolution.original_price),
        display_price=str(resolution.display_price),
        has_discount=resolution.has_discount,
        discount_percent=resolution.discount_percent,
        original_range=str(resolution.original_range) if resolution.original_range else None,
        discounted_range=(
            str(resolution.discounted_range) if resolution.discounted_range else None
        ),
        badge_label=badge.label if badge else None,
        badge_color=badge.color if badge else None,
        campaign_kind=resolution.campaign_kind.value if resolution.campaign_kind else None,
        source=resolution.source.value,
        available=resolution.available,
    )
