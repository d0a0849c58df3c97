"""Application service: Flash-Sale Feed use case (query).

Builds the home screen's flash-sale strip: products whose campaign is a
flash sale, shown as single prices, plus the countdown to the earliest
slot close among them.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime

from promoprice.application.clock import Clock, utc_now
from promoprice.application.dto import FlashSaleFeedDTO, PriceQuoteDTO, to_quote_dto
from promoprice.domain.model.campaign import Campaign, CampaignKind
from promoprice.domain.model.pricing import PricingInput
from promoprice.domain.repository.campaign_repository import CampaignRepository
from promoprice.domain.repository.product_repository import ProductRepository
from promoprice.domain.service.flash_sale import flash_sale_countdown
from promoprice.domain.service.price_resolver import PriceResolver

logger = logging.getLogger(__name__)

MAX_FLASH_SALE_ITEMS = 8


class FlashSaleFeedHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        campaign_repo: CampaignRepository,
        resolver: PriceResolver | None = None,
        clock: Clock = utc_now,
        limit: int = MAX_FLASH_SALE_ITEMS,
    ) -> None:
        self._product_repo = product_repo
        self._campaign_repo = campaign_repo
        self._resolver = resolver or PriceResolver()
        self._clock = clock
        self._limit = limit

    def handle(self, now: datetime | None = None) -> FlashSaleFeedDTO:
        now = now or self._clock()
        items: list[PriceQuoteDTO] = []
        feed_campaigns: list[Campaign] = []

        for product in self._product_repo.list_all():
            if len(items) >= self._limit:
                break
            campaigns = self._campaign_repo.for_product(product.product_id)
            resolution = self._resolver.resolve(
                PricingInput.for_product(product, campaigns), now
            )
            if resolution.campaign_kind is not CampaignKind.FLASH_SALE:
                continue

            dto = to_quote_dto(product.product_id, product.name, None, resolution)
            # Flash-sale cards always show a single price.
            items.append(replace(dto, original_range=None, discounted_range=None))
            feed_campaigns.extend(campaigns)

        countdown = flash_sale_countdown(now, feed_campaigns)
        logger.debug("Flash-sale feed: %d items, countdown %s", len(items), countdown)
        return FlashSaleFeedDTO(
            items=items,
            countdown_seconds=int(countdown.total_seconds()) if countdown is not None else None,
        )
