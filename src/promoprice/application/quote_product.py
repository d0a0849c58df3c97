"""Application service: Quote Product use case (query).

Looks up a product and its campaigns, then asks the domain resolver for
the price block of a product card or the product detail screen.
"""

from __future__ import annotations

from datetime import datetime

from promoprice.application.clock import Clock, utc_now
from promoprice.application.dto import PriceQuoteDTO, to_quote_dto
from promoprice.application.resolution_cache import ResolutionCache
from promoprice.domain.exceptions import EntityNotFoundError
from promoprice.domain.model.pricing import PricingInput
from promoprice.domain.repository.campaign_repository import CampaignRepository
from promoprice.domain.repository.product_repository import ProductRepository
from promoprice.domain.service.price_resolver import PriceResolver


class QuoteProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        campaign_repo: CampaignRepository,
        resolver: PriceResolver | None = None,
        clock: Clock = utc_now,
        cache: ResolutionCache | None = None,
    ) -> None:
        self._product_repo = product_repo
        self._campaign_repo = campaign_repo
        self._resolver = resolver or PriceResolver()
        self._clock = clock
        self._cache = cache

    def handle(
        self,
        product_id: str,
        variant_id: str | None = None,
        now: datetime | None = None,
    ) -> PriceQuoteDTO:
        """Quote one product, optionally narrowed to a selected variant.

        Steps:
        1. Resolve the product (and variant) or fail.
        2. Collect the product's campaigns in backend order.
        3. Resolve against a single ``now`` (the caller's, or the clock's).
        """
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product '{product_id}' not found")

        variant = product.find_variant(variant_id) if variant_id is not None else None
        now = now or self._clock()

        def resolve():
            pricing_input = PricingInput.for_product(
                product, self._campaign_repo.for_product(product.product_id), variant
            )
            return self._resolver.resolve(pricing_input, now)

        if self._cache is None:
            resolution = resolve()
        else:
            key = self._cache.key(
                product.product_id, variant_id, self._campaign_repo.version(), now
            )
            resolution = self._cache.get_or_resolve(key, resolve)

        return to_quote_dto(product.product_id, product.name, variant_id, resolution)
