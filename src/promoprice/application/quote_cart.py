"""Application service: Quote Cart use case (query)."""

from __future__ import annotations

from datetime import datetime

from promoprice.application.clock import Clock, utc_now
from promoprice.application.dto import CartLineQuoteDTO
from promoprice.domain.model.pricing import CartLine, PriceResolution
from promoprice.domain.repository.cart_repository import CartRepository
from promoprice.domain.service.price_resolver import PriceResolver


class QuoteCartHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        resolver: PriceResolver | None = None,
        clock: Clock = utc_now,
    ) -> None:
        self._cart_repo = cart_repo
        self._resolver = resolver or PriceResolver()
        self._clock = clock

    def handle(self, now: datetime | None = None) -> list[CartLineQuoteDTO]:
        """Price every cart line against one shared instant."""
        now = now or self._clock()
        return [
            self._to_dto(line, self._resolver.resolve_cart_line(line, now))
            for line in self._cart_repo.list_lines()
        ]

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_dto(line: CartLine, resolution: PriceResolution) -> CartLineQuoteDTO:
        return CartLineQuoteDTO(
            line_id=line.line_id,
            name=line.name,
            original_price=str(resolution.original_price),
            display_price=str(resolution.display_price),
            has_discount=resolution.has_discount,
            discount_percent=resolution.discount_percent,
            usage_exceeded=resolution.usage_exceeded,
        )
