"""Catalog product snapshot.

Products come from the catalog service together with any prices the
backend has already precomputed. The pricing engine only reads them.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from promoprice.domain.exceptions import EntityNotFoundError
from promoprice.domain.model.value_objects import Money


@dataclass(frozen=True)
class ProductVariant:
    variant_id: str
    price: Money
    name: str | None = None


@dataclass(frozen=True)
class Product:
    """A product as published by the catalog service.

    ``discount_price``, ``final_price`` and ``price_after_promotion`` are
    the backend's precomputed figures; any of them may be missing.
    """

    product_id: str
    name: str
    price: Money | None = None
    variants: tuple[ProductVariant, ...] = field(default_factory=tuple)
    discount_price: Money | None = None
    final_price: Money | None = None
    price_after_promotion: Money | None = None

    def find_variant(self, variant_id: str) -> ProductVariant:
        for variant in self.variants:
            if variant.variant_id == variant_id:
                return variant
        raise EntityNotFoundError(
            f"Variant '{variant_id}' not found on product '{self.name}'"
        )

    def unit_prices(self, selected_variant: ProductVariant | None = None) -> list[Money]:
        """Price set for this product.

        A selected variant narrows the set to its own price. A product with
        variants is priced from its positively priced variants only; the
        flat product price counts only when there are no variants. An empty
        list means pricing is unavailable.
        """
        if selected_variant is not None:
            return [selected_variant.price]

        if self.variants:
            return [v.price for v in self.variants if not v.price.is_zero]

        if self.price is not None and not self.price.is_zero:
            return [self.price]
        return []

    @property
    def server_discount_price(self) -> Money | None:
        """First precomputed figure the backend supplied, if any."""
        for candidate in (self.discount_price, self.final_price, self.price_after_promotion):
            if candidate is not None:
                return candidate
        return None
