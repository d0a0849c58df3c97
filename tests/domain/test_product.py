"""Unit tests for deriving a product's price set."""

import pytest

from promoprice.domain.exceptions import EntityNotFoundError
from promoprice.domain.model.pricing import PricingInput
from promoprice.domain.model.product import Product, ProductVariant
from promoprice.domain.model.value_objects import Money
from tests.builders import campaign, percent


def _product(**kwargs) -> Product:
    defaults = dict(product_id="p1", name="Shirt", price=Money.of(100000))
    defaults.update(kwargs)
    return Product(**defaults)


def _variants(*amounts: int) -> tuple[ProductVariant, ...]:
    return tuple(ProductVariant(variant_id=f"v{i}", price=Money.of(a)) for i, a in enumerate(amounts))


class TestUnitPrices:

    def test_flat_price(self):
        assert _product().unit_prices() == [Money.of(100000)]

    def test_variant_prices_win_over_flat_price(self):
        product = _product(variants=_variants(80000, 120000))
        assert product.unit_prices() == [Money.of(80000), Money.of(120000)]

    def test_zero_priced_variants_are_skipped(self):
        product = _product(variants=_variants(0, 120000))
        assert product.unit_prices() == [Money.of(120000)]

    def test_all_variants_unpriced_is_unavailable(self):
        product = _product(variants=_variants(0, 0))
        assert product.unit_prices() == []

    def test_selected_variant_narrows_set(self):
        product = _product(variants=_variants(80000, 120000))
        selected = product.find_variant("v1")
        assert product.unit_prices(selected) == [Money.of(120000)]

    def test_no_price_at_all(self):
        assert _product(price=None).unit_prices() == []
        assert _product(price=Money.zero()).unit_prices() == []

    def test_unknown_variant(self):
        with pytest.raises(EntityNotFoundError, match="Variant 'nope' not found"):
            _product().find_variant("nope")


class TestServerDiscountPrice:

    def test_discount_price_first(self):
        product = _product(
            discount_price=Money.of(70000),
            final_price=Money.of(80000),
            price_after_promotion=Money.of(90000),
        )
        assert product.server_discount_price == Money.of(70000)

    def test_falls_through_missing_fields(self):
        assert _product(price_after_promotion=Money.of(90000)).server_discount_price == Money.of(90000)

    def test_none_supplied(self):
        assert _product().server_discount_price is None


class TestPricingInputForProduct:

    def test_builds_input(self):
        c = campaign(percent(10))
        product = _product(final_price=Money.of(100000))
        pricing_input = PricingInput.for_product(product, [c])
        assert pricing_input.unit_prices == (Money.of(100000),)
        assert pricing_input.campaigns == (c,)
        assert pricing_input.server_discount_price == Money.of(100000)
        assert not pricing_input.campaign_usage_exceeded
