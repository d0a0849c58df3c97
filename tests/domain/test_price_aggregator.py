"""Unit tests for the Price Aggregator."""

from promoprice.domain.model.value_objects import Money, PriceRange
from promoprice.domain.service.price_aggregator import aggregate, price_range
from tests.builders import fixed, percent


def _prices(*amounts: int) -> list[Money]:
    return [Money.of(a) for a in amounts]


class TestSinglePrice:

    def test_no_voucher(self):
        result = aggregate(_prices(100000), None)
        assert result.original_price == Money.of(100000)
        assert result.display_price == Money.of(100000)
        assert result.original_range is None
        assert result.discounted_range is None
        assert not result.is_discounted

    def test_with_voucher(self):
        result = aggregate(_prices(200000), percent(20))
        assert result.display_price == Money.of(160000)
        assert result.original_range is None


class TestVariants:

    def test_ranges(self):
        result = aggregate(_prices(120000, 80000), fixed(10000))
        assert result.original_price == Money.of(80000)
        assert result.display_price == Money.of(70000)
        assert result.original_range == PriceRange(Money.of(80000), Money.of(120000))
        assert result.discounted_range == PriceRange(Money.of(70000), Money.of(110000))

    def test_identical_variant_prices_have_no_range(self):
        result = aggregate(_prices(50000, 50000), percent(10))
        assert result.original_range is None
        assert result.discounted_range is None
        assert result.display_price == Money.of(45000)

    def test_no_discounted_range_without_voucher(self):
        result = aggregate(_prices(80000, 120000), None)
        assert result.original_range is not None
        assert result.discounted_range is None

    def test_display_is_cheapest_discounted_price(self):
        # A cap makes the dearer variant's discount bigger in absolute terms
        # but the cheapest discounted price still comes from the cheaper one.
        result = aggregate(_prices(100000, 300000), percent(50, cap=60000))
        assert result.display_price == Money.of(50000)
        assert result.discounted_range == PriceRange(Money.of(50000), Money.of(240000))

    def test_discounted_range_can_collapse(self):
        result = aggregate(_prices(10000, 20000), fixed(50000))
        assert result.discounted_range is None


class TestZeroGuard:

    def test_full_wipeout_falls_back_to_original(self):
        result = aggregate(_prices(5000), fixed(10000))
        assert result.display_price == Money.of(5000)
        assert not result.is_discounted

    def test_wipeout_of_cheapest_variant_drops_discounted_range(self):
        result = aggregate(_prices(5000, 30000), fixed(10000))
        assert result.display_price == Money.of(5000)
        assert result.discounted_range is None
        assert result.original_range == PriceRange(Money.of(5000), Money.of(30000))


class TestEmpty:

    def test_empty_price_set(self):
        result = aggregate([], percent(10))
        assert result.original_price == Money.zero()
        assert result.display_price == Money.zero()


class TestPriceRange:

    def test_single_price_has_no_range(self):
        assert price_range(_prices(100000)) is None

    def test_range_spans_min_and_max(self):
        assert price_range(_prices(120000, 80000, 100000)) == PriceRange(
            min=Money.of(80000), max=Money.of(120000)
        )
