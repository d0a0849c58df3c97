"""Integration tests for the QuoteCart use case."""

from promoprice.application.quote_cart import QuoteCartHandler
from promoprice.domain.model.pricing import CartLine
from promoprice.domain.model.value_objects import Money
from tests.builders import NOW
from tests.fakes import FakeCartRepository


def _line(line_id: str, **kwargs) -> CartLine:
    defaults = dict(
        name=f"Item {line_id}",
        unit_price=Money.of(100000),
        base_unit_price=Money.of(100000),
        platform_campaign_price=Money.of(50000),
        in_platform_campaign=True,
    )
    defaults.update(kwargs)
    return CartLine(line_id=line_id, **defaults)


class TestQuoteCart:

    def test_prices_every_line(self):
        repo = FakeCartRepository([
            _line("1"),
            _line("2", campaign_usage_exceeded=True),
            _line("3", in_platform_campaign=False, platform_campaign_price=None),
        ])
        quotes = QuoteCartHandler(repo, clock=lambda: NOW).handle()

        assert [q.display_price for q in quotes] == ["50000 VND", "100000 VND", "100000 VND"]
        assert [q.has_discount for q in quotes] == [True, False, False]
        assert [q.usage_exceeded for q in quotes] == [False, True, False]
        assert quotes[0].discount_percent == 50

    def test_lines_without_campaign_price_show_charged_price(self):
        repo = FakeCartRepository([
            _line("1", unit_price=Money.of(90000), campaign_usage_exceeded=True),
            _line("2", unit_price=Money.of(90000), in_platform_campaign=False),
            _line("3", unit_price=Money.of(90000)),
        ])
        quotes = QuoteCartHandler(repo, clock=lambda: NOW).handle()

        assert [q.display_price for q in quotes] == ["90000 VND", "90000 VND", "50000 VND"]
        assert [q.original_price for q in quotes] == ["90000 VND", "90000 VND", "100000 VND"]
        assert quotes[2].discount_percent == 50

    def test_empty_cart(self):
        assert QuoteCartHandler(FakeCartRepository(), clock=lambda: NOW).handle() == []

    def test_reads_clock_once(self):
        calls = []

        def clock():
            calls.append(1)
            return NOW

        QuoteCartHandler(FakeCartRepository([_line("1"), _line("2")]), clock=clock).handle()
        assert len(calls) == 1
