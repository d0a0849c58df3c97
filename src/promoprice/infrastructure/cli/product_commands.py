"""CLI commands for product price quotes."""

from __future__ import annotations

from pathlib import Path

import click

from promoprice.application.dto import PriceQuoteDTO
from promoprice.application.quote_product import QuoteProductHandler
from promoprice.domain.exceptions import DomainException
from promoprice.infrastructure.bootstrap import campaign_repository, product_repository
from promoprice.infrastructure.cli.options import at_option, parse_at


def display_quote(dto: PriceQuoteDTO) -> None:
    """Shared formatting for displaying a price quote."""
    if not dto.available:
        click.echo(f"{dto.name}: price unavailable")
        return

    click.echo(f"{dto.name}  (source={dto.source})")
    if dto.has_discount:
        click.echo(f"  Price:     {dto.display_price}  (-{dto.discount_percent}%)")
        click.echo(f"  Was:       {dto.original_price}")
    else:
        click.echo(f"  Price:     {dto.display_price}")
    if dto.original_range:
        click.echo(f"  Range:     {dto.original_range}")
    if dto.discounted_range:
        click.echo(f"  Sale:      {dto.discounted_range}")
    if dto.badge_label:
        click.echo(f"  Badge:     {dto.badge_label} {dto.badge_color}")


@click.command("quote")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--variant", "variant_id", default=None, help="Selected variant ID.")
@at_option
@click.pass_obj
def product_quote(data_dir: Path | None, product_id: str, variant_id: str | None, at: str | None) -> None:
    """Show the price a shopper sees for a product."""
    handler = QuoteProductHandler(
        product_repo=product_repository(data_dir),
        campaign_repo=campaign_repository(data_dir),
    )

    try:
        dto = handler.handle(product_id, variant_id=variant_id, now=parse_at(at))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_quote(dto)


@click.command("list")
@click.pass_obj
def product_list(data_dir: Path | None) -> None:
    """List all products in the catalog."""
    products = product_repository(data_dir).list_all()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<10} {'Name':<30} {'Variants':>8}")
    click.echo("-" * 50)
    for p in products:
        click.echo(f"{p.product_id:<10} {p.name:<30} {len(p.variants):>8}")
