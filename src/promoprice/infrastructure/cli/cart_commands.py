"""CLI commands for cart line pricing."""

from __future__ import annotations

from pathlib import Path

import click

from promoprice.application.quote_cart import QuoteCartHandler
from promoprice.infrastructure.bootstrap import cart_repository
from promoprice.infrastructure.cli.options import at_option, parse_at


@click.command("quote")
@at_option
@click.pass_obj
def cart_quote(data_dir: Path | None, at: str | None) -> None:
    """Show the price of every cart line."""
    handler = QuoteCartHandler(cart_repo=cart_repository(data_dir))
    lines = handler.handle(now=parse_at(at))

    if not lines:
        click.echo("Cart is empty.")
        return

    click.echo(f"{'Item':<24} {'Price':>16} {'Was':>16}  Note")
    click.echo("-" * 72)
    for line in lines:
        was = line.original_price if line.has_discount else ""
        note = "campaign limit reached" if line.usage_exceeded else ""
        click.echo(f"{line.name:<24} {line.display_price:>16} {was:>16}  {note}")
