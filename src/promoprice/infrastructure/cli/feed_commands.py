"""CLI commands for home feed sections."""

from __future__ import annotations

from pathlib import Path

import click

from promoprice.application.flash_sale_feed import FlashSaleFeedHandler
from promoprice.infrastructure.bootstrap import campaign_repository, product_repository
from promoprice.infrastructure.cli.options import at_option, parse_at


@click.command("flash-sale")
@at_option
@click.pass_obj
def feed_flash_sale(data_dir: Path | None, at: str | None) -> None:
    """Show the flash-sale strip of the home feed."""
    handler = FlashSaleFeedHandler(
        product_repo=product_repository(data_dir),
        campaign_repo=campaign_repository(data_dir),
    )
    feed = handler.handle(now=parse_at(at))

    if not feed.items:
        click.echo("No flash-sale products.")
        return

    if feed.countdown_seconds is not None:
        hours, rest = divmod(feed.countdown_seconds, 3600)
        minutes, seconds = divmod(rest, 60)
        click.echo(f"Ends in {hours:02d}:{minutes:02d}:{seconds:02d}")
    for item in feed.items:
        suffix = f"  -{item.discount_percent}%" if item.has_discount else ""
        click.echo(f"  {item.name:<30} {item.display_price:>16}{suffix}")
