import logging
from pathlib import Path

import click

from promoprice.infrastructure.cli.cart_commands import cart_quote
from promoprice.infrastructure.cli.feed_commands import feed_flash_sale
from promoprice.infrastructure.cli.product_commands import product_list, product_quote


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory holding catalog.json and cart.json.",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log pricing decisions.")
@click.pass_context
def cli(ctx: click.Context, data_dir: Path | None, verbose: bool) -> None:
    """promoprice: promotional price resolution"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = data_dir


@cli.group()
def product() -> None:
    """Quote catalog products."""


@cli.group()
def cart() -> None:
    """Quote cart lines."""


@cli.group()
def feed() -> None:
    """Render home feed sections."""


# Register subcommands
product.add_command(product_list)
product.add_command(product_quote)
cart.add_command(cart_quote)
feed.add_command(feed_flash_sale)
