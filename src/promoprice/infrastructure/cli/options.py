"""Shared click parameters."""

from __future__ import annotations

from datetime import datetime

import click

from promoprice.infrastructure.payloads import parse_instant


def parse_at(value: str | None) -> datetime | None:
    """Parse the ``--at`` option; None means "read the clock"."""
    if value is None:
        return None
    moment = parse_instant(value, "--at")
    if moment is None:
        raise click.BadParameter(
            f"Invalid instant '{value}'. Expected ISO 8601, e.g. 2025-01-31T10:00:00Z."
        )
    return moment


at_option = click.option(
    "--at",
    "at",
    default=None,
    help="Evaluate promotions at this ISO 8601 instant instead of now.",
)
