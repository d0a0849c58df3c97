"""Domain service: flash-sale countdown."""

from __future__ import annotations

from datetime import datetime, timedelta

from promoprice.domain.model.campaign import Campaign, CampaignKind
from promoprice.domain.model.value_objects import as_utc


def flash_sale_countdown(now: datetime, campaigns: list[Campaign]) -> timedelta | None:
    """Time left until the earliest flash-sale slot closes.

    Only flash-sale campaigns with a published slot count. Returns None
    when no slot is known and never a negative duration.
    """
    close_times = [
        as_utc(slot.close_time)
        for slot in (c.exposed_slot for c in campaigns if c.kind is CampaignKind.FLASH_SALE)
        if slot is not None and slot.close_time is not None
    ]
    if not close_times:
        return None
    remaining = min(close_times) - as_utc(now)
    return max(timedelta(0), remaining)
