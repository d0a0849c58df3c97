"""Domain service: promotion activity rules.

Answers "is this campaign running?" and "is this voucher usable right
now?" for a caller-supplied instant. Nothing here reads the clock, so
every card of one render pass is judged against the same ``now``.
"""

from __future__ import annotations

import logging
from datetime import datetime

from promoprice.domain.model.campaign import Campaign, Voucher
from promoprice.domain.model.value_objects import TimeWindow, is_active_status

logger = logging.getLogger(__name__)


def is_within(now: datetime, window: TimeWindow | None) -> bool:
    """True when *now* falls inside *window*; an absent window never constrains."""
    if window is None:
        return True
    return window.contains(now)


def is_campaign_active(now: datetime, campaign: Campaign) -> bool:
    """Decide whether *campaign* is running at *now*.

    First matching rule wins:
      1. An exposed, enabled slot decides alone (flash-sale time slots
         open independently of the campaign's published dates).
      2. A campaign-level window requires an active status and *now*
         inside the window.
      3. Without any window, the status must be active and at least one
         voucher must be switched on.
    """
    slot = campaign.exposed_slot
    if slot is not None and slot.is_enabled:
        return is_within(now, slot.window)

    if campaign.window is not None and campaign.window.is_bounded:
        return is_active_status(campaign.status) and is_within(now, campaign.window)

    return is_active_status(campaign.status) and any(
        is_active_status(v.status) for v in campaign.vouchers
    )


def is_voucher_active(now: datetime, voucher: Voucher, campaign: Campaign | None = None) -> bool:
    """Decide whether *voucher* can be applied at *now*.

    Window precedence: own slot, own window, the parent campaign's window,
    then status alone. A voucher that carries no usable amount is never
    active.
    """
    if not voucher.is_usable:
        return False
    if not is_active_status(voucher.status):
        return False

    if voucher.slot is not None and voucher.slot.is_enabled:
        return is_within(now, voucher.slot.window)

    if voucher.window is not None and voucher.window.is_bounded:
        return is_within(now, voucher.window)

    if campaign is not None and campaign.window is not None and campaign.window.is_bounded:
        return is_active_status(campaign.status) and is_within(now, campaign.window)

    return True


def select_active_voucher(
    now: datetime,
    campaigns: tuple[Campaign, ...] | list[Campaign],
) -> tuple[Campaign | None, Voucher | None]:
    """Pick the first active campaign and its first active voucher.

    Only one voucher is ever applied; campaigns do not stack. When the
    first active campaign has no usable voucher, no discount applies even
    if a later campaign would have one.
    """
    campaign = next((c for c in campaigns if is_campaign_active(now, c)), None)
    if campaign is None:
        return None, None

    voucher = next(
        (v for v in campaign.vouchers if is_voucher_active(now, v, campaign)),
        None,
    )
    logger.debug(
        "Selected campaign %s, voucher %s",
        campaign.campaign_id,
        voucher.voucher_id if voucher is not None else None,
    )
    return campaign, voucher
