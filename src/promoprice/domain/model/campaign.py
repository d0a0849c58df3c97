"""Campaign and Voucher models.

A campaign is a promotional grouping published by the promotions service.
It owns an ordered list of vouchers, each a single discount rule. Both
are plain immutable snapshots: they are rebuilt from upstream data on
every request and never mutated by the pricing engine.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum

from promoprice.domain.model.value_objects import SlotWindow, TimeWindow

DEFAULT_BADGE_COLOR = "#FF6600"
DEFAULT_BADGE_LABEL = "SALE"


class CampaignKind(Enum):
    FLASH_SALE = "FLASH_SALE"
    MEGA_SALE = "MEGA_SALE"
    GENERIC = "GENERIC"

    @staticmethod
    def parse(raw: str | None) -> CampaignKind:
        if raw:
            normalized = raw.strip().upper()
            for kind in (CampaignKind.FLASH_SALE, CampaignKind.MEGA_SALE):
                if kind.value == normalized:
                    return kind
        return CampaignKind.GENERIC


class VoucherType(Enum):
    PERCENT = "PERCENT"
    FIXED = "FIXED"

    @staticmethod
    def parse(raw: str | None) -> VoucherType | None:
        if not raw:
            return None
        try:
            return VoucherType(raw.strip().upper())
        except ValueError:
            return None


@dataclass(frozen=True)
class Voucher:
    """One discount rule nested under a campaign.

    ``discount_percent`` is read for PERCENT vouchers, ``discount_value``
    for FIXED ones. ``max_discount_value`` caps the absolute amount taken
    off by a PERCENT voucher.
    """

    voucher_id: str | None = None
    type: VoucherType | None = None
    discount_percent: Decimal | None = None
    discount_value: Decimal | None = None
    max_discount_value: Decimal | None = None
    window: TimeWindow | None = None
    slot: SlotWindow | None = None
    status: str | None = None

    @property
    def is_usable(self) -> bool:
        """True when the voucher carries a positive amount for its type."""
        if self.type is VoucherType.PERCENT:
            return self.discount_percent is not None and self.discount_percent > 0
        if self.type is VoucherType.FIXED:
            return self.discount_value is not None and self.discount_value > 0
        return False


@dataclass(frozen=True)
class CampaignBadge:
    """Display metadata for a campaign ribbon. No computational effect."""

    label: str
    color: str
    icon_url: str | None = None


@dataclass(frozen=True)
class Campaign:
    """A promotional campaign and its vouchers, in backend order.

    ``raw_kind`` keeps the backend's campaign type string, which is only
    used to label badges of campaigns that are neither flash nor mega sales.
    """

    campaign_id: str | None = None
    kind: CampaignKind = CampaignKind.GENERIC
    raw_kind: str | None = None
    status: str | None = None
    window: TimeWindow | None = None
    slot: SlotWindow | None = None
    badge_label: str | None = None
    badge_color: str | None = None
    badge_icon_url: str | None = None
    vouchers: tuple[Voucher, ...] = field(default_factory=tuple)

    @property
    def exposed_slot(self) -> SlotWindow | None:
        """The slot governing this campaign, if one is published.

        Flash-sale slots are published either on the campaign itself or on
        its first voucher; the campaign's own slot wins.
        """
        if self.slot is not None and self.slot.is_exposed:
            return self.slot
        if self.vouchers:
            first_slot = self.vouchers[0].slot
            if first_slot is not None and first_slot.is_exposed:
                return first_slot
        return None

    @property
    def badge(self) -> CampaignBadge:
        if self.kind is CampaignKind.MEGA_SALE:
            label = "MEGA SALE"
        elif self.kind is CampaignKind.FLASH_SALE:
            label = "FLASH SALE"
        else:
            label = self.badge_label or self.raw_kind or DEFAULT_BADGE_LABEL
        return CampaignBadge(
            label=label,
            color=self.badge_color or DEFAULT_BADGE_COLOR,
            icon_url=self.badge_icon_url,
        )
