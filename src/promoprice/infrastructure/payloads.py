"""Mapping of backend JSON payloads onto domain models.

The catalog and promotions services speak camelCase JSON in which almost
every field is optional. Malformed numbers or instants are dropped (and
logged) instead of rejecting the whole payload: a broken promotion must
never keep a product from being priced.
"""

from __future__ import annotations

import logging
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any

from promoprice.domain.model.campaign import Campaign, CampaignKind, Voucher, VoucherType
from promoprice.domain.model.pricing import CartLine
from promoprice.domain.model.product import Product, ProductVariant
from promoprice.domain.model.value_objects import (
    DEFAULT_CURRENCY,
    Money,
    SlotWindow,
    TimeWindow,
    as_utc,
)

logger = logging.getLogger(__name__)


# --- Scalars ------------------------------------------------------------------


def parse_decimal(raw: Any, field: str) -> Decimal | None:
    if raw is None or isinstance(raw, bool):
        return None
    try:
        value = Decimal(str(raw))
    except (InvalidOperation, ValueError):
        logger.warning("Dropping malformed %s: %r", field, raw)
        return None
    if not value.is_finite():
        logger.warning("Dropping non-finite %s: %r", field, raw)
        return None
    return value


def parse_money(raw: Any, field: str, currency: str = DEFAULT_CURRENCY) -> Money | None:
    value = parse_decimal(raw, field)
    if value is None:
        return None
    if value < 0:
        logger.warning("Dropping negative %s: %r", field, raw)
        return None
    return Money(value, currency)


def parse_instant(raw: Any, field: str) -> datetime | None:
    if not raw:
        return None
    text = str(raw).strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return as_utc(datetime.fromisoformat(text))
    except ValueError:
        logger.warning("Dropping malformed %s: %r", field, raw)
        return None


def _text(raw: Any) -> str | None:
    if raw is None:
        return None
    text = str(raw).strip()
    return text or None


def objects(raw: Any, field: str) -> list[dict[str, Any]]:
    """The JSON objects of a payload list, skipping anything else."""
    if raw is None:
        return []
    if not isinstance(raw, list):
        logger.warning("Ignoring %s: expected a list, got %r", field, raw)
        return []
    items = []
    for item in raw:
        if not isinstance(item, dict):
            logger.warning("Skipping malformed %s entry: %r", field, item)
            continue
        items.append(item)
    return items


# --- Promotions ---------------------------------------------------------------


def _window(data: dict[str, Any], start_key: str, end_key: str) -> TimeWindow | None:
    window = TimeWindow(
        start=parse_instant(data.get(start_key), start_key),
        end=parse_instant(data.get(end_key), end_key),
    )
    return window if window.is_bounded else None


def _slot(data: dict[str, Any]) -> SlotWindow | None:
    window = _window(data, "slotOpenTime", "slotCloseTime")
    if window is None:
        return None
    return SlotWindow(window=window, status=_text(data.get("slotStatus")))


def parse_voucher(data: dict[str, Any]) -> Voucher:
    voucher_type = VoucherType.parse(_text(data.get("type")))
    if data.get("type") and voucher_type is None:
        logger.warning("Unknown voucher type %r; voucher will not apply", data.get("type"))
    return Voucher(
        voucher_id=_text(data.get("platformVoucherId") or data.get("voucherId")),
        type=voucher_type,
        discount_percent=parse_decimal(data.get("discountPercent"), "discountPercent"),
        discount_value=parse_decimal(data.get("discountValue"), "discountValue"),
        max_discount_value=parse_decimal(data.get("maxDiscountValue"), "maxDiscountValue"),
        window=_window(data, "startTime", "endTime"),
        slot=_slot(data),
        status=_text(data.get("status")),
    )


def parse_campaign(data: dict[str, Any]) -> Campaign:
    raw_kind = _text(data.get("campaignType"))
    return Campaign(
        campaign_id=_text(data.get("campaignId")),
        kind=CampaignKind.parse(raw_kind),
        raw_kind=raw_kind,
        status=_text(data.get("status")),
        window=_window(data, "startTime", "endTime"),
        slot=_slot(data),
        badge_label=_text(data.get("badgeLabel")),
        badge_color=_text(data.get("badgeColor")),
        badge_icon_url=_text(data.get("badgeIconUrl")),
        vouchers=tuple(parse_voucher(v) for v in objects(data.get("vouchers"), "vouchers")),
    )


def product_campaigns(data: dict[str, Any]) -> list[Campaign]:
    """Platform campaigns attached to a product payload.

    Older catalog responses publish them under ``platform`` instead of
    ``platformVouchers``.
    """
    vouchers = data.get("vouchers") or {}
    if not isinstance(vouchers, dict):
        logger.warning("Ignoring malformed vouchers block: %r", vouchers)
        return []
    raw = vouchers.get("platformVouchers") or vouchers.get("platform")
    return [parse_campaign(c) for c in objects(raw, "platformVouchers")]


# --- Catalog ------------------------------------------------------------------


def parse_product(data: dict[str, Any]) -> Product:
    currency = _text(data.get("currency")) or DEFAULT_CURRENCY
    variants = []
    for raw in objects(data.get("variants"), "variants"):
        price = parse_money(
            raw.get("variantPrice", raw.get("price")), "variantPrice", currency
        )
        if price is None:
            logger.warning("Skipping variant %r without a valid price", raw.get("variantId"))
            continue
        variants.append(
            ProductVariant(
                variant_id=str(raw.get("variantId")),
                price=price,
                name=_text(raw.get("optionValue")),
            )
        )
    return Product(
        product_id=str(data["productId"]),
        name=_text(data.get("name")) or str(data["productId"]),
        price=parse_money(data.get("price"), "price", currency),
        variants=tuple(variants),
        discount_price=parse_money(data.get("discountPrice"), "discountPrice", currency),
        final_price=parse_money(data.get("finalPrice"), "finalPrice", currency),
        price_after_promotion=parse_money(
            data.get("priceAfterPromotion"), "priceAfterPromotion", currency
        ),
    )


# --- Cart ---------------------------------------------------------------------


def parse_cart_line(data: dict[str, Any]) -> CartLine:
    unit_price = parse_money(data.get("unitPrice"), "unitPrice")
    return CartLine(
        line_id=str(data["cartItemId"]),
        name=_text(data.get("name")) or str(data["cartItemId"]),
        unit_price=unit_price if unit_price is not None else Money.zero(),
        base_unit_price=parse_money(data.get("baseUnitPrice"), "baseUnitPrice"),
        platform_campaign_price=parse_money(
            data.get("platformCampaignPrice"), "platformCampaignPrice"
        ),
        in_platform_campaign=data.get("inPlatformCampaign") is True,
        campaign_usage_exceeded=data.get("campaignUsageExceeded") is True,
    )
