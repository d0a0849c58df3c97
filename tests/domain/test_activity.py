"""Unit tests for campaign and voucher activity rules."""

from datetime import timedelta

from promoprice.domain.model.campaign import CampaignKind, Voucher, VoucherType
from promoprice.domain.model.value_objects import SlotWindow
from promoprice.domain.service.activity import (
    is_campaign_active,
    is_voucher_active,
    is_within,
    select_active_voucher,
)
from tests.builders import NOW, campaign, fixed, percent, slot, window


class TestIsWithin:

    def test_absent_window_is_unconstrained(self):
        assert is_within(NOW, None)

    def test_start_and_end_inclusive(self):
        w = window(0, 30)
        assert is_within(w.start, w)
        assert is_within(w.end, w)
        assert not is_within(w.end + timedelta(milliseconds=1), w)


class TestCampaignSlotRule:

    def test_open_slot_makes_campaign_active(self):
        c = campaign(percent(10), kind=CampaignKind.FLASH_SALE, slot=slot(-5, 5))
        assert is_campaign_active(NOW, c)

    def test_closed_slot_wins_over_open_campaign_window(self):
        c = campaign(
            percent(10),
            kind=CampaignKind.FLASH_SALE,
            slot=slot(-61, -1),
            window=window(-1440, 1440),
        )
        assert not is_campaign_active(NOW, c)

    def test_open_slot_wins_over_inactive_campaign_status(self):
        c = campaign(percent(10), slot=slot(-5, 5), status="INACTIVE")
        assert is_campaign_active(NOW, c)

    def test_disabled_slot_falls_back_to_campaign_window(self):
        c = campaign(percent(10), slot=slot(-61, -1, status="INACTIVE"), window=window(-60, 60))
        assert is_campaign_active(NOW, c)

    def test_half_specified_slot_is_ignored(self):
        c = campaign(percent(10), slot=SlotWindow(window(-61, None)), window=window(-60, 60))
        assert is_campaign_active(NOW, c)

    def test_slot_published_on_first_voucher(self):
        v = percent(10, slot=slot(-61, -1))
        c = campaign(v, kind=CampaignKind.FLASH_SALE, window=window(-60, 60))
        assert not is_campaign_active(NOW, c)


class TestCampaignWindowRule:

    def test_active_inside_window(self):
        assert is_campaign_active(NOW, campaign(percent(10), window=window(-60, 60)))

    def test_inactive_after_window(self):
        assert not is_campaign_active(NOW, campaign(percent(10), window=window(-60, -1)))

    def test_missing_status_treated_as_active(self):
        assert is_campaign_active(NOW, campaign(percent(10), window=window(-60, 60), status=None))

    def test_inactive_status_inside_window(self):
        assert not is_campaign_active(
            NOW, campaign(percent(10), window=window(-60, 60), status="INACTIVE")
        )

    def test_open_ended_window(self):
        assert is_campaign_active(NOW, campaign(percent(10), window=window(-60, None)))


class TestCampaignStatusOnlyRule:

    def test_active_with_an_active_voucher(self):
        assert is_campaign_active(NOW, campaign(percent(10)))

    def test_inactive_without_vouchers(self):
        assert not is_campaign_active(NOW, campaign())

    def test_inactive_when_every_voucher_is_off(self):
        assert not is_campaign_active(NOW, campaign(percent(10, status="INACTIVE")))

    def test_inactive_status(self):
        assert not is_campaign_active(NOW, campaign(percent(10), status="EXPIRED"))


class TestVoucherActivity:

    def test_own_slot_open(self):
        v = percent(10, slot=slot(-5, 5), window=window(-600, -300))
        assert is_voucher_active(NOW, v, campaign(v))

    def test_own_slot_closed_beats_open_window(self):
        v = percent(10, slot=slot(-10, -1), window=window(-60, 60))
        assert not is_voucher_active(NOW, v, campaign(v))

    def test_disabled_own_slot_falls_back_to_own_window(self):
        v = percent(10, slot=slot(-10, -1, status="INACTIVE"), window=window(-60, 60))
        assert is_voucher_active(NOW, v, campaign(v))

    def test_own_window_beats_campaign_window(self):
        v = percent(10, window=window(-60, 60))
        c = campaign(v, window=window(-600, -300))
        assert is_voucher_active(NOW, v, c)

    def test_inherits_campaign_window(self):
        v = percent(10)
        assert is_voucher_active(NOW, v, campaign(v, window=window(-60, 60)))
        assert not is_voucher_active(NOW, v, campaign(v, window=window(-60, -1)))

    def test_inherited_window_requires_campaign_status(self):
        v = percent(10)
        assert not is_voucher_active(NOW, v, campaign(v, window=window(-60, 60), status="INACTIVE"))

    def test_status_only(self):
        assert is_voucher_active(NOW, percent(10), None)
        assert is_voucher_active(NOW, percent(10, status=None), None)
        assert not is_voucher_active(NOW, percent(10, status="USED"), None)

    def test_disabled_voucher_inside_open_slot(self):
        v = percent(10, slot=slot(-5, 5), status="INACTIVE")
        assert not is_voucher_active(NOW, v, campaign(v))

    def test_voucher_without_amount_is_inactive(self):
        assert not is_voucher_active(NOW, Voucher(type=VoucherType.PERCENT), None)
        assert not is_voucher_active(NOW, Voucher(type=VoucherType.FIXED), None)
        assert not is_voucher_active(NOW, Voucher(discount_percent=None), None)

    def test_zero_amount_is_inactive(self):
        assert not is_voucher_active(NOW, fixed(0), None)


class TestSelectActiveVoucher:

    def test_first_active_campaign_and_voucher(self):
        expired = campaign(percent(50), window=window(-60, -1), campaign_id="old")
        live = campaign(percent(10, status="INACTIVE"), fixed(5000), campaign_id="live")
        later = campaign(percent(30), campaign_id="later")

        selected, voucher = select_active_voucher(NOW, [expired, live, later])

        assert selected.campaign_id == "live"
        assert voucher.voucher_id == "fixed-5000"

    def test_no_stacking_across_campaigns(self):
        first = campaign(percent(10, window=window(-60, -1)), window=window(-60, 60), campaign_id="a")
        second = campaign(percent(30), campaign_id="b")

        selected, voucher = select_active_voucher(NOW, [first, second])

        assert selected.campaign_id == "a"
        assert voucher is None

    def test_nothing_active(self):
        assert select_active_voucher(NOW, []) == (None, None)
