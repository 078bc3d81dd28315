"""Unit tests for inventory status derivation and expiry day counting"""

from datetime import datetime, timedelta, timezone

from medshare.dates import days_until
from medshare.inventory import derive_inventory_status
from medshare.models import InventoryStatus


class TestDaysUntil:
    """Whole days until expiry, partial days rounded up"""

    def test_exact_days(self, now):
        assert days_until(now + timedelta(days=30), now) == 30

    def test_partial_day_counts_as_full_day(self, now):
        assert days_until(now + timedelta(days=29, hours=1), now) == 30

    def test_expired_today_is_zero(self, now):
        assert days_until(now - timedelta(hours=3), now) == 0

    def test_expired_yesterday_is_negative(self, now):
        assert days_until(now - timedelta(days=1, hours=3), now) == -1

    def test_naive_datetimes_treated_as_utc(self, now):
        naive_expiry = datetime(2026, 3, 11, 12, 0)
        assert days_until(naive_expiry, now) == 10

    def test_other_timezones_compared_as_instants(self, now):
        ist = timezone(timedelta(hours=5, minutes=30))
        expiry = (now + timedelta(days=5)).astimezone(ist)
        assert days_until(expiry, now) == 5


class TestDeriveInventoryStatus:
    """Expired < 0 days, Expiring Soon < 90 days, Low Stock < 500 units"""

    def test_expired(self, now):
        status = derive_inventory_status(5000, now - timedelta(days=2), now)
        assert status == InventoryStatus.EXPIRED

    def test_expiring_soon(self, now):
        status = derive_inventory_status(5000, now + timedelta(days=89), now)
        assert status == InventoryStatus.EXPIRING_SOON

    def test_ninety_days_is_not_expiring_soon(self, now):
        status = derive_inventory_status(5000, now + timedelta(days=90), now)
        assert status == InventoryStatus.IN_STOCK

    def test_low_stock(self, now):
        status = derive_inventory_status(499, now + timedelta(days=365), now)
        assert status == InventoryStatus.LOW_STOCK

    def test_expiry_takes_precedence_over_low_stock(self, now):
        status = derive_inventory_status(10, now + timedelta(days=10), now)
        assert status == InventoryStatus.EXPIRING_SOON

    def test_in_stock(self, now):
        status = derive_inventory_status(500, now + timedelta(days=365), now)
        assert status == InventoryStatus.IN_STOCK

    def test_threshold_overrides(self, now):
        status = derive_inventory_status(
            100,
            now + timedelta(days=100),
            now,
            expiring_soon_days=120,
            low_stock_threshold=50,
        )
        assert status == InventoryStatus.EXPIRING_SOON

        status = derive_inventory_status(
            100,
            now + timedelta(days=100),
            now,
            expiring_soon_days=30,
            low_stock_threshold=50,
        )
        assert status == InventoryStatus.IN_STOCK
