"""
Tests for the dead stock finder.

Covers:
- Idle threshold boundary
- Fallback to date added
- Expired and empty items excluded
- Ordering by idle days
"""

from datetime import timedelta

from inventory_engines.dead_stock import days_since, find_dead_stock
from inventory_kernel.domain.policies import DeadStockPolicy


class TestDaysSince:
    def test_absolute_days(self, as_of_date):
        assert days_since(as_of_date - timedelta(days=10), as_of_date) == 10
        assert days_since(as_of_date + timedelta(days=3), as_of_date) == 3


class TestFindDeadStock:
    """Tests for dead stock detection."""

    def test_exactly_threshold_is_not_dead(self, item, as_of_date):
        """An item idle for exactly the threshold still counts as moving."""
        idle = item(5, "1", last_movement_date=as_of_date - timedelta(days=90))
        assert find_dead_stock([idle], as_of_date) == ()

    def test_one_day_over_threshold(self, item, as_of_date):
        idle = item(5, "1", last_movement_date=as_of_date - timedelta(days=91))
        result = find_dead_stock([idle], as_of_date)
        assert len(result) == 1
        assert result[0].item is idle
        assert result[0].days_idle == 91

    def test_falls_back_to_date_added(self, item, as_of_date):
        added = as_of_date - timedelta(days=200)
        result = find_dead_stock([item(1, date_added=added)], as_of_date)
        assert result[0].last_activity_date == added

    def test_no_dates_skipped(self, item, as_of_date):
        assert find_dead_stock([item(10, "1")], as_of_date) == ()

    def test_zero_quantity_excluded(self, item, as_of_date):
        empty = item(0, "1", last_movement_date=as_of_date - timedelta(days=300))
        assert find_dead_stock([empty], as_of_date) == ()

    def test_expired_excluded(self, item, as_of_date):
        expired = item(
            5, "1",
            last_movement_date=as_of_date - timedelta(days=300),
            expiry_date=as_of_date - timedelta(days=1),
        )
        assert find_dead_stock([expired], as_of_date) == ()

    def test_custom_policy(self, item, as_of_date):
        moved = item(2, "1", last_movement_date=as_of_date - timedelta(days=31))
        policy = DeadStockPolicy(idle_days=30, min_quantity=3)
        assert find_dead_stock([moved], as_of_date, policy) == ()
        assert len(find_dead_stock([moved], as_of_date, DeadStockPolicy(idle_days=30))) == 1

    def test_seed_inventory(self, seed_items, as_of_date):
        result = find_dead_stock(seed_items, as_of_date)
        assert [d.item.id for d in result] == ["QR00300", "QR44556", "QR00500", "QR00100"]
        assert [d.days_idle for d in result] == [150, 120, 100, 95]
