"""
Pytest fixtures for the inventory test suite.

Provides:
- A fixed reference date and a DeterministicClock pinned to it
- The demo seed inventory and suppliers dated relative to that day
- An ``item`` factory for compact test records
- Logging reset between tests
"""

from datetime import date, datetime, timezone

import pytest

from inventory_kernel.domain.clock import DeterministicClock
from inventory_kernel.domain.items import InventoryItem
from inventory_kernel.logging_config import LogContext, reset_logging
from inventory_services.seed import seed_inventory, seed_suppliers

AS_OF = date(2024, 6, 15)


@pytest.fixture(autouse=True)
def _clean_logging():
    reset_logging()
    LogContext.clear()
    yield
    LogContext.clear()
    reset_logging()


@pytest.fixture
def as_of_date() -> date:
    return AS_OF


@pytest.fixture
def clock() -> DeterministicClock:
    return DeterministicClock(datetime(2024, 6, 15, 9, 30, tzinfo=timezone.utc))


@pytest.fixture
def seed_items(as_of_date):
    return seed_inventory(as_of_date)


@pytest.fixture
def suppliers():
    return seed_suppliers()


@pytest.fixture
def item():
    """Factory for InventoryItem with terse positional quantity/cost."""
    counter = iter(range(1, 10_000))

    def make(quantity=1, unit_cost=None, **kwargs) -> InventoryItem:
        n = next(counter)
        kwargs.setdefault("id", f"QR{n:05d}")
        kwargs.setdefault("name", f"Item {n}")
        return InventoryItem(quantity=quantity, unit_cost=unit_cost, **kwargs)

    return make
