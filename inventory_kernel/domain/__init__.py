"""
Pure domain layer.

Immutable records, thresholds and the clock abstraction, with NO
dependencies on I/O or the current time.
"""

from inventory_kernel.domain.clock import Clock, DeterministicClock, SystemClock
from inventory_kernel.domain.items import (
    AbcCategory,
    InventoryItem,
    ItemStatus,
    Supplier,
)
from inventory_kernel.domain.policies import (
    AlertPolicy,
    AnalyticsPolicy,
    DashboardPolicy,
    DeadStockPolicy,
)

__all__ = [
    "Clock",
    "DeterministicClock",
    "SystemClock",
    "AbcCategory",
    "InventoryItem",
    "ItemStatus",
    "Supplier",
    "AlertPolicy",
    "AnalyticsPolicy",
    "DashboardPolicy",
    "DeadStockPolicy",
]
