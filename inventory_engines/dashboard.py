"""
Module: inventory_engines.dashboard
Responsibility:
    Derive the inventory table's effective status badges, row ordering and
    the "predicted top sellers" shortlist.

Architecture position:
    Engines -- pure calculation layer, zero I/O.

Invariants enforced:
    - Purity: expiry is judged against the explicit ``as_of_date``.
    - Orderings are total and deterministic (name is the last tie-break).
"""

from __future__ import annotations

from datetime import date
from typing import Sequence

from inventory_kernel.domain.items import AbcCategory, InventoryItem, ItemStatus
from inventory_kernel.domain.policies import DashboardPolicy
from inventory_kernel.logging_config import get_logger

logger = get_logger("engines.dashboard")

_STATUS_ORDER = {
    ItemStatus.EXPIRED: 0,
    ItemStatus.CRITICAL: 1,
    ItemStatus.LOW_STOCK: 2,
    ItemStatus.IN_STOCK: 3,
}
_CATEGORY_ORDER = {AbcCategory.A: 0, AbcCategory.B: 1, AbcCategory.C: 2}


def effective_status(
    item: InventoryItem,
    as_of_date: date,
    policy: DashboardPolicy | None = None,
) -> ItemStatus:
    """Status derived from expiry and quantity, ignoring the stored label."""
    policy = policy or DashboardPolicy()
    if item.is_expired(as_of_date):
        return ItemStatus.EXPIRED
    if item.stock_quantity <= policy.critical_quantity:
        return ItemStatus.CRITICAL
    if item.stock_quantity <= policy.low_stock_quantity:
        return ItemStatus.LOW_STOCK
    return ItemStatus.IN_STOCK


def sort_for_dashboard(
    items: Sequence[InventoryItem],
    as_of_date: date,
    policy: DashboardPolicy | None = None,
) -> list[InventoryItem]:
    """
    Order rows for the inventory table.

    Keys, in order: effective status (Expired first), ABC category
    (uncategorized last), expiry date (undated last), most recent
    activity first, then name case-insensitively.
    """
    policy = policy or DashboardPolicy()

    def key(item: InventoryItem) -> tuple:
        activity = item.last_activity_date
        return (
            _STATUS_ORDER[effective_status(item, as_of_date, policy)],
            _CATEGORY_ORDER.get(item.abc_category, len(_CATEGORY_ORDER)),
            (0, item.expiry_date) if item.expiry_date else (1, date.max),
            -activity.toordinal() if activity else 0,
            item.name.casefold(),
        )

    return sorted(items, key=key)


def predict_top_sellers(
    items: Sequence[InventoryItem],
    as_of_date: date,
    policy: DashboardPolicy | None = None,
) -> list[InventoryItem]:
    """
    Shortlist likely fast movers.

    Candidates are unexpired A/B items holding more than
    ``policy.top_seller_min_quantity`` units, ranked by most recent movement
    (never moved ranks last), then A before B, then quantity descending.
    """
    policy = policy or DashboardPolicy()
    candidates = [
        item
        for item in items
        if not item.is_expired(as_of_date)
        and item.stock_quantity > policy.top_seller_min_quantity
        and item.abc_category in (AbcCategory.A, AbcCategory.B)
    ]
    candidates.sort(key=lambda item: (
        -item.last_movement_date.toordinal() if item.last_movement_date else 0,
        item.abc_category is not AbcCategory.A,
        -item.stock_quantity,
    ))

    shortlist = candidates[: policy.top_seller_count]
    logger.debug("top_sellers_predicted", extra={
        "candidate_count": len(candidates),
        "shortlist": [item.id for item in shortlist],
    })
    return shortlist
