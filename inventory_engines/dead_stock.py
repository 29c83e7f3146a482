"""
Module: inventory_engines.dead_stock
Responsibility:
    Identify usable stock that has not moved for longer than a configured
    number of days.

Architecture position:
    Engines -- pure calculation layer, zero I/O.

Invariants enforced:
    - Purity: the reference date is passed in as ``as_of_date``.
    - Expired items are never reported as dead stock (they are alerts).
    - Result ordering is deterministic: idle days descending, ties in
      input order.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Sequence

from inventory_kernel.domain.items import InventoryItem
from inventory_kernel.domain.policies import DeadStockPolicy
from inventory_kernel.logging_config import get_logger
from inventory_engines.tracer import traced_engine

logger = get_logger("engines.dead_stock")


@dataclass(frozen=True)
class DeadStockItem:
    """An idle item with the date it last moved and its idle age."""

    item: InventoryItem
    last_activity_date: date
    days_idle: int


def days_since(reference_date: date, as_of_date: date) -> int:
    """Absolute whole days between two dates."""
    return abs((as_of_date - reference_date).days)


@traced_engine("dead_stock", "1.0", fingerprint_fields=("items", "as_of_date"))
def find_dead_stock(
    items: Sequence[InventoryItem],
    as_of_date: date,
    policy: DeadStockPolicy | None = None,
) -> tuple[DeadStockItem, ...]:
    """
    Return idle items, longest idle first.

    An item is dead stock when its last movement (or, failing that, the
    date it was added) is more than ``policy.idle_days`` ago, it holds at
    least ``policy.min_quantity`` units, and it has not expired.
    Items with neither date are skipped.
    """
    policy = policy or DeadStockPolicy()
    found: list[DeadStockItem] = []

    for item in items:
        reference = item.last_activity_date
        if reference is None:
            continue
        idle = days_since(reference, as_of_date)
        if (
            idle > policy.idle_days
            and item.stock_quantity >= policy.min_quantity
            and not item.is_expired(as_of_date)
        ):
            found.append(DeadStockItem(item=item, last_activity_date=reference, days_idle=idle))

    found.sort(key=lambda d: d.days_idle, reverse=True)

    logger.info("dead_stock_detected", extra={
        "as_of_date": as_of_date.isoformat(),
        "item_count": len(items),
        "dead_stock_count": len(found),
        "idle_days": policy.idle_days,
    })
    return tuple(found)
