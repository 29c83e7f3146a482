"""
Module: inventory_engines.alerts
Responsibility:
    Build the low-stock and expiry notifications shown to operators.

Architecture position:
    Engines -- pure calculation layer, zero I/O.

Invariants enforced:
    - Purity: "today" is the explicit ``as_of_date`` parameter.
    - Expired items never raise a low-stock alert.
    - Expiring list: expired items first, then by expiry date ascending.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Sequence

from inventory_kernel.domain.items import InventoryItem
from inventory_kernel.domain.policies import AlertPolicy
from inventory_kernel.logging_config import get_logger
from inventory_engines.tracer import traced_engine

logger = get_logger("engines.alerts")


class AlertKind(str, Enum):
    LOW_STOCK = "low_stock"
    NEAR_EXPIRY = "near_expiry"
    EXPIRED = "expired"


@dataclass(frozen=True)
class StockAlert:
    """One notification about one item."""

    kind: AlertKind
    item: InventoryItem
    days_until_expiry: int | None = None


@dataclass(frozen=True)
class AlertReport:
    """Low-stock and expiry alerts as of a date."""

    as_of_date: date
    low_stock: tuple[StockAlert, ...] = ()
    expiring: tuple[StockAlert, ...] = ()

    @property
    def expired_count(self) -> int:
        return sum(1 for a in self.expiring if a.kind is AlertKind.EXPIRED)

    @property
    def alert_count(self) -> int:
        return len(self.low_stock) + len(self.expiring)

    @property
    def has_alerts(self) -> bool:
        return self.alert_count > 0


def days_until_expiry(item: InventoryItem, as_of_date: date) -> int | None:
    """Days from ``as_of_date`` to the expiry date (negative once expired)."""
    if item.expiry_date is None:
        return None
    return (item.expiry_date - as_of_date).days


def is_near_expiry(item: InventoryItem, as_of_date: date, near_expiry_days: int) -> bool:
    """True when not yet expired and expiring within ``near_expiry_days``."""
    if item.is_expired(as_of_date):
        return False
    remaining = days_until_expiry(item, as_of_date)
    return remaining is not None and 0 <= remaining <= near_expiry_days


def is_low_stock(item: InventoryItem, as_of_date: date, threshold: int) -> bool:
    """True for unexpired items with some, but at most ``threshold``, units."""
    return not item.is_expired(as_of_date) and 0 < item.stock_quantity <= threshold


@traced_engine("alerts", "1.0", fingerprint_fields=("items", "as_of_date"))
def build_alerts(
    items: Sequence[InventoryItem],
    as_of_date: date,
    policy: AlertPolicy | None = None,
) -> AlertReport:
    """Collect low-stock alerts (input order) and expiry alerts (expired first)."""
    policy = policy or AlertPolicy()

    low_stock = tuple(
        StockAlert(kind=AlertKind.LOW_STOCK, item=item)
        for item in items
        if is_low_stock(item, as_of_date, policy.low_stock_threshold)
    )

    expiring: list[StockAlert] = []
    for item in items:
        if item.is_expired(as_of_date):
            kind = AlertKind.EXPIRED
        elif is_near_expiry(item, as_of_date, policy.near_expiry_days):
            kind = AlertKind.NEAR_EXPIRY
        else:
            continue
        expiring.append(StockAlert(
            kind=kind,
            item=item,
            days_until_expiry=days_until_expiry(item, as_of_date),
        ))

    expiring.sort(key=lambda a: (a.kind is not AlertKind.EXPIRED, a.item.expiry_date))

    report = AlertReport(
        as_of_date=as_of_date,
        low_stock=low_stock,
        expiring=tuple(expiring),
    )

    logger.info("alerts_built", extra={
        "as_of_date": as_of_date.isoformat(),
        "low_stock_count": len(report.low_stock),
        "expiring_count": len(report.expiring),
        "expired_count": report.expired_count,
    })
    return report
