"""
Module: inventory_engines.analytics
Responsibility:
    Headline inventory KPIs: stock value, simulated cost of goods sold,
    turnover, carrying cost, sales velocity and the value held by each
    ABC category.

Architecture position:
    Engines -- pure calculation layer, zero I/O.

Invariants enforced:
    - Purity: day counts are measured against the explicit ``as_of_date``.
    - Decimal-only arithmetic; rates rounded half-up for display.
    - Empty input yields an all-zero KPI set, never a division error.

Sales are not recorded anywhere, so demand is simulated the way the
dashboard always has: an item holding fewer than
``simulated_demand_ceiling`` units is assumed to have sold the difference,
otherwise one unit.  The numbers are indicative only.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Sequence

from inventory_kernel.domain.items import AbcCategory, InventoryItem
from inventory_kernel.domain.policies import AnalyticsPolicy
from inventory_kernel.logging_config import get_logger
from inventory_engines._rounding import round_to
from inventory_engines.tracer import traced_engine

logger = get_logger("engines.analytics")

_ZERO = Decimal("0")
_ONE = Decimal("1")


@dataclass(frozen=True)
class VelocityPoint:
    """Units per day moved by one item, with its stock value."""

    item_id: str
    name: str
    velocity: Decimal
    value: Decimal


@dataclass(frozen=True)
class InventoryKpis:
    """KPI snapshot for the analytics dashboard."""

    as_of_date: date
    total_inventory_value: Decimal = _ZERO
    average_inventory_value: Decimal = _ZERO
    cost_of_goods_sold: Decimal = _ZERO
    stock_turnover_rate: Decimal = _ZERO
    carrying_cost: Decimal = _ZERO
    overall_sales_velocity: Decimal = _ZERO
    sales_velocity: tuple[VelocityPoint, ...] = ()
    category_value_distribution: dict[AbcCategory, Decimal] = field(default_factory=dict)


def simulated_units_sold(item: InventoryItem, ceiling: int) -> int:
    """Demand proxy: shortfall below ``ceiling``, or a single unit."""
    quantity = item.stock_quantity
    return ceiling - quantity if quantity < ceiling else 1


def _days_before(reference: date | None, as_of_date: date) -> int:
    return (as_of_date - reference).days if reference else 0


@traced_engine("analytics", "1.0", fingerprint_fields=("items", "as_of_date"))
def compute_inventory_kpis(
    items: Sequence[InventoryItem],
    as_of_date: date,
    policy: AnalyticsPolicy | None = None,
) -> InventoryKpis:
    """
    Compute the KPI snapshot as of ``as_of_date``.

    Postconditions:
        - average value is half the current stock value (no opening
          balance is kept).
        - turnover is 0 unless both COGS and average value are positive.
        - category distribution omits categories holding no value.
    """
    policy = policy or AnalyticsPolicy()
    if not items:
        return InventoryKpis(as_of_date=as_of_date)

    total_value = _ZERO
    cogs = _ZERO
    units_sold = 0
    activity_days_total = 0
    category_value = {category: _ZERO for category in AbcCategory}
    velocity: list[VelocityPoint] = []

    for item in items:
        value = item.stock_value()
        total_value += value
        if item.abc_category is not None:
            category_value[item.abc_category] += value

        days_since_added = _days_before(item.date_added, as_of_date)
        days_since_movement = _days_before(item.last_movement_date, as_of_date)
        activity_days = max(1, days_since_added)
        sold = simulated_units_sold(item, policy.simulated_demand_ceiling)

        if 0 < days_since_movement <= policy.recent_movement_days:
            cogs += (item.unit_cost or _ZERO) * sold
            units_sold += sold
        activity_days_total += activity_days

        item_velocity = Decimal(sold) / max(1, days_since_movement or activity_days)
        if item_velocity > 0:
            velocity.append(VelocityPoint(
                item_id=item.id,
                name=item.name,
                velocity=round_to(item_velocity),
                value=value,
            ))

    average_value = total_value / 2
    turnover = cogs / average_value if cogs > 0 and average_value > 0 else _ZERO
    mean_activity_days = Decimal(activity_days_total) / len(items)
    overall_velocity = Decimal(units_sold) / max(_ONE, mean_activity_days)

    velocity.sort(key=lambda p: p.velocity, reverse=True)

    kpis = InventoryKpis(
        as_of_date=as_of_date,
        total_inventory_value=total_value,
        average_inventory_value=average_value,
        cost_of_goods_sold=cogs,
        stock_turnover_rate=round_to(turnover),
        carrying_cost=round_to(average_value * policy.carrying_cost_rate),
        overall_sales_velocity=round_to(overall_velocity),
        sales_velocity=tuple(velocity[: policy.top_velocity_count]),
        category_value_distribution={
            category: value for category, value in category_value.items() if value > 0
        },
    )

    logger.info("inventory_kpis_computed", extra={
        "as_of_date": as_of_date.isoformat(),
        "item_count": len(items),
        "total_inventory_value": str(kpis.total_inventory_value),
        "stock_turnover_rate": str(kpis.stock_turnover_rate),
    })
    return kpis
