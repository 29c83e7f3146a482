"""
Module: inventory_engines.reports
Responsibility:
    Tabular business reports over the item list: profit margins, stock
    aging since purchase, and supplier performance.

Architecture position:
    Engines -- pure calculation layer, zero I/O.
    Rows are frozen dataclasses; ``inventory_services.report_export``
    turns them into CSV/XLSX files.

Invariants enforced:
    - Purity: stock age is measured against the explicit ``as_of_date``.
    - Decimal-only arithmetic; money rounded to 2 places, percentages of
      supplier metrics to 1 place, half-up.
    - Orderings are stable for equal sort keys.

Failure modes:
    - ValueError from ``build_report`` for an unknown report type string.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Sequence

from inventory_kernel.domain.items import InventoryItem, Supplier
from inventory_kernel.logging_config import get_logger
from inventory_engines._rounding import round_to
from inventory_engines.tracer import traced_engine

logger = get_logger("engines.reports")

_ZERO = Decimal("0")
_HUNDRED = Decimal("100")

# On-time rates are quoted per supplier, not per delivery; the report
# expands them over a nominal delivery count.
SIMULATED_DELIVERY_COUNT = 10


class ReportType(str, Enum):
    PROFIT_MARGINS = "profit_margins"
    STOCK_AGING = "stock_aging"
    SUPPLIER_PERFORMANCE = "supplier_performance"


@dataclass(frozen=True)
class ProfitMarginRow:
    id: str
    name: str
    unit_cost: Decimal
    unit_price: Decimal
    profit_margin_absolute: Decimal
    profit_margin_percentage: Decimal


@dataclass(frozen=True)
class StockAgingRow:
    id: str
    name: str
    purchase_date: date
    days_in_stock: int
    quantity: int
    total_value: Decimal


@dataclass(frozen=True)
class SupplierPerformanceRow:
    supplier_id: str
    supplier_name: str
    items_supplied_count: int
    total_purchase_value: Decimal
    average_lead_time: Decimal | None
    on_time_delivery_rate: Decimal | None
    quality_rating: Decimal | None


@traced_engine("reports.profit_margins", "1.0", fingerprint_fields=("items",))
def profit_margin_report(items: Sequence[InventoryItem]) -> tuple[ProfitMarginRow, ...]:
    """Margin per item with both a cost and a price, best percentage first."""
    rows: list[ProfitMarginRow] = []
    for item in items:
        if item.unit_cost is None or item.unit_price is None:
            continue
        margin = item.unit_price - item.unit_cost
        percentage = margin / item.unit_price * _HUNDRED if item.unit_price > 0 else _ZERO
        rows.append(ProfitMarginRow(
            id=item.id,
            name=item.name,
            unit_cost=item.unit_cost,
            unit_price=item.unit_price,
            profit_margin_absolute=round_to(margin),
            profit_margin_percentage=round_to(percentage),
        ))

    rows.sort(key=lambda r: r.profit_margin_percentage, reverse=True)
    logger.info("profit_margin_report_built", extra={"row_count": len(rows)})
    return tuple(rows)


@traced_engine("reports.stock_aging", "1.0", fingerprint_fields=("items", "as_of_date"))
def stock_aging_report(
    items: Sequence[InventoryItem],
    as_of_date: date,
) -> tuple[StockAgingRow, ...]:
    """Days since purchase for every item with a purchase date, oldest first."""
    rows: list[StockAgingRow] = []
    for item in items:
        if item.purchase_date is None:
            continue
        rows.append(StockAgingRow(
            id=item.id,
            name=item.name,
            purchase_date=item.purchase_date,
            days_in_stock=(as_of_date - item.purchase_date).days,
            quantity=item.stock_quantity,
            total_value=round_to(item.stock_value()),
        ))

    rows.sort(key=lambda r: r.days_in_stock, reverse=True)
    logger.info("stock_aging_report_built", extra={
        "as_of_date": as_of_date.isoformat(),
        "row_count": len(rows),
    })
    return tuple(rows)


@dataclass
class _SupplierTally:
    supplier_id: str
    supplier_name: str
    quality_rating: Decimal | None = None
    on_time_count: int = 0
    total_deliveries: int = 0
    item_count: int = 0
    total_value: Decimal = _ZERO
    lead_times: list[int] = field(default_factory=list)


def _tally_for(supplier: Supplier) -> _SupplierTally:
    rate = supplier.on_time_delivery_rate
    has_rate = rate is not None and rate > 0
    return _SupplierTally(
        supplier_id=supplier.id,
        supplier_name=supplier.name,
        quality_rating=supplier.performance_rating,
        on_time_count=int(round_to(rate * SIMULATED_DELIVERY_COUNT, 0)) if has_rate else 0,
        total_deliveries=SIMULATED_DELIVERY_COUNT if has_rate else 0,
    )


@traced_engine("reports.supplier_performance", "1.0", fingerprint_fields=("items", "suppliers"))
def supplier_performance_report(
    items: Sequence[InventoryItem],
    suppliers: Sequence[Supplier],
) -> tuple[SupplierPerformanceRow, ...]:
    """
    One row per known supplier, plus a row per unknown supplier id seen on
    an item.  Best-rated first, then highest purchase value.

    Average lead time repeats the supplier's quoted lead time once per item
    supplied; it is None when the supplier supplies nothing or quotes no
    (or a zero) lead time.
    """
    by_id = {s.id: s for s in suppliers}
    tallies: dict[str, _SupplierTally] = {s.id: _tally_for(s) for s in suppliers}

    for item in items:
        if not item.supplier_id:
            continue
        tally = tallies.get(item.supplier_id)
        if tally is None:
            logger.warning("supplier_unknown", extra={
                "supplier_id": item.supplier_id,
                "item_id": item.id,
            })
            tally = _SupplierTally(
                supplier_id=item.supplier_id,
                supplier_name=f"Unknown (ID: {item.supplier_id})",
            )
            tallies[item.supplier_id] = tally

        tally.item_count += 1
        tally.total_value += item.stock_value()
        known = by_id.get(item.supplier_id)
        if known is not None and known.lead_time_days:
            tally.lead_times.append(known.lead_time_days)

    rows: list[SupplierPerformanceRow] = []
    for tally in tallies.values():
        lead_times = tally.lead_times
        average_lead = (
            Decimal(sum(lead_times)) / len(lead_times) if lead_times else None
        )
        on_time = (
            Decimal(tally.on_time_count) / tally.total_deliveries * _HUNDRED
            if tally.total_deliveries > 0
            else None
        )
        rows.append(SupplierPerformanceRow(
            supplier_id=tally.supplier_id,
            supplier_name=tally.supplier_name,
            items_supplied_count=tally.item_count,
            total_purchase_value=round_to(tally.total_value),
            average_lead_time=round_to(average_lead, 1) if average_lead else None,
            on_time_delivery_rate=round_to(on_time, 1) if on_time else None,
            quality_rating=tally.quality_rating or None,
        ))

    rows.sort(key=lambda r: (r.quality_rating or _ZERO, r.total_purchase_value), reverse=True)
    logger.info("supplier_performance_report_built", extra={
        "supplier_count": len(suppliers),
        "row_count": len(rows),
    })
    return tuple(rows)


def build_report(
    report_type: ReportType | str,
    items: Sequence[InventoryItem],
    as_of_date: date,
    suppliers: Sequence[Supplier] = (),
) -> tuple:
    """Dispatch to the report builder for ``report_type``."""
    report_type = ReportType(report_type)
    if report_type is ReportType.PROFIT_MARGINS:
        return profit_margin_report(items)
    if report_type is ReportType.STOCK_AGING:
        return stock_aging_report(items, as_of_date)
    return supplier_performance_report(items, suppliers)
