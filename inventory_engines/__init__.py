"""
Module: inventory_engines
Responsibility:
    Package entrypoint that re-exports all public symbols from the pure
    calculation engine sub-modules.  This is the canonical import surface
    for ``inventory_services``.

Architecture position:
    Engines -- pure calculation layer, zero I/O.
    May only import inventory_kernel (and sibling engine modules).
    MUST NOT import inventory_services, inventory_config or
    inventory_ingestion.

Invariants enforced:
    - Purity: engines NEVER call ``datetime.now()`` or ``date.today()``.
      Dates are passed in as ``as_of_date``; services supply them from an
      injected Clock.
    - Decimal-only arithmetic for costs, prices and values.
    - Determinism: identical inputs always produce identical outputs.

Audit relevance:
    Engine entry points are wrapped with ``@traced_engine`` and emit
    INVENTORY_ENGINE_TRACE log records with an input fingerprint.

Usage:
    from inventory_engines import classify_abc, find_dead_stock, build_alerts
"""

from inventory_kernel.logging_config import get_logger

logger = get_logger("engines")

from inventory_engines.abc import (
    CATEGORY_A_THRESHOLD,
    CATEGORY_B_THRESHOLD,
    DEFAULT_UNIT_COST,
    AbcSummary,
    classify_abc,
    consumption_value,
    sort_for_abc_table,
    summarize_abc,
)
from inventory_engines.alerts import (
    AlertKind,
    AlertReport,
    StockAlert,
    build_alerts,
)
from inventory_engines.analytics import (
    InventoryKpis,
    VelocityPoint,
    compute_inventory_kpis,
)
from inventory_engines.dashboard import (
    effective_status,
    predict_top_sellers,
    sort_for_dashboard,
)
from inventory_engines.dead_stock import (
    DeadStockItem,
    find_dead_stock,
)
from inventory_engines.reports import (
    ProfitMarginRow,
    ReportType,
    StockAgingRow,
    SupplierPerformanceRow,
    build_report,
    profit_margin_report,
    stock_aging_report,
    supplier_performance_report,
)

__all__ = [
    # ABC
    "classify_abc",
    "consumption_value",
    "summarize_abc",
    "sort_for_abc_table",
    "AbcSummary",
    "DEFAULT_UNIT_COST",
    "CATEGORY_A_THRESHOLD",
    "CATEGORY_B_THRESHOLD",
    # Alerts
    "build_alerts",
    "AlertKind",
    "AlertReport",
    "StockAlert",
    # Analytics
    "compute_inventory_kpis",
    "InventoryKpis",
    "VelocityPoint",
    # Dashboard
    "effective_status",
    "sort_for_dashboard",
    "predict_top_sellers",
    # Dead stock
    "find_dead_stock",
    "DeadStockItem",
    # Reports
    "ReportType",
    "ProfitMarginRow",
    "StockAgingRow",
    "SupplierPerformanceRow",
    "build_report",
    "profit_margin_report",
    "stock_aging_report",
    "supplier_performance_report",
]

logger.debug("engines_package_loaded", extra={
    "modules": ["abc", "alerts", "analytics", "dashboard", "dead_stock", "reports"],
})
