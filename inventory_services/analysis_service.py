"""
inventory_services.analysis_service -- Views over the inventory store.

Responsibility:
    Feed the store's classified items, the configured thresholds and the
    clock's date into the pure engines, one method per view: ABC table,
    dashboard, alerts, dead stock, KPIs and reports (with export).

Architecture position:
    Services -- composes InventoryStore, InventoryConfig and the engines.
    Nothing here is cached; each call reflects the store as it is now.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from inventory_config import InventoryConfig, get_active_config
from inventory_kernel.domain.clock import Clock, SystemClock
from inventory_kernel.domain.items import InventoryItem
from inventory_kernel.logging_config import get_logger
from inventory_engines import (
    AbcSummary,
    AlertReport,
    DeadStockItem,
    InventoryKpis,
    ReportType,
    build_alerts,
    build_report,
    compute_inventory_kpis,
    find_dead_stock,
    predict_top_sellers,
    sort_for_abc_table,
    sort_for_dashboard,
    summarize_abc,
)
from inventory_services.inventory_store import InventoryStore
from inventory_services.report_export import export_report

logger = get_logger("services.analysis")


@dataclass(frozen=True)
class DashboardView:
    rows: tuple[InventoryItem, ...]
    top_sellers: tuple[InventoryItem, ...]


@dataclass(frozen=True)
class AbcView:
    rows: tuple[InventoryItem, ...]
    summary: AbcSummary


class InventoryAnalysisService:
    """Read-side views of an InventoryStore."""

    def __init__(
        self,
        store: InventoryStore,
        config: InventoryConfig | None = None,
        clock: Clock | None = None,
    ):
        self.store = store
        self.config = config or get_active_config()
        self._clock = clock or SystemClock()

    def abc_view(self) -> AbcView:
        classified = self.store.classified()
        return AbcView(
            rows=tuple(sort_for_abc_table(classified)),
            summary=summarize_abc(classified),
        )

    def dashboard(self) -> DashboardView:
        today = self._clock.today()
        classified = self.store.classified()
        policy = self.config.dashboard
        return DashboardView(
            rows=tuple(sort_for_dashboard(classified, today, policy)),
            top_sellers=tuple(predict_top_sellers(classified, today, policy)),
        )

    def alerts(self) -> AlertReport:
        return build_alerts(self.store.classified(), self._clock.today(), self.config.alerts)

    def dead_stock(self) -> tuple[DeadStockItem, ...]:
        return find_dead_stock(self.store.classified(), self._clock.today(), self.config.dead_stock)

    def kpis(self) -> InventoryKpis:
        return compute_inventory_kpis(
            self.store.classified(), self._clock.today(), self.config.analytics
        )

    def report(self, report_type: ReportType | str) -> tuple:
        return build_report(
            report_type,
            self.store.classified(),
            self._clock.today(),
            self.store.suppliers,
        )

    def export(self, report_type: ReportType | str, fmt: str, destination: Path | str) -> Path:
        """Build a report and write it as ``fmt`` to ``destination``."""
        report_type = ReportType(report_type)
        rows = self.report(report_type)
        logger.info("report_export_requested", extra={
            "report_type": report_type.value,
            "format": fmt,
        })
        return export_report(rows, fmt, destination, sheet_title=report_type.value)
