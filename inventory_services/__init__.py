"""
inventory_services -- Stateful orchestration over the engines.

InventoryStore holds the in-memory item list and applies scans;
InventoryAnalysisService turns it into dashboard, alert, dead-stock,
KPI and report views; report_export writes reports to CSV/XLSX.
"""

from inventory_services.analysis_service import (
    AbcView,
    DashboardView,
    InventoryAnalysisService,
)
from inventory_services.inventory_store import InventoryStore, ScanOutcome
from inventory_services.report_export import SUPPORTED_FORMATS, export_report
from inventory_services.seed import seed_inventory, seed_suppliers

__all__ = [
    "AbcView",
    "DashboardView",
    "InventoryAnalysisService",
    "InventoryStore",
    "ScanOutcome",
    "SUPPORTED_FORMATS",
    "export_report",
    "seed_inventory",
    "seed_suppliers",
]
