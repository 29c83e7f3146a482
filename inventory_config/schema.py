"""
InventoryConfig schema.

The human-authored YAML file is parsed by the loader into these frozen
types.  Threshold policies themselves live in
``inventory_kernel.domain.policies`` so the engines never import this
package.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from inventory_kernel.domain.policies import (
    AlertPolicy,
    AnalyticsPolicy,
    DashboardPolicy,
    DeadStockPolicy,
)


@dataclass(frozen=True)
class InventoryConfig:
    """Complete runtime configuration for one deployment."""

    config_id: str
    version: int
    alerts: AlertPolicy = field(default_factory=AlertPolicy)
    dead_stock: DeadStockPolicy = field(default_factory=DeadStockPolicy)
    dashboard: DashboardPolicy = field(default_factory=DashboardPolicy)
    analytics: AnalyticsPolicy = field(default_factory=AnalyticsPolicy)
    checksum: str = ""
