"""
Policies -- Threshold value objects consumed by the engines.

Engines accept these as plain parameters; ``inventory_config`` builds them
from YAML.  Defaults reproduce the demo's hard-coded thresholds, so every
engine works without configuration.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class AlertPolicy:
    """Low-stock and expiry alert thresholds."""

    low_stock_threshold: int = 20
    near_expiry_days: int = 30


@dataclass(frozen=True)
class DeadStockPolicy:
    """Items idle longer than ``idle_days`` with stock on hand are dead stock."""

    idle_days: int = 90
    min_quantity: int = 1


@dataclass(frozen=True)
class DashboardPolicy:
    """Quantity cut-offs for the effective status badge."""

    critical_quantity: int = 5
    low_stock_quantity: int = 20
    top_seller_count: int = 3
    top_seller_min_quantity: int = 5


@dataclass(frozen=True)
class AnalyticsPolicy:
    """Parameters of the simulated KPI model."""

    carrying_cost_rate: Decimal = Decimal("0.20")
    recent_movement_days: int = 30
    simulated_demand_ceiling: int = 50
    top_velocity_count: int = 10
