"""
Configuration Loader (``inventory_config.loader``).

Responsibility
--------------
Loads a YAML configuration file and parses it into the typed
``InventoryConfig``.  The public runtime entry point is
``inventory_config.get_active_config()``.

Invariants enforced
-------------------
* Every parsed object is a frozen dataclass.
* Threshold counts are non-negative integers, rates lie in ``[0, 1]``,
  and the critical quantity never exceeds the low-stock quantity.
* Missing sections or keys fall back to the policy defaults.
* ``compute_checksum`` is a deterministic SHA-256 of the parsed document.

Failure modes
-------------
* Missing YAML file  -> ``FileNotFoundError`` propagates.
* Malformed YAML  -> ``yaml.YAMLError`` propagates.
* Missing ``config_id`` or invalid values -> ``ConfigValidationError``.
"""

from __future__ import annotations

import hashlib
import json
from dataclasses import fields
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any

import yaml

from inventory_kernel.domain.policies import (
    AlertPolicy,
    AnalyticsPolicy,
    DashboardPolicy,
    DeadStockPolicy,
)
from inventory_kernel.exceptions import ConfigValidationError

from inventory_config.schema import InventoryConfig


def load_yaml_file(path: Path) -> dict[str, Any]:
    """
    Load a single YAML file and return its contents as a dict.

    Raises:
        FileNotFoundError: if the file does not exist.
        yaml.YAMLError: if the file contains invalid YAML.
    """
    with open(path) as f:
        return yaml.safe_load(f) or {}


def _parse_count(section: str, key: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigValidationError(section, key, f"expected an integer, got {value!r}")
    if value < 0:
        raise ConfigValidationError(section, key, "must not be negative")
    return value


def _parse_rate(section: str, key: str, value: Any) -> Decimal:
    if isinstance(value, bool):
        raise ConfigValidationError(section, key, f"expected a number, got {value!r}")
    try:
        rate = Decimal(str(value))
    except InvalidOperation as e:
        raise ConfigValidationError(section, key, f"expected a number, got {value!r}") from e
    if not rate.is_finite():
        raise ConfigValidationError(section, key, f"expected a finite number, got {value!r}")
    if not Decimal("0") <= rate <= Decimal("1"):
        raise ConfigValidationError(section, key, "must be between 0 and 1")
    return rate


def _parse_section(section: str, data: dict[str, Any] | None, policy_type: type) -> Any:
    """Build ``policy_type`` from a YAML mapping, keeping defaults for absent keys."""
    if data is None:
        return policy_type()
    if not isinstance(data, dict):
        raise ConfigValidationError(section, "*", "section must be a mapping")

    known = {f.name: f for f in fields(policy_type)}
    unknown = sorted(set(data) - set(known))
    if unknown:
        raise ConfigValidationError(section, unknown[0], "unknown key")

    values: dict[str, Any] = {}
    for key, value in data.items():
        if known[key].type in ("Decimal", Decimal):
            values[key] = _parse_rate(section, key, value)
        else:
            values[key] = _parse_count(section, key, value)
    return policy_type(**values)


def parse_config(data: dict[str, Any]) -> InventoryConfig:
    """
    Parse an ``InventoryConfig`` from a YAML-derived dict.

    Raises:
        ConfigValidationError: on a missing ``config_id`` or any invalid value.
    """
    if not isinstance(data, dict):
        raise ConfigValidationError("root", "*", "document must be a mapping")
    config_id = data.get("config_id")
    if not config_id or not isinstance(config_id, str):
        raise ConfigValidationError("root", "config_id", "required string")

    dashboard = _parse_section("dashboard", data.get("dashboard"), DashboardPolicy)
    if dashboard.critical_quantity > dashboard.low_stock_quantity:
        raise ConfigValidationError(
            "dashboard", "critical_quantity", "must not exceed low_stock_quantity"
        )

    return InventoryConfig(
        config_id=config_id,
        version=_parse_count("root", "version", data.get("version", 1)),
        alerts=_parse_section("alerts", data.get("alerts"), AlertPolicy),
        dead_stock=_parse_section("dead_stock", data.get("dead_stock"), DeadStockPolicy),
        dashboard=dashboard,
        analytics=_parse_section("analytics", data.get("analytics"), AnalyticsPolicy),
        checksum=compute_checksum(data),
    )


def load_config_file(path: Path) -> InventoryConfig:
    """Load and parse a configuration file."""
    return parse_config(load_yaml_file(path))


def compute_checksum(data: dict[str, Any]) -> str:
    """
    Compute SHA-256 checksum of canonical JSON serialization.

    Identical ``data`` always produces identical checksums.
    """
    canonical = json.dumps(data, sort_keys=True, default=str)
    return hashlib.sha256(canonical.encode()).hexdigest()
