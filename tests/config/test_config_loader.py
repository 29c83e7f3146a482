"""
Tests for configuration loading and validation.
"""

import logging
from decimal import Decimal

import pytest
import yaml

from inventory_config import DEFAULT_CONFIG_PATH, get_active_config
from inventory_config.loader import compute_checksum, load_config_file, parse_config
from inventory_kernel.domain.policies import AlertPolicy, AnalyticsPolicy, DashboardPolicy
from inventory_kernel.exceptions import ConfigValidationError


class TestDefaultConfig:
    """Tests for the shipped configuration set."""

    def test_loads_defaults(self):
        config = get_active_config()
        assert config.config_id == "default"
        assert config.version == 1
        assert config.alerts == AlertPolicy()
        assert config.dashboard == DashboardPolicy()
        assert config.analytics.carrying_cost_rate == Decimal("0.20")
        assert len(config.checksum) == 64

    def test_emits_config_trace(self, caplog):
        caplog.set_level(logging.INFO, logger="inventory_kernel.config")
        config = get_active_config()
        records = [r for r in caplog.records if r.getMessage() == "INVENTORY_CONFIG_TRACE"]
        assert len(records) == 1
        assert records[0].config_id == "default"
        assert records[0].checksum == config.checksum

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            get_active_config(tmp_path / "missing.yaml")

    def test_default_path_exists(self):
        assert DEFAULT_CONFIG_PATH.is_file()


class TestParseConfig:
    """Tests for YAML document validation."""

    def test_missing_sections_default(self):
        config = parse_config({"config_id": "lean"})
        assert config.dead_stock.idle_days == 90
        assert config.analytics == AnalyticsPolicy()

    def test_partial_section_keeps_other_defaults(self):
        config = parse_config({"config_id": "c", "alerts": {"near_expiry_days": 7}})
        assert config.alerts == AlertPolicy(low_stock_threshold=20, near_expiry_days=7)

    def test_missing_config_id(self):
        with pytest.raises(ConfigValidationError) as exc_info:
            parse_config({"alerts": {}})
        assert exc_info.value.key == "config_id"

    @pytest.mark.parametrize("section,key,value", [
        ("alerts", "low_stock_threshold", -1),
        ("alerts", "low_stock_threshold", "20"),
        ("dead_stock", "idle_days", 1.5),
        ("dead_stock", "min_quantity", True),
        ("analytics", "carrying_cost_rate", 1.5),
        ("analytics", "carrying_cost_rate", "lots"),
        ("analytics", "carrying_cost_rate", float("nan")),
        ("analytics", "carrying_cost_rate", float("inf")),
        ("dashboard", "colour", 3),
    ])
    def test_invalid_values(self, section, key, value):
        with pytest.raises(ConfigValidationError) as exc_info:
            parse_config({"config_id": "bad", section: {key: value}})
        assert exc_info.value.section == section
        assert exc_info.value.key == key

    def test_section_must_be_mapping(self):
        with pytest.raises(ConfigValidationError):
            parse_config({"config_id": "bad", "alerts": [1, 2]})

    @pytest.mark.parametrize("data", [[1, 2], "config", None])
    def test_root_must_be_mapping(self, data):
        with pytest.raises(ConfigValidationError) as exc_info:
            parse_config(data)
        assert exc_info.value.section == "root"

    def test_critical_above_low_stock_rejected(self):
        with pytest.raises(ConfigValidationError) as exc_info:
            parse_config({
                "config_id": "bad",
                "dashboard": {"critical_quantity": 30, "low_stock_quantity": 20},
            })
        assert exc_info.value.key == "critical_quantity"


class TestLoadConfigFile:
    def test_round_trip_from_disk(self, tmp_path):
        path = tmp_path / "custom.yaml"
        path.write_text(yaml.safe_dump({
            "config_id": "store-7",
            "version": 3,
            "dead_stock": {"idle_days": 60},
        }))
        config = load_config_file(path)
        assert config.config_id == "store-7"
        assert config.version == 3
        assert config.dead_stock.idle_days == 60

    def test_empty_file_rejected(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        with pytest.raises(ConfigValidationError):
            load_config_file(path)

    def test_list_document_rejected(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigValidationError):
            load_config_file(path)

    @pytest.mark.parametrize("rate", [".nan", ".inf", "-.inf"])
    def test_non_finite_rate_rejected(self, tmp_path, rate):
        path = tmp_path / "nan.yaml"
        path.write_text(f"config_id: odd\nanalytics:\n  carrying_cost_rate: {rate}\n")
        with pytest.raises(ConfigValidationError) as exc_info:
            load_config_file(path)
        assert exc_info.value.key == "carrying_cost_rate"


class TestComputeChecksum:
    def test_key_order_irrelevant(self):
        assert compute_checksum({"a": 1, "b": 2}) == compute_checksum({"b": 2, "a": 1})

    def test_value_change_detected(self):
        assert compute_checksum({"a": 1}) != compute_checksum({"a": 2})
