"""
inventory_config -- single public entrypoint for inventory configuration.

Responsibility:
    Provides the ONLY way to obtain configuration at runtime through
    ``get_active_config()``.  Returns a frozen ``InventoryConfig`` whose
    policies are handed to the engines by the services layer.

Architecture position:
    Configuration -- YAML-driven thresholds.  Sits above
    ``inventory_kernel`` and below ``inventory_services``.  Engines MUST
    NEVER import from ``inventory_config``.

Failure modes:
    - ``FileNotFoundError`` -- the configuration file does not exist.
    - ``yaml.YAMLError`` -- the file is not valid YAML.
    - ``ConfigValidationError`` -- a value is out of range.

Audit relevance:
    Every successful ``get_active_config()`` call emits an
    ``INVENTORY_CONFIG_TRACE`` log entry with the config id, version and
    checksum.
"""

from __future__ import annotations

import logging
from pathlib import Path

from inventory_config.loader import load_config_file
from inventory_config.schema import InventoryConfig

_logger = logging.getLogger("inventory_kernel.config")

DEFAULT_CONFIG_PATH = Path(__file__).parent / "sets" / "default.yaml"


def get_active_config(config_path: Path | None = None) -> InventoryConfig:
    """The ONLY public configuration entrypoint.

    Non-goals:
        Does NOT cache; callers hold the returned config for as long as
        they need it.

    Args:
        config_path: Override path to a YAML file.  Defaults to
            inventory_config/sets/default.yaml.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigValidationError: If a value fails validation.
    """
    path = config_path or DEFAULT_CONFIG_PATH
    config = load_config_file(path)

    _logger.info(
        "INVENTORY_CONFIG_TRACE",
        extra={
            "trace_type": "INVENTORY_CONFIG_TRACE",
            "config_id": config.config_id,
            "config_version": config.version,
            "checksum": config.checksum,
            "config_path": str(path),
        },
    )
    return config


__all__ = [
    "DEFAULT_CONFIG_PATH",
    "InventoryConfig",
    "get_active_config",
]
