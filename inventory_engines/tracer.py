"""
inventory_engines.tracer -- INVENTORY_ENGINE_TRACE records for engine calls.

Responsibility:
    ``@traced_engine`` logs one record per engine call carrying the engine
    name and version, how long the call took, and a short fingerprint of
    the inputs that matter.  Two calls with equal inputs share a
    fingerprint, so a surprising dashboard can be matched to the data that
    produced it.

Architecture position:
    Engines -- support module.  Logging is its only side effect.

Invariants enforced:
    - Fingerprints are stable across runs: mappings are key-sorted, dates
      are ISO, dataclasses are reduced to their fields.
    - Arguments are read, never modified.

Usage:
    @traced_engine("abc", "1.0", fingerprint_fields=("items",))
    def classify_abc(items):
        ...
"""

from __future__ import annotations

import dataclasses
import functools
import hashlib
import inspect
import logging
import time
from collections.abc import Callable, Mapping
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any

_logger = logging.getLogger("inventory_kernel.engines.tracer")

FINGERPRINT_LENGTH = 16


def _canonicalize(value: Any) -> str:
    """Render ``value`` as text that only depends on its content."""
    if value is None:
        return "null"
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, (str, bool, int, float, Decimal)):
        return str(value)
    if isinstance(value, date):
        return value.isoformat()
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        value = {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
    if isinstance(value, Mapping):
        pairs = sorted((str(k), _canonicalize(v)) for k, v in value.items())
        return "{" + ",".join(f"{k}:{v}" for k, v in pairs) + "}"
    if isinstance(value, (list, tuple)):
        return "[" + ",".join(map(_canonicalize, value)) + "]"
    return str(value)


def compute_input_fingerprint(
    fingerprint_fields: tuple[str, ...],
    arguments: Mapping[str, Any],
) -> str:
    """SHA-256 prefix over ``name=value`` for each listed field ("null" when absent)."""
    canonical = "|".join(
        f"{name}={_canonicalize(arguments.get(name))}" for name in fingerprint_fields
    )
    digest = hashlib.sha256(canonical.encode("utf-8")).hexdigest()
    return digest[:FINGERPRINT_LENGTH]


def traced_engine(
    engine_name: str,
    engine_version: str,
    fingerprint_fields: tuple[str, ...] = (),
) -> Callable:
    """
    Wrap an engine function so each call emits INVENTORY_ENGINE_TRACE.

    ``fingerprint_fields`` name parameters of the wrapped function; they are
    matched whether passed positionally or by keyword.
    """

    def decorator(func: Callable) -> Callable:
        signature = inspect.signature(func)

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            fingerprint = ""
            if fingerprint_fields:
                bound = signature.bind_partial(*args, **kwargs).arguments
                fingerprint = compute_input_fingerprint(fingerprint_fields, bound)

            started = time.perf_counter()
            result = func(*args, **kwargs)
            elapsed_ms = round((time.perf_counter() - started) * 1000, 2)

            _logger.info("INVENTORY_ENGINE_TRACE", extra={
                "trace_type": "INVENTORY_ENGINE_TRACE",
                "engine_name": engine_name,
                "engine_version": engine_version,
                "input_fingerprint": fingerprint,
                "duration_ms": elapsed_ms,
                "function": func.__qualname__,
            })
            return result

        return wrapper

    return decorator
