"""
QR label payload codec.

Wire format: a JSON object with camelCase keys::

    {"id": "QR12345", "name": "Wireless Mouse", "unitCost": 15.0,
     "unitPrice": 29.99, "supplierId": "SUP001",
     "purchaseDate": "2024-01-01", "expiryDate": null}

``id`` and ``name`` are required.  Optional keys may be absent or null.
Unknown keys are ignored.  Numbers are parsed straight to ``Decimal`` so a
label's ``29.99`` never passes through binary float.

Decoding never raises: every failure becomes a ``ScanRejected``.
"""

from __future__ import annotations

import json
from datetime import date
from decimal import Decimal
from typing import Any

from inventory_kernel.exceptions import InvalidScanPayloadError
from inventory_kernel.logging_config import get_logger

from inventory_ingestion.domain.types import (
    ScanAccepted,
    ScanDecodeResult,
    ScanPayload,
    ScanRejectCode,
    ScanRejected,
)

logger = get_logger("ingestion.qr_payload")

# wire key -> ScanPayload attribute
_NUMBER_FIELDS = {"unitCost": "unit_cost", "unitPrice": "unit_price"}
_DATE_FIELDS = {"expiryDate": "expiry_date", "purchaseDate": "purchase_date"}
_TEXT_FIELDS = {"supplierId": "supplier_id"}


def _reject(code: ScanRejectCode, message: str, field: str | None = None) -> ScanRejected:
    logger.info("scan_payload_rejected", extra={
        "reject_code": code.value,
        "field": field,
        "reason": message,
    })
    return ScanRejected(code=code, message=message, field=field)


def _parse_number(value: Any) -> Decimal | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, Decimal, float)):
        raise ValueError("must be a number")
    result = value if isinstance(value, Decimal) else Decimal(str(value))
    if not result.is_finite():
        raise ValueError("must be a finite number")
    if result < 0:
        raise ValueError("must not be negative")
    return result


def _parse_date(value: Any) -> date | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError("must be a YYYY-MM-DD string")
    return date.fromisoformat(value)


def _parse_text(value: Any) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError("must be a string")
    return value


def decode_scan_payload(text: str) -> ScanDecodeResult:
    """
    Validate scanned text and convert it to a typed payload.

    Postconditions:
        - Returns ScanAccepted with a ScanPayload whose fields satisfy the
          payload contract, or ScanRejected naming the offending field.
    Raises:
        Nothing.
    """
    try:
        data = json.loads(text, parse_float=Decimal)
    except (TypeError, ValueError) as e:
        return _reject(ScanRejectCode.MALFORMED_JSON, f"Not valid JSON: {e}")
    except RecursionError:
        return _reject(ScanRejectCode.MALFORMED_JSON, "JSON nested too deeply")

    if not isinstance(data, dict):
        return _reject(ScanRejectCode.NOT_AN_OBJECT, "Expected a JSON object with 'id' and 'name'")

    for key in ("id", "name"):
        value = data.get(key)
        if value is None:
            return _reject(ScanRejectCode.MISSING_FIELD, f"'{key}' is required", key)
        if not isinstance(value, str):
            return _reject(ScanRejectCode.INVALID_FIELD, f"'{key}' must be a string", key)

    fields: dict[str, Any] = {}
    parsers = (
        (_NUMBER_FIELDS, _parse_number),
        (_DATE_FIELDS, _parse_date),
        (_TEXT_FIELDS, _parse_text),
    )
    for mapping, parse in parsers:
        for wire_key, attribute in mapping.items():
            try:
                fields[attribute] = parse(data.get(wire_key))
            except ValueError as e:
                return _reject(ScanRejectCode.INVALID_FIELD, f"'{wire_key}' {e}", wire_key)

    try:
        payload = ScanPayload(item_id=data["id"], name=data["name"], **fields)
    except InvalidScanPayloadError as e:
        return _reject(ScanRejectCode.MISSING_FIELD, e.reason, e.field)

    logger.debug("scan_payload_decoded", extra={"scanned_item_id": payload.item_id})
    return ScanAccepted(payload=payload)


def _wire_number(value: Decimal) -> int | float:
    return int(value) if value == value.to_integral_value() else float(value)


def encode_scan_payload(payload: ScanPayload) -> str:
    """Serialize a payload to the compact JSON text printed on a QR label."""
    data: dict[str, Any] = {"id": payload.item_id, "name": payload.name}
    for wire_key, attribute in _NUMBER_FIELDS.items():
        value = getattr(payload, attribute)
        if value is not None:
            data[wire_key] = _wire_number(value)
    for wire_key, attribute in _DATE_FIELDS.items():
        value = getattr(payload, attribute)
        if value is not None:
            data[wire_key] = value.isoformat()
    for wire_key, attribute in _TEXT_FIELDS.items():
        value = getattr(payload, attribute)
        if value is not None:
            data[wire_key] = value
    return json.dumps(data, separators=(",", ":"))
