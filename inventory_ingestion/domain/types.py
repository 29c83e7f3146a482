"""
inventory_ingestion.domain.types -- Pure frozen dataclasses for QR scan input.

ZERO I/O. Imports only from inventory_kernel.

A scan is untrusted text.  Decoding yields exactly one of:
    ScanAccepted(payload)   -- a validated, typed ScanPayload
    ScanRejected(code, ...) -- why the text was refused
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum

from inventory_kernel.exceptions import InvalidScanPayloadError


class ScanRejectCode(str, Enum):
    """Machine-readable reasons a scan was refused."""

    MALFORMED_JSON = "MALFORMED_JSON"
    NOT_AN_OBJECT = "NOT_AN_OBJECT"
    MISSING_FIELD = "MISSING_FIELD"
    INVALID_FIELD = "INVALID_FIELD"


@dataclass(frozen=True)
class ScanPayload:
    """
    Typed contents of an item QR label.

    Contract:
        ``item_id`` and ``name`` are non-empty; costs and prices are
        non-negative finite Decimals when present.
    Raises:
        InvalidScanPayloadError on construction with bad fields.
    """

    item_id: str
    name: str
    expiry_date: date | None = None
    unit_cost: Decimal | None = None
    unit_price: Decimal | None = None
    supplier_id: str | None = None
    purchase_date: date | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.item_id, str) or not self.item_id.strip():
            raise InvalidScanPayloadError("id", "must be a non-empty string")
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidScanPayloadError("name", "must be a non-empty string")
        for field_name in ("unit_cost", "unit_price"):
            value = getattr(self, field_name)
            if value is None:
                continue
            if not isinstance(value, Decimal) or not value.is_finite():
                raise InvalidScanPayloadError(field_name, "must be a finite Decimal")
            if value < 0:
                raise InvalidScanPayloadError(field_name, "must not be negative")


@dataclass(frozen=True)
class ScanAccepted:
    payload: ScanPayload

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class ScanRejected:
    code: ScanRejectCode
    message: str
    field: str | None = None

    @property
    def ok(self) -> bool:
        return False


ScanDecodeResult = ScanAccepted | ScanRejected
