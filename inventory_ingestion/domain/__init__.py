"""Pure scan-input types. ZERO I/O."""

from inventory_ingestion.domain.types import (
    ScanAccepted,
    ScanDecodeResult,
    ScanPayload,
    ScanRejectCode,
    ScanRejected,
)

__all__ = [
    "ScanAccepted",
    "ScanDecodeResult",
    "ScanPayload",
    "ScanRejectCode",
    "ScanRejected",
]
