"""
inventory_ingestion -- Untrusted-input boundary for QR label scans.

Scanned text is decoded into a typed ``ScanPayload`` (or a
``ScanRejected`` explaining why not) before anything reaches the
inventory store.  Label text for printing is produced by
``encode_scan_payload``.
"""

from inventory_ingestion.domain.types import (
    ScanAccepted,
    ScanDecodeResult,
    ScanPayload,
    ScanRejectCode,
    ScanRejected,
)
from inventory_ingestion.qr_payload import decode_scan_payload, encode_scan_payload

__all__ = [
    "ScanAccepted",
    "ScanDecodeResult",
    "ScanPayload",
    "ScanRejectCode",
    "ScanRejected",
    "decode_scan_payload",
    "encode_scan_payload",
]
