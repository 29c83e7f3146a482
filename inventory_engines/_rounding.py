"""Display rounding shared by the report and analytics engines."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal


def round_to(value: Decimal, places: int = 2) -> Decimal:
    """Round half-up to ``places`` decimal places."""
    return value.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)
