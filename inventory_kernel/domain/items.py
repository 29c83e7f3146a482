"""
Items -- Immutable inventory record and supplier value objects.

Responsibility:
    Defines the trusted internal record types consumed by every engine:
    InventoryItem, Supplier and the AbcCategory label.  Untrusted scanner
    input is decoded into these types by ``inventory_ingestion``; engines
    never see raw JSON.

Architecture position:
    Kernel > Domain -- pure functional core, zero I/O.

Invariants enforced:
    - Numeric fields are ``Decimal`` (never float) after construction.
    - quantity, unit_cost and unit_price are never negative.
    - Date fields are ``date`` instances (ISO strings are parsed).

Failure modes:
    - InvalidItemError on missing id, negative numbers or unparseable values.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any

from inventory_kernel.exceptions import InvalidItemError


class AbcCategory(str, Enum):
    """ABC (Pareto) value tier."""

    A = "A"
    B = "B"
    C = "C"


class ItemStatus(str, Enum):
    """Display status of an inventory item."""

    IN_STOCK = "In Stock"
    LOW_STOCK = "Low Stock"
    CRITICAL = "Critical"
    EXPIRED = "Expired"


def to_decimal(value: Any, field: str, item_id: str | None = None) -> Decimal | None:
    """Normalize an optional numeric value to Decimal (floats via str)."""
    if value is None:
        return None
    if isinstance(value, bool):
        raise InvalidItemError(item_id, field, value, "boolean is not a number")
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value))
        except (InvalidOperation, ValueError) as e:
            raise InvalidItemError(item_id, field, value, "not a number") from e
    if not result.is_finite():
        raise InvalidItemError(item_id, field, value, "not a finite number")
    return result


def to_date(value: Any, field: str, item_id: str | None = None) -> date | None:
    """Normalize an optional date value (``date`` or ISO string)."""
    if value is None or isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value)
        except ValueError as e:
            raise InvalidItemError(item_id, field, value, "not an ISO date") from e
    raise InvalidItemError(item_id, field, value, "not a date")


@dataclass(frozen=True, slots=True)
class InventoryItem:
    """
    A single stock record.

    Contract:
        Immutable.  Engines derive new records with ``dataclasses.replace``;
        nothing mutates an item in place.

    Guarantees:
        - quantity is a non-negative int or None (missing, read as 0).
        - unit_cost / unit_price are non-negative Decimals or None.
        - abc_category is only populated by the ABC classifier.
    """

    id: str
    name: str = ""
    quantity: int | None = 0
    unit_cost: Decimal | None = None
    unit_price: Decimal | None = None
    location: str | None = None
    expiry_date: date | None = None
    status: str = ItemStatus.IN_STOCK.value
    date_added: date | None = None
    last_movement_date: date | None = None
    supplier_id: str | None = None
    purchase_date: date | None = None
    abc_category: AbcCategory | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.id, str) or not self.id:
            raise InvalidItemError(None, "id", self.id, "id must be a non-empty string")

        if self.quantity is not None:
            if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
                raise InvalidItemError(self.id, "quantity", self.quantity, "not an integer")
            if self.quantity < 0:
                raise InvalidItemError(self.id, "quantity", self.quantity, "negative")

        for name in ("unit_cost", "unit_price"):
            value = to_decimal(getattr(self, name), name, self.id)
            if value is not None and value < 0:
                raise InvalidItemError(self.id, name, value, "negative")
            object.__setattr__(self, name, value)

        for name in ("expiry_date", "date_added", "last_movement_date", "purchase_date"):
            object.__setattr__(self, name, to_date(getattr(self, name), name, self.id))

        if self.abc_category is not None and not isinstance(self.abc_category, AbcCategory):
            object.__setattr__(self, "abc_category", AbcCategory(self.abc_category))

    @property
    def stock_quantity(self) -> int:
        """Quantity with missing read as zero."""
        return self.quantity or 0

    @property
    def last_activity_date(self) -> date | None:
        """Last movement date, falling back to the date the item was added."""
        return self.last_movement_date or self.date_added

    def stock_value(self) -> Decimal:
        """Quantity times unit cost, with unknown cost counted as zero."""
        return (self.unit_cost or Decimal("0")) * self.stock_quantity

    def is_expired(self, as_of_date: date) -> bool:
        """True if the expiry date is strictly before ``as_of_date``."""
        return self.expiry_date is not None and self.expiry_date < as_of_date


@dataclass(frozen=True, slots=True)
class Supplier:
    """Supplier master record used by the supplier performance report."""

    id: str
    name: str
    contact_email: str | None = None
    performance_rating: Decimal | None = None  # 1-5 stars
    lead_time_days: int | None = None
    on_time_delivery_rate: Decimal | None = None  # 0.0 to 1.0

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "performance_rating",
            to_decimal(self.performance_rating, "performance_rating", self.id),
        )
        rate = to_decimal(self.on_time_delivery_rate, "on_time_delivery_rate", self.id)
        if rate is not None and not (Decimal("0") <= rate <= Decimal("1")):
            raise InvalidItemError(self.id, "on_time_delivery_rate", rate, "must be within 0..1")
        object.__setattr__(self, "on_time_delivery_rate", rate)
