"""
inventory_services.inventory_store -- In-memory inventory state.

Responsibility:
    Own the current item list, apply QR scans to it, assign storage
    locations, and hand engines a freshly classified view on request.

Architecture position:
    Services -- stateful orchestration over engines + kernel.
    Time comes from an injected Clock; engines receive ``as_of_date``.

Invariants enforced:
    - Items are immutable; every change replaces the record.
    - Item order is insertion order; new scans append.
    - ``classified()`` recomputes the ABC classification on every call.

Failure modes:
    - ItemNotFoundError from ``get``/``assign_location`` for unknown ids.
    - ``scan`` never raises on bad scanner input; it returns ScanRejected.

Usage:
    store = InventoryStore(seed_inventory(today), seed_suppliers(), clock=clock)
    outcome = store.scan('{"id": "QR12345", "name": "Wireless Mouse"}')
    store.assign_location(outcome.item.id, "Aisle 3")
    dashboard_rows = store.classified()
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable
from uuid import uuid4

from inventory_kernel.domain.clock import Clock, SystemClock
from inventory_kernel.domain.items import InventoryItem, ItemStatus, Supplier
from inventory_kernel.exceptions import ItemNotFoundError
from inventory_kernel.logging_config import LogContext, get_logger
from inventory_engines.abc import classify_abc
from inventory_ingestion import (
    ScanAccepted,
    ScanPayload,
    ScanRejected,
    decode_scan_payload,
)

logger = get_logger("services.inventory_store")


@dataclass(frozen=True)
class ScanOutcome:
    """Result of applying an accepted scan."""

    item: InventoryItem
    created: bool


class InventoryStore:
    """
    Single-owner, in-memory item collection.

    Contract:
        Not thread-safe; one store per client session.
    Non-goals:
        No persistence.  Restarting loses all changes.
    """

    def __init__(
        self,
        items: Iterable[InventoryItem] = (),
        suppliers: Iterable[Supplier] = (),
        clock: Clock | None = None,
    ):
        self._items: list[InventoryItem] = list(items)
        self._suppliers: tuple[Supplier, ...] = tuple(suppliers)
        self._clock = clock or SystemClock()

    @property
    def items(self) -> tuple[InventoryItem, ...]:
        return tuple(self._items)

    @property
    def suppliers(self) -> tuple[Supplier, ...]:
        return self._suppliers

    def _index_of(self, item_id: str) -> int:
        for i, item in enumerate(self._items):
            if item.id == item_id:
                return i
        raise ItemNotFoundError(item_id)

    def get(self, item_id: str) -> InventoryItem:
        return self._items[self._index_of(item_id)]

    def apply_scan(self, payload: ScanPayload) -> ScanOutcome:
        """
        Count one unit of the scanned item.

        Known id: quantity +1, movement stamped today, and any optional
        field present on the label replaces the stored value.
        Unknown id: appended with quantity 1, no location, purchase date
        defaulting to today.
        """
        today = self._clock.today()
        try:
            index = self._index_of(payload.item_id)
        except ItemNotFoundError:
            index = None

        if index is not None:
            current = self._items[index]
            updated = replace(
                current,
                quantity=current.stock_quantity + 1,
                last_movement_date=today,
                expiry_date=payload.expiry_date or current.expiry_date,
                unit_cost=payload.unit_cost if payload.unit_cost is not None else current.unit_cost,
                unit_price=payload.unit_price if payload.unit_price is not None else current.unit_price,
                supplier_id=payload.supplier_id or current.supplier_id,
                purchase_date=payload.purchase_date or current.purchase_date,
            )
            self._items[index] = updated
            logger.info("scan_applied", extra={
                "scanned_item_id": updated.id,
                "item_created": False,
                "quantity": updated.quantity,
            })
            return ScanOutcome(item=updated, created=False)

        created = InventoryItem(
            id=payload.item_id,
            name=payload.name,
            quantity=1,
            location=None,
            expiry_date=payload.expiry_date,
            status=ItemStatus.IN_STOCK.value,
            unit_cost=payload.unit_cost,
            unit_price=payload.unit_price,
            date_added=today,
            last_movement_date=today,
            supplier_id=payload.supplier_id,
            purchase_date=payload.purchase_date or today,
        )
        self._items.append(created)
        logger.info("scan_applied", extra={
            "scanned_item_id": created.id,
            "item_created": True,
            "quantity": created.quantity,
        })
        return ScanOutcome(item=created, created=True)

    def scan(self, text: str) -> ScanOutcome | ScanRejected:
        """Decode scanned text and apply it; rejections leave state untouched."""
        with LogContext.bind(scan_id=str(uuid4())):
            result = decode_scan_payload(text)
            if isinstance(result, ScanAccepted):
                return self.apply_scan(result.payload)
            logger.warning("scan_rejected", extra={
                "reject_code": result.code.value,
                "field": result.field,
            })
            return result

    def assign_location(self, item_id: str, location: str | None) -> InventoryItem:
        """Set the storage location; blank input clears it."""
        index = self._index_of(item_id)
        cleaned = location.strip() if location else ""
        updated = replace(self._items[index], location=cleaned or None)
        self._items[index] = updated
        logger.info("location_assigned", extra={
            "located_item_id": item_id,
            "location": updated.location,
        })
        return updated

    def classified(self) -> list[InventoryItem]:
        """Current items with ABC categories, in store order."""
        return classify_abc(self._items)
