"""
Demo seed data.

Dates are offsets from an explicit ``as_of_date`` so the demo inventory
always looks the same relative to "today", whatever today is.
"""

from __future__ import annotations

from datetime import date, timedelta

from inventory_kernel.domain.items import InventoryItem, Supplier


def seed_suppliers() -> tuple[Supplier, ...]:
    return (
        Supplier("SUP001", "Global Electronics Ltd.", "sales@globalelec.com", "4.5", 14, "0.95"),
        Supplier("SUP002", "Office Supreme Inc.", "orders@officesupreme.com", "4.2", 7, "0.92"),
        Supplier("SUP003", "Fresh Produce Co.", "fresh@produceco.com", "4.8", 2, "0.98"),
        Supplier("SUP004", "Tech Parts Direct", "support@techparts.com", "3.9", 21, "0.88"),
    )


# id, name, quantity, location, expiry offset, status, cost, price,
# added offset, last movement offset, supplier, purchase offset
_SEED_ROWS = (
    ("QR12345", "Wireless Mouse", 5, "Aisle 3, Shelf B", None, "Critical", "15.00", "29.99", -100, -5, "SUP001", -110),
    ("QR67890", "Keyboard", 75, "Aisle 1, Shelf A", None, "In Stock", "30.00", "59.99", -200, -10, "SUP001", -210),
    ("QR11223", "Organic Milk", 20, "Cold Storage 1", 15, "Low Stock", "2.00", "3.99", -5, -2, "SUP003", -7),
    ("QR44556", "Printer Paper (Ream)", 500, "Warehouse Back, Rack 5", None, "In Stock", "4.50", "8.99", -365, -120, "SUP002", -370),
    ("QR77889", "Hand Sanitizer (500ml)", 3, "Office Supply Closet", 20, "Critical", "3.00", "6.99", -30, -1, "SUP002", -35),
    ("QR00100", "Laptop Stand", 150, "Aisle 2, Shelf C", None, "In Stock", "25.00", "49.99", -180, -95, "SUP004", -190),
    ("QR00200", "Coffee Beans (1kg)", 5, "Pantry", 180, "Critical", "12.00", "24.99", -60, -3, "SUP003", -65),
    ("QR00300", "Office Chair", 10, "Storage Room", None, "Low Stock", "90.00", "179.99", -400, -150, "SUP004", -410),
    ("QR00400", "External SSD 1TB", 30, "Tech Storage", None, "In Stock", "70.00", "119.99", -90, -30, "SUP001", -95),
    ("QR00500", "Notebooks (Pack of 5)", 200, "Stationery Cabinet", None, "In Stock", "6.00", "12.99", -250, -100, "SUP002", -255),
    ("QR00600", "Expired Product (Test)", 10, "Disposal Area", -5, "Expired", "10.00", "19.99", -100, -100, "SUP004", -105),
    ("QR00700", "New Product Fast Mover", 50, "Hot Items Shelf", 365, "In Stock", "20.00", "39.99", -10, -1, "SUP001", -12),
)


def seed_inventory(as_of_date: date) -> tuple[InventoryItem, ...]:
    """Demo items dated relative to ``as_of_date``."""

    def offset(days: int | None) -> date | None:
        return None if days is None else as_of_date + timedelta(days=days)

    return tuple(
        InventoryItem(
            id=item_id,
            name=name,
            quantity=quantity,
            location=location,
            expiry_date=offset(expiry),
            status=status,
            unit_cost=cost,
            unit_price=price,
            date_added=offset(added),
            last_movement_date=offset(moved),
            supplier_id=supplier_id,
            purchase_date=offset(purchased),
        )
        for (
            item_id, name, quantity, location, expiry, status,
            cost, price, added, moved, supplier_id, purchased,
        ) in _SEED_ROWS
    )
