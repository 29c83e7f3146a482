"""
Module: inventory_engines.abc
Responsibility:
    ABC (Pareto) classification of inventory items by consumption value.
    Items are ranked by ``quantity * unit_cost`` descending and labelled
    A (up to 80% of cumulative value), B (up to 95%) or C (the rest).

Architecture position:
    Engines -- pure calculation layer, zero I/O.
    May only import inventory_kernel.domain and sibling engine modules.

Invariants enforced:
    - Output length and order equal the input; every record is labelled.
    - Effective unit cost is never None in the output (defaults to 1).
    - Ties in consumption value keep their input order (stable sort).
    - Decimal-only arithmetic; thresholds compared on unrounded values.
    - Input records are never mutated; new records are returned.

Failure modes:
    - None for well-typed input.  A zero total labels every record C.

Usage:
    from inventory_engines.abc import classify_abc

    classified = classify_abc(items)
    classified[0].abc_category  # AbcCategory.A
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from decimal import Decimal
from typing import Sequence

from inventory_kernel.domain.items import AbcCategory, InventoryItem
from inventory_kernel.logging_config import get_logger
from inventory_engines.tracer import traced_engine

logger = get_logger("engines.abc")

# Scale-free placeholder for unknown cost, not a real-world price.
DEFAULT_UNIT_COST = Decimal("1")
CATEGORY_A_THRESHOLD = Decimal("0.80")
CATEGORY_B_THRESHOLD = Decimal("0.95")

_ZERO = Decimal("0")
_CATEGORY_ORDER = {AbcCategory.A: 0, AbcCategory.B: 1, AbcCategory.C: 2}


def effective_unit_cost(item: InventoryItem) -> Decimal:
    """Unit cost with unknown cost defaulted to ``DEFAULT_UNIT_COST``."""
    return item.unit_cost if item.unit_cost is not None else DEFAULT_UNIT_COST


def consumption_value(item: InventoryItem) -> Decimal:
    """Quantity (missing read as 0) times effective unit cost."""
    return item.stock_quantity * effective_unit_cost(item)


def category_for(cumulative_share: Decimal) -> AbcCategory:
    """Map a cumulative value share (0..1] to its ABC tier."""
    if cumulative_share <= CATEGORY_A_THRESHOLD:
        return AbcCategory.A
    if cumulative_share <= CATEGORY_B_THRESHOLD:
        return AbcCategory.B
    return AbcCategory.C


@traced_engine("abc", "1.0", fingerprint_fields=("items",))
def classify_abc(items: Sequence[InventoryItem]) -> list[InventoryItem]:
    """
    Classify items into ABC tiers by cumulative consumption value.

    Preconditions:
        - ``items`` holds valid InventoryItem records (any length).
    Postconditions:
        - ``len(result) == len(items)`` and ``result[i].id == items[i].id``.
        - Every result record has ``abc_category`` set and a non-None
          ``unit_cost``.
        - Records whose own consumption value is zero are always C; they
          still count toward the running total.
    Raises:
        Nothing.
    """
    if not items:
        return []

    values = [consumption_value(item) for item in items]
    # sorted() is stable: equal values keep their input order.
    ranked = sorted(range(len(items)), key=lambda i: values[i], reverse=True)
    total = sum(values, _ZERO)

    categories: list[AbcCategory] = [AbcCategory.C] * len(items)

    if total == _ZERO:
        logger.info("abc_zero_total_value", extra={
            "item_count": len(items),
        })
    else:
        cumulative = _ZERO
        for index in ranked:
            cumulative += values[index]
            if values[index] == _ZERO:
                categories[index] = AbcCategory.C
            else:
                categories[index] = category_for(cumulative / total)

    result = [
        replace(
            item,
            unit_cost=effective_unit_cost(item),
            abc_category=categories[i],
        )
        for i, item in enumerate(items)
    ]

    logger.info("abc_classification_completed", extra={
        "item_count": len(items),
        "total_consumption_value": str(total),
        "count_a": categories.count(AbcCategory.A),
        "count_b": categories.count(AbcCategory.B),
        "count_c": categories.count(AbcCategory.C),
    })

    return result


@dataclass(frozen=True)
class AbcSummary:
    """
    Per-category item counts and stock values.

    Contract:
        Every category appears in both maps, zero when empty.
        Uncategorized items are counted in ``uncategorized_count`` only.
    """

    counts: dict[AbcCategory, int] = field(default_factory=dict)
    values: dict[AbcCategory, Decimal] = field(default_factory=dict)
    uncategorized_count: int = 0

    @property
    def total_value(self) -> Decimal:
        return sum(self.values.values(), _ZERO)

    def share_of_value(self, category: AbcCategory) -> Decimal:
        """Fraction of total stock value held by ``category`` (0 when empty)."""
        total = self.total_value
        if total == _ZERO:
            return _ZERO
        return self.values[category] / total


def summarize_abc(items: Sequence[InventoryItem]) -> AbcSummary:
    """Count items and sum stock value (unknown cost as 0) per category."""
    counts = {category: 0 for category in AbcCategory}
    values = {category: _ZERO for category in AbcCategory}
    uncategorized = 0

    for item in items:
        if item.abc_category is None:
            uncategorized += 1
            continue
        counts[item.abc_category] += 1
        values[item.abc_category] += item.stock_value()

    return AbcSummary(counts=counts, values=values, uncategorized_count=uncategorized)


def sort_for_abc_table(items: Sequence[InventoryItem]) -> list[InventoryItem]:
    """Order by category (A, B, C, uncategorized), then stock value descending."""
    return sorted(
        items,
        key=lambda item: (
            _CATEGORY_ORDER.get(item.abc_category, len(_CATEGORY_ORDER)),
            -item.stock_value(),
        ),
    )
