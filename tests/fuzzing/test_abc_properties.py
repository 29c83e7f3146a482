"""
Property-based tests for the ABC classifier and the QR decoder.

Invariants checked on generated inventories:
- Output length and ids match the input, in order
- Every output record has a category and a unit cost
- Zero-value records are always C
- Classification is idempotent
- Tiers are monotone: a higher-value record never gets a worse tier
- The decoder never raises on arbitrary text
"""

import json
from decimal import Decimal

from hypothesis import given, settings
from hypothesis import strategies as st

from inventory_engines.abc import classify_abc, consumption_value
from inventory_ingestion import ScanAccepted, ScanRejected, decode_scan_payload
from inventory_kernel.domain.items import AbcCategory, InventoryItem

_RANK = {AbcCategory.A: 0, AbcCategory.B: 1, AbcCategory.C: 2}

costs = st.one_of(
    st.none(),
    st.decimals(min_value=0, max_value=10_000, places=2, allow_nan=False, allow_infinity=False),
)


@st.composite
def inventories(draw):
    rows = draw(st.lists(
        st.tuples(st.one_of(st.none(), st.integers(min_value=0, max_value=5_000)), costs),
        max_size=40,
    ))
    return [
        InventoryItem(id=f"QR{i:05d}", name=f"Item {i}", quantity=q, unit_cost=c)
        for i, (q, c) in enumerate(rows)
    ]


class TestAbcProperties:
    """Invariants of classify_abc over generated inventories."""

    @given(inventories())
    @settings(max_examples=200)
    def test_shape_and_order(self, items):
        result = classify_abc(items)
        assert [r.id for r in result] == [i.id for i in items]
        assert all(r.abc_category is not None for r in result)
        assert all(r.unit_cost is not None for r in result)

    @given(inventories())
    def test_zero_value_is_c(self, items):
        for r in classify_abc(items):
            if consumption_value(r) == Decimal("0"):
                assert r.abc_category is AbcCategory.C

    @given(inventories())
    def test_idempotent(self, items):
        once = classify_abc(items)
        assert classify_abc(once) == once

    @given(inventories())
    def test_higher_value_never_worse_tier(self, items):
        result = [r for r in classify_abc(items) if consumption_value(r) > 0]
        for a in result:
            for b in result:
                if consumption_value(a) > consumption_value(b):
                    assert _RANK[a.abc_category] <= _RANK[b.abc_category]


class TestDecoderNeverRaises:
    @given(st.text(max_size=200))
    def test_arbitrary_text(self, text):
        assert isinstance(decode_scan_payload(text), (ScanAccepted, ScanRejected))

    @given(st.dictionaries(
        st.sampled_from(["id", "name", "unitCost", "unitPrice", "expiryDate", "supplierId"]),
        st.one_of(st.none(), st.booleans(), st.integers(), st.text(max_size=12), st.floats()),
    ))
    def test_arbitrary_objects(self, data):
        result = decode_scan_payload(json.dumps(data))
        assert isinstance(result, (ScanAccepted, ScanRejected))

    @given(st.integers(min_value=1, max_value=50_000), st.sampled_from(["[]", "{}"]))
    @settings(max_examples=25)
    def test_nested_values(self, depth, brackets):
        opening, closing = brackets
        text = '{"id": "A", "name": "B", "extra": ' + opening * depth + closing * depth + "}"
        result = decode_scan_payload(text)
        assert isinstance(result, (ScanAccepted, ScanRejected))
