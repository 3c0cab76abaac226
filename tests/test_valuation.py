from decimal import Decimal
import random

import pytest

from inventory_analytics import settings
from inventory_analytics.errors import InvalidArgumentError
from inventory_analytics.valuation import (
    is_low_stock,
    low_stock_items,
    summarize_valuation,
    top_items,
)


def test_summary_for_sample_items(sample_items) -> None:
    summary = summarize_valuation(sample_items)

    assert summary.total_items == 2
    assert summary.total_value == Decimal("40.00")
    assert summary.low_stock_count == 1
    assert summary.issues == []
    assert not summary.has_issues


def test_empty_input_gives_zero_summary() -> None:
    summary = summarize_valuation([])

    assert summary.total_items == 0
    assert summary.total_value == Decimal("0")
    assert summary.low_stock_count == 0
    assert summary.flagged_item_ids == []


def test_total_value_is_exact_for_many_cent_values(make_item) -> None:
    items = [make_item(f"S{i}", 1, unit_cost=Decimal("0.10")) for i in range(1000)]

    assert summarize_valuation(items).total_value == Decimal("100.00")


def test_total_value_ignores_input_order(make_item) -> None:
    items = [
        make_item(f"S{i}", i * 3, unit_cost=Decimal(f"{i}.{i:02d}")) for i in range(25)
    ]
    expected = sum((item.quantity * item.unit_cost for item in items), Decimal("0"))
    shuffled = items[:]
    random.Random(7).shuffle(shuffled)

    assert summarize_valuation(items).total_value == expected
    assert summarize_valuation(shuffled).total_value == expected


def test_low_stock_count_never_exceeds_total(make_item) -> None:
    items = [make_item(f"S{i}", i, reorder_level=50) for i in range(10)]
    summary = summarize_valuation(items)

    assert summary.low_stock_count == summary.total_items == 10


def test_negative_values_are_flagged_but_still_summed(make_item) -> None:
    bad = make_item("BAD", -4, unit_cost=Decimal("2.50"))
    cheap = make_item("NEG", 2, unit_cost=Decimal("-1.00"))
    good = make_item("OK", 3, unit_cost=Decimal("1.00"))

    summary = summarize_valuation([bad, cheap, good])

    assert summary.total_value == Decimal("-10.00") + Decimal("-2.00") + Decimal("3.00")
    assert summary.flagged_item_ids == [bad.id, cheap.id]
    assert {(i.item_id, i.field) for i in summary.issues} == {
        (bad.id, "quantity"),
        (cheap.id, "unit_cost"),
    }


def test_missing_reorder_level_is_flagged_and_not_low_stock(make_item) -> None:
    item = make_item("X", 0, reorder_level=None)

    summary = summarize_valuation([item])

    assert not is_low_stock(item)
    assert summary.low_stock_count == 0
    assert summary.issues[0].reason == "missing reorder level"


def test_low_stock_items_keeps_input_order(make_item) -> None:
    first = make_item("Z", 1)
    second = make_item("A", 10)
    plenty = make_item("M", 11)

    assert low_stock_items([first, plenty, second]) == [first, second]


def test_top_items_orders_by_quantity_then_sku(make_item) -> None:
    items = [
        make_item("C", 7),
        make_item("B", 9),
        make_item("A", 7),
        make_item("D", 1),
    ]

    assert [i.sku for i in top_items(items, 3)] == ["B", "A", "C"]


def test_top_one_of_sample(sample_items) -> None:
    assert [i.sku for i in top_items(sample_items, 1)] == ["B"]


def test_top_items_is_idempotent(make_item) -> None:
    items = [make_item(f"S{i % 4}{i}", i % 6) for i in range(12)]

    once = top_items(items, 5)

    assert top_items(once, 5) == once


def test_top_items_edges(sample_items) -> None:
    assert top_items(sample_items, 0) == []
    assert len(top_items(sample_items, 10)) == 2
    assert top_items([], 5) == []
    assert len(top_items(sample_items)) == 2


@pytest.mark.parametrize("n", [-1, 2.5, "3", True])
def test_top_items_rejects_bad_n(sample_items, n) -> None:
    with pytest.raises(InvalidArgumentError):
        top_items(sample_items, n)


def test_top_items_default_ignores_configured_top_n(make_item, monkeypatch) -> None:
    monkeypatch.setattr(settings, "TOP_N", 10)
    items = [make_item(f"S{i:02d}", i) for i in range(12)]

    assert len(top_items(items)) == 5
