from __future__ import annotations

from collections.abc import Callable
from decimal import Decimal

import pytest

from inventory_analytics.schemas import Category, InventoryItem, Supplier


@pytest.fixture()
def make_item() -> Callable[..., InventoryItem]:
    counter = iter(range(1, 10_000))

    def _make(sku: str, quantity: int = 0, **overrides) -> InventoryItem:
        fields = {
            "id": f"item-{next(counter)}",
            "sku": sku,
            "name": f"Item {sku}",
            "quantity": quantity,
            "unit": "pcs",
            "unit_cost": Decimal("1.00"),
            "selling_price": Decimal("2.00"),
            "reorder_level": 10,
        }
        fields.update(overrides)
        return InventoryItem(**fields)

    return _make


@pytest.fixture()
def sample_items(make_item) -> list[InventoryItem]:
    return [
        make_item("A", 5, reorder_level=10, unit_cost=Decimal("2.00"), category_id="cat-1"),
        make_item("B", 20, reorder_level=5, unit_cost=Decimal("1.50"), supplier_id="sup-1"),
    ]


@pytest.fixture()
def categories() -> list[Category]:
    return [
        Category(id="cat-1", name="Hardware", color="#EF4444"),
        Category(id="cat-2", name="Tools", parent_id="cat-1"),
    ]


@pytest.fixture()
def suppliers() -> list[Supplier]:
    return [Supplier(id="sup-1", name="Acme Supply", lead_time_days=3)]
