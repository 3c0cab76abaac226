from collections.abc import Iterable
from typing import Optional

from . import settings
from .schemas import Category, InventoryItem, RollupBucket, Supplier
from .valuation import item_value


def _rollup(
    items: Iterable[InventoryItem],
    groups: Iterable[tuple[str, str]],
    key: str,
) -> dict[str, RollupBucket]:
    """
    Groups items by the reference stored in ``key``.

    Every known group gets a bucket, even an empty one. Items whose reference
    is null or points at an unknown group land in the uncategorized bucket.
    Only direct assignment counts; parent/child trees are not walked.
    """
    breakdown = {
        group_id: RollupBucket(group_id=group_id, name=name)
        for group_id, name in groups
    }
    # A group that already uses the reserved id absorbs the unassigned items.
    fallback = breakdown.setdefault(
        settings.UNCATEGORIZED_ID,
        RollupBucket(
            group_id=settings.UNCATEGORIZED_ID, name=settings.UNCATEGORIZED_NAME
        ),
    )

    for item in items:
        ref: Optional[str] = getattr(item, key)
        bucket = breakdown.get(ref, fallback) if ref is not None else fallback
        bucket.count += 1
        bucket.value += item_value(item)

    return breakdown


def category_breakdown(
    items: Iterable[InventoryItem], categories: Iterable[Category]
) -> dict[str, RollupBucket]:
    """Item count and stock value per category."""
    return _rollup(items, ((c.id, c.name) for c in categories), key="category_id")


def supplier_breakdown(
    items: Iterable[InventoryItem], suppliers: Iterable[Supplier]
) -> dict[str, RollupBucket]:
    """Item count and stock value per supplier."""
    return _rollup(items, ((s.id, s.name) for s in suppliers), key="supplier_id")
