from collections.abc import Iterable

from .schemas import InventoryItem


def search_items(items: Iterable[InventoryItem], query: str) -> list[InventoryItem]:
    """Case-insensitive substring match on name, SKU and description."""
    if not query:
        return list(items)
    needle = query.lower()
    return [
        item
        for item in items
        if needle in item.name.lower()
        or needle in item.sku.lower()
        or needle in item.description.lower()
    ]
