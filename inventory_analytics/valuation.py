import logging
from collections.abc import Iterable, Sequence
from decimal import Decimal

from .errors import InvalidArgumentError
from .schemas import DataQualityIssue, InventoryItem, ValuationSummary

logger = logging.getLogger(__name__)


def item_value(item: InventoryItem) -> Decimal:
    """Stock value of a single item (quantity x unit cost)."""
    return item.quantity * item.unit_cost


def is_low_stock(item: InventoryItem) -> bool:
    """True when the item is at or below its reorder level. Unknown levels never count."""
    if item.reorder_level is None:
        return False
    return item.quantity <= item.reorder_level


def low_stock_items(items: Iterable[InventoryItem]) -> list[InventoryItem]:
    """Items needing reorder, in input order."""
    return [item for item in items if is_low_stock(item)]


def check_item(item: InventoryItem) -> list[DataQualityIssue]:
    """Lists the data-quality problems of one item. Values are reported as found."""
    issues = []
    for field in ("quantity", "unit_cost", "reorder_level"):
        value = getattr(item, field)
        if value is not None and value < 0:
            issues.append(
                DataQualityIssue(
                    item_id=item.id, field=field, value=value, reason="negative value"
                )
            )
    if item.reorder_level is None:
        issues.append(
            DataQualityIssue(
                item_id=item.id,
                field="reorder_level",
                value=None,
                reason="missing reorder level",
            )
        )
    return issues


def summarize_valuation(items: Iterable[InventoryItem]) -> ValuationSummary:
    """
    Computes item count, total stock value and low-stock count in a single pass.

    Sums are exact ``Decimal`` arithmetic. Bad rows are flagged on the summary
    but still contribute their raw values so the caller can decide what to do.
    """
    total_items = 0
    total_value = Decimal("0")
    low_stock_count = 0
    issues: list[DataQualityIssue] = []

    for item in items:
        total_items += 1
        total_value += item_value(item)
        if is_low_stock(item):
            low_stock_count += 1
        issues.extend(check_item(item))

    if issues:
        logger.warning(
            f"⚠️ {len(issues)} data-quality issue(s) found while valuing {total_items} items."
        )

    return ValuationSummary(
        total_items=total_items,
        total_value=total_value,
        low_stock_count=low_stock_count,
        issues=issues,
    )


def top_items(
    items: Iterable[InventoryItem], n: int = 5
) -> list[InventoryItem]:
    """
    Returns up to ``n`` items with the highest quantity.
    Ties are broken by SKU so the order is total and reproducible.
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidArgumentError(f"n must be an integer, got {n!r}")
    if n < 0:
        raise InvalidArgumentError(f"n must be >= 0, got {n}")
    if n == 0:
        return []

    ranked: Sequence[InventoryItem] = sorted(
        items, key=lambda item: (-item.quantity, item.sku)
    )
    return list(ranked[:n])
