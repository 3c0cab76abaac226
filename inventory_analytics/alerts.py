import logging
from collections.abc import Iterable
from typing import Optional

from .schemas import Alert, InventoryItem, Severity

logger = logging.getLogger(__name__)


def classify_severity(quantity: int, reorder_level: Optional[int]) -> Optional[Severity]:
    """
    Maps a stock level to a low-stock alert severity.

    - ``quantity == 0`` -> critical, whatever the reorder level
    - ``0 < quantity <= reorder_level / 2`` -> high
    - ``reorder_level / 2 < quantity <= reorder_level`` -> medium
    - ``quantity > reorder_level`` -> None (no alert)

    Negative quantities are treated like an empty shelf. Without a reorder
    level only an empty shelf raises an alert.
    """
    if quantity <= 0:
        return "critical"
    if reorder_level is None or quantity > reorder_level:
        return None
    # 2q <= level is the integer form of q <= level * 0.5
    if 2 * quantity <= reorder_level:
        return "high"
    return "medium"


def evaluate_alert(item: InventoryItem) -> Optional[Alert]:
    """Zero or one low-stock alert for an item."""
    severity = classify_severity(item.quantity, item.reorder_level)
    if severity is None:
        return None

    if severity == "critical":
        title = f"Out of stock: {item.name}"
        message = f"{item.name} ({item.sku}) has no stock left."
    else:
        title = f"Low stock: {item.name}"
        message = (
            f"{item.name} ({item.sku}) is down to {item.quantity} {item.unit}"
            f" (reorder level {item.reorder_level})."
        )
    return Alert(
        type="low_stock",
        severity=severity,
        item_id=item.id,
        title=title,
        message=message,
    )


def generate_alerts(items: Iterable[InventoryItem]) -> list[Alert]:
    """
    One evaluation pass over ``items``. Previously raised alerts are not
    consulted; the store is expected to upsert on (item, type).
    """
    alerts = [alert for alert in map(evaluate_alert, items) if alert is not None]
    logger.info(f"Generated {len(alerts)} low-stock alert(s).")
    return alerts


def unread_alerts(alerts: Iterable[Alert]) -> list[Alert]:
    return [alert for alert in alerts if not alert.is_read]


def unread_count(alerts: Iterable[Alert]) -> int:
    return sum(1 for alert in alerts if not alert.is_read)
