from collections.abc import Iterable
from datetime import date, datetime, timezone

from .errors import InsufficientStockError
from .schemas import ABSOLUTE_MOVEMENT_TYPES, StockMovement


def apply_movement(current_quantity: int, movement: StockMovement) -> int:
    """
    Returns the item's stock level after ``movement``.

    inbound adds, outbound subtracts, adjustment and stocktake set the level
    to the movement's quantity. A transfer only moves stock between locations,
    so the organization-wide level is unchanged.
    """
    if movement.type == "inbound":
        return current_quantity + movement.quantity
    if movement.type == "outbound":
        if movement.quantity > current_quantity:
            raise InsufficientStockError(
                movement.item_id, current_quantity, movement.quantity
            )
        return current_quantity - movement.quantity
    if movement.type in ABSOLUTE_MOVEMENT_TYPES:
        return movement.quantity
    return current_quantity


def signed_quantity(movement: StockMovement) -> str:
    """Display form used in movement history: ``+5``, ``-3`` or a bare number."""
    sign = {"inbound": "+", "outbound": "-"}.get(movement.type, "")
    return f"{sign}{movement.quantity}"


def month_start(day: date) -> datetime:
    """Midnight UTC on the first day of ``day``'s month."""
    return datetime(day.year, day.month, 1, tzinfo=timezone.utc)


def movements_since(
    movements: Iterable[StockMovement], since: datetime
) -> list[StockMovement]:
    """Movements recorded at or after ``since``. Naive timestamps are read as UTC."""
    if since.tzinfo is None:
        since = since.replace(tzinfo=timezone.utc)
    selected = []
    for movement in movements:
        created_at = movement.created_at
        if created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=timezone.utc)
        if created_at >= since:
            selected.append(movement)
    return selected
