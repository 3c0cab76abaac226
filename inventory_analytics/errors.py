class InventoryAnalyticsError(Exception):
    """Base class for every error raised by the analytics engine."""


class InvalidArgumentError(InventoryAnalyticsError, ValueError):
    """Raised when a caller passes an argument the engine cannot work with."""


class InsufficientStockError(InventoryAnalyticsError, ValueError):
    """Raised when an outbound movement would take stock below zero."""

    def __init__(self, item_id: str, available: int, requested: int):
        self.item_id = item_id
        self.available = available
        self.requested = requested
        super().__init__(
            f"Cannot remove {requested} units of item {item_id}: only {available} in stock."
        )


class PermissionDeniedError(InventoryAnalyticsError):
    """Raised when a role is not allowed to perform an action."""
