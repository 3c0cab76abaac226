from datetime import datetime
from decimal import Decimal
from typing import Any, Literal, Optional

from pydantic import BaseModel, Field, ValidationError, model_validator

from .errors import InvalidArgumentError

ItemStatus = Literal["active", "discontinued", "out_of_stock"]
MovementType = Literal["inbound", "outbound", "transfer", "adjustment", "stocktake"]
AlertType = Literal["low_stock", "expiry", "reorder"]
Severity = Literal["low", "medium", "high", "critical"]

# Movement types whose quantity is an absolute stock level rather than a delta.
ABSOLUTE_MOVEMENT_TYPES = ("adjustment", "stocktake")


class InventoryItem(BaseModel):
    """
    One row of the inventory table, as handed over by the data-access layer.

    Negative quantities/costs and a missing reorder level pass validation; the
    valuation step reports them as data-quality issues.
    """

    id: str
    sku: str = Field(..., min_length=1)
    name: str
    description: str = ""
    quantity: int
    unit: str = "pcs"
    unit_cost: Decimal
    selling_price: Decimal = Decimal("0")
    reorder_level: Optional[int] = None
    reorder_quantity: int = 0
    status: ItemStatus = "active"
    category_id: Optional[str] = None
    supplier_id: Optional[str] = None
    location_id: Optional[str] = None
    organization_id: Optional[str] = None

    class Config:
        frozen = True
        extra = "ignore"


class Category(BaseModel):
    id: str
    name: str
    description: str = ""
    color: str = "#3B82F6"
    parent_id: Optional[str] = None
    organization_id: Optional[str] = None

    class Config:
        frozen = True
        extra = "ignore"


class Supplier(BaseModel):
    id: str
    name: str
    contact_person: str = ""
    email: str = ""
    phone: str = ""
    lead_time_days: int = Field(default=7, ge=0)
    organization_id: Optional[str] = None

    class Config:
        frozen = True
        extra = "ignore"


class StockMovement(BaseModel):
    id: str
    item_id: str
    type: MovementType
    quantity: int
    created_at: datetime
    notes: str = ""
    reference_number: str = ""
    from_location_id: Optional[str] = None
    to_location_id: Optional[str] = None
    organization_id: Optional[str] = None

    class Config:
        frozen = True
        extra = "ignore"

    @model_validator(mode="after")
    def _check_quantity(self) -> "StockMovement":
        if self.type in ABSOLUTE_MOVEMENT_TYPES:
            if self.quantity < 0:
                raise ValueError(f"{self.type} movements need a quantity >= 0")
        elif self.quantity <= 0:
            raise ValueError(f"{self.type} movements need a quantity > 0")
        return self


class Alert(BaseModel):
    type: AlertType
    severity: Severity
    item_id: Optional[str] = None
    title: str = ""
    message: str = ""
    is_read: bool = False
    id: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        frozen = True
        extra = "ignore"


class InventorySnapshot(BaseModel):
    """Immutable point-in-time view of one organization's inventory."""

    organization_id: Optional[str] = None
    items: tuple[InventoryItem, ...] = ()
    categories: tuple[Category, ...] = ()
    suppliers: tuple[Supplier, ...] = ()
    movements: tuple[StockMovement, ...] = ()
    alerts: tuple[Alert, ...] = ()

    class Config:
        frozen = True


# --- Derived value objects ---


class DataQualityIssue(BaseModel):
    item_id: str
    field: str
    value: Any = None
    reason: str


class ValuationSummary(BaseModel):
    total_items: int = 0
    total_value: Decimal = Decimal("0")
    low_stock_count: int = 0
    issues: list[DataQualityIssue] = Field(default_factory=list)

    @property
    def flagged_item_ids(self) -> list[str]:
        """Offending item ids in first-seen order, without duplicates."""
        return list(dict.fromkeys(issue.item_id for issue in self.issues))

    @property
    def has_issues(self) -> bool:
        return bool(self.issues)


class RollupBucket(BaseModel):
    group_id: str
    name: str
    count: int = 0
    value: Decimal = Decimal("0")


class ReportMetrics(BaseModel):
    organization_id: Optional[str] = None
    generated_at: datetime
    valuation: ValuationSummary
    top_items: list[InventoryItem]
    category_breakdown: dict[str, RollupBucket]
    supplier_breakdown: dict[str, RollupBucket]
    movements_this_month: int = 0
    alerts: list[Alert] = Field(default_factory=list)
    unread_alerts: int = 0


_SNAPSHOT_MODELS = {
    "items": InventoryItem,
    "categories": Category,
    "suppliers": Supplier,
    "movements": StockMovement,
    "alerts": Alert,
}


def parse_rows(model: type[BaseModel], rows: list[dict]) -> list[BaseModel]:
    """Validates raw rows into ``model`` instances, failing fast on the first bad row."""
    parsed = []
    for index, row in enumerate(rows):
        try:
            parsed.append(model.model_validate(row))
        except ValidationError as e:
            raise InvalidArgumentError(
                f"Row {index} is not a valid {model.__name__}: {e}"
            ) from e
    return parsed


def parse_items(rows: list[dict]) -> list[InventoryItem]:
    return parse_rows(InventoryItem, rows)  # type: ignore[return-value]


def parse_snapshot(
    organization_id: Optional[str], raw: dict[str, list[dict]]
) -> InventorySnapshot:
    """
    Builds an immutable snapshot from raw row collections keyed by
    ``items``, ``categories``, ``suppliers``, ``movements`` and ``alerts``.
    Missing collections are treated as empty.
    """
    unknown = set(raw) - set(_SNAPSHOT_MODELS)
    if unknown:
        raise InvalidArgumentError(f"Unknown snapshot collections: {sorted(unknown)}")

    collections = {
        key: tuple(parse_rows(model, raw.get(key) or []))
        for key, model in _SNAPSHOT_MODELS.items()
    }
    return InventorySnapshot(organization_id=organization_id, **collections)
