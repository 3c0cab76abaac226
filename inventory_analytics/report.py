from datetime import date, datetime, timezone
from typing import Optional

from .alerts import generate_alerts, unread_count
from .movements import month_start, movements_since
from .rollups import category_breakdown, supplier_breakdown
from .schemas import InventorySnapshot, ReportMetrics
from .valuation import summarize_valuation, top_items


def build_report(
    snapshot: InventorySnapshot,
    today: Optional[date] = None,
    top_n: int = 5,
) -> ReportMetrics:
    """
    Computes every dashboard/report figure from one snapshot.
    All aggregations read the same immutable collections.
    """
    today = today or date.today()
    items = snapshot.items

    return ReportMetrics(
        organization_id=snapshot.organization_id,
        generated_at=datetime.now(timezone.utc),
        valuation=summarize_valuation(items),
        top_items=top_items(items, top_n),
        category_breakdown=category_breakdown(items, snapshot.categories),
        supplier_breakdown=supplier_breakdown(items, snapshot.suppliers),
        movements_this_month=len(movements_since(snapshot.movements, month_start(today))),
        alerts=generate_alerts(items),
        unread_alerts=unread_count(snapshot.alerts),
    )
