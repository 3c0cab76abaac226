from collections.abc import Iterable
from datetime import date
from decimal import Decimal

import pandas as pd

from . import settings
from .schemas import InventoryItem

_CENTS = Decimal("0.01")


def format_money(value: Decimal) -> str:
    """
    Plain fixed-point rendering with at least two decimals.
    Extra precision is kept so the exported value parses back unchanged.
    """
    if value.as_tuple().exponent > -2:
        value = value.quantize(_CENTS)
    return format(value, "f")


def items_to_dataframe(items: Iterable[InventoryItem]) -> pd.DataFrame:
    """Projects items onto the export columns, money already rendered as text."""
    rows = [
        {
            "SKU": item.sku,
            "Name": item.name,
            "Quantity": item.quantity,
            "Unit": item.unit,
            "Unit Cost": format_money(item.unit_cost),
            "Selling Price": format_money(item.selling_price),
            "Status": item.status,
        }
        for item in items
    ]
    return pd.DataFrame(rows, columns=settings.EXPORT_COLUMNS)


def export_items_csv(items: Iterable[InventoryItem]) -> str:
    """
    Serializes items to CSV in the fixed export column order.
    Fields holding commas, quotes, CR or LF are quoted; rows end in CRLF (RFC 4180).
    """
    df = items_to_dataframe(items)
    return df.to_csv(index=False, lineterminator="\r\n")


def export_filename(day: date) -> str:
    """e.g. ``inventory-report-2024-06-30.csv``"""
    return f"{settings.REPORT_FILENAME_BASE}-{day.isoformat()}.csv"
