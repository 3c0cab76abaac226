import json
import logging
from datetime import date
from pathlib import Path
from typing import Optional

import requests

from . import settings, utils
from .exporters import export_filename
from .schemas import ReportMetrics

logger = logging.getLogger(__name__)


def save_outputs(
    metrics: ReportMetrics,
    csv_text: str,
    day: Optional[date] = None,
    output_dir: Optional[Path] = None,
) -> list[Path]:
    """Saves the CSV export and, when enabled, the JSON report with dated filenames."""
    day = day or date.today()
    output_dir = output_dir or settings.OUTPUT_DIR
    output_dir.mkdir(parents=True, exist_ok=True)

    csv_path = output_dir / export_filename(day)
    # newline="" keeps the export's own line endings on every platform
    with open(csv_path, "w", encoding="utf-8", newline="") as f:
        f.write(csv_text)
    logger.info(f"✅ CSV export saved to: {csv_path}")
    saved = [csv_path]

    if settings.SAVE_JSON_OUTPUT:
        json_path = (
            output_dir
            / f"{settings.REPORT_FILENAME_BASE}-{utils.get_date_suffix_for_filename(day)}.json"
        )
        with open(json_path, "w", encoding="utf-8") as f:
            json.dump(metrics.model_dump(mode="json"), f, indent=2)
        logger.info(f"✅ JSON report saved to: {json_path}")
        saved.append(json_path)
    else:
        logger.info("Skipping JSON file save as per configuration.")

    return saved


def build_webhook_payload(metrics: ReportMetrics) -> dict:
    valuation = metrics.valuation
    return {
        "organizationId": metrics.organization_id,
        "generatedAt": metrics.generated_at.isoformat(),
        "summary": {
            "totalItems": valuation.total_items,
            "totalValue": str(valuation.total_value),
            "lowStockCount": valuation.low_stock_count,
            "movementsThisMonth": metrics.movements_this_month,
            "unreadAlerts": metrics.unread_alerts,
        },
        "flaggedItems": valuation.flagged_item_ids,
        "alerts": [alert.model_dump(mode="json") for alert in metrics.alerts],
    }


def post_to_webhook(metrics: ReportMetrics, webhook_url: Optional[str] = None) -> bool:
    """
    Posts the report summary to the webhook. Delivery failures are logged,
    not raised; the files on disk are the report of record.
    """
    webhook_url = webhook_url or settings.WEBHOOK_URL
    if not webhook_url:
        logger.warning("⚠️ WEBHOOK_URL not set. Skipping webhook post.")
        return False

    logger.info(f"🚀 Posting report summary to webhook: {webhook_url}")
    try:
        response = requests.post(
            webhook_url, json=build_webhook_payload(metrics), timeout=15
        )
        response.raise_for_status()
    except requests.exceptions.RequestException as e:
        logger.error(f"❌ Error posting to webhook: {e}")
        return False

    logger.info("✅ Report summary successfully posted to webhook.")
    return True
