import logging
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Optional

import requests

from inventory_analytics import data_handler, settings
from inventory_analytics.errors import InvalidArgumentError
from inventory_analytics.exporters import export_items_csv
from inventory_analytics.pipeline import DataPipeline
from inventory_analytics.report import build_report
from inventory_analytics.schemas import InventorySnapshot, ReportMetrics, parse_snapshot
from inventory_analytics.sources import SnapshotSource

logger = logging.getLogger(__name__)


@dataclass
class ReportResult:
    snapshot: InventorySnapshot
    metrics: ReportMetrics
    csv_text: str


class ReportPipeline(DataPipeline):
    def __init__(
        self,
        source: SnapshotSource,
        organization_id: Optional[str] = settings.ORGANIZATION_ID,
        top_n: int = settings.TOP_N,
        output_dir: Optional[Path] = None,
        today: Optional[date] = None,
        test_mode: bool = False,
    ):
        super().__init__("inventory", test_mode=test_mode)
        self.source = source
        self.organization_id = organization_id
        self.top_n = top_n
        self.output_dir = output_dir
        self.today = today or date.today()

    def extract(self) -> Optional[dict[str, list[dict]]]:
        logger.info(f"--- Fetching snapshot for organization: {self.organization_id or 'all'} ---")
        try:
            return self.source.fetch(self.organization_id)
        except requests.exceptions.RequestException as e:
            logger.error(f"❌ Could not fetch snapshot: {e}")
            return None

    def transform(self, raw_data: dict[str, list[dict]]) -> Optional[ReportResult]:
        try:
            logger.info("Validating rows against schema...")
            snapshot = parse_snapshot(self.organization_id, raw_data)
            logger.info(f"✅ Data validation successful ({len(snapshot.items)} items).")
        except InvalidArgumentError as e:
            logger.error("❌ Data validation failed!")
            logger.error(e)
            return None

        logger.info("\n--- Computing Metrics ---")
        metrics = build_report(snapshot, today=self.today, top_n=self.top_n)
        valuation = metrics.valuation
        logger.info(f"Items: {valuation.total_items}")
        logger.info(f"Total value: {valuation.total_value}")
        logger.info(f"Low stock: {valuation.low_stock_count}")
        logger.info(f"Movements this month: {metrics.movements_this_month}")
        if valuation.has_issues:
            for issue in valuation.issues:
                logger.warning(
                    f"  > ⚠️ Item {issue.item_id}: {issue.field} {issue.reason} ({issue.value})"
                )

        return ReportResult(
            snapshot=snapshot, metrics=metrics, csv_text=export_items_csv(snapshot.items)
        )

    def load(self, result: ReportResult) -> None:
        data_handler.save_outputs(
            result.metrics, result.csv_text, day=self.today, output_dir=self.output_dir
        )

        if not self.test_mode:
            data_handler.post_to_webhook(result.metrics)
        else:
            logger.info("🧪 Test Mode: Skipping webhook post.")
