import sys

from inventory_analytics import settings
from inventory_analytics.logger import setup_logger
from inventory_analytics.pipelines.report import ReportPipeline
from inventory_analytics.sources import CsvSnapshotSource, RestSnapshotSource


def run_process(test_mode: bool = False) -> int:
    """Main orchestration function: fetch a snapshot, compute the report, save and publish it."""
    logger = setup_logger()

    # The hosted backend wins when configured; otherwise read the CSV exports.
    if settings.BACKEND_URL:
        source = RestSnapshotSource()
        logger.info(f"Using backend at {settings.BACKEND_URL}")
    else:
        source = CsvSnapshotSource(settings.INPUT_DIR)
        logger.info(f"Using CSV exports in {settings.INPUT_DIR}")

    result = ReportPipeline(source, test_mode=test_mode).run()
    if result is None:
        logger.error("\n❌ Report could not be produced.")
        return 1

    logger.info("\n--- Process Finished Successfully ---")
    return 0


if __name__ == "__main__":
    sys.exit(run_process(test_mode="--test" in sys.argv[1:]))
