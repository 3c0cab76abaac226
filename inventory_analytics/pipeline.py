import logging
from abc import ABC, abstractmethod
from typing import Any, Optional

logger = logging.getLogger(__name__)


class DataPipeline(ABC):
    """
    Abstract base class for report pipelines.
    Follows an Extract -> Transform -> Load (ETL) pattern.
    """

    def __init__(self, report_type: str, test_mode: bool = False):
        self.report_type = report_type
        self.test_mode = test_mode

    def run(self) -> Optional[Any]:
        """
        Orchestrates the pipeline execution. Returns the transformed result,
        or None when nothing could be produced.
        """
        logger.info(f"🚀 STEP: {self.report_type.upper()} REPORT")
        logger.info("-" * 30)

        # --- 1. EXTRACT ---
        raw_data = self.extract()
        if raw_data is None:
            logger.error(f"❌ No data extracted for {self.report_type}.")
            return None

        # --- 2. TRANSFORM ---
        result = self.transform(raw_data)
        if result is None:
            logger.error(f"❌ Transformation failed for {self.report_type}.")
            return None

        # --- 3. LOAD ---
        self.load(result)

        logger.info(f"✅ {self.report_type.capitalize()} Pipeline Finished.\n")
        logger.info("=" * 60)
        return result

    @abstractmethod
    def extract(self) -> Optional[Any]:
        """Fetches raw rows from the data source."""

    @abstractmethod
    def transform(self, raw_data: Any) -> Optional[Any]:
        """Validates the raw rows and computes derived values."""

    @abstractmethod
    def load(self, result: Any) -> None:
        """Persists and publishes the result."""
