"""
Adapters that pull raw snapshot rows out of the data store.

Each source returns plain dicts keyed by collection name (``items``,
``categories``, ``suppliers``, ``movements``, ``alerts``), already scoped to
one organization. Validation happens later, in the pipeline.
"""
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

import requests

from . import settings
from .utils import dataframe_to_rows, load_csv

logger = logging.getLogger(__name__)


class SnapshotSource(ABC):
    @abstractmethod
    def fetch(self, organization_id: Optional[str]) -> dict[str, list[dict]]:
        """Returns every collection for ``organization_id``."""


class CsvSnapshotSource(SnapshotSource):
    """Reads table exports (one CSV per collection) from a directory."""

    def __init__(self, input_dir: Path = settings.INPUT_DIR):
        self.input_dir = input_dir
        self.filenames = {
            "items": settings.ITEMS_FILENAME,
            "categories": settings.CATEGORIES_FILENAME,
            "suppliers": settings.SUPPLIERS_FILENAME,
            "movements": settings.MOVEMENTS_FILENAME,
            "alerts": settings.ALERTS_FILENAME,
        }

    def fetch(self, organization_id: Optional[str]) -> dict[str, list[dict]]:
        raw = {}
        for collection, filename in self.filenames.items():
            df = load_csv(self.input_dir / filename)
            if df is None:
                raw[collection] = []
                continue

            # Exports may hold several tenants; keep only the requested one.
            if organization_id and "organization_id" in df.columns:
                df = df[df["organization_id"] == organization_id]

            raw[collection] = dataframe_to_rows(df)
            logger.info(f"  > Loaded {len(raw[collection])} {collection} from {filename}")
        return raw


class RestSnapshotSource(SnapshotSource):
    """
    Fetches rows from a PostgREST-style API such as the one the dashboard's
    hosted backend exposes: ``GET {base_url}/rest/v1/{table}?organization_id=eq.{org}``.
    """

    def __init__(
        self,
        base_url: str = settings.BACKEND_URL,
        api_key: Optional[str] = settings.BACKEND_API_KEY,
        timeout: int = settings.BACKEND_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        if not base_url:
            raise ValueError("A backend URL is required for RestSnapshotSource.")
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        if api_key:
            self.session.headers.update(
                {"apikey": api_key, "Authorization": f"Bearer {api_key}"}
            )

    def _get_table(self, table: str, organization_id: Optional[str]) -> list[dict]:
        params = {"select": "*"}
        if organization_id:
            params["organization_id"] = f"eq.{organization_id}"

        response = self.session.get(
            f"{self.base_url}/rest/v1/{table}", params=params, timeout=self.timeout
        )
        response.raise_for_status()
        return response.json()

    def fetch(self, organization_id: Optional[str]) -> dict[str, list[dict]]:
        raw = {}
        for collection, table in settings.SNAPSHOT_TABLES.items():
            raw[collection] = self._get_table(table, organization_id)
            logger.info(f"  > Fetched {len(raw[collection])} rows from '{table}'")
        return raw
