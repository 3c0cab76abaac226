import logging
from datetime import date, datetime
from pathlib import Path

import pandas as pd

logger = logging.getLogger(__name__)


def get_date_suffix_for_filename(day: date | None = None) -> str:
    """Returns the date as a YYYY-MM-DD string for filenames."""
    return (day or datetime.now().date()).strftime("%Y-%m-%d")


def load_csv(file_path: Path) -> pd.DataFrame | None:
    """
    CSV loader with an encoding fallback. Every column is read as text so
    money values reach the Decimal fields without float rounding.
    It will attempt to read a file in the following order:
    1. UTF-8 with BOM support ('utf-8-sig').
    2. Latin-1, which never fails to decode but might misinterpret characters.
    """
    try:
        return pd.read_csv(file_path, encoding="utf-8-sig", dtype=str)

    except UnicodeDecodeError:
        logger.info(
            f"UTF-8 decoding failed for {file_path.name}. Retrying with 'latin-1'."
        )
        return pd.read_csv(file_path, encoding="latin-1", dtype=str)

    except FileNotFoundError:
        logger.info(f"Export not found at {file_path}, skipping.")
        return None

    except pd.errors.EmptyDataError:
        logger.info(f"Export {file_path.name} is empty, skipping.")
        return None


def dataframe_to_rows(df: pd.DataFrame) -> list[dict]:
    """Converts a DataFrame to row dicts. Empty cells are left out so schema defaults apply."""
    return [
        {str(k): v for k, v in rec.items() if pd.notna(v)}
        for rec in df.to_dict("records")
    ]
