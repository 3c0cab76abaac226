import os
from pathlib import Path
from dotenv import load_dotenv

# --- Base Directory ---
BASE_DIR = Path(__file__).resolve().parent.parent

# --- Load Environment Variables ---
load_dotenv(BASE_DIR / ".env")

# --- Path Configuration ---
INPUT_DIR = BASE_DIR / os.getenv("INPUT_DIR", "input")
OUTPUT_DIR = BASE_DIR / os.getenv("OUTPUT_DIR", "output")
LOG_DIR = BASE_DIR / os.getenv("LOG_DIR", "logs")

# --- Snapshot Source Configuration ---
# Tenant every fetched row must belong to.
ORGANIZATION_ID = os.getenv("ORGANIZATION_ID")

# Hosted backend (PostgREST-style). When unset, CSV exports in INPUT_DIR are used.
BACKEND_URL = os.getenv("BACKEND_URL")
BACKEND_API_KEY = os.getenv("BACKEND_API_KEY")
BACKEND_TIMEOUT = int(os.getenv("BACKEND_TIMEOUT", "15"))

# --- Filename Configuration ---
ITEMS_FILENAME = os.getenv("ITEMS_FILENAME", "inventory_items.csv")
CATEGORIES_FILENAME = os.getenv("CATEGORIES_FILENAME", "categories.csv")
SUPPLIERS_FILENAME = os.getenv("SUPPLIERS_FILENAME", "suppliers.csv")
MOVEMENTS_FILENAME = os.getenv("MOVEMENTS_FILENAME", "stock_movements.csv")
ALERTS_FILENAME = os.getenv("ALERTS_FILENAME", "alerts.csv")
REPORT_FILENAME_BASE = os.getenv("REPORT_FILENAME", "inventory-report")

# --- Outputs ---
WEBHOOK_URL = os.getenv("WEBHOOK_URL")
SAVE_JSON_OUTPUT = os.getenv("SAVE_JSON_OUTPUT", "true").lower() in ("1", "true", "yes")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# --- Shared Business Logic ---
# Number of items shown in the "top items" panels.
TOP_N = int(os.getenv("TOP_N", "5"))

# Fixed column order of the CSV export.
EXPORT_COLUMNS = [
    "SKU",
    "Name",
    "Quantity",
    "Unit",
    "Unit Cost",
    "Selling Price",
    "Status",
]

# Bucket key for items without a (known) category or supplier.
UNCATEGORIZED_ID = "uncategorized"
UNCATEGORIZED_NAME = "Uncategorized"

# Backend table name for each snapshot collection.
SNAPSHOT_TABLES = {
    "items": "inventory_items",
    "categories": "categories",
    "suppliers": "suppliers",
    "movements": "stock_movements",
    "alerts": "alerts",
}
