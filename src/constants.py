"""Module containing constant values used throughout the application."""

import os
import tomllib
from pathlib import Path

# ==================== PROJECT METADATA ====================
root = Path(__file__).resolve().parent.parent
with open(root / "pyproject.toml", "rb") as f:
    pyproject = tomllib.load(f)

PROJECT_NAME = pyproject["project"]["name"]
VERSION = pyproject["project"]["version"]

# ==================== SEARCH CONFIGURATION ====================
YOU_SEARCH_URL = "https://ydc-index.io/v1/search"
YOU_API_KEY = os.getenv("YOU_API_KEY")

SEARCH_TIMEOUT = 30.0  # Timeout in seconds
SEARCH_RESULT_LIMIT = 5  # Only the first results feed the snippet corpus
SEARCH_QUERY_TEMPLATE = "drug interactions between {medications}"

# ==================== INTERACTION ANALYSIS ====================
MIN_MEDICATIONS = 2
DESCRIPTION_MAX_CHARS = 300
FINGERPRINT_DELIMITER = "|"

# ==================== LOCAL STORAGE ====================
MEDICATIONS_STORAGE_KEY = "kaathu_meds"
INTERACTIONS_CACHE_KEY = "kaathu_interactions"
INTERACTIONS_CACHE_TTL_MS = 24 * 60 * 60 * 1000  # 24 hours
LOCAL_STORE_PATH = os.getenv("KAATHU_STORE_PATH", str(root / ".kaathu_store.json"))

# ==================== QR PAYLOAD ====================
QR_PAYLOAD_TYPE = "kaathu"
QR_PAYLOAD_VERSION = 1

# ==================== MONITORING ====================
RESEND_API_KEY = os.getenv("RESEND_API_KEY")
RESEND_FROM_EMAIL = os.getenv("RESEND_FROM_EMAIL")
MONITORING_EMAIL = os.getenv("MONITORING_EMAIL")
