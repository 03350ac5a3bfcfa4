"""
Configuration and environment setup module.
Handles the Gemini API key, model choice, and folder/file naming constants.
"""

import os
from dotenv import load_dotenv

# Load environment variables from .env
load_dotenv()

# Gemini API key
GEMINI_API_KEY = os.getenv("GEMINI_API_KEY")

# Gemini Configuration
GEMINI_MODEL = "gemini-2.0-flash"

# Supported input files
MIME_TYPES = {
    ".pdf": "application/pdf",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".gif": "image/gif",
}
VALID_EXTENSIONS = frozenset(MIME_TYPES)

# Output locations (relative to the scanned folder)
INVOICE_DIR = "invoices"
NON_INVOICE_DIR = "non-invoices"
REPORT_FILE = "results.json"

# Console / logging
PROGRESS_INTERVAL = 1
LOG_FILE = "invoice_sorter.log"


def require_gemini_api_key():
    """Return the configured API key, failing when it was never set."""
    if not GEMINI_API_KEY:
        raise ValueError("GEMINI_API_KEY not found. Please set it in .env file.")
    return GEMINI_API_KEY
