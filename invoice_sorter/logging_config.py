"""
Logging configuration module.
Logs to both console and a log file for debugging and monitoring.
"""

import logging

from invoice_sorter.config import LOG_FILE

logger = logging.getLogger("invoice_sorter")


def configure_logging(log_file=LOG_FILE, level=logging.INFO):
    """Attach the console and file handlers. Called once by the CLI."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=[logging.FileHandler(log_file, encoding="utf-8"), logging.StreamHandler()]
    )
    return logger
