"""
Command-line entry point: invoice-sorter <folder>
"""

import sys

from invoice_sorter.config import require_gemini_api_key
from invoice_sorter.gemini_utils import GeminiClient
from invoice_sorter.invoice_processor import process_invoices
from invoice_sorter.logging_config import configure_logging, logger


def main(argv=None, gemini=None):
    """Run the sorter on the folder named in ``argv``; returns the exit code."""
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print("Please provide a folder path as an argument", file=sys.stderr)
        return 1
    folder_path = args[0]

    configure_logging()

    if gemini is None:
        try:
            gemini = GeminiClient(api_key=require_gemini_api_key())
        except ValueError as e:
            logger.error(str(e))
            return 1

    try:
        process_invoices(folder_path, gemini)
    except Exception as e:
        logger.error(f"Error processing invoices: {e}")
        return 1
    return 0


def main_entry():
    sys.exit(main())
