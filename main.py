"""
Main entry point for the Gemini invoice sorter.
Classifies every supported document in the given folder and sorts it into
invoices/ or non-invoices/.
"""

import sys

from invoice_sorter.cli import main


if __name__ == "__main__":
    sys.exit(main())
