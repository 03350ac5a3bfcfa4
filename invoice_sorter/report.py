"""
Result reporting: a console table of invoices and the results.json dump.
"""

import json
import os
import tempfile

from rich.console import Console
from rich.table import Table
from rich.text import Text

from invoice_sorter.config import REPORT_FILE
from invoice_sorter.helpers import display_name


def build_invoice_table(records):
    table = Table(title="Invoice Processing Results")
    for column in ("File", "Date", "Seller", "Item"):
        table.add_column(column)
    for record in records:
        if record.isInvoice:
            # Model text is shown verbatim, never parsed as console markup
            table.add_row(
                Text(display_name(record.fileName)),
                Text(record.invoiceDate or ""),
                Text(record.sellerName or ""),
                Text(record.firstItem or ""),
            )
    return table


def print_invoice_table(records, console=None):
    """Print only the records classified as invoices."""
    console = console or Console()
    console.print(build_invoice_table(records))


def write_report(records, folder_path):
    """
    Write every record as a pretty-printed JSON array to results.json.

    The data goes to a temp file in the same folder first and replaces the
    report in one step, so an interrupted run never leaves a half-written file.
    """
    report_path = os.path.join(folder_path, REPORT_FILE)
    payload = [
        dict(record.model_dump(), fileName=display_name(record.fileName))
        for record in records
    ]

    fd, tmp_path = tempfile.mkstemp(prefix=".results-", suffix=".json.tmp", dir=folder_path)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2, ensure_ascii=False)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_path, report_path)
    except BaseException:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise
    return report_path
