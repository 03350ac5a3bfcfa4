"""
Moves processed files into the invoices / non-invoices subfolders,
renaming invoices to Date-Seller-Item.ext.
"""

import os

from invoice_sorter.config import INVOICE_DIR, NON_INVOICE_DIR
from invoice_sorter.helpers import display_name, sanitize_date, sanitize_name_part
from invoice_sorter.logging_config import logger


def ensure_result_folders(folder_path):
    """Create both destination folders if missing; safe to call repeatedly."""
    invoice_folder = os.path.join(folder_path, INVOICE_DIR)
    non_invoice_folder = os.path.join(folder_path, NON_INVOICE_DIR)
    os.makedirs(invoice_folder, exist_ok=True)
    os.makedirs(non_invoice_folder, exist_ok=True)
    return invoice_folder, non_invoice_folder


def invoice_file_name(record):
    """Build "Date-Seller-Item.ext" for an invoice record."""
    date = sanitize_date(record.invoiceDate)
    seller = sanitize_name_part(record.sellerName, "UnknownSeller")
    item = sanitize_name_part(record.firstItem, "UnknownItem")
    ext = os.path.splitext(record.fileName)[1]
    return f"{date}-{seller}-{item}{ext}"


def move_to_result_folder(record, folder_path):
    """
    Move the record's source file out of ``folder_path``.

    Invoices land in ``invoices/`` under their derived name; everything else
    goes to ``non-invoices/`` unchanged. An existing destination raises
    FileExistsError instead of being overwritten.
    """
    invoice_folder, non_invoice_folder = ensure_result_folders(folder_path)

    source = os.path.join(folder_path, record.fileName)
    if record.isInvoice:
        destination = os.path.join(invoice_folder, invoice_file_name(record))
    else:
        destination = os.path.join(non_invoice_folder, record.fileName)

    if os.path.lexists(destination):
        raise FileExistsError(f"Refusing to overwrite existing file: {destination}")

    os.rename(source, destination)
    logger.info(f"Moved {display_name(record.fileName)} -> {display_name(os.path.relpath(destination, folder_path))}")
    return destination
