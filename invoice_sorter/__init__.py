"""Sorts a folder of documents into invoices and non-invoices using Gemini."""

from invoice_sorter.gemini_utils import GeminiClient
from invoice_sorter.invoice_processor import classify_document, iter_candidate_files, process_invoices
from invoice_sorter.models import InvoiceData, InvoiceRecord

__version__ = "0.1.0"

__all__ = [
    "GeminiClient",
    "InvoiceData",
    "InvoiceRecord",
    "classify_document",
    "iter_candidate_files",
    "process_invoices",
]
