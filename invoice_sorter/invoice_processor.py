"""
Main invoice processing pipeline module.
Coordinates folder scan → Gemini classification → move/rename → report.
"""

import os

from pydantic import ValidationError

from invoice_sorter.config import VALID_EXTENSIONS
from invoice_sorter.file_sorter import move_to_result_folder
from invoice_sorter.gemini_utils import INVOICE_PROMPT
from invoice_sorter.helpers import display_name, extract_json_object, mime_type_for
from invoice_sorter.logging_config import logger
from invoice_sorter.models import InvoiceData, InvoiceRecord
from invoice_sorter.progress import ElapsedTimer
from invoice_sorter.report import print_invoice_table, write_report


# ---------- File Enumeration ----------

def iter_candidate_files(folder_path):
    """
    List ``folder_path`` once and return a lazy iterator over the supported
    files in it. A missing or unreadable folder raises OSError right away.
    """
    entries = os.listdir(folder_path)
    return _filter_candidates(folder_path, entries)


def _filter_candidates(folder_path, entries):
    for name in entries:
        path = os.path.join(folder_path, name)
        if os.path.splitext(name)[1].lower() in VALID_EXTENSIONS and os.path.isfile(path):
            yield path
        else:
            logger.info(f"Skipping file: {display_name(name)}")


# ---------- Classification ----------

def classify_document(file_path, gemini, timer_factory=ElapsedTimer):
    """
    Ask Gemini whether ``file_path`` is an invoice and extract its fields.

    Any failure (read error, API error, missing or malformed JSON, schema
    mismatch) is logged and turns into a non-invoice record for the file.
    """
    file_name = os.path.basename(file_path)
    try:
        with open(file_path, "rb") as f:
            data = f.read()
        mime_type = mime_type_for(file_path)

        logger.info("Processing file, please wait...")
        with timer_factory():
            response_text = gemini.generate(data, mime_type, INVOICE_PROMPT)
        logger.info("Raw response for %s: %s", display_name(file_name), response_text)

        parsed = extract_json_object(response_text)
        validated = InvoiceData.model_validate(parsed)
        return InvoiceRecord.from_data(file_name, validated)
    except ValidationError as e:
        logger.error(f"Error processing file {display_name(file_name)}: response failed validation: {e}")
    except Exception as e:
        logger.error(f"Error processing file {display_name(file_name)}: {e}")
    return InvoiceRecord.not_invoice(file_name)


# ---------- Batch ----------

def process_invoices(folder_path, gemini, timer_factory=ElapsedTimer, console=None):
    """
    Full pipeline for one folder:
    1. List supported files
    2. Classify each one with Gemini
    3. Move it into invoices/ or non-invoices/
    4. Print the invoice table and write results.json

    Folder errors and move failures propagate and abort the run.
    """
    results = []
    for file_path in iter_candidate_files(folder_path):
        logger.info(f"Processing file: {display_name(os.path.basename(file_path))}")
        record = classify_document(file_path, gemini, timer_factory=timer_factory)
        move_to_result_folder(record, folder_path)
        results.append(record)

    print_invoice_table(results, console=console)
    report_path = write_report(results, folder_path)
    logger.info(f"Processed {len(results)} file(s)")
    logger.info(f"   -> Report: {report_path}")
    return results
