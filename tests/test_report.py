import io
import json
import os

from rich.console import Console

from invoice_sorter.models import InvoiceRecord
from invoice_sorter.report import print_invoice_table, write_report

RECORDS = [
    InvoiceRecord(
        fileName="a.pdf",
        isInvoice=True,
        invoiceDate="2024-03-01",
        sellerName="Acme Corp.",
        firstItem="Widget #1",
    ),
    InvoiceRecord.not_invoice("b.png"),
]


def test_table_lists_invoices_only():
    console = Console(record=True, width=120)
    print_invoice_table(RECORDS, console=console)
    text = console.export_text()
    assert "Invoice Processing Results" in text
    assert "a.pdf" in text and "Acme Corp." in text and "Widget #1" in text
    assert "b.png" not in text


def test_report_contains_every_record(invoice_folder):
    path = write_report(RECORDS, invoice_folder)
    assert path.endswith("results.json")
    data = json.loads((invoice_folder / "results.json").read_text(encoding="utf-8"))
    assert [entry["fileName"] for entry in data] == ["a.pdf", "b.png"]
    assert data[1] == {
        "fileName": "b.png",
        "isInvoice": False,
        "invoiceDate": None,
        "sellerName": None,
        "firstItem": None,
    }


def test_report_overwrites_previous_run_and_leaves_no_temp_files(invoice_folder):
    (invoice_folder / "results.json").write_text('[{"stale": true}]', encoding="utf-8")
    write_report(RECORDS[1:], invoice_folder)
    data = json.loads((invoice_folder / "results.json").read_text(encoding="utf-8"))
    assert data == [RECORDS[1].model_dump()]
    assert [p.name for p in invoice_folder.iterdir()] == ["results.json"]


def test_report_is_pretty_printed_utf8(invoice_folder):
    record = InvoiceRecord(fileName="ü.pdf", isInvoice=True, sellerName="Müller GmbH")
    write_report([record], invoice_folder)
    raw = (invoice_folder / "results.json").read_text(encoding="utf-8")
    assert "Müller GmbH" in raw
    assert raw.startswith("[\n  {")


def test_empty_run_writes_empty_array(invoice_folder):
    write_report([], invoice_folder)
    assert json.loads((invoice_folder / "results.json").read_text(encoding="utf-8")) == []


def test_table_shows_bracketed_model_text_verbatim():
    records = [
        InvoiceRecord(fileName="[x].pdf", isInvoice=True, sellerName="AC/DC [/] Supplies", firstItem="Widget [red] edition"),
        InvoiceRecord(fileName="y.pdf", isInvoice=True, sellerName="[/x]", firstItem="[bold]Cable"),
    ]
    out = io.StringIO()
    print_invoice_table(records, console=Console(file=out, width=160))
    text = out.getvalue()
    assert "AC/DC [/] Supplies" in text
    assert "Widget [red] edition" in text
    assert "[/x]" in text and "[bold]Cable" in text
    assert "[x].pdf" in text


def test_undecodable_file_name_is_reported_lossily(invoice_folder):
    name = os.fsdecode(b"scan\xff.pdf")
    write_report([InvoiceRecord.not_invoice(name)], invoice_folder)
    data = json.loads((invoice_folder / "results.json").read_text(encoding="utf-8"))
    assert data[0]["fileName"] == "scan�.pdf"


def test_table_handles_undecodable_file_name():
    out = io.StringIO()
    record = InvoiceRecord(fileName=os.fsdecode(b"scan\xff.pdf"), isInvoice=True, sellerName="Acme")
    print_invoice_table([record], console=Console(file=out, width=120))
    assert "scan�.pdf" in out.getvalue()
