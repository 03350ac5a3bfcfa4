"""
Pydantic models for the Gemini answer and the per-file result record.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict


class InvoiceData(BaseModel):
    """Shape of the JSON object the model is asked to return.

    Strict mode: ``isInvoice`` must be a real boolean and the other fields
    real strings (or null). All four keys are required; extra keys are ignored.
    """

    model_config = ConfigDict(strict=True, frozen=True)

    isInvoice: bool
    invoiceDate: Optional[str]
    sellerName: Optional[str]
    firstItem: Optional[str]


class InvoiceRecord(BaseModel):
    """One processed file: its original name plus the validated answer."""

    model_config = ConfigDict(strict=True, frozen=True)

    fileName: str
    isInvoice: bool
    invoiceDate: Optional[str] = None
    sellerName: Optional[str] = None
    firstItem: Optional[str] = None

    @classmethod
    def from_data(cls, file_name: str, data: InvoiceData) -> "InvoiceRecord":
        return cls(fileName=file_name, **data.model_dump())

    @classmethod
    def not_invoice(cls, file_name: str) -> "InvoiceRecord":
        """Fallback record used whenever classification fails."""
        return cls(fileName=file_name, isInvoice=False)
