"""
Gemini (LLM) utility functions.
Sends a document with the classification prompt and returns the raw reply text.
"""

from google import genai
from google.genai import types

from invoice_sorter.config import GEMINI_MODEL
from invoice_sorter.models import InvoiceData


# ========== PROMPT ==========
INVOICE_PROMPT = """
Analyze this document and:
1. Verify if it's an invoice
2. If it is an invoice, extract:
   - Invoice date (YYYY-MM-DD format)
   - Seller's company name
   - First item name from the list of goods/services
3. Return JSON format: {
  "isInvoice": boolean,
  "invoiceDate": string|null,
  "sellerName": string|null,
  "firstItem": string|null
}
"""


# ========== CLIENT ==========
class GeminiClient:
    """Thin wrapper around ``genai.Client`` exposing a single ``generate`` call."""

    def __init__(self, api_key=None, model=GEMINI_MODEL, client=None):
        self.client = client if client is not None else genai.Client(api_key=api_key)
        self.model = model

    def generate(self, data, mime_type, prompt=INVOICE_PROMPT):
        """Send ``data`` as an inline attachment next to ``prompt``; return the reply text."""
        response = self.client.models.generate_content(
            model=self.model,
            contents=[
                prompt,
                types.Part.from_bytes(data=data, mime_type=mime_type),
            ],
            config=types.GenerateContentConfig(
                temperature=0,
                response_mime_type="application/json",
                response_schema=InvoiceData,
            ),
        )
        return response.text
