import io

import pdfplumber

from app.extraction.exceptions import ExtractionError
from app.pdf.base import BasePdfEngine


class PdfPlumberEngine(BasePdfEngine):
    """Reads PDF page text with pdfplumber."""

    name = "pdfplumber"

    def extract_pages(self, pdf_bytes: bytes) -> list[str]:
        try:
            with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
                return [page.extract_text() or "" for page in pdf.pages]
        except Exception as exc:
            raise ExtractionError(f"pdfplumber could not read PDF: {exc}") from exc
