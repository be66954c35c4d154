import pymupdf

from app.extraction.exceptions import ExtractionError
from app.pdf.base import BasePdfEngine


class PyMuPdfEngine(BasePdfEngine):
    """Reads PDF page text with PyMuPDF, in natural reading order."""

    name = "pymupdf"

    def extract_pages(self, pdf_bytes: bytes) -> list[str]:
        try:
            with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                return [page.get_text("text", sort=True) for page in doc]
        except Exception as exc:
            raise ExtractionError(f"pymupdf could not read PDF: {exc}") from exc
