from app.extraction.base import BaseExtractor
from app.extraction.models import AttachmentKind
from app.pdf.base import BasePdfEngine


class PdfExtractor(BaseExtractor):
    """Extracts PDF text through the configured engine."""

    kind = AttachmentKind.PDF
    empty_message = "(This PDF may be a scanned document; no text could be extracted.)"

    def __init__(self, engine: BasePdfEngine) -> None:
        self._engine = engine

    def extract(self, content: bytes) -> str:
        pages = self._engine.extract_pages(content)
        return "\n".join(pages).strip()
