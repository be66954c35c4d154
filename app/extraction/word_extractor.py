import io

import docx

from app.extraction.base import BaseExtractor
from app.extraction.exceptions import ExtractionError
from app.extraction.models import AttachmentKind


class WordExtractor(BaseExtractor):
    """Extracts raw paragraph and table text from .docx using python-docx."""

    kind = AttachmentKind.WORD
    empty_message = "(No text could be extracted from this Word document.)"

    def extract(self, content: bytes) -> str:
        try:
            document = docx.Document(io.BytesIO(content))
        except Exception as exc:
            raise ExtractionError(f"python-docx could not open document: {exc}") from exc

        parts = [p.text for p in document.paragraphs if p.text.strip()]
        for table in document.tables:
            for row in table.rows:
                cells = [cell.text.strip() for cell in row.cells]
                if any(cells):
                    parts.append("\t".join(cells))
        return "\n\n".join(parts).strip()
