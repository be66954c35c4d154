import json

from app.extraction.base import BaseExtractor
from app.extraction.models import AttachmentKind


class TextExtractor(BaseExtractor):
    """Decodes plain-text formats (txt, csv, md) as UTF-8."""

    kind = AttachmentKind.TEXT

    def extract(self, content: bytes) -> str:
        return content.decode("utf-8", errors="replace")


class JsonTextExtractor(TextExtractor):
    """Decodes JSON and pretty-prints it; invalid JSON is passed through raw."""

    def extract(self, content: bytes) -> str:
        text = super().extract(content)
        try:
            return json.dumps(json.loads(text), indent=2, ensure_ascii=False)
        except (ValueError, RecursionError):
            # Nesting deeper than the interpreter's recursion limit also lands here.
            return text
