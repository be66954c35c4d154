import base64

from app.extraction.base import BaseExtractor
from app.extraction.models import AttachmentKind, ImageInput


class ImageExtractor(BaseExtractor):
    """Wraps image bytes as a base64 vision input with the given MIME type."""

    kind = AttachmentKind.IMAGE

    def __init__(self, mime_type: str) -> None:
        self._mime_type = mime_type

    def extract(self, content: bytes) -> ImageInput:
        payload = base64.b64encode(content).decode("ascii")
        return ImageInput(mime_type=self._mime_type, base64_payload=payload)
