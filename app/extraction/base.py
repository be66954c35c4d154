from abc import ABC, abstractmethod
from typing import ClassVar

from app.extraction.models import AttachmentKind, ImageInput


class BaseExtractor(ABC):
    """Contract for all attachment extractors."""

    kind: ClassVar[AttachmentKind]

    # Substituted when a document yields no text; None keeps empty text as is.
    empty_message: ClassVar[str | None] = None

    @abstractmethod
    def extract(self, content: bytes) -> str | ImageInput:
        """Convert raw attachment bytes into text or a vision input.

        Args:
            content: Raw file content as uploaded.

        Returns:
            Extracted text, or an ImageInput for image formats.

        Raises:
            ExtractionError: if the document cannot be parsed.
        """
