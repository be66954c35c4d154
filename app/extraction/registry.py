from app.config.settings import Settings
from app.extraction.base import BaseExtractor
from app.extraction.exceptions import ExtractionError
from app.extraction.image_extractor import ImageExtractor
from app.extraction.models import (
    Attachment,
    AttachmentKind,
    ExtractionResult,
    ImageInput,
    InputField,
    TextChunk,
)
from app.extraction.pdf_extractor import PdfExtractor
from app.extraction.slide_deck_extractor import SlideDeckExtractor
from app.extraction.spreadsheet_extractor import XlsExtractor, XlsxExtractor
from app.extraction.text_extractor import JsonTextExtractor, TextExtractor
from app.extraction.truncation import DEFAULT_MAX_CHARS, clamp
from app.extraction.word_extractor import WordExtractor
from app.generation.exceptions import DisallowedImageError, UnsupportedFormatError
from app.logging.logger import Log
from app.pdf.factory import PdfEngineFactory

UNPARSEABLE_MESSAGE = "(This file could not be parsed; no text was extracted.)"


class ExtractorRegistry:
    """Selects an extractor by file extension and turns attachments into results."""

    def __init__(
        self,
        extractors: dict[str, BaseExtractor],
        max_chunk_chars: int = DEFAULT_MAX_CHARS,
    ) -> None:
        self._extractors = extractors
        self._max_chunk_chars = max_chunk_chars

    @classmethod
    def create(cls, settings: Settings) -> "ExtractorRegistry":
        """Build the registry with every supported format."""
        text = TextExtractor()
        jpeg = ImageExtractor("image/jpeg")
        extractors: dict[str, BaseExtractor] = {
            "txt": text,
            "csv": text,
            "md": text,
            "json": JsonTextExtractor(),
            "xlsx": XlsxExtractor(),
            "xls": XlsExtractor(),
            "pdf": PdfExtractor(PdfEngineFactory.create(settings)),
            "docx": WordExtractor(),
            "pptx": SlideDeckExtractor(),
            "png": ImageExtractor("image/png"),
            "jpg": jpeg,
            "jpeg": jpeg,
            "webp": ImageExtractor("image/webp"),
        }
        return cls(extractors, max_chunk_chars=settings.max_chunk_chars)

    def classify(self, attachment: Attachment) -> AttachmentKind:
        extractor = self._extractors.get(attachment.extension)
        return extractor.kind if extractor is not None else AttachmentKind.UNSUPPORTED

    def check(self, attachment: Attachment, field: InputField) -> BaseExtractor:
        """Return the extractor for an attachment or reject it for this field.

        Raises:
            DisallowedImageError: an image was attached to a field without image support.
            UnsupportedFormatError: no extractor handles the extension.
        """
        extractor = self._extractors.get(attachment.extension)
        if extractor is None:
            raise UnsupportedFormatError(
                f"{field.label} field does not support this file format: "
                f"{attachment.original_name}"
            )
        if extractor.kind is AttachmentKind.IMAGE and not field.accepts_images:
            raise DisallowedImageError(
                f"{field.label} field does not accept image files: "
                f"{attachment.original_name}"
            )
        return extractor

    def extract(self, attachment: Attachment, field: InputField) -> ExtractionResult:
        """Extract one attachment into a labeled text chunk or an image input."""
        extractor = self.check(attachment, field)
        label = (
            f"{field.label} attachment ({extractor.kind.value}): "
            f"{attachment.original_name}"
        )
        try:
            outcome = extractor.extract(attachment.content)
        except ExtractionError as exc:
            Log.warning(f"Could not parse {attachment.original_name}: {exc}")
            return TextChunk(label=label, text=UNPARSEABLE_MESSAGE)

        if isinstance(outcome, ImageInput):
            Log.debug(f"Prepared image input from {attachment.original_name}")
            return outcome

        Log.debug(
            f"Extracted {len(outcome)} chars from {attachment.original_name} "
            f"({extractor.kind.name})"
        )
        if extractor.empty_message is not None and not outcome.strip():
            return TextChunk(label=label, text=extractor.empty_message)
        return TextChunk(label=label, text=clamp(outcome, self._max_chunk_chars))
