from dataclasses import dataclass
from enum import Enum


class AttachmentKind(Enum):
    """Closed set of attachment formats the extractors understand."""

    TEXT = "Text"
    SPREADSHEET = "Excel"
    PDF = "PDF"
    WORD = "Word"
    SLIDE_DECK = "PPTX"
    IMAGE = "Image"
    UNSUPPORTED = "Unsupported"


class InputField(Enum):
    """Logical input fields of a generate request."""

    TRANSCRIPT = "transcript"
    RUBRIC = "rubric"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @property
    def accepts_images(self) -> bool:
        return self is InputField.TRANSCRIPT


@dataclass(frozen=True)
class Attachment:
    """An uploaded file, alive only for the duration of one request."""

    original_name: str
    content: bytes

    @property
    def extension(self) -> str:
        """Lower-cased text after the last dot, empty when there is none."""
        _, dot, ext = self.original_name.rpartition(".")
        return ext.lower() if dot else ""

    @property
    def size_bytes(self) -> int:
        return len(self.content)


@dataclass(frozen=True)
class TextChunk:
    """Text produced from one attachment, labeled by field, kind and filename."""

    label: str
    text: str

    def render(self) -> str:
        return f"[{self.label}]\n{self.text}"


@dataclass(frozen=True)
class ImageInput:
    """Base64-encoded image forwarded to the model as vision input."""

    mime_type: str
    base64_payload: str

    @property
    def data_url(self) -> str:
        return f"data:{self.mime_type};base64,{self.base64_payload}"


ExtractionResult = TextChunk | ImageInput
