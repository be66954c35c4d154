from collections.abc import Sequence

from app.config.settings import Settings
from app.extraction.models import Attachment, ImageInput, InputField
from app.extraction.registry import ExtractorRegistry
from app.generation.exceptions import MissingTranscriptError, UploadLimitError


class RequestValidator:
    """Checks a generate request before and after attachment parsing."""

    def __init__(
        self,
        registry: ExtractorRegistry,
        *,
        max_file_size_bytes: int,
        max_files_per_field: int,
        max_total_files: int,
    ) -> None:
        self._registry = registry
        self._max_file_size_bytes = max_file_size_bytes
        self._max_files_per_field = max_files_per_field
        self._max_total_files = max_total_files

    @classmethod
    def create(cls, settings: Settings, registry: ExtractorRegistry) -> "RequestValidator":
        return cls(
            registry,
            max_file_size_bytes=settings.max_file_size_bytes,
            max_files_per_field=settings.max_files_per_field,
            max_total_files=settings.max_total_files,
        )

    def check_uploads(self, uploads: dict[InputField, Sequence[Attachment]]) -> None:
        """Enforce upload limits and per-field formats before anything is parsed.

        Raises:
            UploadLimitError: too many files, or a file over the size limit.
            UnsupportedFormatError: an attachment has an unknown extension.
            DisallowedImageError: an image was attached to the rubric field.
        """
        total = sum(len(files) for files in uploads.values())
        if total > self._max_total_files:
            raise UploadLimitError(
                f"Too many files: {total} (max {self._max_total_files} in total)"
            )
        for field, files in uploads.items():
            if len(files) > self._max_files_per_field:
                raise UploadLimitError(
                    f"Too many files in {field.value} field: {len(files)} "
                    f"(max {self._max_files_per_field})"
                )
            for attachment in files:
                if attachment.size_bytes > self._max_file_size_bytes:
                    raise UploadLimitError(
                        f"File too large: {attachment.original_name} "
                        f"({attachment.size_bytes} bytes, max {self._max_file_size_bytes})"
                    )
                self._registry.check(attachment, field)

    @staticmethod
    def check_transcript(transcript_bundle: str, images: Sequence[ImageInput]) -> None:
        """Raise MissingTranscriptError when the transcript has no text and no images."""
        if not transcript_bundle.strip() and not images:
            raise MissingTranscriptError(
                "Missing transcript content: enter transcript text or upload "
                "transcript files."
            )
