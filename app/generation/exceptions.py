class GenerationError(Exception):
    """Base exception for all errors that end a generate request."""


class ValidationError(GenerationError):
    """Raised when the submitted input cannot be processed (HTTP 400)."""


class MissingTranscriptError(ValidationError):
    """Raised when the transcript field yields neither text nor images."""


class UnsupportedFormatError(ValidationError):
    """Raised when an attachment has an extension no extractor handles."""


class DisallowedImageError(ValidationError):
    """Raised when an image is attached to a field that does not accept images."""


class UploadLimitError(ValidationError):
    """Raised when uploads exceed the configured count or size limits."""


class ConfigurationError(GenerationError):
    """Raised when the process is misconfigured, e.g. the template is missing."""


class UpstreamError(GenerationError):
    """Raised when the completion provider call fails."""
