from app.generation.exceptions import UpstreamError


class CompletionError(UpstreamError):
    """Raised when the completion provider returns an unusable response."""


class CompletionNetworkError(CompletionError):
    """Raised when the provider call fails due to network/infrastructure issues."""
