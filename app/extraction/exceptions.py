class ExtractionError(Exception):
    """Raised when a document parser cannot read an attachment."""
