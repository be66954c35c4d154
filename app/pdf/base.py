from abc import ABC, abstractmethod


class BasePdfEngine(ABC):
    """Contract for PDF text engines used by the PDF attachment extractor."""

    name: str

    @abstractmethod
    def extract_pages(self, pdf_bytes: bytes) -> list[str]:
        """Return the text of every page, in page order.

        Raises:
            ExtractionError: if the document cannot be opened or read.
        """
