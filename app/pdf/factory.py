from app.config.settings import Settings
from app.pdf.base import BasePdfEngine
from app.pdf.pdfplumber_adapter import PdfPlumberEngine
from app.pdf.pymupdf_adapter import PyMuPdfEngine


class PdfEngineFactory:
    """Creates the PDF text engine named by settings.pdf_engine."""

    ENGINES: dict[str, type[BasePdfEngine]] = {
        PdfPlumberEngine.name: PdfPlumberEngine,
        PyMuPdfEngine.name: PyMuPdfEngine,
    }

    @classmethod
    def create(cls, settings: Settings) -> BasePdfEngine:
        engine = settings.pdf_engine.lower()
        engine_cls = cls.ENGINES.get(engine)
        if engine_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {sorted(cls.ENGINES)}"
            )
        return engine_cls()
