import io
import tempfile
from pathlib import Path

import pytest
from pptx import Presentation
from pptx.util import Inches

from app.extraction.exceptions import ExtractionError
from app.extraction.slide_deck_extractor import SlideDeckExtractor


def _staged_files() -> set[Path]:
    return set(Path(tempfile.gettempdir()).glob("upload-*.pptx"))


class TestSlideDeckExtractor:
    def test_extracts_slides_in_order(self, sample_pptx_bytes: bytes) -> None:
        result = SlideDeckExtractor().extract(sample_pptx_bytes)
        assert result == (
            "--- Slide: slide1 ---\nOpening the call"
            "\n\n"
            "--- Slide: slide2 ---\nHandling objections"
        )

    def test_collects_text_inside_group_shapes(self) -> None:
        presentation = Presentation()
        slide = presentation.slides.add_slide(presentation.slide_layouts[6])
        group = slide.shapes.add_group_shape()
        inner = group.shapes.add_group_shape()
        box = inner.shapes.add_textbox(Inches(1), Inches(1), Inches(4), Inches(1))
        box.text_frame.text = "Escalate to a supervisor"
        buf = io.BytesIO()
        presentation.save(buf)

        result = SlideDeckExtractor().extract(buf.getvalue())

        assert result == "--- Slide: slide1 ---\nEscalate to a supervisor"

    def test_empty_deck_returns_empty_string(self, empty_pptx_bytes: bytes) -> None:
        assert SlideDeckExtractor().extract(empty_pptx_bytes) == ""

    def test_removes_temp_file_after_parsing(self, sample_pptx_bytes: bytes) -> None:
        before = _staged_files()
        SlideDeckExtractor().extract(sample_pptx_bytes)
        assert _staged_files() - before == set()

    def test_removes_temp_file_when_parsing_fails(self) -> None:
        before = _staged_files()
        with pytest.raises(ExtractionError):
            SlideDeckExtractor().extract(b"not a pptx")
        assert _staged_files() - before == set()
