from collections.abc import Iterable, Iterator
from pathlib import PurePosixPath

from pptx import Presentation
from pptx.enum.shapes import MSO_SHAPE_TYPE
from pptx.shapes.base import BaseShape
from pptx.slide import Slide

from app.extraction.base import BaseExtractor
from app.extraction.exceptions import ExtractionError
from app.extraction.models import AttachmentKind
from app.extraction.temp_file import staged_temp_file


class SlideDeckExtractor(BaseExtractor):
    """Extracts slide text from .pptx using python-pptx.

    The deck is staged to a temporary file and parsed from its path.
    """

    kind = AttachmentKind.SLIDE_DECK
    empty_message = "(No text could be extracted from this slide deck.)"

    def extract(self, content: bytes) -> str:
        with staged_temp_file(content, suffix=".pptx") as path:
            try:
                presentation = Presentation(str(path))
                blocks = [
                    f"--- Slide: {self._slide_id(slide)} ---\n{self._slide_text(slide)}"
                    for slide in presentation.slides
                ]
            except Exception as exc:
                raise ExtractionError(f"python-pptx extraction failed: {exc}") from exc
        return "\n\n".join(blocks)

    @staticmethod
    def _slide_id(slide: Slide) -> str:
        # Part names look like /ppt/slides/slide3.xml
        return PurePosixPath(str(slide.part.partname)).stem

    @classmethod
    def _slide_text(cls, slide: Slide) -> str:
        lines: list[str] = []
        for shape in cls._iter_shapes(slide.shapes):
            if shape.has_text_frame:
                lines.extend(
                    p.text for p in shape.text_frame.paragraphs if p.text.strip()
                )
            elif shape.has_table:
                for row in shape.table.rows:
                    cells = [cell.text.strip() for cell in row.cells]
                    if any(cells):
                        lines.append("\t".join(cells))
        return "\n".join(lines)

    @classmethod
    def _iter_shapes(cls, shapes: Iterable[BaseShape]) -> Iterator[BaseShape]:
        for shape in shapes:
            if shape.shape_type == MSO_SHAPE_TYPE.GROUP:
                yield from cls._iter_shapes(shape.shapes)
            else:
                yield shape
