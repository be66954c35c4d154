import io

import docx
import openpyxl
import pytest
from pptx import Presentation
from pptx.util import Inches
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Hello PDF World")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Page one content")
    c.showPage()
    c.drawString(72, 720, "Page two content")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def sample_docx_bytes() -> bytes:
    """Word document with two paragraphs and a small table."""
    document = docx.Document()
    document.add_paragraph("Agent greets the customer.")
    document.add_paragraph("Customer asks about the refund policy.")
    table = document.add_table(rows=1, cols=2)
    table.rows[0].cells[0].text = "Step"
    table.rows[0].cells[1].text = "Confirm identity"
    buf = io.BytesIO()
    document.save(buf)
    return buf.getvalue()


@pytest.fixture()
def empty_docx_bytes() -> bytes:
    buf = io.BytesIO()
    docx.Document().save(buf)
    return buf.getvalue()


@pytest.fixture()
def sample_pptx_bytes() -> bytes:
    """Slide deck with two text slides."""
    presentation = Presentation()
    layout = presentation.slide_layouts[6]
    for text in ("Opening the call", "Handling objections"):
        slide = presentation.slides.add_slide(layout)
        box = slide.shapes.add_textbox(Inches(1), Inches(1), Inches(6), Inches(1))
        box.text_frame.text = text
    buf = io.BytesIO()
    presentation.save(buf)
    return buf.getvalue()


@pytest.fixture()
def empty_pptx_bytes() -> bytes:
    buf = io.BytesIO()
    Presentation().save(buf)
    return buf.getvalue()


@pytest.fixture()
def two_sheet_xlsx_bytes() -> bytes:
    """Workbook with sheets Q1 and Q2, in that order."""
    workbook = openpyxl.Workbook()
    q1 = workbook.active
    q1.title = "Q1"
    q1.append(["criterion", "weight"])
    q1.append(["empathy", 3])
    q2 = workbook.create_sheet("Q2")
    q2.append(["criterion", "weight"])
    q2.append(["accuracy", 2.5])
    buf = io.BytesIO()
    workbook.save(buf)
    return buf.getvalue()


@pytest.fixture()
def png_bytes() -> bytes:
    # PNG signature followed by arbitrary bytes; images are never decoded.
    return b"\x89PNG\r\n\x1a\n" + b"\x00" * 16
