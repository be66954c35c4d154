"""Spreadsheet extractors: every sheet rendered as CSV, in workbook order."""

import csv
import io
from collections.abc import Iterable, Sequence
from datetime import date, datetime, time

import openpyxl
import xlrd
from xlrd.book import Book
from xlrd.sheet import Sheet

from app.extraction.base import BaseExtractor
from app.extraction.exceptions import ExtractionError
from app.extraction.models import AttachmentKind


def sheet_banner(name: str) -> str:
    return f"--- Sheet: {name} ---"


def format_cell(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    return str(value)


def rows_to_csv(rows: Iterable[Sequence[object]]) -> str:
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    for row in rows:
        writer.writerow([format_cell(value) for value in row])
    return buf.getvalue().rstrip("\n")


def render_sheets(sheets: Iterable[tuple[str, Iterable[Sequence[object]]]]) -> str:
    blocks = [f"{sheet_banner(name)}\n{rows_to_csv(rows)}" for name, rows in sheets]
    return "\n\n".join(blocks)


class XlsxExtractor(BaseExtractor):
    """Extracts .xlsx workbooks using openpyxl."""

    kind = AttachmentKind.SPREADSHEET

    def extract(self, content: bytes) -> str:
        try:
            workbook = openpyxl.load_workbook(
                io.BytesIO(content), read_only=True, data_only=True
            )
        except Exception as exc:
            raise ExtractionError(f"openpyxl could not open workbook: {exc}") from exc
        try:
            return render_sheets(
                (ws.title, ws.iter_rows(values_only=True)) for ws in workbook.worksheets
            )
        except Exception as exc:
            raise ExtractionError(f"openpyxl extraction failed: {exc}") from exc
        finally:
            workbook.close()


class XlsExtractor(BaseExtractor):
    """Extracts legacy .xls workbooks using xlrd."""

    kind = AttachmentKind.SPREADSHEET

    def extract(self, content: bytes) -> str:
        try:
            book = xlrd.open_workbook(file_contents=content)
            return render_sheets(
                (sheet.name, self._rows(book, sheet)) for sheet in book.sheets()
            )
        except Exception as exc:
            raise ExtractionError(f"xlrd extraction failed: {exc}") from exc

    @staticmethod
    def _rows(book: Book, sheet: Sheet) -> list[list[object]]:
        rows: list[list[object]] = []
        for r in range(sheet.nrows):
            row: list[object] = []
            for cell in sheet.row(r):
                if cell.ctype == xlrd.XL_CELL_DATE:
                    row.append(xlrd.xldate_as_datetime(cell.value, book.datemode))
                elif cell.ctype == xlrd.XL_CELL_BOOLEAN:
                    row.append(bool(cell.value))
                else:
                    row.append(cell.value)
            rows.append(row)
        return rows
