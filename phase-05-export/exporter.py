"""
exporter.py — Phase 05: Data Export
-------------------------------------
Turns rows of tabular dashboard data into downloadable files.

Formats:
  CSV   — header = keys of the first row joined by ",", one line per row.
          Values are NOT quoted or escaped: a comma inside a value shifts
          the columns that follow it.
  PDF   — title line + one grid table (header row, one row per record).
          Cell text wraps; the header row repeats after a page break.
  XLSX  — one sheet named "Data", one row per record.

Each format has a *_bytes() builder (used by the dashboard download
buttons) and an export_to_*() writer that saves into output_dir.

Export row sets come from prepare_data_for_export(): the fixed sample
sheets ("rating", "sentiment", "userInsights", "category") and a live
"reviews" sheet built from the session's records.
"""

import io
import logging
import time
from pathlib import Path
from typing import Any, Iterable, Sequence

import pandas as pd
from fpdf import FPDF
from fpdf.fonts import FontFace

logger = logging.getLogger(__name__)

EXPORT_KINDS = ("rating", "sentiment", "userInsights", "category", "reviews")


# ---------------------------------------------------------------------------
# Row preparation
# ---------------------------------------------------------------------------

def prepare_data_for_export(kind: str, records: Iterable = ()) -> list[dict[str, Any]]:
    """
    Build the row set for an export.

    Args:
        kind:    One of EXPORT_KINDS. Anything else yields [].
        records: ReviewRecords, used only by the "reviews" kind.

    Returns:
        list of flat dicts sharing the same keys.
    """
    if kind == "rating":
        return [
            {
                "Review ID":   "REV-001",
                "User ID":     "USR-001",
                "Rating":      "4.5",
                "Sentiment":   "Positive",
                "Source":      "Mobile App",
                "Product":     "Sample Product 1",
                "Category":    "Electronics",
                "Quantity":    "1",
                "Review Date": "2024-03-15",
            },
        ]

    if kind == "sentiment":
        return [
            {
                "Date":              "2024-03-15",
                "Overall Sentiment": "65%",
                "Tone":              "Friendly",
                "Emotion Score":     "82%",
                "User Group":        "New Users",
                "Source":            "Mobile App",
            },
        ]

    if kind == "userInsights":
        return [
            {"Metric": "Total Users",  "Value": "12,345", "Change": "+5.2%", "Period": "Last 30 days"},
            {"Metric": "Active Users", "Value": "8,765",  "Change": "+3.8%", "Period": "Last 30 days"},
        ]

    if kind == "category":
        return [
            {
                "Product ID": "PRD-001",
                "Name":       "Sample Product 1",
                "Category":   "Electronics",
                "Price":      "$99.99",
                "Units Sold": "150",
                "Revenue":    "$14,998.50",
            },
        ]

    if kind == "reviews":
        return [
            {
                "Review ID": r.review_id,
                "Product":   r.product_name,
                "Brand":     r.brand,
                "Category":  r.category,
                "Rating":    r.rating,
                "Sentiment": r.sentiment.capitalize(),
                "Comment":   r.comment,
                "Date":      r.date,
                "Verified":  "Yes" if r.purchase_verified else "No",
            }
            for r in records
        ]

    return []


def _require_rows(rows: Sequence[dict], fmt: str) -> list[str]:
    if not rows:
        raise ValueError(f"Export ({fmt}): no rows to export.")
    return list(rows[0].keys())


def _cell_text(value: Any) -> str:
    return "" if value is None else str(value)


# ---------------------------------------------------------------------------
# CSV
# ---------------------------------------------------------------------------

def to_csv_text(rows: Sequence[dict[str, Any]]) -> str:
    """Render rows as comma-joined lines. No quoting, no escaping."""
    headers = _require_rows(rows, "csv")
    lines = [",".join(headers)]
    for row in rows:
        lines.append(",".join(_cell_text(row.get(h)) for h in headers))
    return "\n".join(lines)


def csv_bytes(rows: Sequence[dict[str, Any]]) -> bytes:
    return to_csv_text(rows).encode("utf-8")


# ---------------------------------------------------------------------------
# PDF
# ---------------------------------------------------------------------------

class TableReportPDF(FPDF):
    """A4 portrait document holding a title and a single grid table."""

    TITLE_SIZE = 16
    TABLE_SIZE = 8
    LINE_HEIGHT = 4.5

    def __init__(self, title: str):
        super().__init__()
        self.report_title = title
        self.set_margins(14, 15, 14)

    def title_line(self):
        self.set_font("Helvetica", "", self.TITLE_SIZE)
        self.set_text_color(0, 0, 0)
        self.text(14, 15, _latin1(self.report_title))
        self.set_y(20)

    def grid_table(self, headers: list[str], rows: Sequence[dict[str, Any]]):
        """
        Draw the header row and one row per record. Cell text wraps onto
        as many lines as it needs and the header row repeats on every page.
        """
        header_cells = [_latin1(h) for h in headers]
        body = [[_latin1(_cell_text(row.get(h))) for h in headers] for row in rows]
        widths = self._column_widths(header_cells, body)

        self.set_font("Helvetica", "", self.TABLE_SIZE)
        self.set_text_color(0, 0, 0)
        heading = FontFace(emphasis="BOLD", color=(255, 255, 255), fill_color=(41, 128, 185))
        with self.table(
            width=self.epw,
            col_widths=widths,
            line_height=self.LINE_HEIGHT,
            text_align="LEFT",
            headings_style=heading,
        ) as table:
            for cells in [header_cells, *body]:
                table_row = table.row()
                for text in cells:
                    table_row.cell(text)

    def _column_widths(self, header_cells: list[str], body: list[list[str]]) -> list[float]:
        """
        Every column is at least as wide as its longest single word, so
        words never break. Width left over after that goes to the columns
        holding longer text, in proportion to how much they would need.
        """
        pad = 2 * self.c_margin + 2
        floors, natural = [], []
        for i, header in enumerate(header_cells):
            self.set_font("Helvetica", "B", self.TABLE_SIZE)
            floor = max(self.get_string_width(w) for w in header.split() or [""])
            full = self.get_string_width(header)
            self.set_font("Helvetica", "", self.TABLE_SIZE)
            for cells in body:
                words = cells[i].split() or [""]
                floor = max(floor, max(self.get_string_width(w) for w in words))
                full = max(full, self.get_string_width(cells[i]))
            floors.append(floor + pad)
            natural.append(full + pad)

        if sum(natural) <= self.epw:
            return natural
        spare = self.epw - sum(floors)
        extra = [n - f for n, f in zip(natural, floors)]
        if spare <= 0 or not sum(extra):
            return floors
        return [f + e * spare / sum(extra) for f, e in zip(floors, extra)]


def _latin1(text: str) -> str:
    # Core PDF fonts only cover latin-1
    return text.encode("latin-1", "replace").decode("latin-1")


def pdf_bytes(rows: Sequence[dict[str, Any]], title: str) -> bytes:
    headers = _require_rows(rows, "pdf")
    pdf = TableReportPDF(title)
    pdf.add_page()
    pdf.title_line()
    pdf.grid_table(headers, rows)
    return bytes(pdf.output())


# ---------------------------------------------------------------------------
# XLSX
# ---------------------------------------------------------------------------

def xlsx_bytes(rows: Sequence[dict[str, Any]]) -> bytes:
    _require_rows(rows, "xlsx")
    buf = io.BytesIO()
    pd.DataFrame(list(rows)).to_excel(buf, sheet_name="Data", index=False, engine="openpyxl")
    return buf.getvalue()


# ---------------------------------------------------------------------------
# File writers
# ---------------------------------------------------------------------------

def _write(payload: bytes, path: Path, log: logging.Logger) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(payload)
    log.info(f"  Export written -> {path} ({len(payload)} bytes)")
    return path


def export_to_csv(
    rows: Sequence[dict[str, Any]],
    filename: str,
    output_dir: str | Path = ".",
    log: logging.Logger = logger,
) -> Path:
    """Write ``{output_dir}/{filename}.csv`` and return its path."""
    return _write(csv_bytes(rows), Path(output_dir) / f"{filename}.csv", log)


def export_to_pdf(
    rows: Sequence[dict[str, Any]],
    filename: str,
    title: str,
    output_dir: str | Path = ".",
    log: logging.Logger = logger,
) -> Path:
    """Write ``{output_dir}/{filename}.pdf`` and return its path."""
    start = time.monotonic()
    path = _write(pdf_bytes(rows, title), Path(output_dir) / f"{filename}.pdf", log)
    log.debug(f"  PDF rendered in {time.monotonic() - start:.2f}s")
    return path


def export_to_xlsx(
    rows: Sequence[dict[str, Any]],
    kind: str,
    output_dir: str | Path = ".",
    log: logging.Logger = logger,
) -> Path:
    """Write ``{output_dir}/{kind}-report.xlsx`` and return its path."""
    return _write(xlsx_bytes(rows), Path(output_dir) / f"{kind}-report.xlsx", log)
