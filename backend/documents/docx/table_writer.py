"""Render merged bilingual rows into a new DOCX.

Each merged table becomes a three-column Word table (ordinal / content /
spare) with single black borders on every edge. Consecutive tables are
separated by an empty paragraph.
"""
from __future__ import annotations

import io
from typing import Sequence

import docx
from docx.oxml import OxmlElement
from docx.oxml.ns import qn
from docx.shared import Pt, Twips

from backend.bilingual.rows import MergedRow

DEBUG = False


def dbg(msg: str):
    if DEBUG:
        print(f"[MERGE-DEBUG] {msg}")


# Widths in twips (dxa): narrow / wide / narrow.
COLUMN_WIDTHS = (720, 6480, 720)
TABLE_WIDTH = sum(COLUMN_WIDTHS)
BORDER_EDGES = ("top", "left", "bottom", "right", "insideH", "insideV")
BORDER_SIZE = 4  # eighths of a point
BORDER_COLOR = "000000"
TABLE_GAP = Pt(10)


def _set_table_width(table, width: int) -> None:
    tblPr = table._tbl.tblPr
    tblW = tblPr.find(qn("w:tblW"))
    if tblW is None:
        tblW = OxmlElement("w:tblW")
        tblPr.append(tblW)
    tblW.set(qn("w:w"), str(width))
    tblW.set(qn("w:type"), "dxa")


def _set_table_borders(table) -> None:
    tblPr = table._tbl.tblPr
    existing = tblPr.find(qn("w:tblBorders"))
    if existing is not None:
        tblPr.remove(existing)
    borders = OxmlElement("w:tblBorders")
    for edge in BORDER_EDGES:
        el = OxmlElement(f"w:{edge}")
        el.set(qn("w:val"), "single")
        el.set(qn("w:sz"), str(BORDER_SIZE))
        el.set(qn("w:space"), "0")
        el.set(qn("w:color"), BORDER_COLOR)
        borders.append(el)
    # tblBorders must precede tblLayout/tblCellMar/tblLook inside tblPr.
    anchor = None
    for tag in ("w:shd", "w:tblLayout", "w:tblCellMar", "w:tblLook"):
        anchor = tblPr.find(qn(tag))
        if anchor is not None:
            break
    if anchor is not None:
        anchor.addprevious(borders)
    else:
        tblPr.append(borders)


def _write_cell(cell, text: str, width: int) -> None:
    cell.width = Twips(width)
    paragraph = cell.paragraphs[0]
    fmt = paragraph.paragraph_format
    fmt.space_before = Pt(0)
    fmt.space_after = Pt(0)
    fmt.line_spacing = 1.0
    if text:
        paragraph.add_run(text)


def add_merged_table(document, rows: Sequence[MergedRow]):
    table = document.add_table(rows=0, cols=len(COLUMN_WIDTHS))
    _set_table_width(table, TABLE_WIDTH)
    _set_table_borders(table)
    table.autofit = False
    for column, width in zip(table.columns, COLUMN_WIDTHS):
        column.width = Twips(width)
    for row in rows:
        cells = table.add_row().cells
        for cell, text, width in zip(cells, (row.left, row.middle, row.right), COLUMN_WIDTHS):
            _write_cell(cell, text or "", width)
    return table


def build_document(tables: Sequence[Sequence[MergedRow]]):
    """Return a python-docx ``Document`` holding one bordered table per entry."""
    document = docx.Document()
    for idx, rows in enumerate(tables):
        add_merged_table(document, rows)
        dbg(f"rendered table {idx + 1} with {len(rows)} rows")
        if idx < len(tables) - 1:
            spacer = document.add_paragraph("")
            spacer.paragraph_format.space_after = TABLE_GAP
    return document


def render_docx(tables: Sequence[Sequence[MergedRow]]) -> bytes:
    buffer = io.BytesIO()
    build_document(tables).save(buffer)
    return buffer.getvalue()


def write_docx(data: bytes, out_path: str) -> str:
    """Write rendered DOCX bytes to ``out_path`` and return the path written."""
    with open(out_path, "wb") as fh:
        fh.write(data)
    dbg(f"wrote {out_path}")
    return out_path


__all__ = [
    "COLUMN_WIDTHS",
    "TABLE_WIDTH",
    "add_merged_table",
    "build_document",
    "render_docx",
    "write_docx",
]
