"""DOCX-specific parsing and rendering helpers."""

from .table_reader import TableQuestions, cell_text, extract_tables
from .table_writer import build_document, render_docx, write_docx

__all__ = [
    "TableQuestions",
    "build_document",
    "cell_text",
    "extract_tables",
    "render_docx",
    "write_docx",
]
