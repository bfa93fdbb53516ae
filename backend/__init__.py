"""Convenience exports for the backend package.

The backend is organized by capability: ``bilingual`` holds the row pairing
logic and the merge pipeline, ``documents.docx`` the Word readers and
writers. This module re-exports the entry points the UI and CLI use so
callers can write ``from backend import MergeJob``.
"""

from .bilingual.pipeline import MergeJob, MergeOutcome, MergeState, merge_documents
from .config import MergeSettings, load_settings
from .documents.docx.table_reader import TableQuestions, extract_tables
from .documents.docx.table_writer import build_document, render_docx

__all__ = [
    "MergeJob",
    "MergeOutcome",
    "MergeState",
    "MergeSettings",
    "TableQuestions",
    "build_document",
    "extract_tables",
    "load_settings",
    "merge_documents",
    "render_docx",
]
