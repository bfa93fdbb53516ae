#!/usr/bin/env python3
"""
Read quiz tables out of a DOCX.

Every table row with at least two cells contributes the text of its second
cell; that column carries the question stems, options and answer markers.
Alongside the texts, the leading token of each stem row (the question id)
is collected so the merge step can label questions with it.

Example:
    python -m backend.documents.docx.table_reader quiz_en.docx
"""
from __future__ import annotations

import argparse
import io
import json
import os
import zipfile
from dataclasses import asdict, dataclass, field
from typing import IO, List, Union

import docx
from docx.opc.exceptions import PackageNotFoundError
from docx.oxml.ns import qn

from backend.bilingual.errors import DocumentReadError, NoTablesFound
from backend.bilingual.rows import Role, classify, leading_identifier

DocxSource = Union[str, "os.PathLike[str]", bytes, IO[bytes]]

DEBUG = False


def dbg(msg: str):
    if DEBUG:
        print(f"[MERGE-DEBUG] {msg}")


_T = qn("w:t")
_BR = qn("w:br")
_TBL = qn("w:tbl")
_TR = qn("w:tr")
_TC = qn("w:tc")


@dataclass(frozen=True)
class TableQuestions:
    """Second-column texts of one table plus the ids of its stem rows."""

    questions: List[str] = field(default_factory=list)
    ids: List[str] = field(default_factory=list)


def cell_text(tc) -> str:
    """Plain text of a ``w:tc`` element with ``w:br`` turned into newlines."""
    parts: List[str] = []
    for el in tc.iter():
        if el.tag == _T:
            parts.append(el.text or "")
        elif el.tag == _BR:
            parts.append("\n")
    return "".join(parts).replace("\r\n", "\n").strip()


def _source_name(source: DocxSource) -> str:
    if isinstance(source, (bytes, bytearray)):
        return "document"
    if isinstance(source, (str, os.PathLike)):
        return os.path.basename(os.fspath(source))
    name = getattr(source, "name", None)
    return os.path.basename(str(name)) if name else "document"


def open_document(source: DocxSource):
    """Open ``source`` with python-docx, normalising failures to ``DocumentReadError``."""
    name = _source_name(source)
    if isinstance(source, (bytes, bytearray)):
        stream = io.BytesIO(bytes(source))
    elif isinstance(source, os.PathLike):
        stream = os.fspath(source)
    else:
        stream = source
    if hasattr(stream, "seek"):
        stream.seek(0)
    try:
        return docx.Document(stream)
    except (PackageNotFoundError, zipfile.BadZipFile, KeyError, ValueError) as exc:
        raise DocumentReadError(f"Could not read {name}: {exc}") from exc


def read_table(tbl) -> TableQuestions:
    questions: List[str] = []
    ids: List[str] = []
    for tr in tbl.iter(_TR):
        cells = list(tr.iter(_TC))
        if len(cells) < 2:
            continue
        text = cell_text(cells[1])
        questions.append(text)
        if classify(text) is Role.STEM:
            ids.append(leading_identifier(text))
    return TableQuestions(questions=questions, ids=ids)


def extract_tables(source: DocxSource) -> List[TableQuestions]:
    """Return one ``TableQuestions`` per table in ``source``, in document order.

    Raises:
        DocumentReadError: ``source`` is not a readable Word document.
        NoTablesFound: the document body holds no table.
    """
    document = open_document(source)
    tables = [read_table(tbl) for tbl in document.element.body.iter(_TBL)]
    if not tables:
        raise NoTablesFound()
    for idx, table in enumerate(tables, start=1):
        dbg(f"table {idx}: {len(table.questions)} rows, {len(table.ids)} questions")
    return tables


def main():
    ap = argparse.ArgumentParser(description="Dump the quiz tables found in a DOCX as JSON")
    ap.add_argument("docx_path", help="Path to the .docx file")
    args = ap.parse_args()
    tables = extract_tables(args.docx_path)
    print(json.dumps([asdict(t) for t in tables], indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
