"""Builders for small quiz documents used across the test suite."""

from typing import Sequence

import docx

EN_QUIZ = [
    "QID001 What is your favorite animal?",
    "A. Cat",
    "B. Dog",
    "C. Bird",
    "D. Fish",
    "ANSWER: B",
    "",
]

UK_QUIZ = [
    "QID001 Koja je vaša omiljena životinja?",
    "A. Mačka",
    "B. Pas",
    "C. Ptica",
    "D. Riba",
    "ODGOVOR: B",
    "",
]

EN_QUIZ_2 = [
    "QID002 Which planet is largest?",
    "A) Mars",
    "B) Jupiter",
    "ANSWER: B",
]

UK_QUIZ_2 = [
    "QID002 Koja je planeta najveća?",
    "a) Mars",
    "Jupiter",
    "ODGOVOR: B",
]


def build_quiz_docx(path, tables: Sequence[Sequence[str]], *, header: bool = False):
    """Write a quiz document: one 3-column table per entry, text in column two.

    With ``header=True`` every table starts with a row merged across all
    columns, which leaves a single ``w:tc`` in that row.
    """
    doc = docx.Document()
    doc.add_paragraph("Quiz")
    for lines in tables:
        table = doc.add_table(rows=0, cols=3)
        if header:
            cells = table.add_row().cells
            merged = cells[0].merge(cells[2])
            merged.text = "Header spanning the table"
        for number, text in enumerate(lines, start=1):
            cells = table.add_row().cells
            cells[0].text = str(number)
            cells[1].text = text
        doc.add_paragraph("")
    doc.save(str(path))
    return path
