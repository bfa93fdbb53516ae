"""
Row classification and pairing for bilingual quiz tables.

Each table row of a quiz document holds one line of content in its second
cell: a question stem ("QID001 What is ...?"), an option ("A. Cat"), the
answer marker ("ANSWER: B") or nothing. Two documents in different
languages share the same row layout, so rows are paired by position and the
role of each pair is decided from the first document's line alone.

Merged rows carry the `{mlang <tag>}...{mlang}` spans understood by the
multi-language filter of the authoring tool the output is imported into.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence

from backend.bilingual.errors import LengthMismatch

_OPTION_RE = re.compile(r"^[A-Z]\s*[.)]")
_ANSWER_RE = re.compile(r"^ANSWER", re.IGNORECASE)
_LEADING_TOKEN_RE = re.compile(r"^\S+\s*")


class Role(Enum):
    STEM = "stem"
    OPTION = "option"
    ANSWER = "answer"
    BLANK = "blank"


@dataclass(frozen=True)
class MergedRow:
    """One row of the output table: ordinal, bilingual content, spare column."""

    left: str
    middle: str
    right: str = ""


def is_option_row(text: Optional[str]) -> bool:
    return bool(_OPTION_RE.match((text or "").strip()))


def is_answer_row(text: Optional[str]) -> bool:
    return bool(_ANSWER_RE.match(text or ""))


def classify(text: Optional[str]) -> Role:
    """Return the role of a single line.

    The option check runs first; the answer marker is matched on the line as
    extracted (extraction already strips it); anything that is neither and
    is not blank is a question stem.
    """
    if is_option_row(text):
        return Role.OPTION
    if is_answer_row(text):
        return Role.ANSWER
    if not (text or "").strip():
        return Role.BLANK
    return Role.STEM


def strip_leading_identifier(text: Optional[str]) -> str:
    """Drop the first whitespace-delimited token, e.g. ``"Q1 What?" -> "What?"``."""
    return _LEADING_TOKEN_RE.sub("", (text or "").strip(), count=1).strip()


def leading_identifier(text: Optional[str]) -> str:
    parts = (text or "").split()
    return parts[0] if parts else ""


def mlang_span(lang: str, text: str) -> str:
    return f"{{mlang {lang}}}{text}{{mlang}}"


def _bilingual(lang1: str, text1: str, lang2: str, text2: str) -> str:
    return mlang_span(lang1, text1) + mlang_span(lang2, text2)


def merge_option(line1: str, line2: str, lang1: str, lang2: str) -> str:
    prefix = line1[:2]
    val1 = line1[2:].strip()
    # The translated marker may differ in case or be missing entirely.
    if line2.strip().upper().startswith(prefix):
        val2 = line2[2:].strip()
    else:
        val2 = line2.strip()
    return f"{prefix} {_bilingual(lang1, val1, lang2, val2)}"


def merge_stem(identifier: str, line1: str, line2: str, lang1: str, lang2: str) -> str:
    clean1 = strip_leading_identifier(line1)
    clean2 = strip_leading_identifier(line2)
    return f"{identifier}  {_bilingual(lang1, clean1, lang2, clean2)}"


def merge_rows(
    first: Sequence[str],
    second: Sequence[str],
    identifiers: Sequence[str],
    lang1: str,
    lang2: str,
) -> List[MergedRow]:
    """Pair two parallel question sequences into bilingual rows.

    Args:
        first: Second-column texts of one table in the first language.
        second: The same table in the second language, row for row.
        identifiers: Leading tokens of the first document's stem rows.
        lang1: Language tag for the first document, used verbatim.
        lang2: Language tag for the second document, used verbatim.

    Returns:
        One ``MergedRow`` per input line. Stem rows are numbered from 1.

    Raises:
        LengthMismatch: the two sequences differ in length.
    """
    if len(first) != len(second):
        raise LengthMismatch(len(first), len(second))

    rows: List[MergedRow] = []
    question_number = 1
    id_index = 0

    for raw1, raw2 in zip(first, second):
        line1 = raw1 or ""
        line2 = raw2 or ""
        role = classify(line1)

        if role is Role.STEM:
            current_id = identifiers[id_index] if id_index < len(identifiers) else ""
            id_index += 1
            rows.append(
                MergedRow(
                    left=str(question_number),
                    middle=merge_stem(current_id or "", line1, line2, lang1, lang2),
                )
            )
            question_number += 1
        elif role is Role.OPTION:
            rows.append(MergedRow(left="", middle=merge_option(line1, line2, lang1, lang2)))
        else:
            # Answer and blank rows are copied from the first language only.
            rows.append(MergedRow(left="", middle=line1))

    return rows


__all__ = [
    "Role",
    "MergedRow",
    "classify",
    "is_option_row",
    "is_answer_row",
    "strip_leading_identifier",
    "leading_identifier",
    "mlang_span",
    "merge_option",
    "merge_stem",
    "merge_rows",
]
