"""Merge two single-language quiz documents into one bilingual document."""

from .errors import (
    BilingualMergeError,
    DocumentReadError,
    LengthMismatch,
    MergeInProgress,
    MissingInput,
    NoTablesFound,
    TableCountMismatch,
)
from .rows import MergedRow, Role, classify, merge_rows, strip_leading_identifier

__all__ = [
    "BilingualMergeError",
    "DocumentReadError",
    "LengthMismatch",
    "MergeInProgress",
    "MissingInput",
    "NoTablesFound",
    "TableCountMismatch",
    "MergedRow",
    "Role",
    "classify",
    "merge_rows",
    "strip_leading_identifier",
]
