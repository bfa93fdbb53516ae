"""Exceptions raised while merging two quiz documents into one bilingual file."""

from __future__ import annotations

from typing import Optional


class BilingualMergeError(Exception):
    """Base class for every failure that aborts a merge run."""


class MissingInput(BilingualMergeError):
    """A source document or a language tag was not provided."""


class DocumentReadError(BilingualMergeError):
    """The uploaded file could not be opened as a Word document."""


class NoTablesFound(BilingualMergeError):
    def __init__(self, message: str = "No tables found in document.") -> None:
        super().__init__(message)


class TableCountMismatch(BilingualMergeError):
    def __init__(self, first_count: int, second_count: int) -> None:
        self.first_count = first_count
        self.second_count = second_count
        super().__init__(
            "The number of tables in the files does not match! "
            f"({first_count} vs {second_count})"
        )


class LengthMismatch(BilingualMergeError):
    """Two tables at the same index hold a different number of rows."""

    def __init__(
        self,
        first_count: int,
        second_count: int,
        table_number: Optional[int] = None,
    ) -> None:
        self.first_count = first_count
        self.second_count = second_count
        self.table_number = table_number
        where = f" in table {table_number}" if table_number is not None else ""
        super().__init__(
            f"The number of lines in the files does not match{where}! "
            f"({first_count} vs {second_count})"
        )

    def for_table(self, table_number: int) -> "LengthMismatch":
        return LengthMismatch(self.first_count, self.second_count, table_number)


class MergeInProgress(BilingualMergeError):
    def __init__(self, state: str) -> None:
        self.state = state
        super().__init__(
            f"A merge is already in progress ({state}). Please wait for it to finish."
        )


__all__ = [
    "BilingualMergeError",
    "MissingInput",
    "DocumentReadError",
    "NoTablesFound",
    "TableCountMismatch",
    "LengthMismatch",
    "MergeInProgress",
]
