"""
Orchestrates a bilingual merge run: read both documents, pair their tables,
render the merged DOCX.

Stages raise on failure. ``MergeJob`` is the single place that turns a
failure into a reportable outcome; UI layers only display what it returns.
"""
from __future__ import annotations

import sys
import traceback
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Sequence, Tuple

from backend.bilingual.errors import (
    BilingualMergeError,
    LengthMismatch,
    MergeInProgress,
    MissingInput,
    TableCountMismatch,
)
from backend.bilingual.rows import MergedRow, merge_rows
from backend.config import MergeSettings
from backend.documents.docx import table_reader, table_writer
from backend.documents.docx.table_reader import DocxSource, TableQuestions, extract_tables
from backend.documents.docx.table_writer import render_docx, write_docx

DEBUG = False


def dbg(msg: str):
    if DEBUG:
        print(f"[MERGE-DEBUG] {msg}")


def set_debug(enabled: bool) -> None:
    """Toggle debug output for the pipeline and the DOCX reader/writer."""
    global DEBUG
    DEBUG = enabled
    table_reader.DEBUG = enabled
    table_writer.DEBUG = enabled


STATUS_READING_FIRST = "Reading first document..."
STATUS_READING_SECOND = "Reading second document..."
STATUS_MERGING = "Building merged tables..."
STATUS_RENDERING = "Generating .docx..."


def done_message(file_name: str) -> str:
    return f"Done. File ready: {file_name}"


def error_message(exc: BaseException) -> str:
    return f"Error: {str(exc) or exc.__class__.__name__}"


class MergeState(Enum):
    IDLE = "idle"
    READING_FIRST = "reading_first"
    READING_SECOND = "reading_second"
    MERGING = "merging"
    RENDERING = "rendering"
    DONE = "done"
    FAILED = "failed"


_STARTABLE = {MergeState.IDLE, MergeState.DONE, MergeState.FAILED}

StageCallback = Callable[[MergeState, str], None]
StatusCallback = Callable[[str], None]


@dataclass
class MergeOutcome:
    ok: bool
    message: str
    data: Optional[bytes] = None
    file_name: Optional[str] = None
    error: Optional[BaseException] = None


def validate_inputs(first, second, lang1: Optional[str], lang2: Optional[str]) -> Tuple[str, str]:
    """Check that both files and both language tags were supplied.

    Returns the stripped language tags.
    """
    if not first or not second:
        raise MissingInput("You must select both files (.docx).")
    tag1 = (lang1 or "").strip()
    tag2 = (lang2 or "").strip()
    if not tag1 or not tag2:
        raise MissingInput("You must enter both language codes.")
    return tag1, tag2


def merge_tables(
    tables1: Sequence[TableQuestions],
    tables2: Sequence[TableQuestions],
    lang1: str,
    lang2: str,
) -> List[List[MergedRow]]:
    """Merge tables pairwise by index using the first document's question ids."""
    if len(tables1) != len(tables2):
        raise TableCountMismatch(len(tables1), len(tables2))
    merged: List[List[MergedRow]] = []
    for number, (t1, t2) in enumerate(zip(tables1, tables2), start=1):
        try:
            rows = merge_rows(t1.questions, t2.questions, t1.ids, lang1, lang2)
        except LengthMismatch as exc:
            raise exc.for_table(number) from None
        dbg(f"merged table {number}: {len(rows)} rows")
        merged.append(rows)
    return merged


def merge_documents(
    first: DocxSource,
    second: DocxSource,
    lang1: Optional[str],
    lang2: Optional[str],
    *,
    on_stage: Optional[StageCallback] = None,
) -> bytes:
    """Run every stage for two source documents and return the merged DOCX bytes."""
    tag1, tag2 = validate_inputs(first, second, lang1, lang2)

    def stage(state: MergeState, message: str) -> None:
        dbg(message)
        if on_stage is not None:
            on_stage(state, message)

    stage(MergeState.READING_FIRST, STATUS_READING_FIRST)
    tables1 = extract_tables(first)

    stage(MergeState.READING_SECOND, STATUS_READING_SECOND)
    tables2 = extract_tables(second)

    stage(MergeState.MERGING, STATUS_MERGING)
    merged = merge_tables(tables1, tables2, tag1, tag2)

    stage(MergeState.RENDERING, STATUS_RENDERING)
    return render_docx(merged)


class MergeJob:
    """One merge run at a time, tracked through ``MergeState``."""

    def __init__(
        self,
        settings: Optional[MergeSettings] = None,
        on_status: Optional[StatusCallback] = None,
    ) -> None:
        self.settings = settings or MergeSettings()
        self.on_status = on_status
        self.state = MergeState.IDLE
        self.outcome: Optional[MergeOutcome] = None

    @property
    def busy(self) -> bool:
        return self.state not in _STARTABLE

    def _notify(self, message: str) -> None:
        if self.on_status is not None:
            self.on_status(message)

    def _advance(self, state: MergeState, message: str) -> None:
        self.state = state
        self._notify(message)

    def _finish(self, outcome: MergeOutcome) -> MergeOutcome:
        self.state = MergeState.DONE if outcome.ok else MergeState.FAILED
        self.outcome = outcome
        self._notify(outcome.message)
        return outcome

    def run(
        self,
        first: DocxSource,
        second: DocxSource,
        lang1: Optional[str],
        lang2: Optional[str],
        out_path: Optional[str] = None,
    ) -> MergeOutcome:
        """Execute a full merge and report success or the first failure.

        With ``out_path`` the merged document is also written to disk before
        the run is reported as done; a failed write fails the run.

        Raises:
            MergeInProgress: another run on this job has not finished yet.
        """
        if self.busy:
            raise MergeInProgress(self.state.value)
        self.outcome = None
        try:
            data = merge_documents(first, second, lang1, lang2, on_stage=self._advance)
            if out_path is not None:
                write_docx(data, out_path)
        except Exception as exc:
            # A status callback already receives the error message.
            if self.on_status is None:
                print(error_message(exc), file=sys.stderr)
            if DEBUG or not isinstance(exc, (BilingualMergeError, OSError)):
                traceback.print_exc()
            return self._finish(MergeOutcome(ok=False, message=error_message(exc), error=exc))
        except BaseException:
            # Interrupted (e.g. KeyboardInterrupt or a UI rerun); allow a new run.
            self.state = MergeState.IDLE
            raise
        name = self.settings.output_name
        return self._finish(
            MergeOutcome(ok=True, message=done_message(name), data=data, file_name=name)
        )


__all__ = [
    "STATUS_READING_FIRST",
    "STATUS_READING_SECOND",
    "STATUS_MERGING",
    "STATUS_RENDERING",
    "MergeState",
    "MergeOutcome",
    "MergeJob",
    "done_message",
    "error_message",
    "merge_documents",
    "merge_tables",
    "set_debug",
    "validate_inputs",
]
