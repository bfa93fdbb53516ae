from __future__ import annotations

from typing import Optional

import streamlit as st

from backend.bilingual.errors import MergeInProgress
from backend.bilingual.pipeline import MergeOutcome
from backend.config import MergeSettings
from frontend.session_state import (
    get_merge_job,
    get_merge_outcome,
    remember_outcome,
    render_merge_downloads,
    reset_merge_workflow,
    trigger_rerun,
)


@st.dialog("Merge failed")
def show_error_dialog(message: str) -> None:
    st.error(message)
    if st.button("OK", key="merge_error_ok"):
        trigger_rerun()


def _show_status(placeholder, message: str) -> None:
    text = message or "Working..."
    if text.startswith("Error:"):
        placeholder.error(text)
    elif text.startswith("Done"):
        placeholder.success(text)
    else:
        placeholder.info(text)


def _render_outcome(placeholder, outcome: Optional[MergeOutcome]) -> None:
    if outcome is None:
        placeholder.caption("Select both documents and language codes, then press Merge.")
        return
    _show_status(placeholder, outcome.message)
    if outcome.ok:
        render_merge_downloads()


def render_merge_page(settings: MergeSettings) -> None:
    """Render the two-document upload form, run merges and offer the result."""

    col1, col2 = st.columns(2)
    with col1:
        first = st.file_uploader(
            "First document",
            type=["docx"],
            key="merge_file1",
            help="Quiz document in the first language.",
        )
        lang1 = st.text_input(
            "First language code",
            value=settings.lang1,
            key="merge_lang1",
            placeholder="en",
        )
    with col2:
        second = st.file_uploader(
            "Second document",
            type=["docx"],
            key="merge_file2",
            help="The same quiz translated into the second language.",
        )
        lang2 = st.text_input(
            "Second language code",
            value=settings.lang2,
            key="merge_lang2",
            placeholder="uk",
        )

    job = get_merge_job()
    button_col, reset_col = st.columns([1, 1])
    with button_col:
        merge_clicked = st.button("Merge", type="primary", disabled=job.busy)
    with reset_col:
        reset_clicked = st.button("Start over", key="merge_reset")

    status_placeholder = st.empty()

    if reset_clicked:
        reset_merge_workflow()
        trigger_rerun()
        return

    if merge_clicked:
        job.on_status = lambda message: _show_status(status_placeholder, message)
        try:
            outcome = job.run(first, second, lang1, lang2)
        except MergeInProgress as exc:
            st.warning(str(exc))
            return
        finally:
            job.on_status = None
        remember_outcome(outcome)
        if not outcome.ok:
            show_error_dialog(outcome.message)

    _render_outcome(status_placeholder, get_merge_outcome())


__all__ = ["render_merge_page", "show_error_dialog"]
