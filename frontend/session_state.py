from __future__ import annotations

from typing import Any, Dict, Optional

import streamlit as st

from backend.bilingual.pipeline import MergeJob, MergeOutcome
from backend.config import DOCX_MIME, MergeSettings


def initialize_session_state(settings: MergeSettings) -> None:
    """Populate Streamlit session defaults for the merge page."""

    st.session_state.setdefault("merge_job", MergeJob(settings))
    st.session_state.setdefault("merge_outcome", None)
    st.session_state.setdefault("merge_downloads", {})


def get_merge_job() -> MergeJob:
    return st.session_state["merge_job"]


def get_merge_outcome() -> Optional[MergeOutcome]:
    return st.session_state.get("merge_outcome")


def remember_outcome(outcome: MergeOutcome) -> None:
    """Keep the last run's result so it survives reruns (e.g. after a download)."""

    st.session_state["merge_outcome"] = outcome
    reset_merge_downloads()
    if outcome.ok and outcome.data is not None:
        store_merge_download(
            "merged",
            label=f"Download {outcome.file_name}",
            data=outcome.data,
            file_name=outcome.file_name or "merged_output.docx",
            mime=DOCX_MIME,
        )


def reset_merge_downloads() -> None:
    st.session_state["merge_downloads"] = {}


def reset_merge_workflow() -> None:
    """Forget the last outcome and start over with an idle job."""

    job = get_merge_job()
    st.session_state["merge_job"] = MergeJob(job.settings)
    st.session_state["merge_outcome"] = None
    reset_merge_downloads()


def trigger_rerun() -> None:
    """Request Streamlit to rerun regardless of API availability."""

    rerun_fn = getattr(st, "rerun", None)
    if callable(rerun_fn):
        rerun_fn()
        return
    rerun_fn = getattr(st, "experimental_rerun", None)
    if callable(rerun_fn):
        rerun_fn()
        return
    raise RuntimeError("Streamlit rerun API unavailable; update Streamlit to a newer version.")


def store_merge_download(
    key: str,
    *,
    label: str,
    data: bytes,
    file_name: str,
    mime: Optional[str] = None,
) -> None:
    bucket: Dict[str, Dict[str, Any]] = st.session_state.setdefault("merge_downloads", {})
    bucket[key] = {
        "label": label,
        "data": data,
        "file_name": file_name,
        "mime": mime,
    }


def render_merge_downloads() -> None:
    downloads: Dict[str, Dict[str, Any]] = st.session_state.get("merge_downloads") or {}
    if not downloads:
        return
    for key, meta in downloads.items():
        st.download_button(
            meta["label"],
            meta["data"],
            file_name=meta["file_name"],
            mime=meta.get("mime"),
            key=f"merge_download_{key}",
        )


__all__ = [
    "initialize_session_state",
    "get_merge_job",
    "get_merge_outcome",
    "remember_outcome",
    "reset_merge_downloads",
    "reset_merge_workflow",
    "trigger_rerun",
    "store_merge_download",
    "render_merge_downloads",
]
