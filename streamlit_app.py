#!/usr/bin/env python3

"""Streamlit application entrypoint for the bilingual quiz merger."""

from __future__ import annotations

import streamlit as st

from backend.bilingual.pipeline import set_debug
from backend.config import MergeSettings, load_settings
from frontend.merge_page import render_merge_page
from frontend.session_state import initialize_session_state

APP_NAME = "Bilingual Quiz Merger"


def configure_page() -> None:
    st.set_page_config(
        page_title=APP_NAME,
        page_icon="📄",
        layout="centered",
    )


class StreamlitApp:
    """Thin orchestrator wiring settings, session state and the merge page."""

    def __init__(self, settings: MergeSettings) -> None:
        self.settings = settings
        set_debug(settings.debug)

    def run(self) -> None:
        st.title(APP_NAME)
        st.caption(
            "Merge two quiz documents (same tables, two languages) into one "
            "document using {mlang} bilingual markup."
        )
        initialize_session_state(self.settings)
        self._render_styles()
        render_merge_page(self.settings)

    @staticmethod
    def _render_styles() -> None:
        st.markdown(
            """
            <style>
            div.block-container{
                max-width: 900px;
                padding: 32px 48px;
            }
            div[data-testid="stFileUploader"] section{
                border-radius: 0;
                border: 1px solid #d4d6db;
            }
            </style>
            """,
            unsafe_allow_html=True,
        )


def main() -> None:
    configure_page()
    app = StreamlitApp(load_settings())
    app.run()


if __name__ == "__main__":
    main()
