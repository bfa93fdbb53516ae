"""Runtime settings for the bilingual merge workflow.

Values come from the environment (optionally seeded from a ``.env`` file):

    BILINGUAL_LANG1         default first language tag shown in the UI
    BILINGUAL_LANG2         default second language tag
    BILINGUAL_OUTPUT_NAME   file name of the merged document
    BILINGUAL_DEBUG         1/true/yes/on enables verbose debug output
"""
from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_OUTPUT_NAME = "merged_output.docx"
DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class MergeSettings:
    lang1: str = ""
    lang2: str = ""
    output_name: str = DEFAULT_OUTPUT_NAME
    debug: bool = False


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


def load_settings() -> MergeSettings:
    """Build settings from the environment after loading ``.env`` if present."""
    load_dotenv(override=False)
    output_name = (os.getenv("BILINGUAL_OUTPUT_NAME") or "").strip() or DEFAULT_OUTPUT_NAME
    return MergeSettings(
        lang1=(os.getenv("BILINGUAL_LANG1") or "").strip(),
        lang2=(os.getenv("BILINGUAL_LANG2") or "").strip(),
        output_name=output_name,
        debug=_env_flag("BILINGUAL_DEBUG"),
    )


__all__ = ["DEFAULT_OUTPUT_NAME", "DOCX_MIME", "MergeSettings", "load_settings"]
