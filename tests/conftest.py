import pathlib
import sys
from typing import List

import pytest
from dotenv import load_dotenv

sys.path.insert(0, str(pathlib.Path(__file__).resolve().parents[1]))
sys.path.insert(0, str(pathlib.Path(__file__).resolve().parent))

from _quiz_helpers import build_quiz_docx  # noqa: E402

load_dotenv(override=False)


@pytest.fixture
def quiz_docx(tmp_path):
    def _make(name: str, tables: List[List[str]], **kwargs):
        return build_quiz_docx(tmp_path / name, tables, **kwargs)

    return _make


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch):
    for key in ("BILINGUAL_LANG1", "BILINGUAL_LANG2", "BILINGUAL_OUTPUT_NAME", "BILINGUAL_DEBUG"):
        monkeypatch.delenv(key, raising=False)
