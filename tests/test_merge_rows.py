import pytest

from _quiz_helpers import EN_QUIZ, UK_QUIZ
from backend.bilingual.errors import LengthMismatch
from backend.bilingual.rows import MergedRow, merge_rows


def test_end_to_end_single_question():
    rows = merge_rows(EN_QUIZ, UK_QUIZ, ["QID001"], "en", "uk")
    assert len(rows) == 7
    assert rows[0].left == "1"
    assert rows[0].middle == (
        "QID001  {mlang en}What is your favorite animal?{mlang}"
        "{mlang uk}Koja je vaša omiljena životinja?{mlang}"
    )
    assert rows[1].middle.startswith("A. {mlang en}Cat{mlang}{mlang uk}Mačka{mlang}")
    assert rows[5].middle == "ANSWER: B"
    assert rows[6] == MergedRow(left="", middle="", right="")
    assert all(row.right == "" for row in rows)
    assert [row.left for row in rows[1:]] == [""] * 6


def test_merge_is_deterministic():
    first = merge_rows(EN_QUIZ, UK_QUIZ, ["QID001"], "en", "uk")
    second = merge_rows(EN_QUIZ, UK_QUIZ, ["QID001"], "en", "uk")
    assert first == second


def test_length_mismatch_names_both_lengths():
    with pytest.raises(LengthMismatch) as excinfo:
        merge_rows(EN_QUIZ, UK_QUIZ[:-1], ["QID001"], "en", "uk")
    assert excinfo.value.first_count == 7
    assert excinfo.value.second_count == 6
    assert "7 vs 6" in str(excinfo.value)


def test_question_numbers_and_ids_advance_per_stem():
    first = ["Q1 One?", "A. yes", "Q2 Two?", "B) no", "Q3 Three?"]
    second = ["Q1 Jedan?", "A. da", "Q2 Dva?", "B) ne", "Q3 Tri?"]
    rows = merge_rows(first, second, ["Q1", "Q2"], "en", "hr")
    assert [row.left for row in rows] == ["1", "", "2", "", "3"]
    assert rows[2].middle.startswith("Q2  {mlang en}Two?{mlang}")
    # Identifier list exhausted: the third stem gets an empty id.
    assert rows[4].middle == "  {mlang en}Three?{mlang}{mlang hr}Tri?{mlang}"


def test_option_prefix_matches_case_insensitively():
    rows = merge_rows(["A) Mars"], ["a) Mars"], [], "en", "hr")
    assert rows[0].middle == "A) {mlang en}Mars{mlang}{mlang hr}Mars{mlang}"


def test_option_without_marker_keeps_full_translation():
    rows = merge_rows(["B. Jupiter"], ["  Jupiter  "], [], "en", "hr")
    assert rows[0].middle == "B. {mlang en}Jupiter{mlang}{mlang hr}Jupiter{mlang}"


def test_option_with_different_marker_is_not_stripped():
    rows = merge_rows(["C. Bird"], ["D. Ptica"], [], "en", "hr")
    assert rows[0].middle == "C. {mlang en}Bird{mlang}{mlang hr}D. Ptica{mlang}"


def test_second_language_role_is_never_checked():
    # The translated line looks like an option but the first line is a stem.
    rows = merge_rows(["Q9 Pick one"], ["A. Odaberi"], ["Q9"], "en", "hr")
    assert rows[0].left == "1"
    assert rows[0].middle == "Q9  {mlang en}Pick one{mlang}{mlang hr}Odaberi{mlang}"


def test_answer_and_blank_rows_drop_translation():
    rows = merge_rows(["answer: c", "   "], ["ODGOVOR: C", "nešto"], [], "en", "hr")
    assert rows[0].middle == "answer: c"
    assert rows[1].middle == "   "


def test_none_lines_are_treated_as_empty():
    rows = merge_rows([None], [None], [], "en", "hr")
    assert rows == [MergedRow(left="", middle="", right="")]


def test_language_tags_are_used_verbatim():
    rows = merge_rows(["A. x"], ["A. y"], [], "en-GB", "sr_Latn")
    assert rows[0].middle == "A. {mlang en-GB}x{mlang}{mlang sr_Latn}y{mlang}"


def test_empty_tables_merge_to_no_rows():
    assert merge_rows([], [], [], "en", "uk") == []
