import pytest

from backend.bilingual.rows import (
    Role,
    classify,
    is_option_row,
    leading_identifier,
    mlang_span,
    strip_leading_identifier,
)


def test_strip_leading_identifier_removes_first_token():
    assert strip_leading_identifier("Q1 What is this?") == "What is this?"


def test_strip_leading_identifier_trims_outer_and_inner_whitespace():
    assert strip_leading_identifier("  ABC123  Hello world ") == "Hello world"


@pytest.mark.parametrize("text", ["", "   ", None, "Q1", "  Q1  "])
def test_strip_leading_identifier_without_remainder(text):
    assert strip_leading_identifier(text) == ""


def test_leading_identifier():
    assert leading_identifier("  QID007\tWhich one?") == "QID007"
    assert leading_identifier("") == ""


@pytest.mark.parametrize("text", ["A. Cat", "Z.", "B) Dog", "C . spaced", "  D) indented"])
def test_option_rows(text):
    assert is_option_row(text)
    assert classify(text) is Role.OPTION


@pytest.mark.parametrize("text", ["1. Not", "a. lowercase", "AB. two letters", "A Cat"])
def test_not_option_rows(text):
    assert classify(text) is not Role.OPTION


@pytest.mark.parametrize("text", ["ANSWER: B", "answer b", "Answer:C"])
def test_answer_rows(text):
    assert classify(text) is Role.ANSWER


@pytest.mark.parametrize("text", ["", "   ", "\n", None])
def test_blank_rows(text):
    assert classify(text) is Role.BLANK


def test_stem_is_the_default():
    assert classify("QID1 Text") is Role.STEM
    assert classify("Which of these is true?") is Role.STEM


def test_option_check_wins_over_answer_prefix():
    # "A." is an option marker even though "A" could start "ANSWER".
    assert classify("A. ANSWER is here") is Role.OPTION
    assert classify("ANSWER. B") is Role.ANSWER


def test_mlang_span():
    assert mlang_span("en", "Cat") == "{mlang en}Cat{mlang}"
