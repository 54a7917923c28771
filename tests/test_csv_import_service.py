"""Tests for CSV flashcard import parsing."""
import pytest

from flashdrill.core.exceptions import ValidationError
from flashdrill.services.csv_import_service import parse_flashcard_csv


def test_header_row_is_skipped_and_hint_is_optional():
    text = "Question,Answer,Hint\nCapital of France?,Paris,City of light\nCapital of Italy?,Rome\n"

    cards = parse_flashcard_csv(text)

    assert [(c.question, c.answer, c.hint) for c in cards] == [
        ("Capital of France?", "Paris", "City of light"),
        ("Capital of Italy?", "Rome", None),
    ]


def test_quoted_fields_with_commas_and_escaped_quotes():
    text = 'q,a,h\n"Say ""hi"", politely","Hello, there",""\n'

    cards = parse_flashcard_csv(text)

    assert len(cards) == 1
    assert cards[0].question == 'Say "hi", politely'
    assert cards[0].answer == "Hello, there"
    assert cards[0].hint is None


def test_fields_are_trimmed_and_blank_lines_ignored():
    text = "q,a\n\n   2 + 2 ,  4  \n\n"

    cards = parse_flashcard_csv(text)

    assert [(c.question, c.answer) for c in cards] == [("2 + 2", "4")]


def test_rows_with_fewer_than_two_fields_are_skipped():
    text = "q,a\nlonely\nfull,row\n"

    cards = parse_flashcard_csv(text)

    assert [(c.question, c.answer) for c in cards] == [("full", "row")]


def test_windows_line_endings():
    cards = parse_flashcard_csv("q,a\r\none,1\r\ntwo,2\r\n")

    assert [c.answer for c in cards] == ["1", "2"]


@pytest.mark.parametrize("text", ["", "Question,Answer\n", "q,a\nonly-one-field\n"])
def test_no_parseable_rows_is_a_validation_failure(text):
    with pytest.raises(ValidationError):
        parse_flashcard_csv(text)


def test_rows_with_empty_question_or_answer_are_skipped():
    text = "q,a,h\n,orphan answer,h\norphan question,,h\nkept,yes,\n"

    cards = parse_flashcard_csv(text)

    assert [(c.question, c.answer) for c in cards] == [("kept", "yes")]
