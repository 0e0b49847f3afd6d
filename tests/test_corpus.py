import pytest

from faq_corpus import (
    CorpusLoadError,
    file_loader,
    iter_faq_blocks,
    load_faq_csv,
    load_faq_file,
    parse_faq_text,
)
from faq_matcher import FaqEntry

FAQ_TEXT = """Welcome to the help centre.
Q: How do I reset my password?
A: Use the reset link.
It expires in a day.

Q: Orphan question without an answer
Q: How do I contact support?
A: Call 16221.
"""


def test_parses_blocks_with_multi_line_answers():
    assert parse_faq_text(FAQ_TEXT) == [
        FaqEntry("How do I reset my password?", "Use the reset link.\nIt expires in a day."),
        FaqEntry("How do I contact support?", "Call 16221."),
    ]


def test_question_not_followed_by_answer_is_dropped():
    text = "Q: Broken block\nSome stray text\nA: too late\nQ: Fine?\nA: Yes.\n"
    assert parse_faq_text(text) == [FaqEntry("Fine?", "Yes.")]


def test_blocks_with_empty_question_or_answer_are_dropped():
    text = "Q:\nA: No question here.\nQ: No answer?\nA:   \nQ: Good?\nA: Good.\n"
    assert parse_faq_text(text) == [FaqEntry("Good?", "Good.")]


def test_windows_line_endings_are_tolerated():
    lines = ["Q: One?\r\n", "A: First.\r\n", "Q: Two?\r\n", "A: Second.\r\n"]
    assert list(iter_faq_blocks(lines)) == [FaqEntry("One?", "First."), FaqEntry("Two?", "Second.")]


def test_duplicate_questions_are_kept():
    text = "Q: Same?\nA: One.\nQ: Same?\nA: Two.\n"
    assert [entry.answer for entry in parse_faq_text(text)] == ["One.", "Two."]


def test_scanner_is_lazy():
    def lines():
        yield "Q: First?\n"
        yield "A: One.\n"
        yield "Q: Second?\n"
        raise AssertionError("read past the second question")

    blocks = iter_faq_blocks(lines())
    assert next(blocks) == FaqEntry("First?", "One.")


def test_empty_text_has_no_entries():
    assert parse_faq_text("") == []


def test_load_text_file(tmp_path):
    path = tmp_path / "faq.txt"
    path.write_text(FAQ_TEXT, encoding="utf-8")

    entries = load_faq_file(path)

    assert [entry.question for entry in entries] == [
        "How do I reset my password?",
        "How do I contact support?",
    ]


def test_file_loader_rereads_on_every_call(tmp_path):
    path = tmp_path / "faq.txt"
    path.write_text("Q: One?\nA: First.\n", encoding="utf-8")
    loader = file_loader(str(path))
    assert len(loader()) == 1

    path.write_text("Q: One?\nA: First.\nQ: Two?\nA: Second.\n", encoding="utf-8")
    assert len(loader()) == 2


def test_missing_file_raises_corpus_load_error(tmp_path):
    with pytest.raises(CorpusLoadError) as excinfo:
        load_faq_file(tmp_path / "missing.txt")
    assert excinfo.value.reason == "file not found"


def test_undecodable_file_raises_corpus_load_error(tmp_path):
    path = tmp_path / "faq.txt"
    path.write_bytes(b"Q: \xff\xfe?\nA: broken\n")
    with pytest.raises(CorpusLoadError):
        load_faq_file(path)


def test_load_csv_skips_id_column_and_blank_rows(tmp_path):
    path = tmp_path / "faq.csv"
    path.write_text(
        "Question_ID,Questions,Answers\n"
        "1,How do I reset my password?,Use the reset link.\n"
        "2,,Orphan answer\n"
        "3,How do I contact support?,Call 16221.\n",
        encoding="utf-8",
    )

    assert load_faq_file(path) == [
        FaqEntry("How do I reset my password?", "Use the reset link."),
        FaqEntry("How do I contact support?", "Call 16221."),
    ]


def test_csv_without_question_answer_columns_is_rejected(tmp_path):
    path = tmp_path / "faq.csv"
    path.write_text("title,body\nx,y\n", encoding="utf-8")
    with pytest.raises(CorpusLoadError):
        load_faq_csv(str(path))


def test_empty_csv_is_rejected(tmp_path):
    path = tmp_path / "faq.csv"
    path.write_text("", encoding="utf-8")
    with pytest.raises(CorpusLoadError):
        load_faq_file(path)
