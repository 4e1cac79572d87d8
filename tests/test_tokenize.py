import subprocess
from unittest import mock

import pytest

from wcgen.frequency import WordList
from wcgen.tokenize import (
    code_words,
    count_code_words,
    count_text_words,
    extract_pdf_text,
    read_file,
    text_words,
)


def test_read_file_joins_lines_and_appends_space(tmp_path):
    path = tmp_path / "doc.txt"
    path.write_bytes(b"alpha\nbeta\n")
    assert read_file(path) == "alphabeta "


def test_read_file_missing_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_file(tmp_path / "absent.txt")


def test_extract_pdf_text_runs_pdftotext():
    completed = subprocess.CompletedProcess(
        args=[], returncode=0, stdout="page text\n", stderr=""
    )
    with mock.patch("wcgen.tokenize.subprocess.run", return_value=completed) as run:
        result = extract_pdf_text("doc.pdf")
    assert result == "page text\n"
    assert run.call_args.args[0] == ["pdftotext", "doc.pdf", "-"]


def test_text_words_plain():
    assert list(text_words("hello world ")) == ["hello", "world"]


def test_text_words_lowercases():
    assert list(text_words("Hello WORLD ")) == list(text_words("hello world "))


def test_text_words_drops_stop_words():
    assert list(text_words("the cat and the hat ")) == ["cat", "hat"]


def test_text_words_drops_single_letters():
    assert list(text_words("x y zz ")) == ["zz"]


def test_text_words_plural_s():
    assert list(text_words("cats ")) == ["cat"]


def test_text_words_ies_to_y():
    assert list(text_words("flies ")) == ["fly"]


def test_text_words_doubled_consonant():
    assert list(text_words("glasses ")) == ["glass"]


def test_text_words_keeps_ess_ending():
    assert list(text_words("less ")) == ["less"]


def test_text_words_needs_trailing_separator():
    assert list(text_words("word")) == []


def test_text_words_stops_at_nul():
    assert list(text_words("good \0bad ")) == ["good"]
    assert list(text_words("good\0bad ")) == []


def test_text_and_code_stop_lists_differ():
    assert list(text_words("often ")) == ["often"]
    assert list(code_words("often ")) == []


def test_code_words_plain():
    assert list(code_words("hello world ")) == ["hello", "world"]


def test_code_words_lowercases():
    assert list(code_words("HELLO world ")) == list(code_words("hello world "))


def test_code_words_assignment():
    assert list(code_words("x = y;")) == ["x", "=", "y", ";"]


def test_code_words_increment():
    assert list(code_words("i++;")) == ["i", "++", ";"]


def test_code_words_arrow_splits_operands():
    assert list(code_words("a->b")) == ["a", "b"]


def test_code_words_braces():
    assert list(code_words("{")) == ["{}"]


def test_code_words_call():
    assert list(code_words("foo(")) == ["foo", "()"]


def test_code_words_possessive_and_stop_word():
    assert list(code_words("it's")) == []
    assert list(code_words("the end ")) == ["end"]


def test_count_text_words_returns_highest_count():
    words = WordList()
    highest = count_text_words("apple banana apple ", words)
    assert highest == 2
    assert words.frequency("apple") == 2
    assert words.frequency("banana") == 1
    assert highest == words.max_frequency()


def test_count_text_words_accumulates_across_calls():
    words = WordList()
    count_text_words("apple ", words)
    assert count_text_words("apple ", words) == 2
    assert len(words) == 1


def test_count_code_words_counts_tokens():
    words = WordList()
    highest = count_code_words("x = x;", words)
    assert highest == 2
    assert words.frequency("x") == 2
    assert "=" in words
    assert ";" in words


def test_count_code_words_at_least_one():
    words = WordList()
    assert count_code_words("the ", words) == 1
    assert len(words) == 0


@pytest.mark.parametrize("counter", [count_text_words, count_code_words])
def test_count_rejects_empty_content(counter):
    with pytest.raises(ValueError):
        counter("", WordList())