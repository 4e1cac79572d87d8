"""Reading documents and splitting them into counted words."""

from __future__ import annotations

import os
import subprocess
from collections.abc import Iterator

from wcgen.frequency import WordList

_TEXT_SEPARATORS = frozenset(" \t\n.,?!\"'({[)}]")

_TEXT_STOP_WORDS = frozenset(
    {
        ",", ".", " ", ";", "", "is", "i", "a", "my", "were", "has", "we",
        "every", "an", "the", "of", "from", "to", "when", "will", "be", "but",
        "in", "and", "for", "you", "are", "if", "while", "not", "been",
        "other", "need", "also", "it", "without", "itself", "etc", "which",
        "common", "commonly", "with", "like", "so", "may", "as", "this", "or",
        "that", "more", "any", "many", "some", "have", "am", "their", "only",
        "these", "on", "they", "there", "was", "her", "she", "upon", "once",
        "at", "about", "than", "our", "through", "them", "then", "by", "can",
        "s",
    }
)

_CODE_STOP_WORDS = frozenset(
    {
        ",", ".", " ", "", "is", "my", "were", "has", "we", "an", "the", "of",
        "from", "to", "when", "often", "will", "also", "be", "but", "in",
        "without", "it", "and", "you", "are", "etc", "which", "common",
        "commonly", "with", "like", "so", "been", "may", "as", "this", "or",
        "that", "other", "more", "any", "many", "some", "not", "itself",
        "have", "am", "their", "only", "these", "on", "they", "there", "was",
        "her", "she", "alway", "always", "upon", "once", "at", "own", "about",
        "than", "our", "through", "them", "then", "by", "can",
    }
)

_BEFORE_IES = frozenset("bcdfglmnpstaeiou")
_BEFORE_VES_TO_F = frozenset("loear")
_BEFORE_PLURAL_S = frozenset("tykndgolwmer")
_CODE_SKIPPED = frozenset("\t')}\"_<>")
_SEMICOLON_BLOCKERS = frozenset("\t();}\"")
_CODE_OPERATORS = frozenset(";+=-*")
_SHIFT_OR_STEP = frozenset("<>+-")
_STRIP_AT_LINE_END = str.maketrans("", "", ".(,'`\t_")


def read_file(path: str | os.PathLike[str]) -> str:
    """Return a file's lines joined without newlines, followed by one space.

    Raises OSError when the file cannot be opened.
    """
    with open(path, encoding="utf-8", errors="replace", newline="") as handle:
        return handle.read().replace("\n", "") + " "


def extract_pdf_text(path: str | os.PathLike[str]) -> str:
    """Return the text of a PDF as printed by the ``pdftotext`` tool.

    Raises OSError when the tool cannot be started.
    """
    result = subprocess.run(
        ["pdftotext", os.fspath(path), "-"],
        capture_output=True,
        text=True,
        encoding="utf-8",
        errors="replace",
        check=False,
    )
    return result.stdout


def _at(chars: list[str], index: int) -> str:
    return chars[index] if 0 <= index < len(chars) else "\0"


def _lower(char: str) -> str:
    return chr(ord(char) + 32) if "A" <= char <= "Z" else char


def _is_letter(char: str) -> bool:
    return "a" <= char <= "z" or "A" <= char <= "Z"


def _is_lower(char: str) -> bool:
    return "a" <= char <= "z"


def _suffix_step(chars: list[str], i: int, word: str) -> tuple[str, int] | None:
    """Apply the plural-stripping rules at position ``i``.

    Returns the finished word and the last consumed position, or None when
    no rule applies.
    """
    c = chars[i]
    prev, prev2 = _at(chars, i - 1), _at(chars, i - 2)
    next1, next2, next3 = _at(chars, i + 1), _at(chars, i + 2), _at(chars, i + 3)

    if c == "e" and next1 == "s" and next2 == "s" and not _is_letter(next3):
        return word + "ess", i + 3
    if prev == c and next1 == "e" and next2 == "s" and not _is_letter(next3):
        return word + c, i + 2
    if c == "v" and next1 == "e" and next2 == "s":
        if prev == "i" and prev2 != "r":
            return word + "fe", i + 2
        if prev in _BEFORE_VES_TO_F and prev2 != "o":
            return word + "f", i + 2
        return word + c + next1, i + 2
    if (
        c == "i"
        and next1 == "e"
        and next2 == "s"
        and not _is_letter(next3)
        and prev in _BEFORE_IES
    ):
        return word + "y", i + 2
    if c == "s" and not _is_letter(next1) and prev in _BEFORE_PLURAL_S:
        return word, i
    return None


def text_words(content: str) -> Iterator[str]:
    """Yield the words of prose, lower-cased and with plurals reduced.

    Short words and common stop words ending at punctuation or whitespace
    are dropped. A NUL character ends the scan.
    """
    chars = list(content)
    word = ""
    i = 0
    while i < len(chars):
        c = chars[i] = _lower(chars[i])
        if c in _TEXT_SEPARATORS:
            if len(word) > 1 and word not in _TEXT_STOP_WORDS:
                yield word
            word = ""
        elif (step := _suffix_step(chars, i, word)) is not None:
            word, i = step
            yield word
            word = ""
        elif c == "\0":
            return
        else:
            word += c
        i += 1


def _blocks_semicolon(char: str) -> bool:
    return char in _SEMICOLON_BLOCKERS or ord(char) >= 128


def _code_step(chars: list[str], i: int, word: str) -> tuple[str, int, bool]:
    """Scan one position of source code.

    Returns the word so far, the last consumed position and whether the
    word is complete.
    """
    n = len(chars)
    chars[i] = _lower(chars[i])

    def at(offset: int = 0) -> str:
        return _at(chars, i + offset)

    c = at()
    if c == "'" and at(1) in ("s", "S"):
        return word, i + 1, False
    if at(1) == ";":
        if not _blocks_semicolon(c):
            word += c
        return word, i, True
    if c in _CODE_SKIPPED or ord(c) >= 128:
        return word, i, False
    if at(1) == "{":
        return word + c, i, True
    if c == "-" and at(1) == ">":
        return word, i, True

    step = _suffix_step(chars, i, word)
    if step is not None:
        return step[0], step[1], True

    if c in ("+", "-") and at(1) in _SHIFT_OR_STEP:
        return word + c + chars[i + 1], i + 1, True
    if c in _CODE_OPERATORS or (
        c == "/"
        and ((at(1) != "+" and at(-1) == "+") or (at(-1) != "-" and at(1) == "-"))
    ):
        return word + c, i, True

    if c == "[":
        try:
            close = chars.index("]", i)
        except ValueError:
            return word, n, False
        word += "".join(chars[i:close])
        i = close
        c = at()

    if c == "{":
        return "{}", i, True
    if at(-1) == "\\" and c == "n":
        return word + c, i, True
    if _is_lower(c) and not _is_letter(at(1)):
        return word + c, i, True
    if c == "(":
        return word + "()", i, True
    if at(1) == ";" and not _blocks_semicolon(c):
        return word + c, i, True
    if c in (":", "="):
        return word + c, i, True
    if c == "\n" or (_is_lower(c) and at(1) == "\n"):
        return word, i + 1, False
    if c in (".", ",") and at(1) == " " and i != n - 1:
        return word, i + 1, True

    if c != " ":
        word += c
    if (c in (".", ",") and i == n - 1) or c == "." or at(1) == "\n":
        return word.translate(_STRIP_AT_LINE_END), i, True
    if c == " " or (_is_lower(c) and (i == n - 1 or at(1) == "\t")):
        return word, i, True
    return word, i, False


def code_words(content: str) -> Iterator[str]:
    """Yield the tokens of program source: identifiers, operators and brackets.

    Identifiers are lower-cased and stop words are dropped.
    """
    chars = list(content)
    word = ""
    i = 0
    while i < len(chars):
        word, i, complete = _code_step(chars, i, word)
        if complete:
            if word not in _CODE_STOP_WORDS:
                yield word
            word = ""
        i += 1


def count_text_words(content: str, words: WordList) -> int:
    """Add the prose words of ``content`` to ``words``.

    Returns the highest count reached by a word added here, or 0 if none.
    Raises ValueError for empty content.
    """
    if not content:
        raise ValueError("the document content is empty")
    highest = 0
    for word in text_words(content):
        highest = max(highest, words.add(word))
    return highest


def count_code_words(content: str, words: WordList) -> int:
    """Add the source-code tokens of ``content`` to ``words``.

    Returns the highest count reached by a token added here, at least 1.
    Raises ValueError for empty content.
    """
    if not content:
        raise ValueError("the document content is empty")
    highest = 1
    for word in code_words(content):
        highest = max(highest, words.add(word))
    return highest