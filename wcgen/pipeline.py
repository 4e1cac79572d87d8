"""Turning a list of document paths into a ranked report of their words."""

from __future__ import annotations

from collections.abc import Iterable

from wcgen.frequency import WordList
from wcgen.tokenize import count_text_words, read_file


def split_paths(data: str) -> list[str]:
    """Split newline-separated paths into a list, one entry per line.

    A trailing newline does not produce an empty final entry.
    """
    lines = data.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def collect_content(paths: Iterable[str]) -> str:
    """Read every path and join their contents, each followed by a space.

    Paths that cannot be read contribute nothing.
    """
    parts = []
    for path in paths:
        try:
            parts.append(read_file(path) + " ")
        except OSError:
            continue
    return "".join(parts)


def format_top_words(entries: Iterable[tuple[str, int]]) -> str:
    """Render ranked words as numbered ``rank word : count`` lines."""
    return "".join(
        f"{rank} {word} : {count}\n"
        for rank, (word, count) in enumerate(entries, start=1)
    )


def top_words_report(paths_text: str, k: int) -> str:
    """Count the prose words of the listed files and report the ``k`` most frequent.

    Raises ValueError when no content could be read or ``k`` is below 1.
    """
    content = collect_content(split_paths(paths_text))
    words = WordList()
    count_text_words(content, words)
    return format_top_words(words.top(k))