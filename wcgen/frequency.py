"""Word frequency table that keeps words in order of first appearance."""

from __future__ import annotations

from collections.abc import Iterator


class WordList:
    """Distinct words with their occurrence counts, in first-seen order.

    Iterating yields ``(word, count)`` pairs in the order the words were
    first added.
    """

    def __init__(self) -> None:
        self._counts: dict[str, int] = {}

    def add(self, word: str) -> int:
        """Record one occurrence of ``word`` and return its new count."""
        count = self._counts.get(word, 0) + 1
        self._counts[word] = count
        return count

    def __len__(self) -> int:
        return len(self._counts)

    def __iter__(self) -> Iterator[tuple[str, int]]:
        return iter(self._counts.items())

    def __contains__(self, word: object) -> bool:
        return word in self._counts

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._counts!r})"

    def frequency(self, word: str) -> int:
        """Return how often ``word`` was added, or 0 if it never was."""
        return self._counts.get(word, 0)

    def max_frequency(self) -> int:
        """Return the highest count of any word, or 0 when empty."""
        return max(self._counts.values(), default=0)

    def top(self, k: int) -> list[tuple[str, int]]:
        """Return up to ``k`` words, most frequent first.

        Words with the same count keep their first-seen order.
        """
        if k < 1:
            raise ValueError(f"k must be at least 1, got {k}")
        ranked = sorted(self._counts.items(), key=lambda item: -item[1])
        return ranked[:k]