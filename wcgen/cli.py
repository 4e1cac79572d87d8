"""Command line for ranking the most frequent words of documents."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from wcgen.frequency import WordList
from wcgen.tokenize import (
    count_code_words,
    count_text_words,
    extract_pdf_text,
    read_file,
)

BANNER = "<<----- WELCOME TO THE WORD CLOUD GENERATOR ----->>"
_TEXT, _CPP, _PDF = "text", "cpp", "pdf"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wcgen",
        description="List the most frequent words of text, C++ or PDF documents.",
    )
    parser.add_argument(
        "--type",
        choices=(_TEXT, _CPP, _PDF),
        default=_TEXT,
        help="kind of the documents (default: text)",
    )
    parser.add_argument(
        "-k",
        "--top",
        type=int,
        dest="k",
        help="number of words to list; asked for when omitted",
    )
    parser.add_argument("files", nargs="+", help="documents to read")
    return parser


def _gather(kind: str, files: Sequence[str]) -> str:
    parts = []
    for path in files:
        if kind == _PDF:
            try:
                parts.append(extract_pdf_text(path))
            except OSError:
                print(f"Error opening pipe for {path}", file=sys.stderr)
        else:
            try:
                parts.append(read_file(path))
            except OSError:
                print(f"Error opening file: {path}", file=sys.stderr)
    return "".join(parts)


def _ask_k(total: int) -> int:
    prompt = "How many words you want for this generator : "
    while True:
        answer = input(prompt)
        try:
            k = int(answer.strip())
        except ValueError:
            k = 0
        if 1 <= k <= total:
            return k
        prompt = f"Please enter valid input between  1 to {total} : "


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command and return its exit status."""
    args = _build_parser().parse_args(argv)
    print(f"\n\n{BANNER}\n")

    content = _gather(args.type, args.files)
    words = WordList()
    if content:
        counter = count_code_words if args.type == _CPP else count_text_words
        counter(content, words)
    if not words:
        print("\nYour docs content is empty.")
        return 1

    total = len(words)
    print(f"There are total {total} distinct words.")
    if args.k is None:
        try:
            k = _ask_k(total)
        except EOFError:
            return 1
    else:
        k = args.k
        if not 1 <= k <= total:
            print(
                f"Please enter valid input between  1 to {total}", file=sys.stderr
            )
            return 2

    for rank, (word, count) in enumerate(words.top(k), start=1):
        print(f"{rank:<3} : {word:<15} : {count} times")
    print("\nThank you !")
    return 0


if __name__ == "__main__":
    sys.exit(main())