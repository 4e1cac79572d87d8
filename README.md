# wcgen

Count the most frequent words in a set of documents and draw them as a word cloud.

wcgen reads plain text files, C++ source files or PDF documents and splits
them into words. It lower-cases them, folds common English plurals back to a
singular form ("houses" becomes "house", "flies" becomes "fly", "knives"
becomes "knife"), drops one-letter and very common words, and ranks what is
left by how often it appears.

## Installation

```
pip install .
```

Drawing images needs Pillow 10.1 or later, which is installed as a
dependency. PDF input runs the `pdftotext` program, which must be on your
`PATH`.

## Command line

```
wcgen [--type {text,cpp,pdf}] [-k N] FILE [FILE ...]
```

- `--type` says what kind of documents the files are: `text` (the default),
  `cpp` for C++ source, or `pdf`.
- `-k N` / `--top N` is how many of the most frequent words to list. When it
  is left out, the program prints how many distinct words it found and asks
  for a number between 1 and that count, asking again until it gets one.

Files that cannot be opened are reported on standard error and skipped. The
result is one line per word, most frequent first:

```
1   : house           : 2 times
2   : fly             : 1 times
```

The exit status is 0 on success, 1 when no words were found in the documents
(or input ended while asking for the number), and 2 when `-k` is outside
1 to the number of distinct words.

## Library use

Counting words:

```python
from wcgen.frequency import WordList
from wcgen.tokenize import count_text_words

words = WordList()
count_text_words("Houses and houses, flies and knives. ", words)

print(words.frequency("house"))   # 2
for word, count in words.top(2):
    print(word, count)
```

`WordList` keeps words in the order they were first added; `top(k)` ranks
them by count, keeping that order among equal counts, and raises
`ValueError` when `k` is below 1. It also supports `len()`, `in`, iteration
over `(word, count)` pairs and `max_frequency()`.

`wcgen.tokenize` also offers:

- `read_file(path)` – the file's lines joined without newlines, plus a
  trailing space;
- `extract_pdf_text(path)` – the text that `pdftotext` prints for a PDF;
- `text_words(content)` and `code_words(content)` – generators of the words
  of prose and of C++ source;
- `count_code_words(content, words)` – like `count_text_words`, with rules
  suited to C++ source that keep operators such as `++`, `->` and `<<` and
  brackets such as `()` and `{}` as words of their own.

Both counting functions raise `ValueError` for empty content.

Building a report from a list of paths, one per line:

```python
from wcgen.pipeline import top_words_report

print(top_words_report("notes.txt\nessay.txt", 10))
```

This prints numbered `rank word : count` lines. Paths that cannot be read are
skipped; `split_paths`, `collect_content` and `format_top_words` are the steps
it is built from.

Drawing a word cloud image:

```python
from wcgen.render import render_word_cloud

image_path = render_word_cloud([("house", 5), ("fly", 3), ("knife", 1)], "out", seed=1)
```

The picture is 1200 by 800 pixels on white. Font size grows linearly with
frequency, from 30 to 200 (`font_size`), and colours follow a fixed palette
(`word_color`). `layout_words` places each distinct word, in alphabetical
order, at a random spot where it overlaps no earlier word, returning
`PlacedWord` records; it raises `RuntimeError` if a word cannot be fitted.
The image is written as `Output.png` in the given directory, and its path is
returned.

## What it does not do

There is no graphical window: files are chosen on the command line, and the
`wcgen` command only lists words — it does not draw a word cloud. Images are
made by calling `render_word_cloud` from Python; the finished file is saved
but not opened in a viewer.