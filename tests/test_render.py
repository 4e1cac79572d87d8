import random

import pytest
from PIL import Image

from wcgen.render import (
    PlacedWord,
    font_size,
    layout_words,
    render_word_cloud,
    word_color,
)

ENTRIES = [("tree", 5), ("apple", 3), ("river", 1), ("stone", 2)]


def _overlap(a, b):
    return a[0] < b[2] and b[0] < a[2] and a[1] < b[3] and b[1] < a[3]


def test_font_size_bounds():
    assert font_size(7, 7) == 200
    assert font_size(0, 7) == 30


def test_font_size_grows_with_frequency():
    sizes = [font_size(f, 10) for f in range(1, 11)]
    assert sizes == sorted(sizes)
    assert all(30 <= s <= 200 for s in sizes)


def test_font_size_rejects_zero_maximum():
    with pytest.raises(ValueError):
        font_size(1, 0)


def test_word_color_sequence():
    assert word_color(0) == (255, 0, 0)
    assert word_color(1) == (0, 255, 0)
    assert word_color(6) == word_color(1)
    assert word_color(10) == word_color(5)


def test_first_color_not_reused():
    assert all(word_color(i) != word_color(0) for i in range(1, 20))


def test_word_color_rejects_negative():
    with pytest.raises(ValueError):
        word_color(-1)


def test_layout_empty():
    assert layout_words([], 1200, 800, random.Random(1)) == []


def test_layout_sorted_and_deduplicated():
    entries = ENTRIES + [("apple", 9)]
    placed = layout_words(entries, 1200, 800, random.Random(3))
    assert [p.word for p in placed] == ["apple", "river", "stone", "tree"]
    assert placed[0].frequency == 3
    assert all(isinstance(p, PlacedWord) for p in placed)


def test_layout_no_overlap_and_sizes():
    placed = layout_words(ENTRIES, 1200, 800, random.Random(5))
    for i, a in enumerate(placed):
        for b in placed[i + 1:]:
            assert not _overlap(a.box, b.box)
    tree = next(p for p in placed if p.word == "tree")
    assert tree.size == 200
    assert [p.color for p in placed] == [word_color(i) for i in range(len(placed))]


def test_layout_deterministic_for_seed():
    first = layout_words(ENTRIES, 1200, 800, random.Random(42))
    second = layout_words(ENTRIES, 1200, 800, random.Random(42))
    assert first == second


def test_render_writes_png(tmp_path):
    path = render_word_cloud(ENTRIES, tmp_path, seed=7)
    assert path == tmp_path / "Output.png"
    with Image.open(path) as image:
        assert image.size == (1200, 800)
        assert image.format == "PNG"
        colors = {c for _, c in image.getcolors(maxcolors=1_000_000)}
        assert (255, 255, 255) in colors
        assert len(colors) > 1


def test_render_empty_is_blank(tmp_path):
    path = render_word_cloud([], tmp_path, seed=1)
    with Image.open(path) as image:
        assert image.getcolors() == [(1200 * 800, (255, 255, 255))]