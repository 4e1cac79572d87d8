"""Laying out counted words and drawing them as a word-cloud image."""

from __future__ import annotations

import os
import random
from collections.abc import Iterable
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from PIL import Image, ImageDraw, ImageFont

MIN_FONT_SIZE = 30
MAX_FONT_SIZE = 200
IMAGE_WIDTH = 1200
IMAGE_HEIGHT = 800
MARGIN = 50
OUTPUT_NAME = "Output.png"
MAX_ATTEMPTS = 100_000

Color = tuple[int, int, int]
Box = tuple[float, float, float, float]

RED: Color = (255, 0, 0)
GREEN: Color = (0, 255, 0)
BLUE: Color = (0, 0, 255)
BLACK: Color = (0, 0, 0)
YELLOW: Color = (255, 255, 0)
MAGENTA: Color = (255, 0, 255)
WHITE: Color = (255, 255, 255)

_PALETTE: tuple[Color, ...] = (RED, GREEN, BLUE, BLACK, YELLOW, MAGENTA)


@dataclass(frozen=True)
class PlacedWord:
    """A word positioned on the canvas, with its box as (left, top, right, bottom)."""

    word: str
    frequency: int
    size: int
    color: Color
    position: tuple[int, int]
    box: Box


def font_size(frequency: int, max_frequency: int) -> int:
    """Scale a frequency linearly between the minimum and maximum font sizes."""
    if max_frequency <= 0:
        raise ValueError(f"max_frequency must be positive, got {max_frequency}")
    ratio = frequency / max_frequency
    return int(MIN_FONT_SIZE + (MAX_FONT_SIZE - MIN_FONT_SIZE) * ratio)


def word_color(index: int) -> Color:
    """Return the colour of the word drawn at position ``index``.

    The first word is red; after that the colours cycle through
    green, blue, black, yellow and magenta.
    """
    if index < 0:
        raise ValueError(f"index must not be negative, got {index}")
    if index == 0:
        return _PALETTE[0]
    return _PALETTE[(index - 1) % (len(_PALETTE) - 1) + 1]


@lru_cache(maxsize=None)
def _font(size: int) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
    return ImageFont.load_default(size=size)


def _intersects(a: Box, b: Box) -> bool:
    return a[0] < b[2] and b[0] < a[2] and a[1] < b[3] and b[1] < a[3]


def _unique_sorted(entries: Iterable[tuple[str, int]]) -> list[tuple[str, int]]:
    seen: dict[str, int] = {}
    for word, frequency in entries:
        seen.setdefault(word, frequency)
    return sorted(seen.items())


def layout_words(
    entries: Iterable[tuple[str, int]],
    width: int,
    height: int,
    rng: random.Random,
) -> list[PlacedWord]:
    """Place each distinct word at a random spot where it overlaps no earlier word.

    Words are placed in alphabetical order; the first occurrence of a repeated
    word wins. Every word after the first must also touch the canvas less a
    margin on the right and bottom. Raises RuntimeError when a word cannot be
    placed.
    """
    items = _unique_sorted(entries)
    if not items:
        return []
    highest = max(frequency for _, frequency in items)
    window: Box = (0, 0, width - MARGIN, height - MARGIN)

    placed: list[PlacedWord] = []
    for index, (word, frequency) in enumerate(items):
        size = font_size(frequency, highest)
        left, top, right, bottom = _font(size).getbbox(word)
        for _ in range(MAX_ATTEMPTS):
            x, y = rng.randrange(width), rng.randrange(height)
            box: Box = (x + left, y + top, x + right, y + bottom)
            if not any(
                _intersects(box, other.box) or not _intersects(box, window)
                for other in placed
            ):
                break
        else:
            raise RuntimeError(f"could not find room for {word!r}")
        placed.append(
            PlacedWord(word, frequency, size, word_color(index), (x, y), box)
        )
    return placed


def render_word_cloud(
    entries: Iterable[tuple[str, int]],
    output_dir: str | os.PathLike[str],
    seed: int | None = None,
) -> Path:
    """Draw the words on a white canvas and save it as Output.png in ``output_dir``.

    Returns the path of the written image.
    """
    rng = random.Random(seed)
    image = Image.new("RGB", (IMAGE_WIDTH, IMAGE_HEIGHT), WHITE)
    draw = ImageDraw.Draw(image)
    for placed in layout_words(entries, IMAGE_WIDTH, IMAGE_HEIGHT, rng):
        draw.text(placed.position, placed.word, fill=placed.color, font=_font(placed.size))
    target = Path(output_dir) / OUTPUT_NAME
    image.save(target, format="PNG")
    return target