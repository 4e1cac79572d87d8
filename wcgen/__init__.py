"""Word frequency counting, ranking and word cloud images for text, C++ and PDF documents."""

__version__ = "0.1.0"