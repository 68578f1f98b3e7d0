"""Utility functions for wdym."""

from .logging_utils import configure_logging
from .text_utils import (
    char_width,
    contains_japanese,
    display_width,
    is_japanese_char,
    split_at_width,
)

__all__ = [
    "configure_logging",
    "char_width",
    "contains_japanese",
    "display_width",
    "is_japanese_char",
    "split_at_width",
]
