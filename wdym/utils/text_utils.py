"""Text processing utilities."""

import unicodedata


def is_japanese_char(char: str) -> bool:
    """Check whether a character is hiragana, katakana or kanji."""
    return (
        "\u3040" <= char <= "\u309f"  # Hiragana
        or "\u30a0" <= char <= "\u30ff"  # Katakana
        or "\u4e00" <= char <= "\u9fff"  # Kanji
    )


def contains_japanese(text: str) -> bool:
    """Check whether text contains any Japanese script.

    Args:
        text: Input text

    Returns:
        True if at least one hiragana, katakana or kanji character is present
    """
    return any(is_japanese_char(char) for char in text)


def char_width(char: str) -> int:
    """Terminal cells taken by a character (2 for wide CJK, 0 for combining)."""
    if unicodedata.combining(char):
        return 0
    return 2 if unicodedata.east_asian_width(char) in ("W", "F") else 1


def display_width(text: str) -> int:
    """Terminal cells taken by a string."""
    return sum(char_width(char) for char in text)


def split_at_width(text: str, width: int) -> tuple[str, str]:
    """Split text so the head fits in ``width`` terminal cells.

    Args:
        text: Text to split
        width: Available cells

    Returns:
        (head, rest); head is empty if not even one character fits
    """
    used = 0
    for index, char in enumerate(text):
        cells = char_width(char)
        if used + cells > width:
            return text[:index], text[index:]
        used += cells
    return text, ""
