"""Rendering pipeline: phase + search config + result to styled text."""

from .renderer import APP_TITLE, QUIT_HINT, render, render_header
from .result_formatter import format_result
from .styled_text import Alignment, Color, Line, Span, Style, TextBlock

__all__ = [
    "APP_TITLE",
    "QUIT_HINT",
    "render",
    "render_header",
    "format_result",
    "Alignment",
    "Color",
    "Line",
    "Span",
    "Style",
    "TextBlock",
]
