"""Styled text primitives produced by the renderer.

Backends decide how to display them: the curses terminal maps styles to
attributes, the console presenter drops them and prints plain text.
"""

from dataclasses import dataclass
from enum import Enum


class Color(Enum):
    """Foreground colours understood by the terminal backends."""

    BLUE = "blue"
    CYAN = "cyan"
    GREEN = "green"


class Alignment(Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


@dataclass(frozen=True)
class Style:
    """Text attributes for a span."""

    bold: bool = False
    italic: bool = False
    dim: bool = False
    underline: bool = False
    color: Color | None = None


PLAIN = Style()
BOLD = Style(bold=True)
ITALIC = Style(italic=True)
DIM = Style(dim=True)


@dataclass(frozen=True)
class Span:
    """A run of text sharing one style."""

    text: str
    style: Style = PLAIN


@dataclass(frozen=True)
class Line:
    """A sequence of spans displayed on one row."""

    spans: tuple[Span, ...] = ()
    alignment: Alignment = Alignment.LEFT

    @classmethod
    def of(cls, *parts: "Span | str", alignment: Alignment = Alignment.LEFT) -> "Line":
        """Build a line from spans and bare strings (bare strings get no style)."""
        spans = tuple(part if isinstance(part, Span) else Span(part) for part in parts)
        return cls(spans=spans, alignment=alignment)

    @property
    def plain(self) -> str:
        return "".join(span.text for span in self.spans)


@dataclass(frozen=True)
class TextBlock:
    """A group of body lines with optional edge titles.

    ``titles`` sit on the top edge and ``bottom_titles`` on the bottom edge;
    each title is placed according to its own alignment.
    """

    lines: tuple[Line, ...] = ()
    titles: tuple[Line, ...] = ()
    bottom_titles: tuple[Line, ...] = ()
    bordered: bool = False

    def plain_lines(self) -> list[str]:
        """Body lines without styling."""
        return [line.plain for line in self.lines]

    def plain_titles(self) -> list[str]:
        return [line.plain for line in (*self.titles, *self.bottom_titles)]
