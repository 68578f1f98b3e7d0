"""Terminal input events consumed by the interaction loop."""

from dataclasses import dataclass


@dataclass(frozen=True)
class KeyEvent:
    """A key press. ``key`` is the character, or a curses key name."""

    key: str


@dataclass(frozen=True)
class ResizeEvent:
    """The terminal was resized."""

    pass


@dataclass(frozen=True)
class MouseEvent:
    """Any mouse activity."""

    pass


@dataclass(frozen=True)
class PasteEvent:
    """Bracketed paste content."""

    text: str = ""


InputEvent = KeyEvent | ResizeEvent | MouseEvent | PasteEvent
