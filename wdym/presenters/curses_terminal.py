"""Curses implementation of the terminal backend."""

import curses
import logging
import sys

from wdym.models import InputEvent, KeyEvent, MouseEvent, PasteEvent, ResizeEvent
from wdym.rendering.styled_text import Alignment, Color, Line, Style, TextBlock
from wdym.utils.text_utils import display_width, split_at_width

logger = logging.getLogger(__name__)

_COLOR_PAIRS = {
    Color.BLUE: (1, curses.COLOR_BLUE),
    Color.CYAN: (2, curses.COLOR_CYAN),
    Color.GREEN: (3, curses.COLOR_GREEN),
}

Cell = tuple[str, int]  # (text, curses attribute)

# Bracketed paste markers; curses hands them over as raw characters
_PASTE_START = "[200~"
_PASTE_END = "\x1b[201~"


class CursesTerminal:
    """Draw rendered blocks on a curses screen and read input from it.

    The first block is drawn as a rounded frame around the whole screen with
    its titles on the top and bottom edges; the remaining blocks fill the
    frame, separated by blank rows and wrapped to its width.

    Implements TerminalBackend protocol.
    """

    def __init__(self, screen):
        """Prepare the screen.

        Args:
            screen: The curses window, as passed by ``curses.wrapper``
        """
        self._screen = screen
        self._colors = False
        self._screen.keypad(True)

        try:
            curses.curs_set(0)
        except curses.error:
            logger.debug("Terminal cannot hide the cursor")

        if curses.has_colors():
            curses.start_color()
            background = -1
            try:
                curses.use_default_colors()
            except curses.error:
                background = curses.COLOR_BLACK
            for pair, color in _COLOR_PAIRS.values():
                curses.init_pair(pair, color, background)
            self._colors = True

        curses.mousemask(curses.ALL_MOUSE_EVENTS)

    def draw(self, blocks: list[TextBlock]) -> None:
        """Replace the screen contents with the given blocks."""
        self._screen.erase()
        height, width = self._screen.getmaxyx()

        if blocks and height >= 3 and width >= 6:
            header, body = blocks[0], blocks[1:]
            self._draw_frame(header, height, width)
            self._draw_body(body, top=1, bottom=height - 2, left=2, width=width - 4)

        self._screen.refresh()

    def read_event(self) -> InputEvent:
        """Block until a key, paste, resize or mouse event arrives."""
        try:
            key = self._screen.get_wch()
        except curses.error:
            # Interrupted by a signal, typically SIGWINCH
            return ResizeEvent()

        if key == curses.KEY_RESIZE:
            return ResizeEvent()
        if key == curses.KEY_MOUSE:
            return MouseEvent()
        if key == "\x1b":
            return self._read_escape()
        if isinstance(key, str):
            return KeyEvent(key)
        return KeyEvent(curses.keyname(key).decode("ascii", "replace"))

    def set_bracketed_paste(self, enabled: bool) -> None:
        """Ask the terminal to wrap pasted text in paste markers.

        Without this a paste arrives as individual key presses, so pasting
        text containing the quit key would end the session.
        """
        sys.stdout.write("\x1b[?2004h" if enabled else "\x1b[?2004l")
        sys.stdout.flush()

    def _read_escape(self) -> InputEvent:
        # Only characters already buffered belong to the sequence
        follow = ""
        self._screen.nodelay(True)
        try:
            while len(follow) < len(_PASTE_START) and _PASTE_START.startswith(follow):
                try:
                    char = self._screen.get_wch()
                except curses.error:
                    break
                if not isinstance(char, str):
                    break
                follow += char
        finally:
            self._screen.nodelay(False)

        if follow == _PASTE_START:
            return PasteEvent(self._read_paste())
        return KeyEvent("\x1b" + follow)

    def _read_paste(self) -> str:
        text = ""
        while not text.endswith(_PASTE_END):
            try:
                char = self._screen.get_wch()
            except curses.error:
                logger.debug("Paste interrupted before its end marker")
                return text
            if isinstance(char, str):
                text += char
        return text[: -len(_PASTE_END)]

    def _draw_frame(self, header: TextBlock, height: int, width: int) -> None:
        self._screen.border(0)
        for line in header.titles:
            self._put_aligned(0, line, width)
        for line in header.bottom_titles:
            self._put_aligned(height - 1, line, width)

    def _draw_body(self, blocks: list[TextBlock], top: int, bottom: int, left: int, width: int) -> None:
        rows: list[list[Cell]] = []
        for index, block in enumerate(blocks):
            if index > 0:
                rows.append([])
            for line in block.lines:
                rows.extend(self._wrap(line, width))

        for offset, cells in enumerate(rows[: max(bottom - top + 1, 0)]):
            x = left
            for text, attr in cells:
                self._addstr(top + offset, x, text, attr)
                x += display_width(text)

    def _put_aligned(self, y: int, line: Line, width: int) -> None:
        inner = width - 4
        cells = self._wrap(line, inner)[0]
        used = sum(display_width(text) for text, _ in cells)
        if line.alignment is Alignment.CENTER:
            x = 2 + (inner - used) // 2
        elif line.alignment is Alignment.RIGHT:
            x = 2 + inner - used
        else:
            x = 2
        for text, attr in cells:
            self._addstr(y, x, text, attr)
            x += display_width(text)

    def _wrap(self, line: Line, width: int) -> list[list[Cell]]:
        """Break a line into rows of at most ``width`` cells, keeping styles."""
        rows: list[list[Cell]] = [[]]
        used = 0
        for span in line.spans:
            attr = self._attr(span.style)
            text = span.text
            while text:
                head, text = split_at_width(text, width - used)
                if not head:
                    if used == 0:
                        # A single character wider than the whole row
                        head, text = text[0], text[1:]
                    else:
                        rows.append([])
                        used = 0
                        continue
                rows[-1].append((head, attr))
                used += display_width(head)
        return rows

    def _attr(self, style: Style) -> int:
        attr = curses.A_NORMAL
        if style.bold:
            attr |= curses.A_BOLD
        if style.italic:
            attr |= getattr(curses, "A_ITALIC", curses.A_NORMAL)
        if style.dim:
            attr |= curses.A_DIM
        if style.underline:
            attr |= curses.A_UNDERLINE
        if style.color is not None and self._colors:
            attr |= curses.color_pair(_COLOR_PAIRS[style.color][0])
        return attr

    def _addstr(self, y: int, x: int, text: str, attr: int) -> None:
        try:
            self._screen.addstr(y, x, text, attr)
        except curses.error:
            # Writing the bottom-right cell moves the cursor off screen
            # and reports an error after the text is drawn
            pass


def run_interactive(app) -> None:
    """Run ``app`` inside a curses session.

    ``curses.wrapper`` restores the terminal before any exception from the
    app propagates.

    Args:
        app: A LookupApp
    """
    curses.wrapper(lambda screen: _run_session(app, CursesTerminal(screen)))


def _run_session(app, terminal: CursesTerminal) -> None:
    terminal.set_bracketed_paste(True)
    try:
        app.run(terminal)
    finally:
        terminal.set_bracketed_paste(False)
