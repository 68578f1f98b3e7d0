"""Presenter and terminal implementations for output handling."""

from .console_presenter import ConsolePresenter
from .curses_terminal import CursesTerminal, run_interactive

__all__ = ["ConsolePresenter", "CursesTerminal", "run_interactive"]
