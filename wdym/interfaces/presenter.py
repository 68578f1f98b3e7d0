"""Presenter protocol for non-interactive output."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from wdym.rendering.styled_text import TextBlock


class PresenterProtocol(Protocol):
    """Interface for presenting messages and rendered blocks to the user.

    Used by the CLI outside the interactive loop: startup errors, lookup
    failures and ``--print`` mode output.
    """

    def show_error(self, message: str) -> None:
        """Display an error message.

        Args:
            message: The error message to display
        """
        ...

    def show_blocks(self, blocks: list[TextBlock]) -> None:
        """Display rendered blocks.

        Args:
            blocks: Renderer output
        """
        ...
