"""Protocol for the terminal the interaction loop draws on."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from wdym.models import InputEvent

if TYPE_CHECKING:
    from wdym.rendering.styled_text import TextBlock


class TerminalBackend(Protocol):
    """Interface between the interaction loop and a concrete terminal.

    Raw-mode entry/exit and screen buffer handling belong to the
    implementation; the loop only draws and reads.
    """

    def draw(self, blocks: list[TextBlock]) -> None:
        """Replace the screen contents with the given blocks.

        Args:
            blocks: Renderer output, header block first
        """
        ...

    def read_event(self) -> InputEvent:
        """Block until the next input event arrives.

        Returns:
            The event (key press, resize, mouse, paste)
        """
        ...
