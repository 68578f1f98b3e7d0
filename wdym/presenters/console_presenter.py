"""Console presenter for non-interactive CLI output."""

from wdym.rendering.styled_text import Alignment, TextBlock


class ConsolePresenter:
    """Present output to console (plain text, no styling)."""

    def show_error(self, message: str) -> None:
        """Display an error message."""
        print(f"[ERROR] {message}")

    def show_blocks(self, blocks: list[TextBlock]) -> None:
        """Display rendered blocks as plain text.

        The header's top titles are printed on one line (the quit hint is
        left out since nothing is interactive here); body blocks follow,
        separated by blank lines.
        """
        if not blocks:
            return

        header, body = blocks[0], blocks[1:]
        left = [t.plain for t in header.titles if t.alignment is not Alignment.RIGHT]
        right = [t.plain for t in header.titles if t.alignment is Alignment.RIGHT]
        print(" | ".join(left + right))
        print("=" * 60)

        for index, block in enumerate(body):
            if index > 0:
                print()
            for line in block.plain_lines():
                print(line)
