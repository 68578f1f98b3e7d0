"""Main CLI entry point for wdym."""

import argparse
import sys

from wdym import __version__
from wdym.cli.commands import lookup
from wdym.models import ProviderId
from wdym.models.search import DEFAULT_PROVIDER


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the wdym command."""
    parser = argparse.ArgumentParser(
        prog="wdym",
        description="What Do You Mean? Look up a word or sentence from the terminal",
        epilog="Press 'q' to leave the interactive view",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    parser.add_argument("query", help="Word or sentence to look up")
    parser.add_argument(
        "-s",
        "--source-lang",
        default=None,
        help="Language of the query (code, name or locale, e.g. 'en', 'English', 'en_US.UTF-8'); "
        "detected by the provider when omitted",
    )
    parser.add_argument(
        "-d",
        "--dest-lang",
        default=None,
        help="Language to translate into (code, name or locale)",
    )
    parser.add_argument(
        "-p",
        "--provider",
        default=DEFAULT_PROVIDER.value,
        choices=[provider.value for provider in ProviderId],
        help=f"Lookup provider (default: {DEFAULT_PROVIDER.value})",
    )
    parser.add_argument(
        "--print",
        dest="print_only",
        action="store_true",
        help="Print the result as plain text instead of opening the interactive view",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Provider request timeout in seconds (default: wait indefinitely)",
    )
    parser.add_argument("--log-file", default=None, help="Append log records to this file")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Logging level (default: WARNING)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    return lookup.lookup_command(args)


if __name__ == "__main__":
    sys.exit(main())
