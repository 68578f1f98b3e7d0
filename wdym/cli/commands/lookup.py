"""CLI command for looking up a query."""

import logging

from wdym.app import LookupApp
from wdym.config import create_default_config
from wdym.exceptions import LanguageParseError, WdymException
from wdym.interfaces import PresenterProtocol
from wdym.models import LanguageId, SearchConfig
from wdym.presenters import ConsolePresenter, run_interactive
from wdym.services import create_provider, parse_provider_id, resolve
from wdym.utils import configure_logging

logger = logging.getLogger(__name__)


def build_search_config(args) -> SearchConfig:
    """Resolve command-line arguments into a SearchConfig.

    Args:
        args: Parsed command-line arguments

    Returns:
        SearchConfig with resolved languages

    Raises:
        LanguageParseError: If either language flag names no known language
    """
    return SearchConfig(
        query=args.query,
        source_language=_resolve_flag(args.source_lang),
        target_language=_resolve_flag(args.dest_lang),
        provider=parse_provider_id(args.provider),
    )


def _resolve_flag(token: str | None) -> LanguageId | None:
    if token is None:
        return None
    return resolve(token)


def lookup_command(args) -> int:
    """Execute the lookup command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    config = create_default_config(
        request_timeout=args.timeout,
        log_file=args.log_file,
        log_level=args.log_level,
    )
    configure_logging(config.log_level, config.log_file, console=args.print_only)

    presenter = ConsolePresenter()

    # Invalid languages must never reach the state machine
    try:
        search_config = build_search_config(args)
    except LanguageParseError as e:
        presenter.show_error(str(e))
        return 1

    try:
        provider = create_provider(search_config.provider, config)
        app = LookupApp(search_config, provider)

        if args.print_only:
            _print_result(app, presenter)
        else:
            run_interactive(app)

        return 0

    except WdymException as e:
        presenter.show_error(f"Error: {e}")
        return 1
    except KeyboardInterrupt:
        return 130
    except Exception as e:
        logger.exception("Unexpected error during lookup")
        presenter.show_error(f"Unexpected error: {e}")
        return 1


def _print_result(app: LookupApp, presenter: PresenterProtocol) -> None:
    """Run the lookup without a screen and print the final frame."""
    app.run_until_idle()
    if app.error is not None:
        raise app.error
    presenter.show_blocks(app.view())
