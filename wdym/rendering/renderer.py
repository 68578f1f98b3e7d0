"""Render the interaction state as styled text blocks.

``render`` is a pure function: it performs no I/O and returns equal output
for equal input, so the loop can call it on every tick.
"""

from wdym.exceptions import InvalidPhaseError
from wdym.models import UNDETERMINED, LanguageId, LookupResult, Phase, SearchConfig
from wdym.services.language_resolver import display_name, resolve_or_undetermined

from .result_formatter import format_result
from .styled_text import BOLD, ITALIC, Alignment, Color, Line, Span, Style, TextBlock

APP_TITLE = "What Do You Mean?"
QUIT_HINT = "Press <q> to quit"


def render(phase: Phase, config: SearchConfig, result: LookupResult | None = None) -> list[TextBlock]:
    """Render one frame.

    Args:
        phase: Current interaction phase
        config: The search being run
        result: The held result; required in the RESULT phase

    Returns:
        Header block followed by body blocks; empty once FINISHED

    Raises:
        InvalidPhaseError: If phase is RESULT and no result is given
    """
    if phase is Phase.FINISHED:
        return []

    if phase is Phase.RESULT:
        if result is None:
            raise InvalidPhaseError("the RESULT phase was rendered without a result")
        return [render_header(config, result), *format_result(result)]

    if phase is Phase.START:
        body = Line.of(Span("Starting", ITALIC))
    else:
        body = Line.of(
            Span("Searching for: ", ITALIC),
            Span(config.query, Style(bold=True, italic=True)),
        )
    return [render_header(config), TextBlock(lines=(body,))]


def render_header(config: SearchConfig, result: LookupResult | None = None) -> TextBlock:
    """Title and quit hint; once a result exists, provider and languages too."""
    titles = [Line.of(Span(APP_TITLE, BOLD), alignment=Alignment.CENTER)]
    quit_hint = Line.of(QUIT_HINT, alignment=Alignment.CENTER)

    if result is not None:
        titles.append(Line.of(Span(result.provider.display_name, Style(bold=True, color=Color.CYAN))))
        titles.append(language_indicator(config, result))

    return TextBlock(titles=tuple(titles), bottom_titles=(quit_hint,), bordered=True)


def language_indicator(config: SearchConfig, result: LookupResult) -> Line:
    """Right-aligned "source -> target" line."""
    source = source_language(config, result)
    target = config.target_language or UNDETERMINED
    language_style = Style(italic=True, color=Color.CYAN)
    return Line.of(
        Span(display_name(source), language_style),
        Span(" -> ", Style(dim=True, color=Color.CYAN)),
        Span(display_name(target), language_style),
        alignment=Alignment.RIGHT,
    )


def source_language(config: SearchConfig, result: LookupResult) -> LanguageId:
    """User's source language, else the provider's detection, else undetermined."""
    if config.source_language is not None:
        return config.source_language
    return resolve_or_undetermined(result.detected_source_language)
