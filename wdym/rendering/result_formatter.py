"""Format a LookupResult into styled text blocks.

Each section is rendered by its own function that returns None when the
section is absent, so sections never depend on one another.
"""

from wdym.models import Definition, Literation, LookupResult, TranslationPair

from .styled_text import BOLD, DIM, ITALIC, Color, Line, Span, Style, TextBlock

HEADING_STYLE = Style(bold=True, color=Color.BLUE)
MEANING_STYLE = Style(underline=True, color=Color.CYAN)
POS_STYLE = Style(dim=True, color=Color.GREEN)
SCORE_STYLE = Style(dim=True, italic=True)
EXAMPLE_INDENT = "    "


def format_result(result: LookupResult) -> list[TextBlock]:
    """Render every present section in fixed order.

    Args:
        result: Lookup result to render

    Returns:
        Blocks for Definitions, Translations and Literations, skipping
        absent sections entirely
    """
    sections = (
        format_definitions(result.definitions),
        format_translations(result.translations),
        format_literation(result.literation),
    )
    return [section for section in sections if section is not None]


def format_definitions(definitions: list[Definition] | None) -> TextBlock | None:
    if definitions is None:
        return None

    lines = [_heading("Definitions")]
    for definition in definitions:
        lines.append(format_definition_line(definition))
        for example in definition.examples or []:
            lines.append(Line.of(Span(f"{EXAMPLE_INDENT}{example}", Style(italic=True, dim=True))))
    return TextBlock(lines=tuple(lines))


def format_definition_line(definition: Definition) -> Line:
    """Meaning, part of speech, reverse translations and confidence on one line."""
    spans = [
        Span(definition.meaning, MEANING_STYLE),
        Span(f" ({definition.part_of_speech.lower()})", POS_STYLE),
    ]

    if definition.reverse_translations is not None:
        spans.append(Span(": "))
        spans.extend(Span(f"{word} ", ITALIC) for word in definition.reverse_translations)

    if definition.confidence is not None:
        spans.append(Span(f"({definition.confidence:.3f})", SCORE_STYLE))

    return Line(spans=tuple(spans))


def format_translations(translations: list[TranslationPair] | None) -> TextBlock | None:
    if translations is None:
        return None

    lines = [_heading("Translations")]
    for pair in translations:
        lines.append(Line.of(Span(pair.original or "", ITALIC)))
        lines.append(Line.of(Span(pair.translated or "", BOLD)))
    return TextBlock(lines=tuple(lines))


def format_literation(literation: Literation | None) -> TextBlock | None:
    if literation is None:
        return None

    lines = [_heading("Literations")]
    if literation.original:
        lines.append(Line.of(Span("Original  : ", DIM), Span(literation.original, ITALIC)))
    if literation.translated:
        lines.append(Line.of(Span("Translated: ", DIM), literation.translated))
    return TextBlock(lines=tuple(lines))


def _heading(title: str) -> Line:
    return Line.of(Span(title, HEADING_STYLE))
