"""Data models for lookup results.

A result is a bag of independently optional sections. Empty sequences are
collapsed to None on construction so that "absent" has a single spelling.
"""

from dataclasses import dataclass

from .search import ProviderId


def _none_if_empty(items: list | None) -> list | None:
    if not items:
        return None
    return list(items)


@dataclass
class TranslationPair:
    """A sentence-level translation. Either half may be missing."""

    original: str | None = None
    translated: str | None = None


@dataclass
class Definition:
    """A single dictionary sense."""

    meaning: str
    part_of_speech: str
    reverse_translations: list[str] | None = None
    confidence: float | None = None  # 0.0 - 1.0, provider supplied
    examples: list[str] | None = None

    def __post_init__(self):
        self.reverse_translations = _none_if_empty(self.reverse_translations)
        self.examples = _none_if_empty(self.examples)

    @property
    def sort_score(self) -> float:
        """Confidence used for ordering; missing scores rank as 0."""
        return self.confidence if self.confidence is not None else 0.0


@dataclass
class Literation:
    """Transliteration of the query and of its translation."""

    original: str | None = None
    translated: str | None = None

    @classmethod
    def from_pair(cls, original: str | None, translated: str | None) -> "Literation | None":
        """Build a literation only when both directions are present."""
        if not original or not translated:
            return None
        return cls(original=original, translated=translated)


@dataclass
class LookupResult:
    """Outcome of one successful provider call."""

    provider: ProviderId
    translations: list[TranslationPair] | None = None
    definitions: list[Definition] | None = None
    literation: Literation | None = None
    detected_source_language: str | None = None

    def __post_init__(self):
        self.translations = _none_if_empty(self.translations)
        definitions = _none_if_empty(self.definitions)
        if definitions is not None:
            # sorted() is stable, so equal scores keep provider order
            definitions = sorted(definitions, key=lambda d: d.sort_score, reverse=True)
        self.definitions = definitions
        if not self.detected_source_language:
            self.detected_source_language = None

    def __str__(self) -> str:
        return (
            f"LookupResult(provider={self.provider}, "
            f"definitions={len(self.definitions or [])}, "
            f"translations={len(self.translations or [])}, "
            f"literation={'yes' if self.literation else 'no'})"
        )
