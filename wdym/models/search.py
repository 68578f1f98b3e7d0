"""Data models describing a lookup request."""

from dataclasses import dataclass
from enum import Enum

from .language import LanguageId


class ProviderId(Enum):
    """Available lookup providers."""

    GOOGLE_TRANSLATE = "google-translate"
    JISHO = "jisho"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    def __str__(self) -> str:
        return self.value


_DISPLAY_NAMES = {
    ProviderId.GOOGLE_TRANSLATE: "Google Translate",
    ProviderId.JISHO: "Jisho",
}

DEFAULT_PROVIDER = ProviderId.GOOGLE_TRANSLATE


@dataclass(frozen=True)
class SearchConfig:
    """Immutable description of one lookup attempt.

    Built once from resolved user input. A new lookup needs a new
    SearchConfig; instances are shared, never mutated.
    """

    query: str
    source_language: LanguageId | None = None
    target_language: LanguageId | None = None
    provider: ProviderId = DEFAULT_PROVIDER

    def __str__(self) -> str:
        source = self.source_language or "auto"
        target = self.target_language or "?"
        return f"SearchConfig('{self.query}', {source} -> {target}, provider={self.provider})"
