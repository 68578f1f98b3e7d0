"""Protocol for lookup providers."""

from typing import Protocol

from wdym.models import LookupResult, SearchConfig


class SearchProvider(Protocol):
    """Interface for a translation or dictionary backend.

    Any lookup source (Google Translate, Jisho, a custom dictionary, etc.)
    implements this protocol to be dispatched by the provider registry.
    """

    @property
    def name(self) -> str:
        """Human-readable name for this provider (e.g., 'Google Translate')."""
        ...

    def lookup(self, config: SearchConfig) -> LookupResult:
        """Look up the query described by ``config``.

        One synchronous attempt, no retry. ``config.source_language`` may be
        None, in which case the provider detects it if it can.

        Args:
            config: The search to perform.

        Returns:
            The lookup result. Sections the provider has no data for are None.

        Raises:
            ProviderLookupError: On network failure, malformed responses,
                when no answer is possible, or when a required language
                is missing.
        """
        ...
