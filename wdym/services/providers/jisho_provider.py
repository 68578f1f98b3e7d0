"""Jisho API dictionary provider."""

import logging

import requests

from wdym.exceptions import ProviderLookupError
from wdym.models import Definition, LookupResult, ProviderId, SearchConfig
from wdym.utils.text_utils import contains_japanese

logger = logging.getLogger(__name__)

_SUPPORTED_LANGUAGES = {"ja", "en"}


class JishoProvider:
    """Online Japanese-English dictionary provider using Jisho.org API.

    Jisho answers both directions from a single keyword search, so the
    source and target languages are optional but must be Japanese or
    English when given.

    Implements SearchProvider protocol.
    """

    def __init__(
        self,
        api_url: str = "https://jisho.org/api/v1/search/words",
        max_entries: int = 5,
        timeout: float | None = None,
    ):
        """Initialize with API URL and result limits.

        Args:
            api_url: Jisho API endpoint URL.
            max_entries: Maximum number of dictionary entries to keep.
            timeout: Request timeout in seconds, None to wait indefinitely.
        """
        self._api_url = api_url
        self._max_entries = max_entries
        self._timeout = timeout

    @property
    def name(self) -> str:
        return ProviderId.JISHO.display_name

    def lookup(self, config: SearchConfig) -> LookupResult:
        """Look up the query via Jisho API.

        Args:
            config: Search to perform.

        Returns:
            LookupResult holding dictionary definitions only.

        Raises:
            ProviderLookupError: If a language other than Japanese or English
                is requested, the request fails, or nothing was found.
        """
        for language in (config.source_language, config.target_language):
            if language is not None and language.code not in _SUPPORTED_LANGUAGES:
                raise ProviderLookupError(
                    f"jisho only translates between Japanese and English, not '{language}'"
                )

        logger.debug(f"Querying Jisho: {config}")
        try:
            response = requests.get(
                self._api_url,
                params={"keyword": config.query},
                timeout=self._timeout,
            )
            response.raise_for_status()
        except requests.exceptions.Timeout as e:
            raise ProviderLookupError(f"jisho timed out: {e}") from e
        except requests.RequestException as e:
            raise ProviderLookupError(f"jisho request failed: {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            raise ProviderLookupError(f"jisho returned invalid JSON: {e}") from e

        try:
            definitions = [
                definition
                for entry in data.get("data", [])[: self._max_entries]
                if (definition := _entry_to_definition(entry)) is not None
            ]
        except (KeyError, TypeError, AttributeError) as e:
            raise ProviderLookupError(f"malformed jisho response: {e}") from e

        if not definitions:
            raise ProviderLookupError("no answer possible")

        return LookupResult(
            provider=ProviderId.JISHO,
            definitions=definitions,
            detected_source_language="ja" if contains_japanese(config.query) else "en",
        )


def _entry_to_definition(entry: dict) -> Definition | None:
    """Build a definition from one Jisho entry.

    The first sense provides the part of speech and reverse translations,
    later senses are listed as numbered examples.
    """
    senses = [sense for sense in entry.get("senses", []) if sense.get("english_definitions")]
    if not senses:
        return None

    japanese = (entry.get("japanese") or [{}])[0]
    word = japanese.get("word") or japanese.get("reading") or entry.get("slug", "")
    reading = japanese.get("reading")
    meaning = f"{word}【{reading}】" if reading and reading != word else word

    first = senses[0]
    parts_of_speech = first.get("parts_of_speech") or ["unknown"]
    examples = [
        f"{i}. {'; '.join(sense['english_definitions'])}"
        for i, sense in enumerate(senses[1:], 2)
    ]

    return Definition(
        meaning=meaning,
        part_of_speech=parts_of_speech[0],
        reverse_translations=list(first["english_definitions"]),
        examples=examples,
    )
