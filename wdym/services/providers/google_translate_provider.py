"""Google Translate lookup provider."""

import logging

import requests

from wdym.exceptions import ProviderLookupError
from wdym.models import Definition, Literation, LookupResult, ProviderId, SearchConfig, TranslationPair

logger = logging.getLogger(__name__)

# Response sections requested from the dictionary extension endpoint
_DATA_TYPES = ("at", "bd", "rm", "rw", "sp", "ss", "t")


class GoogleTranslateProvider:
    """Online translation and dictionary provider using Google Translate.

    Uses the endpoint of the Chrome dictionary extension, which returns
    sentence translations, dictionary entries with confidence scores and
    transliterations in one JSON document.

    Implements SearchProvider protocol.
    """

    def __init__(
        self,
        api_url: str = "https://clients5.google.com/translate_a/single",
        client: str = "dict-chrome-ex",
        timeout: float | None = None,
    ):
        """Initialize with endpoint settings.

        Args:
            api_url: Google Translate endpoint URL.
            client: Client identifier sent with each request.
            timeout: Request timeout in seconds, None to wait indefinitely.
        """
        self._api_url = api_url
        self._client = client
        self._timeout = timeout

    @property
    def name(self) -> str:
        return ProviderId.GOOGLE_TRANSLATE.display_name

    def lookup(self, config: SearchConfig) -> LookupResult:
        """Translate the query and fetch dictionary entries.

        Args:
            config: Search to perform. A target language is required.

        Returns:
            LookupResult with whichever sections Google returned.

        Raises:
            ProviderLookupError: If the target language is missing, the
                request fails, or the response cannot be used.
        """
        params = self._build_params(config)
        logger.debug(f"Querying Google Translate: {config}")

        try:
            response = requests.get(self._api_url, params=params, timeout=self._timeout)
            response.raise_for_status()
        except requests.exceptions.Timeout as e:
            raise ProviderLookupError(f"google translate timed out: {e}") from e
        except requests.RequestException as e:
            raise ProviderLookupError(f"google translate request failed: {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            raise ProviderLookupError(f"google translate returned invalid JSON: {e}") from e

        return parse_response(data)

    def _build_params(self, config: SearchConfig) -> list[tuple[str, str]]:
        if config.target_language is None:
            raise ProviderLookupError("google translate requires a destination language")

        target = config.target_language.alpha2
        if target is None:
            raise ProviderLookupError(
                f"the language '{config.target_language}' doesn't have an ISO 639-1 language code"
            )

        source = "auto"
        if config.source_language is not None:
            if config.source_language.alpha2:
                source = config.source_language.alpha2
            else:
                logger.debug(
                    f"Source language '{config.source_language}' has no ISO 639-1 code, "
                    "letting Google detect it"
                )

        params = [("dj", "1")]
        params.extend(("dt", data_type) for data_type in _DATA_TYPES)
        params.extend(
            [
                ("client", self._client),
                ("sl", source),
                ("tl", target),
                ("q", config.query),
            ]
        )
        return params


def parse_response(data: dict) -> LookupResult:
    """Convert a decoded Google Translate response into a LookupResult.

    Args:
        data: JSON body returned with ``dj=1``

    Returns:
        LookupResult with definitions sorted by confidence

    Raises:
        ProviderLookupError: If the body is malformed or carries no answer
    """
    if not isinstance(data, dict) or not data.get("src"):
        raise ProviderLookupError("malformed google translate response: missing source language")

    try:
        definitions = _parse_definitions(data.get("dict"))
        translations, src_translit, translit = _parse_sentences(data.get("sentences"))
    except (KeyError, TypeError, AttributeError) as e:
        raise ProviderLookupError(f"malformed google translate response: {e}") from e

    if not definitions and not translations:
        raise ProviderLookupError("no answer possible")

    return LookupResult(
        provider=ProviderId.GOOGLE_TRANSLATE,
        translations=translations,
        definitions=definitions,
        literation=Literation.from_pair(src_translit, translit),
        detected_source_language=data["src"],
    )


def _parse_definitions(dicts: list | None) -> list[Definition]:
    definitions = []
    for part in dicts or []:
        if part is None:
            continue
        pos = part["pos"]
        for entry in part.get("entry") or []:
            definitions.append(
                Definition(
                    meaning=entry["word"],
                    part_of_speech=pos,
                    reverse_translations=entry.get("reverse_translation"),
                    confidence=entry.get("score"),
                )
            )
    return definitions


def _parse_sentences(
    sentences: list | None,
) -> tuple[list[TranslationPair], str | None, str | None]:
    translations = []
    src_translit = None
    translit = None

    for sentence in sentences or []:
        if sentence is None:
            continue
        # The transliteration arrives as its own trailing sentence object
        src_translit = sentence.get("src_translit") or src_translit
        translit = sentence.get("translit") or translit

        if sentence.get("orig") is not None and sentence.get("trans") is not None:
            translations.append(
                TranslationPair(original=sentence["orig"], translated=sentence["trans"])
            )

    return translations, src_translit, translit
