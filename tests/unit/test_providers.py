"""Tests for GoogleTranslateProvider and JishoProvider."""

from unittest.mock import MagicMock, patch

import pytest
import requests

from wdym.exceptions import ProviderLookupError
from wdym.models import LanguageId, Literation, ProviderId, SearchConfig
from wdym.services.providers.google_translate_provider import GoogleTranslateProvider, parse_response
from wdym.services.providers.jisho_provider import JishoProvider

GOOGLE_GET = "wdym.services.providers.google_translate_provider.requests.get"
JISHO_GET = "wdym.services.providers.jisho_provider.requests.get"

# Dictionary-only answer for "Hello!" (en -> ja)
HELLO_RESPONSE = {
    "dict": [
        {
            "pos": "interjection",
            "terms": ["もしもし！", "今日は!"],
            "entry": [
                {"word": "もしもし！", "reverse_translation": ["Hello!"], "score": 0.004559123},
                {
                    "word": "今日は!",
                    "reverse_translation": ["Hi!", "Hello!", "Good afternoon!", "Good day!"],
                },
            ],
            "base_form": "Hello!",
            "pos_enum": 9,
        }
    ],
    "src": "en",
    "confidence": 1.0,
    "spell": {},
    "ld_result": {"srclangs": ["en"], "srclangs_confidences": [1.0], "extended_srclangs": ["en"]},
}

# Sentence answer for "計算" (ja -> en) with transliteration
KEISAN_RESPONSE = {
    "sentences": [
        {"trans": "Calculation", "orig": "計算", "backend": 10},
        {"translit": "Calculation", "src_translit": "Keisan"},
    ],
    "dict": [
        {
            "pos": "noun",
            "entry": [
                {"word": "calculation", "reverse_translation": ["計算", "算定"], "score": 0.52},
                {"word": "computation", "reverse_translation": ["計算", "演算"], "score": 0.61},
            ],
        },
        None,
    ],
    "src": "ja",
}


def mock_response(payload=None, status_code=200, json_error=None):
    response = MagicMock()
    response.status_code = status_code
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status_code} Error")
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    return response


class TestGoogleTranslateParsing:
    """Tests for parse_response."""

    def test_dictionary_only_response(self):
        result = parse_response(HELLO_RESPONSE)

        assert result.provider is ProviderId.GOOGLE_TRANSLATE
        assert result.detected_source_language == "en"
        assert result.translations is None
        assert result.literation is None
        assert [d.meaning for d in result.definitions] == ["もしもし！", "今日は!"]
        assert result.definitions[0].part_of_speech == "interjection"
        assert result.definitions[1].confidence is None
        assert result.definitions[1].reverse_translations[0] == "Hi!"

    def test_sentences_and_transliteration(self):
        result = parse_response(KEISAN_RESPONSE)

        assert len(result.translations) == 1
        assert result.translations[0].original == "計算"
        assert result.translations[0].translated == "Calculation"
        assert result.literation == Literation(original="Keisan", translated="Calculation")

    def test_definitions_sorted_and_null_dicts_skipped(self):
        result = parse_response(KEISAN_RESPONSE)
        assert [d.meaning for d in result.definitions] == ["computation", "calculation"]

    def test_half_transliteration_is_dropped(self):
        payload = {
            "sentences": [
                {"trans": "Calculation", "orig": "計算"},
                {"src_translit": "Keisan"},
            ],
            "src": "ja",
        }
        assert parse_response(payload).literation is None

    def test_missing_src_is_malformed(self):
        with pytest.raises(ProviderLookupError, match="malformed"):
            parse_response({"dict": HELLO_RESPONSE["dict"]})

    def test_wrong_shape_is_malformed(self):
        with pytest.raises(ProviderLookupError, match="malformed"):
            parse_response({"src": "en", "dict": [{"entry": []}]})

    def test_no_content_means_no_answer(self):
        with pytest.raises(ProviderLookupError, match="no answer possible"):
            parse_response({"src": "en", "sentences": [{"src_translit": "x"}]})


class TestGoogleTranslateProvider:
    """Tests for GoogleTranslateProvider.lookup."""

    def test_lookup_success(self, book_config):
        provider = GoogleTranslateProvider(api_url="https://translate.test/single", timeout=3.0)
        with patch(GOOGLE_GET, return_value=mock_response(HELLO_RESPONSE)) as mock_get:
            result = provider.lookup(book_config)

        assert len(result.definitions) == 2
        args, kwargs = mock_get.call_args
        assert args[0] == "https://translate.test/single"
        assert kwargs["timeout"] == 3.0
        params = kwargs["params"]
        assert ("sl", "en") in params
        assert ("tl", "ja") in params
        assert ("q", "book") in params
        assert ("dt", "rm") in params
        assert ("client", "dict-chrome-ex") in params

    def test_source_defaults_to_auto(self):
        config = SearchConfig(query="book", target_language=LanguageId("ja"))
        provider = GoogleTranslateProvider()
        with patch(GOOGLE_GET, return_value=mock_response(HELLO_RESPONSE)) as mock_get:
            provider.lookup(config)

        assert ("sl", "auto") in mock_get.call_args.kwargs["params"]

    def test_source_without_two_letter_code_is_detected(self, caplog):
        config = SearchConfig(query="aloha", source_language=LanguageId("haw"), target_language=LanguageId("en"))
        with patch(GOOGLE_GET, return_value=mock_response(HELLO_RESPONSE)) as mock_get:
            with caplog.at_level("DEBUG", logger="wdym.services.providers.google_translate_provider"):
                GoogleTranslateProvider().lookup(config)

        assert ("sl", "auto") in mock_get.call_args.kwargs["params"]
        assert "'haw' has no ISO 639-1 code" in caplog.text

    def test_missing_target_language(self):
        provider = GoogleTranslateProvider()
        with patch(GOOGLE_GET) as mock_get:
            with pytest.raises(ProviderLookupError, match="requires a destination language"):
                provider.lookup(SearchConfig(query="book"))
        mock_get.assert_not_called()

    def test_target_without_two_letter_code(self):
        config = SearchConfig(query="aloha", target_language=LanguageId("haw"))
        with pytest.raises(ProviderLookupError, match="ISO 639-1"):
            GoogleTranslateProvider().lookup(config)

    def test_http_error(self, book_config):
        with patch(GOOGLE_GET, return_value=mock_response(status_code=500)):
            with pytest.raises(ProviderLookupError, match="request failed"):
                GoogleTranslateProvider().lookup(book_config)

    def test_timeout(self, book_config):
        with patch(GOOGLE_GET, side_effect=requests.exceptions.Timeout("slow")):
            with pytest.raises(ProviderLookupError, match="timed out"):
                GoogleTranslateProvider().lookup(book_config)

    def test_connection_error(self, book_config):
        with patch(GOOGLE_GET, side_effect=requests.ConnectionError("offline")):
            with pytest.raises(ProviderLookupError) as exc_info:
                GoogleTranslateProvider().lookup(book_config)
        assert isinstance(exc_info.value.__cause__, requests.ConnectionError)

    def test_invalid_json(self, book_config):
        with patch(GOOGLE_GET, return_value=mock_response(json_error=ValueError("bad json"))):
            with pytest.raises(ProviderLookupError, match="invalid JSON"):
                GoogleTranslateProvider().lookup(book_config)

    def test_requests_json_decode_error(self, book_config):
        error = requests.exceptions.JSONDecodeError("Expecting value", "<html>", 0)
        with patch(GOOGLE_GET, return_value=mock_response(json_error=error)):
            with pytest.raises(ProviderLookupError, match="invalid JSON"):
                GoogleTranslateProvider().lookup(book_config)

    def test_name_property(self):
        assert GoogleTranslateProvider().name == "Google Translate"


JISHO_TABERU = {
    "data": [
        {
            "slug": "食べる",
            "japanese": [{"word": "食べる", "reading": "たべる"}],
            "senses": [
                {"english_definitions": ["to eat"], "parts_of_speech": ["Ichidan verb", "Transitive verb"]},
                {"english_definitions": ["to live on", "to subsist on"], "parts_of_speech": []},
            ],
        },
        {
            "slug": "たべる",
            "japanese": [{"reading": "たべる"}],
            "senses": [{"english_definitions": [], "parts_of_speech": []}],
        },
    ]
}


class TestJishoProvider:
    """Tests for JishoProvider."""

    def test_lookup_success(self):
        provider = JishoProvider(api_url="https://jisho.test/search", timeout=1.0)
        with patch(JISHO_GET, return_value=mock_response(JISHO_TABERU)) as mock_get:
            result = provider.lookup(SearchConfig(query="食べる", provider=ProviderId.JISHO))

        assert mock_get.call_args.kwargs["params"] == {"keyword": "食べる"}
        assert result.provider is ProviderId.JISHO
        assert result.detected_source_language == "ja"
        assert len(result.definitions) == 1

        definition = result.definitions[0]
        assert definition.meaning == "食べる【たべる】"
        assert definition.part_of_speech == "Ichidan verb"
        assert definition.reverse_translations == ["to eat"]
        assert definition.confidence is None
        assert definition.examples == ["2. to live on; to subsist on"]

    def test_english_query_detected(self):
        with patch(JISHO_GET, return_value=mock_response(JISHO_TABERU)):
            result = JishoProvider().lookup(SearchConfig(query="eat", provider=ProviderId.JISHO))
        assert result.detected_source_language == "en"

    def test_reading_only_entry(self):
        payload = {
            "data": [
                {
                    "japanese": [{"reading": "すし"}],
                    "senses": [{"english_definitions": ["sushi"], "parts_of_speech": ["Noun"]}],
                }
            ]
        }
        with patch(JISHO_GET, return_value=mock_response(payload)):
            result = JishoProvider().lookup(SearchConfig(query="すし", provider=ProviderId.JISHO))
        assert result.definitions[0].meaning == "すし"
        assert result.definitions[0].examples is None

    def test_limits_entries(self):
        entry = JISHO_TABERU["data"][0]
        payload = {"data": [entry] * 8}
        with patch(JISHO_GET, return_value=mock_response(payload)):
            result = JishoProvider(max_entries=3).lookup(SearchConfig(query="食べる", provider=ProviderId.JISHO))
        assert len(result.definitions) == 3

    def test_empty_results(self):
        with patch(JISHO_GET, return_value=mock_response({"data": []})):
            with pytest.raises(ProviderLookupError, match="no answer possible"):
                JishoProvider().lookup(SearchConfig(query="nonexistent", provider=ProviderId.JISHO))

    def test_unsupported_language(self):
        config = SearchConfig(query="livre", source_language=LanguageId("fr"), provider=ProviderId.JISHO)
        with patch(JISHO_GET) as mock_get:
            with pytest.raises(ProviderLookupError, match="Japanese and English"):
                JishoProvider().lookup(config)
        mock_get.assert_not_called()

    def test_timeout(self):
        with patch(JISHO_GET, side_effect=requests.exceptions.Timeout):
            with pytest.raises(ProviderLookupError, match="timed out"):
                JishoProvider().lookup(SearchConfig(query="食べる", provider=ProviderId.JISHO))

    def test_non_200(self):
        with patch(JISHO_GET, return_value=mock_response(status_code=503)):
            with pytest.raises(ProviderLookupError, match="request failed"):
                JishoProvider().lookup(SearchConfig(query="食べる", provider=ProviderId.JISHO))

    def test_name_property(self):
        assert JishoProvider().name == "Jisho"
