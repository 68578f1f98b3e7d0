"""Tests for the provider registry."""

import pytest

from wdym.exceptions import UnsupportedProviderError
from wdym.models import ProviderId
from wdym.services.provider_registry import (
    PROVIDER_FACTORIES,
    check_registry,
    create_provider,
    parse_provider_id,
)
from wdym.services.providers import GoogleTranslateProvider, JishoProvider


class TestCreateProvider:
    """Tests for create_provider."""

    def test_every_provider_id_is_registered(self):
        assert set(PROVIDER_FACTORIES) == set(ProviderId)

    def test_google_translate(self, test_config):
        provider = create_provider(ProviderId.GOOGLE_TRANSLATE, test_config)
        assert isinstance(provider, GoogleTranslateProvider)
        assert provider._api_url == test_config.google_translate_url
        assert provider._timeout == test_config.request_timeout

    def test_jisho(self, test_config):
        provider = create_provider(ProviderId.JISHO, test_config)
        assert isinstance(provider, JishoProvider)
        assert provider._api_url == test_config.jisho_api_url
        assert provider._max_entries == test_config.jisho_max_entries

    def test_unregistered_provider_raises(self, test_config, monkeypatch):
        monkeypatch.delitem(PROVIDER_FACTORIES, ProviderId.JISHO)
        with pytest.raises(UnsupportedProviderError, match="jisho"):
            create_provider(ProviderId.JISHO, test_config)


class TestCheckRegistry:
    """Tests for the exhaustiveness check."""

    def test_complete_registry_passes(self):
        check_registry(PROVIDER_FACTORIES)

    def test_missing_entry_raises(self):
        partial = {ProviderId.GOOGLE_TRANSLATE: PROVIDER_FACTORIES[ProviderId.GOOGLE_TRANSLATE]}
        with pytest.raises(UnsupportedProviderError, match="jisho"):
            check_registry(partial)


class TestParseProviderId:
    """Tests for parse_provider_id."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("google-translate", ProviderId.GOOGLE_TRANSLATE),
            ("Google_Translate", ProviderId.GOOGLE_TRANSLATE),
            (" jisho ", ProviderId.JISHO),
        ],
    )
    def test_known_names(self, value, expected):
        assert parse_provider_id(value) is expected

    def test_unknown_name(self):
        with pytest.raises(UnsupportedProviderError, match="choose from"):
            parse_provider_id("bing")
