"""Map provider ids to provider implementations."""

import logging
from collections.abc import Callable

from wdym.config import WdymConfig
from wdym.exceptions import UnsupportedProviderError
from wdym.interfaces import SearchProvider
from wdym.models import ProviderId

from .providers import GoogleTranslateProvider, JishoProvider

logger = logging.getLogger(__name__)

ProviderFactory = Callable[[WdymConfig], SearchProvider]


def _google_translate(config: WdymConfig) -> SearchProvider:
    return GoogleTranslateProvider(
        api_url=config.google_translate_url,
        client=config.google_translate_client,
        timeout=config.request_timeout,
    )


def _jisho(config: WdymConfig) -> SearchProvider:
    return JishoProvider(
        api_url=config.jisho_api_url,
        max_entries=config.jisho_max_entries,
        timeout=config.request_timeout,
    )


PROVIDER_FACTORIES: dict[ProviderId, ProviderFactory] = {
    ProviderId.GOOGLE_TRANSLATE: _google_translate,
    ProviderId.JISHO: _jisho,
}


def check_registry(factories: dict[ProviderId, ProviderFactory]) -> None:
    """Ensure every ProviderId has a factory.

    Raises:
        UnsupportedProviderError: Naming the provider ids without one
    """
    missing = [provider_id for provider_id in ProviderId if provider_id not in factories]
    if missing:
        names = ", ".join(str(provider_id) for provider_id in missing)
        raise UnsupportedProviderError(f"no implementation registered for: {names}")


check_registry(PROVIDER_FACTORIES)


def create_provider(provider_id: ProviderId, config: WdymConfig) -> SearchProvider:
    """Instantiate the provider for ``provider_id``.

    Args:
        provider_id: Which provider to build
        config: Application settings (endpoints, timeout)

    Returns:
        A ready-to-use provider

    Raises:
        UnsupportedProviderError: If no implementation is registered
    """
    factory = PROVIDER_FACTORIES.get(provider_id)
    if factory is None:
        raise UnsupportedProviderError(f"provider '{provider_id}' is not implemented")
    logger.debug(f"Creating provider {provider_id}")
    return factory(config)


def parse_provider_id(value: str) -> ProviderId:
    """Parse a provider name as typed on the command line.

    Raises:
        UnsupportedProviderError: If the name matches no provider
    """
    normalized = value.strip().lower().replace("_", "-")
    for provider_id in ProviderId:
        if normalized in (provider_id.value, provider_id.name.lower().replace("_", "-")):
            return provider_id
    choices = ", ".join(provider_id.value for provider_id in ProviderId)
    raise UnsupportedProviderError(f"unknown provider '{value}' (choose from: {choices})")
