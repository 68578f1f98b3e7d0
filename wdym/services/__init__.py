"""Lookup services for wdym."""

from .language_resolver import display_name, resolve, resolve_or_undetermined
from .provider_registry import PROVIDER_FACTORIES, create_provider, parse_provider_id
from .providers import GoogleTranslateProvider, JishoProvider

__all__ = [
    "resolve",
    "resolve_or_undetermined",
    "display_name",
    "PROVIDER_FACTORIES",
    "create_provider",
    "parse_provider_id",
    "GoogleTranslateProvider",
    "JishoProvider",
]
