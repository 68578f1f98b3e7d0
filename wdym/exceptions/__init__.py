"""Custom exceptions for wdym."""

from .base import WdymException
from .language import LanguageParseError
from .lookup import ProviderLookupError, UnsupportedProviderError
from .state import InvalidPhaseError, InvalidTransitionError

__all__ = [
    "WdymException",
    "LanguageParseError",
    "ProviderLookupError",
    "UnsupportedProviderError",
    "InvalidPhaseError",
    "InvalidTransitionError",
]
