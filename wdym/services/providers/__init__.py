"""Lookup provider implementations."""

from .google_translate_provider import GoogleTranslateProvider
from .jisho_provider import JishoProvider

__all__ = ["GoogleTranslateProvider", "JishoProvider"]
