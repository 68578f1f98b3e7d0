"""Resolve free-form language tokens to canonical language identifiers."""

import logging
import re

import langcodes

from wdym.exceptions import LanguageParseError
from wdym.models import UNDETERMINED, LanguageId

logger = logging.getLogger(__name__)

# A bare ISO 639 code, optionally followed by BCP 47 subtags (en, eng, zh-Hant-TW)
_CODE_PATTERN = re.compile(r"[A-Za-z]{2,3}(?:-[A-Za-z0-9]{1,8})*")

# POSIX locale encoding and modifier (zh_CN.utf8, de_DE@euro)
_LOCALE_SUFFIX = re.compile(r"[.@].*$")


def resolve(token: str) -> LanguageId:
    """Resolve a language token.

    Accepts two- and three-letter ISO 639 codes, English language names
    (case-insensitive), native autonyms, BCP 47 tags and POSIX locale
    strings. Region, script, encoding and modifier parts are discarded.

    Args:
        token: User-supplied language, e.g. "ja", "jpn", "Japanese",
            "日本語" or "ja_JP.UTF-8"

    Returns:
        The resolved LanguageId

    Raises:
        LanguageParseError: If the token does not name a known language
    """
    cleaned = (token or "").strip()
    if not cleaned:
        raise LanguageParseError(token or "", "empty language")

    language = _from_code(_strip_locale(cleaned)) or _from_name(cleaned)
    if language is None:
        raise LanguageParseError(token)

    logger.debug(f"Resolved language '{token}' to '{language.code}'")
    return language


def resolve_or_undetermined(token: str | None) -> LanguageId:
    """Resolve a token, falling back to UNDETERMINED instead of raising."""
    if not token:
        return UNDETERMINED
    try:
        return resolve(token)
    except LanguageParseError:
        logger.debug(f"Could not resolve language '{token}', using undetermined")
        return UNDETERMINED


def display_name(language: LanguageId) -> str:
    """English display name for a language ("Japanese", "Undetermined")."""
    if language.is_undetermined:
        return "Undetermined"
    return langcodes.Language.get(language.code).display_name()


def _strip_locale(token: str) -> str:
    return _LOCALE_SUFFIX.sub("", token).replace("_", "-")


def _from_code(candidate: str) -> LanguageId | None:
    if not _CODE_PATTERN.fullmatch(candidate):
        return None
    try:
        code = langcodes.Language.get(candidate).language
    except ValueError:
        return None
    if not code or code == "und":
        return None
    if not langcodes.Language.get(code).is_valid():
        return None
    return LanguageId(code)


def _from_name(name: str) -> LanguageId | None:
    try:
        code = langcodes.find(name).language
    except LookupError:
        return None
    if not code or code == "und":
        return None
    return LanguageId(code)
