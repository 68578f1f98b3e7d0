"""Provider and lookup related exceptions."""

from .base import WdymException


class ProviderLookupError(WdymException):
    """Raised when a provider cannot produce a result.

    Covers network failures, unexpected HTTP status codes, malformed
    responses, "no answer possible" and missing required languages.
    """

    pass


class UnsupportedProviderError(WdymException):
    """Raised when a provider id has no registered implementation."""

    pass
