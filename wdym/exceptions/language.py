"""Language resolution exceptions."""

from .base import WdymException


class LanguageParseError(WdymException):
    """Raised when a language token cannot be resolved to a known language."""

    def __init__(self, token: str, reason: str = "unrecognized language"):
        self.token = token
        self.reason = reason
        super().__init__(f"failed to parse the language '{token}': {reason}")
