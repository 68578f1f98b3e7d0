"""Data model for resolved languages."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LanguageId:
    """Canonical identifier for a natural language.

    Wraps a normalized BCP 47 language subtag, which is the ISO 639-1 code
    when the language has one and the ISO 639-2/3 code otherwise.
    """

    code: str

    @property
    def alpha2(self) -> str | None:
        """Two-letter ISO 639-1 code, or None if the language has none."""
        return self.code if len(self.code) == 2 else None

    @property
    def is_undetermined(self) -> bool:
        return self.code == "und"

    def __str__(self) -> str:
        return self.code


UNDETERMINED = LanguageId("und")
