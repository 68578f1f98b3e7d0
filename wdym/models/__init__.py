"""Data models for wdym."""

from .events import InputEvent, KeyEvent, MouseEvent, PasteEvent, ResizeEvent
from .language import UNDETERMINED, LanguageId
from .phase import Phase
from .result import Definition, Literation, LookupResult, TranslationPair
from .search import ProviderId, SearchConfig

__all__ = [
    "InputEvent",
    "KeyEvent",
    "MouseEvent",
    "PasteEvent",
    "ResizeEvent",
    "LanguageId",
    "UNDETERMINED",
    "Phase",
    "ProviderId",
    "SearchConfig",
    "TranslationPair",
    "Definition",
    "Literation",
    "LookupResult",
]
