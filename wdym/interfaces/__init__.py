"""Interface protocols for wdym."""

from .presenter import PresenterProtocol
from .search_provider import SearchProvider
from .terminal import TerminalBackend

__all__ = ["PresenterProtocol", "SearchProvider", "TerminalBackend"]
