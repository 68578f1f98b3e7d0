"""Interaction state machine driving a lookup from query to result."""

from .messages import LookupFailed, Message, QueryReceived, Quit, ResultReceived, Searching
from .state_machine import QUIT_KEY, LookupApp

__all__ = [
    "LookupApp",
    "QUIT_KEY",
    "Message",
    "QueryReceived",
    "Searching",
    "ResultReceived",
    "LookupFailed",
    "Quit",
]
