"""Interaction state machine invariant violations.

These signal wiring bugs rather than user-facing conditions.
"""

from .base import WdymException


class InvalidTransitionError(WdymException):
    """Raised when a message arrives in a phase that cannot accept it."""

    pass


class InvalidPhaseError(WdymException):
    """Raised when phase-gated data is accessed in the wrong phase."""

    pass
