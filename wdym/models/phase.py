"""Phases of the interaction state machine."""

from enum import Enum


class Phase(Enum):
    """Linear progression START -> SEARCHING -> RESULT -> FINISHED."""

    START = "start"
    SEARCHING = "searching"
    RESULT = "result"
    FINISHED = "finished"
