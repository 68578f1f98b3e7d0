"""Base exception classes for wdym."""


class WdymException(Exception):
    """Base exception for all wdym errors.

    All custom exceptions in the wdym package should inherit
    from this base class for consistent error handling.
    """

    pass
