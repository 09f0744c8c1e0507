"""
Exception types raised by the SatCat catalog layer.
"""


class SatCatError(Exception):
    """Base class for all catalog errors."""


class LoadError(SatCatError):
    """A catalog document could not be read, fetched, or decoded."""

    def __init__(self, message: str, source: str = ""):
        super().__init__(message)
        self.source = source


class PatternError(SatCatError, ValueError):
    """A filter pattern is not a valid regular expression."""

    def __init__(self, message: str, pattern: str = ""):
        super().__init__(message)
        self.pattern = pattern
