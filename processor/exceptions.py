"""
Exceptions raised by the intelligence processor.
"""


class IntelligenceError(Exception):
    """Base error for the signal intelligence core."""


class DataAccessError(IntelligenceError):
    """A query or write against the store failed during an analysis run."""


class InvalidSignalError(IntelligenceError, ValueError):
    """A signal payload is missing required fields or has malformed values."""
