"""Errors raised when a value falls outside the range a Length can represent."""


class LengthError(ValueError):
    """Base class for invalid Length values."""


class NegativeLengthError(LengthError):
    """Raised when an operation would produce a length below zero."""


class LengthOverflowError(LengthError, OverflowError):
    """Raised when an operation would exceed the largest representable length."""
