"""Custom exceptions for the time calculator."""


class TimeCalcError(Exception):
    """Base class for errors raised by the calculator."""


class StoreError(TimeCalcError):
    """Raised when reading or writing the key-value store fails."""
