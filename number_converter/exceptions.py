"""
Custom exception hierarchy for number conversion.

The orchestrator (convert_number) never raises: it reports failures through
the result's is_valid flag and error_code. These exceptions are raised by the
standalone formatters, where a caller asked for something that has no answer.
"""

from __future__ import annotations


class ConversionError(Exception):
    """Base exception for all conversion failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.details = details or {}
        super().__init__(message)


class ScaleOverflowError(ConversionError, ValueError):
    """The magnitude is beyond the largest scale word we can spell."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("SCALE_OVERFLOW", message, details)


class UnknownCurrencyError(ConversionError, KeyError):
    """The symbol is not in the currency table."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("UNKNOWN_CURRENCY", message, details)

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])
