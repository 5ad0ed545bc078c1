"""
Number Converter — shorthand, full value and English words from one input.

Architecture: Currency scan + Shorthand parse (→ plain fallback) → Shorthand & Words rendering
Philosophy:  Every input gets an answer. Bad input gets an honest "invalid".
"""

from .converter import convert_many, convert_number
from .currency import CURRENCIES, currency_word, extract_currency
from .exceptions import ConversionError, ScaleOverflowError, UnknownCurrencyError
from .models import ConversionResult, CurrencyInfo, ErrorCode
from .shorthand import (
    format_grouped,
    number_to_shorthand,
    parse_plain_number,
    parse_shorthand,
)
from .words import convert_hundreds, number_to_words

__version__ = "1.0.0"

__all__ = [
    "CURRENCIES",
    "ConversionError",
    "ConversionResult",
    "CurrencyInfo",
    "ErrorCode",
    "ScaleOverflowError",
    "UnknownCurrencyError",
    "convert_hundreds",
    "convert_many",
    "convert_number",
    "currency_word",
    "extract_currency",
    "format_grouped",
    "number_to_shorthand",
    "number_to_words",
    "parse_plain_number",
    "parse_shorthand",
]
