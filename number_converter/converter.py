"""
The conversion orchestrator — one raw string in, one ConversionResult out.

Flow:
    raw text ──trim──► empty? ──► EMPTY_INPUT result
        │
        ├──► extract_currency        (independent of the number)
        │
        ├──► parse_shorthand ──None──► parse_plain_number ──None──► UNPARSEABLE_NUMBER
        │
        └──► number_to_shorthand + number_to_words ──overflow──► words "number too large"
                         │
                         ▼
                  valid ConversionResult

convert_number never raises for any string input. Empty or unparseable
input gives is_valid=False, numeric_value 0 and shorthand_form "0". A value
that decodes is always valid, even when it is too large to spell.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from decimal import Decimal

from .currency import currency_word, extract_currency
from .exceptions import ScaleOverflowError
from .models import ConversionResult, ErrorCode
from .shorthand import number_to_shorthand, parse_plain_number, parse_shorthand
from .words import number_to_words

logger = logging.getLogger(__name__)

# Sentinel words_form values
EMPTY_WORDS = "zero"
INVALID_WORDS = "invalid input"
OVERFLOW_WORDS = "number too large"

# Offered to users as one-click samples
EXAMPLE_INPUTS: tuple[str, ...] = (
    "$1.5K",
    "€2.5M",
    "£750K",
    "1000000",
    "¥150B",
    "42.7K",
)


def _invalid(
    raw: str, words: str, code: ErrorCode, currency: str | None = None
) -> ConversionResult:
    return ConversionResult(
        original_input=raw,
        numeric_value=Decimal(0),
        shorthand_form="0",
        words_form=words,
        currency=currency,
        is_valid=False,
        error_code=code,
    )


def convert_number(raw: str) -> ConversionResult:
    """Convert one human-entered value into all three representations.

    Args:
        raw: e.g. "$1.5K", "€2.5M", "1,000,000", "42.7k"

    Returns:
        ConversionResult. For "$1.5K":
            numeric_value=1500, shorthand_form="$1.5K",
            words_form="one thousand five hundred dollars", currency="$"
    """
    text = raw.strip()
    if not text:
        logger.debug("Empty input")
        return _invalid(raw, EMPTY_WORDS, ErrorCode.EMPTY_INPUT)

    currency = extract_currency(text)

    value = parse_shorthand(text)
    if value is None:
        value = parse_plain_number(text)

    if value is None:
        logger.debug("No number found in %r", raw)
        return _invalid(raw, INVALID_WORDS, ErrorCode.UNPARSEABLE_NUMBER, currency)

    shorthand = number_to_shorthand(value)
    if currency is not None:
        shorthand = currency + shorthand

    # Decoded but past the last scale word: still valid, only the words give up
    try:
        words = number_to_words(value)
    except ScaleOverflowError as e:
        logger.warning("Cannot spell %r: %s", raw, e)
        words = OVERFLOW_WORDS
    else:
        if currency is not None:
            words = f"{words} {currency_word(currency)}"

    logger.debug("Converted %r → %s", raw, value)
    return ConversionResult(
        original_input=raw,
        numeric_value=value,
        shorthand_form=shorthand,
        words_form=words,
        currency=currency,
        is_valid=True,
    )


def convert_many(raws: Iterable[str]) -> list[ConversionResult]:
    """Convert each input independently, preserving order."""
    return [convert_number(raw) for raw in raws]
