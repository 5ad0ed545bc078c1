"""
Spell a number out in English words.

    1500        → "one thousand five hundred"
    1000000001  → "one billion one"
    -21         → "negative twenty-one"

The number is split into base-1000 chunks; each chunk is spelled by
convert_hundreds() and tagged with its scale word. Zero chunks vanish
entirely, so 1,000,000 is "one million", never "one million zero thousand".

Two boundaries are policy, not accident:
  - Fractions are truncated toward zero before spelling (1.9 → "one").
  - Anything at or above 10**36 (past "decillion") has no scale word and raises
    ScaleOverflowError rather than emitting a half-spelled number.
"""

from __future__ import annotations

from decimal import Decimal

from .exceptions import ScaleOverflowError
from .shorthand import Number, as_decimal

# ─── Word Lookup Tables ──────────────────────────────────────────────

_ONES: tuple[str, ...] = (
    "",
    "one",
    "two",
    "three",
    "four",
    "five",
    "six",
    "seven",
    "eight",
    "nine",
)

_TEENS: tuple[str, ...] = (
    "ten",
    "eleven",
    "twelve",
    "thirteen",
    "fourteen",
    "fifteen",
    "sixteen",
    "seventeen",
    "eighteen",
    "nineteen",
)

_TENS: tuple[str, ...] = (
    "",
    "",
    "twenty",
    "thirty",
    "forty",
    "fifty",
    "sixty",
    "seventy",
    "eighty",
    "ninety",
)

# Index = number of base-1000 chunks below this one
_SCALES: tuple[str, ...] = (
    "",
    "thousand",
    "million",
    "billion",
    "trillion",
    "quadrillion",
    "quintillion",
    "sextillion",
    "septillion",
    "octillion",
    "nonillion",
    "decillion",
)

# First value with no scale word: 10**36
SPELLABLE_LIMIT: int = 1000 ** len(_SCALES)


# ─── Chunk Speller ───────────────────────────────────────────────────


def convert_hundreds(num: int) -> str:
    """Spell 0–999. Zero is the empty string, not "zero".

    Raises:
        ValueError: If num is outside 0–999.
    """
    if not 0 <= num <= 999:
        raise ValueError(f"Chunk out of range 0-999: {num!r}")

    words = ""

    if num >= 100:
        words += _ONES[num // 100] + " hundred"
        num %= 100
        if num > 0:
            words += " "

    if num >= 20:
        words += _TENS[num // 10]
        num %= 10
        if num > 0:
            words += "-" + _ONES[num]
    elif num >= 10:
        words += _TEENS[num - 10]
    elif num > 0:
        words += _ONES[num]

    return words


# ─── Main Converter ─────────────────────────────────────────────────


def number_to_words(value: Number) -> str:
    """Convert a number to lowercase English words.

    Args:
        value: e.g. Decimal("1250000"), 42, -7.5

    Returns:
        "one million two hundred fifty thousand", "forty-two", "negative seven"

    Raises:
        ScaleOverflowError: If |value| truncates to 10**36 or more.
        ValueError: For NaN or infinite values.
    """
    number = as_decimal(value)
    if not number.is_finite():
        raise ValueError(f"Cannot spell non-finite value: {value!r}")

    whole = int(number)  # truncates toward zero

    if whole == 0:
        return "zero"
    if whole < 0:
        return "negative " + number_to_words(-whole)
    if whole >= SPELLABLE_LIMIT:
        raise ScaleOverflowError(
            f"{number} is too large to spell; the largest scale word is "
            f"'{_SCALES[-1]}'",
            details={"value": str(number), "limit": str(Decimal(SPELLABLE_LIMIT))},
        )

    parts: list[str] = []
    scale_index = 0

    while whole > 0:
        whole, chunk = divmod(whole, 1000)
        if chunk > 0:
            chunk_words = convert_hundreds(chunk)
            if scale_index > 0:
                chunk_words += " " + _SCALES[scale_index]
            parts.append(chunk_words)
        scale_index += 1

    return " ".join(reversed(parts))
