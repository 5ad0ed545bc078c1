"""
Shorthand notation: "2.5M" ↔ 2500000.

Parsing is deliberately narrow. Everything except digits, "." and the suffix
letters is thrown away first, then the remainder must match the whole grammar

    <digits>[.<digits>]<K|M|B|T>?

or we return None and let the caller fall back to plain-number parsing.
A consequence worth knowing: "-" is thrown away too, so "-1.5K" parses as
1500. Callers that care about sign must handle it themselves.

All arithmetic is Decimal, so "1.1K" is exactly 1100.
"""

from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import Union

Number = Union[Decimal, int, float]

# ─── Tables (ordered: largest scale first) ──────────────────────────

_SCALES: tuple[tuple[int, str], ...] = (
    (1_000_000_000_000, "T"),
    (1_000_000_000, "B"),
    (1_000_000, "M"),
    (1_000, "K"),
)

_SUFFIX_MULTIPLIERS: tuple[tuple[str, int], ...] = (
    ("K", 1_000),
    ("M", 1_000_000),
    ("B", 1_000_000_000),
    ("T", 1_000_000_000_000),
)

# ASCII digits only: Decimal() would happily accept "٣" but the grammar doesn't.
_NOT_SHORTHAND_CHAR = re.compile(r"[^0-9.KMBTkmbt]")
_SHORTHAND = re.compile(r"([0-9]+\.?[0-9]*)([KMBTkmbt]?)")

_NOT_PLAIN_CHAR = re.compile(r"[^0-9.\-]")
_LEADING_NUMBER = re.compile(r"-?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")

_ONE_PLACE = Decimal("0.1")


# ─── Helpers ────────────────────────────────────────────────────────


def as_decimal(value: Number) -> Decimal:
    """Coerce int/float/Decimal to Decimal (floats go through str())."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def _is_integral(value: Decimal) -> bool:
    return value == value.to_integral_value()


def _canonical(value: Decimal) -> Decimal:
    """Drop trailing zeros: Decimal("1500.0") → 1500, Decimal("1.50") → 1.5."""
    if _is_integral(value):
        return Decimal(int(value))
    return value.normalize()


def _plain(value: Decimal) -> str:
    """Render without exponent or trailing zeros: 500.0 → "500", 1.50 → "1.5"."""
    if _is_integral(value):
        return str(int(value))
    return format(value.normalize(), "f")


def _multiplier(suffix: str) -> int:
    for letter, multiplier in _SUFFIX_MULTIPLIERS:
        if suffix.upper() == letter:
            return multiplier
    return 1


# ─── Parsing ────────────────────────────────────────────────────────


def parse_shorthand(text: str) -> Decimal | None:
    """Decode shorthand such as "2.5M", "$1.5k" or "1,000".

    Returns:
        The expanded value, or None if the cleaned text doesn't match
        the shorthand grammar.
    """
    cleaned = _NOT_SHORTHAND_CHAR.sub("", text)
    match = _SHORTHAND.fullmatch(cleaned)
    if not match:
        return None

    number_part, suffix = match.groups()
    try:
        base = Decimal(number_part)
    except InvalidOperation:
        return None

    return _canonical(base * _multiplier(suffix))


def parse_plain_number(text: str) -> Decimal | None:
    """Lenient fallback: keep digits, "." and "-", read the leading number.

    Mirrors what a forgiving float parser does with leftovers:
    "1.5.3" → 1.5, "12-3" → 12, "--" → None.
    """
    cleaned = _NOT_PLAIN_CHAR.sub("", text)
    match = _LEADING_NUMBER.match(cleaned)
    if not match:
        return None
    try:
        return _canonical(Decimal(match.group(0)))
    except InvalidOperation:
        return None


# ─── Formatting ─────────────────────────────────────────────────────


def number_to_shorthand(value: Number) -> str:
    """Render a value compactly: 1500 → "1.5K", 1000 → "1K", 999 → "999".

    Exact multiples of a scale print without decimals; anything else is
    rounded half-up to one decimal place. The sign is applied once, outside
    the scale computation.

    Raises:
        ValueError: For NaN or infinite values.
    """
    number = as_decimal(value)
    if not number.is_finite():
        raise ValueError(f"Cannot shorten non-finite value: {value!r}")
    if number == 0:
        return "0"

    sign = "-" if number < 0 else ""
    magnitude = abs(number)

    # Enough precision that huge inputs neither round nor fail to quantize
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, magnitude.adjusted() + 3)
        for scale, letter in _SCALES:
            if magnitude < scale:
                continue
            scaled = magnitude / scale
            if _is_integral(magnitude) and int(magnitude) % scale == 0:
                return f"{sign}{int(scaled)}{letter}"
            rounded = scaled.quantize(_ONE_PLACE, rounding=ROUND_HALF_UP)
            return f"{sign}{rounded}{letter}"

    return sign + _plain(magnitude)


def format_grouped(value: Number) -> str:
    """Full value with en-US thousands grouping: 1500 → "1,500", 1.5 → "1.5"."""
    return f"{as_decimal(value).normalize():,f}"
