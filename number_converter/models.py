"""
Pydantic models for conversion results.

A ConversionResult is a value object: built once per input by convert_number,
frozen, compared by value. Nothing holds on to it between calls.
"""

from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


# ─── Error Codes ────────────────────────────────────────────────────


class ErrorCode(str, Enum):
    """Why a conversion result is invalid."""

    EMPTY_INPUT = "EMPTY_INPUT"
    UNPARSEABLE_NUMBER = "UNPARSEABLE_NUMBER"


# ─── Currency ───────────────────────────────────────────────────────


class CurrencyInfo(BaseModel):
    """A recognized currency symbol and its spoken name."""

    model_config = ConfigDict(frozen=True)

    symbol: str
    word: str


# ─── Conversion Result ──────────────────────────────────────────────


class ConversionResult(BaseModel):
    """The three renderings of one input, plus the detected currency.

    Invariant: when is_valid is False, numeric_value is 0 and
    shorthand_form is "0". The currency may be present either way.
    """

    model_config = ConfigDict(frozen=True)

    original_input: str
    numeric_value: Decimal
    shorthand_form: str
    words_form: str
    currency: Optional[str] = None
    is_valid: bool
    error_code: Optional[ErrorCode] = None
