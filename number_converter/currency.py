"""
Currency symbol detection.

The symbol table is an ORDERED tuple of pairs, not a dict lookup: detection
is by substring containment anywhere in the input, and when several symbols
appear the one listed first here wins. Reordering this table changes results.
"""

from __future__ import annotations

from .exceptions import UnknownCurrencyError
from .models import CurrencyInfo

# ─── Symbol Table (scan order) ──────────────────────────────────────

CURRENCIES: tuple[CurrencyInfo, ...] = (
    CurrencyInfo(symbol="$", word="dollars"),
    CurrencyInfo(symbol="€", word="euros"),
    CurrencyInfo(symbol="£", word="pounds"),
    CurrencyInfo(symbol="¥", word="yen"),
    CurrencyInfo(symbol="₹", word="rupees"),
    CurrencyInfo(symbol="₽", word="rubles"),
    CurrencyInfo(symbol="₩", word="won"),
    CurrencyInfo(symbol="¢", word="cents"),
)


# ─── Public API ─────────────────────────────────────────────────────


def extract_currency(text: str) -> str | None:
    """Return the first known currency symbol contained in `text`.

    Position in the input does not matter ("1.5K$" finds "$"); only the
    table order does.
    """
    for currency in CURRENCIES:
        if currency.symbol in text:
            return currency.symbol
    return None


def currency_word(symbol: str) -> str:
    """Spoken name for a symbol, e.g. "€" → "euros".

    Raises:
        UnknownCurrencyError: If the symbol is not in the table.
    """
    for currency in CURRENCIES:
        if currency.symbol == symbol:
            return currency.word
    raise UnknownCurrencyError(
        f"Unrecognized currency symbol: {symbol!r}",
        details={"symbol": symbol, "known": [c.symbol for c in CURRENCIES]},
    )
