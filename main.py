#!/usr/bin/env python3
"""
Number Converter — Entry Point
===============================

Converts each argument and prints shorthand, full value and words.

Usage:
    python main.py                       # Convert the built-in examples
    python main.py '$1.5K' '€2.5M' 42    # Convert your own inputs
    LOG_LEVEL=DEBUG python main.py 1K    # Show per-conversion logging
"""

from __future__ import annotations

import logging
import os
import sys

from dotenv import load_dotenv

from number_converter.converter import EXAMPLE_INPUTS, convert_number
from number_converter.models import ConversionResult
from number_converter.shorthand import format_grouped

load_dotenv()


# ─── ANSI Color Constants ───────────────────────────────────────────

_RED = "\033[91m"
_GREEN = "\033[92m"
_CYAN = "\033[96m"
_DIM = "\033[2m"
_BOLD = "\033[1m"
_RESET = "\033[0m"
_WIDTH = 72


# ─── Pretty Printer ─────────────────────────────────────────────────


def _print_result(result: ConversionResult) -> None:
    print(f"  Input:       {_BOLD}{result.original_input!r}{_RESET}")
    if not result.is_valid:
        print(f"  {_RED}INVALID{_RESET}  {_DIM}[{result.error_code.value}]{_RESET} {result.words_form}")
        return
    print(f"  Value:       {format_grouped(result.numeric_value)}")
    print(f"  Shorthand:   {_CYAN}{result.shorthand_form}{_RESET}")
    print(f"  Words:       {result.words_form}")
    if result.currency:
        print(f"  Currency:    {result.currency}")


def print_report(results: list[ConversionResult]) -> int:
    """Pretty-print every result.

    Returns:
        0 if every input converted, 1 otherwise.
    """
    print(f"\n{'=' * _WIDTH}")
    print(f"{_BOLD}{_CYAN}  NUMBER CONVERTER{_RESET}")
    print(f"{'=' * _WIDTH}")

    for i, result in enumerate(results):
        if i:
            print(f"{'─' * _WIDTH}")
        _print_result(result)

    invalid = sum(1 for r in results if not r.is_valid)
    print(f"{'=' * _WIDTH}")
    if invalid:
        print(f"  {_RED}{_BOLD}{invalid} of {len(results)} input(s) could not be converted{_RESET}")
    else:
        print(f"  {_GREEN}{_BOLD}ALL {len(results)} INPUT(S) CONVERTED{_RESET}")
    print(f"{'=' * _WIDTH}\n")

    return 1 if invalid else 0


# ─── Main ────────────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> int:
    """Convert argv inputs (or the examples) and print the report."""
    logging.basicConfig(level=os.environ.get("LOG_LEVEL", "WARNING").upper())

    inputs = sys.argv[1:] if argv is None else argv
    results = [convert_number(raw) for raw in inputs or EXAMPLE_INPUTS]
    return print_report(results)


if __name__ == "__main__":
    sys.exit(main())
