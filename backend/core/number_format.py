"""pt-BR number parsing and formatting for form inputs, tables and exports."""

from __future__ import annotations

import re

_NUMERIC_PREFIX = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)")


def parse_input_number(value: str) -> float:
    """Convert a pt-BR formatted string ("1.234,56") into a float.

    Dots are thousand separators and the comma is the decimal point.
    Empty or unparsable input yields 0.0, as does any trailing garbage
    that leaves no numeric prefix.
    """
    if not value:
        return 0.0
    clean = value.replace(".", "").replace(",", ".", 1)
    match = _NUMERIC_PREFIX.match(clean)
    if match is None:
        return 0.0
    return float(match.group(0))


def _group_thousands(digits: str) -> str:
    groups = []
    while len(digits) > 3:
        groups.insert(0, digits[-3:])
        digits = digits[:-3]
    groups.insert(0, digits)
    return ".".join(groups)


def _format_ptbr(value: float, min_digits: int, max_digits: int) -> str:
    sign = "-" if value < 0 else ""
    text = f"{abs(value):.{max_digits}f}"
    integer, _, fraction = text.partition(".")
    fraction = fraction.rstrip("0")
    if len(fraction) < min_digits:
        fraction = fraction.ljust(min_digits, "0")
    result = _group_thousands(integer)
    if fraction:
        result += "," + fraction
    if sign and result.strip("0.,"):
        result = sign + result
    return result


def format_input_number(value: float) -> str:
    """Render a number for an input field: "1.234,5" (no currency, up to 2 decimals).

    Zero renders as an empty string so the field shows its placeholder.
    """
    if value == 0:
        return ""
    return _format_ptbr(value, 0, 2)


def format_currency(value: float) -> str:
    """Render a BRL amount, e.g. ``R$ 1.234,56``."""
    text = _format_ptbr(value, 2, 2)
    if text.startswith("-"):
        return "-R$ " + text[1:]
    return "R$ " + text


def format_decimal(value: float, digits: int = 2) -> str:
    """Fixed decimals with a comma separator and no grouping ("1234,57")."""
    return f"{value:.{digits}f}".replace(".", ",")
