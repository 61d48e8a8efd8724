"""Human readable rendering of conversion results."""

from __future__ import annotations

from typing import Final

GROUPING_THRESHOLD: Final[float] = 10_000


def format_amount(value: float) -> str:
    """Format ``value`` for display.

    Large values are rounded to whole units and grouped with thousands
    separators (``12,346``); everything else keeps two decimals (``9.09``).
    """

    if abs(value) >= GROUPING_THRESHOLD:
        return f"{value:,.0f}"
    return f"{value:.2f}"


def format_conversion(
    amount: float,
    source: str,
    converted: float,
    destination: str,
    *,
    long_output: bool = False,
) -> str:
    if not long_output:
        return format_amount(converted)
    return f"{format_amount(amount)} {source} is {format_amount(converted)} {destination}"


__all__ = ["GROUPING_THRESHOLD", "format_amount", "format_conversion"]
