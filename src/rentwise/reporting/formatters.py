# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Display formatting for currency, months and percentages."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Union

from ..core.primitives import AnalyticsSettings, MonthLike, to_month

NOT_APPLICABLE = "N/A"


def _group_digits(digits: str, indian: bool) -> str:
    if len(digits) <= 3:
        return digits
    if not indian:
        return f"{int(digits):,}"
    head, tail = digits[:-3], digits[-3:]
    pairs = []
    while len(head) > 2:
        pairs.insert(0, head[-2:])
        head = head[:-2]
    if head:
        pairs.insert(0, head)
    return ",".join(pairs + [tail])


def format_currency(
    amount: Union[Decimal, int, float, str],
    settings: Optional[AnalyticsSettings] = None,
) -> str:
    """
    Format an amount as currency.

    Defaults follow the dashboard: rupee symbol, no decimals, Indian digit
    grouping ("₹12,34,567"). Rounds half up.
    """
    reporting = (settings or AnalyticsSettings()).reporting
    value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    quantum = Decimal(1).scaleb(-reporting.currency_places)
    value = value.quantize(quantum, rounding=ROUND_HALF_UP)

    sign = "-" if value < 0 else ""
    integer, _, fraction = f"{abs(value):f}".partition(".")
    text = _group_digits(integer, reporting.indian_digit_grouping)
    if fraction:
        text = f"{text}.{fraction}"
    return f"{sign}{reporting.currency_symbol}{text}"


def format_month_year(month: MonthLike) -> str:
    """'2025-05' -> 'May 2025'."""
    return to_month(month).strftime("%B %Y")


def format_percent(value: Optional[Union[Decimal, float]], places: int = 1) -> str:
    """Percentage with ``places`` decimals, or 'N/A' for a not-applicable ratio."""
    if value is None:
        return NOT_APPLICABLE
    return f"{Decimal(str(value)):.{places}f}%"
