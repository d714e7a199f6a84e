# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Period calculus for rent reconciliation.

Every month-like value in rentwise (reporting months, rental periods, fiscal
year boundaries) is a monthly ``pd.Period``. A rental period is the month a
payment is credited against; a reporting month is the month a report is viewed
for. Rent is paid in arrears, so reporting month M evaluates rental period M-1.

Examples:
    >>> from rentwise.core.primitives import rental_period_for_target, fiscal_year_start
    >>> rental_period_for_target("2025-01")
    Period('2024-12', 'M')
    >>> fiscal_year_start("2025-02")
    Period('2024-04', 'M')
"""

from __future__ import annotations

import re
from datetime import date
from typing import List, Union

import pandas as pd

MonthLike = Union[str, date, pd.Timestamp, pd.Period]

FISCAL_YEAR_START_MONTH = 4
ARREARS_OFFSET_MONTHS = 1

_MONTH_PATTERN = re.compile(r"^\s*(\d{4})-(\d{1,2})(?:-\d{1,2})?\s*$")


class InvalidRangeError(ValueError):
    """Raised when a month range ends before it starts."""

    def __init__(self, start: pd.Period, end: pd.Period):
        self.start = start
        self.end = end
        super().__init__(f"Invalid month range: {start} is after {end}")


def to_month(value: MonthLike) -> pd.Period:
    """
    Normalize a month-like value into a monthly ``pd.Period``.

    Accepts "YYYY-MM" (or "YYYY-MM-DD") strings, dates, datetimes, timestamps
    and periods of any frequency.

    Raises:
        ValueError: If a string is not a valid "YYYY-MM" month.
        TypeError: If the value is not month-like at all.
    """
    if isinstance(value, pd.Period):
        return value.asfreq("M")
    if isinstance(value, (date, pd.Timestamp)):
        return pd.Period(value, freq="M")
    if isinstance(value, str):
        match = _MONTH_PATTERN.match(value)
        if match is None:
            raise ValueError(f'Invalid month "{value}": expected "YYYY-MM".')
        year, month = int(match.group(1)), int(match.group(2))
        if not 1 <= month <= 12:
            raise ValueError(f'Invalid month "{value}": expected "YYYY-MM".')
        return pd.Period(year=year, month=month, freq="M")
    raise TypeError(f"Cannot interpret {type(value).__name__} as a month")


def first_day(month: MonthLike) -> date:
    """First calendar day of the month."""
    return to_month(month).start_time.date()


def last_day(month: MonthLike) -> date:
    """Last calendar day of the month."""
    return to_month(month).end_time.date()


def fiscal_year_start(
    month: MonthLike, start_month: int = FISCAL_YEAR_START_MONTH
) -> pd.Period:
    """
    Return the first month of the fiscal year containing ``month``.

    With the default April start, January-March belong to the fiscal year that
    began in April of the previous calendar year; April-December to the one
    that began in April of the same year. The result is never after ``month``.
    """
    period = to_month(month)
    year = period.year if period.month >= start_month else period.year - 1
    return pd.Period(year=year, month=start_month, freq="M")


def rental_period_for_target(
    month: MonthLike, offset: int = ARREARS_OFFSET_MONTHS
) -> pd.Period:
    """Rental period evaluated by a reporting month (M - 1 by default)."""
    return to_month(month) - offset


def reporting_month_for_period(
    period: MonthLike, offset: int = ARREARS_OFFSET_MONTHS
) -> pd.Period:
    """Month in which rent for ``period`` is expected to be recorded (P + 1 by default)."""
    return to_month(period) + offset


def month_range(start: MonthLike, end: MonthLike) -> List[pd.Period]:
    """
    Every calendar month from ``start`` through ``end``, inclusive and ordered.

    Raises:
        InvalidRangeError: If ``start`` is after ``end``.
    """
    start_period = to_month(start)
    end_period = to_month(end)
    if start_period > end_period:
        raise InvalidRangeError(start_period, end_period)
    return list(pd.period_range(start=start_period, end=end_period, freq="M"))
