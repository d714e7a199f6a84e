# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from datetime import date, datetime

import pandas as pd
import pytest

from rentwise.core.primitives import (
    InvalidRangeError,
    first_day,
    fiscal_year_start,
    last_day,
    month_range,
    rental_period_for_target,
    reporting_month_for_period,
    to_month,
)

ALL_MONTHS = list(pd.period_range("2023-01", "2026-12", freq="M"))


# Test to_month normalization
@pytest.mark.parametrize(
    "value",
    ["2025-05", "2025-5", "2025-05-17", date(2025, 5, 17), datetime(2025, 5, 31, 23, 59),
     pd.Timestamp("2025-05-01"), pd.Period("2025-05-17", freq="D"), pd.Period("2025-05", freq="M")],
)
def test_to_month_accepts_month_like_values(value):
    """Test that every month-like input normalizes to the same monthly period."""
    assert to_month(value) == pd.Period("2025-05", freq="M")


@pytest.mark.parametrize("value", ["2025-13", "2025-00", "May 2025", "", "25-05"])
def test_to_month_rejects_malformed_strings(value):
    with pytest.raises(ValueError, match="expected \"YYYY-MM\""):
        to_month(value)


def test_to_month_rejects_non_month_types():
    with pytest.raises(TypeError):
        to_month(202505)


# Test month boundaries
def test_first_and_last_day():
    assert first_day("2024-02") == date(2024, 2, 1)
    assert last_day("2024-02") == date(2024, 2, 29)
    assert last_day("2025-02") == date(2025, 2, 28)
    assert last_day("2025-12") == date(2025, 12, 31)


# Test rental period offset
def test_rental_period_for_target_examples():
    assert rental_period_for_target("2025-05") == pd.Period("2025-04", freq="M")
    assert rental_period_for_target("2025-01") == pd.Period("2024-12", freq="M")


@pytest.mark.parametrize("month", ALL_MONTHS)
def test_rental_period_is_one_month_before_target(month):
    """Test that the evaluated rental period is exactly the previous calendar month."""
    period = rental_period_for_target(month)
    assert period + 1 == month
    assert period.freqstr == "M"
    # Re-applying with the same target gives the same answer
    assert rental_period_for_target(month) == period


def test_reporting_month_is_inverse_of_rental_period():
    for month in ALL_MONTHS:
        assert reporting_month_for_period(rental_period_for_target(month)) == month


def test_custom_arrears_offset():
    assert rental_period_for_target("2025-05", offset=0) == pd.Period("2025-05", freq="M")
    assert rental_period_for_target("2025-05", offset=2) == pd.Period("2025-03", freq="M")


# Test fiscal year boundaries
@pytest.mark.parametrize(
    "month,expected",
    [
        ("2025-01", "2024-04"),
        ("2025-02", "2024-04"),
        ("2025-03", "2024-04"),
        ("2025-04", "2025-04"),
        ("2025-05", "2025-04"),
        ("2025-12", "2025-04"),
    ],
)
def test_fiscal_year_start(month, expected):
    assert fiscal_year_start(month) == pd.Period(expected, freq="M")


@pytest.mark.parametrize("month", ALL_MONTHS)
def test_fiscal_year_start_is_an_april_not_after_month(month):
    start = fiscal_year_start(month)
    assert start.month == 4
    assert start <= month
    assert month.ordinal - start.ordinal < 12


def test_fiscal_year_start_with_calendar_year():
    assert fiscal_year_start("2025-03", start_month=1) == pd.Period("2025-01", freq="M")


# Test month ranges
def test_month_range_is_inclusive_and_ordered():
    months = month_range("2024-11", "2025-02")
    assert months == [
        pd.Period("2024-11", freq="M"),
        pd.Period("2024-12", freq="M"),
        pd.Period("2025-01", freq="M"),
        pd.Period("2025-02", freq="M"),
    ]


def test_month_range_single_month():
    assert month_range("2025-03", "2025-03") == [pd.Period("2025-03", freq="M")]


def test_month_range_rejects_reversed_bounds():
    with pytest.raises(InvalidRangeError, match="2025-04 is after 2025-03") as exc_info:
        month_range("2025-04", "2025-03")
    assert isinstance(exc_info.value, ValueError)
    assert exc_info.value.start == pd.Period("2025-04", freq="M")
