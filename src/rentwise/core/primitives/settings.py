# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from pydantic import Field, model_validator

from .model import Model
from .periods import ARREARS_OFFSET_MONTHS, FISCAL_YEAR_START_MONTH
from .types import MonthPeriod, NonNegativeDecimal, PercentDecimal, PositiveInt


class FiscalSettings(Model):
    """Fiscal calendar and the reporting-month to rental-period policy."""

    fiscal_year_start_month: PositiveInt = Field(
        default=FISCAL_YEAR_START_MONTH,
        ge=1,
        le=12,
        description="Month the fiscal year begins (4=April).",
    )
    arrears_offset_months: PositiveInt = Field(
        default=ARREARS_OFFSET_MONTHS,
        description="Months between a rental period and the month its rent is collected.",
    )


class DelinquencySettings(Model):
    """Thresholds used when flagging and grading delinquency."""

    tolerance: NonNegativeDecimal = Field(
        default=Decimal("0"),
        description="Amount due at or below this value is not treated as delinquent.",
    )
    warning_rate: PercentDecimal = Field(
        default=Decimal("5"),
        description="Delinquency rate (%) above which a group is graded WARNING.",
    )
    critical_rate: PercentDecimal = Field(
        default=Decimal("15"),
        description="Delinquency rate (%) above which a group is graded CRITICAL.",
    )
    history_floor: Optional[MonthPeriod] = Field(
        default=None,
        description="Earliest rental period the historical scan looks at (None = lease start).",
    )

    @model_validator(mode="after")
    def check_rate_order(self) -> "DelinquencySettings":
        if self.warning_rate > self.critical_rate:
            raise ValueError("warning_rate must not exceed critical_rate")
        return self


class ReportingSettings(Model):
    """Settings related to report rounding and display."""

    default_group_name: str = Field(
        default="Default",
        min_length=1,
        description="Implicit group for units without a group label.",
    )
    percent_places: PositiveInt = Field(
        default=2, ge=1, description="Decimal places kept on percentages."
    )
    currency_places: PositiveInt = Field(
        default=0, description="Decimal places shown when formatting currency."
    )
    currency_symbol: str = "₹"
    indian_digit_grouping: bool = Field(
        default=True,
        description="Group digits as 12,34,567 instead of 1,234,567.",
    )


class AnalyticsSettings(Model):
    """
    Top-level configuration for one analytics request.

    Usage Examples:
        # Defaults: April fiscal year, rent collected one month in arrears
        settings = AnalyticsSettings()

        # Ignore sub-rupee shortfalls and compute groups on four threads
        settings = AnalyticsSettings(
            delinquency={"tolerance": "1"},
            max_workers=4,
        )
    """

    fiscal: FiscalSettings = Field(default_factory=FiscalSettings)
    delinquency: DelinquencySettings = Field(default_factory=DelinquencySettings)
    reporting: ReportingSettings = Field(default_factory=ReportingSettings)
    max_workers: PositiveInt = Field(
        default=1,
        ge=1,
        description="Threads used to compute property groups (1 = sequential).",
    )
