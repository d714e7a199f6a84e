# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
rentwise Core Primitives

Building blocks shared by every analytics component: the immutable model base,
period calculus, constrained types, enums and settings.
"""

from .enums import DelinquencySeverityEnum, PaymentTypeEnum, ReportCadenceEnum
from .model import Model
from .periods import (
    ARREARS_OFFSET_MONTHS,
    FISCAL_YEAR_START_MONTH,
    InvalidRangeError,
    MonthLike,
    first_day,
    fiscal_year_start,
    last_day,
    month_range,
    rental_period_for_target,
    reporting_month_for_period,
    to_month,
)
from .settings import (
    AnalyticsSettings,
    DelinquencySettings,
    FiscalSettings,
    ReportingSettings,
)
from .types import MonthPeriod, NonNegativeDecimal, PercentDecimal, PositiveInt

__all__ = [
    # Core models
    "Model",
    # Period calculus
    "ARREARS_OFFSET_MONTHS",
    "FISCAL_YEAR_START_MONTH",
    "InvalidRangeError",
    "MonthLike",
    "first_day",
    "fiscal_year_start",
    "last_day",
    "month_range",
    "rental_period_for_target",
    "reporting_month_for_period",
    "to_month",
    # Settings
    "AnalyticsSettings",
    "DelinquencySettings",
    "FiscalSettings",
    "ReportingSettings",
    # Enums
    "DelinquencySeverityEnum",
    "PaymentTypeEnum",
    "ReportCadenceEnum",
    # Types
    "MonthPeriod",
    "NonNegativeDecimal",
    "PercentDecimal",
    "PositiveInt",
]
