# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
rentwise Reporting

Presentation helpers over finished reports: display formatting and pandas
DataFrame views. Reports format and reshape; they never calculate.
"""

from .formatters import format_currency, format_month_year, format_percent
from .frames import (
    delinquent_units_frame,
    group_summary_frame,
    historical_delinquency_frame,
)

__all__ = [
    "delinquent_units_frame",
    "format_currency",
    "format_month_year",
    "format_percent",
    "group_summary_frame",
    "historical_delinquency_frame",
]
