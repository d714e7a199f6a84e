# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Rental-period reconciliation and delinquency analytics.

Components, leaves first: activity predicates and the payment filter; the
single-period and historical delinquency scanners and the fiscal YTD
aggregator; the property-group rollup and its public entry point ``run``.
"""

from .activity import (
    active_at_month_end,
    active_during_period,
    active_on,
    leases_for_units,
    occupied_unit_ids,
)
from .api import run, run_records
from .delinquency import (
    amount_due,
    delinquency_rate,
    grade_delinquency,
    lease_history_periods,
    scan_history,
    scan_lease_history,
    scan_period,
)
from .payments import PaymentLedger, filter_payments, sum_paid
from .results import (
    DelinquentPeriod,
    DelinquentUnit,
    GroupReport,
    HistoricalDelinquentUnit,
    PeriodDelinquency,
    PortfolioReport,
)
from .rollup import build_group_report, build_portfolio_report, occupancy_rate
from .summary import SummaryReport, build_cadence_summary, build_summary, summary_window
from .ytd import fiscal_ytd_collected, ytd_periods

__all__ = [
    # Entry points
    "run",
    "run_records",
    "build_group_report",
    "build_portfolio_report",
    # Activity
    "active_at_month_end",
    "active_during_period",
    "active_on",
    "leases_for_units",
    "occupied_unit_ids",
    # Payments
    "PaymentLedger",
    "filter_payments",
    "sum_paid",
    # Scanners and aggregates
    "amount_due",
    "delinquency_rate",
    "grade_delinquency",
    "lease_history_periods",
    "scan_history",
    "scan_lease_history",
    "scan_period",
    "fiscal_ytd_collected",
    "ytd_periods",
    "occupancy_rate",
    # Summary
    "SummaryReport",
    "build_cadence_summary",
    "build_summary",
    "summary_window",
    # Results
    "DelinquentPeriod",
    "DelinquentUnit",
    "GroupReport",
    "HistoricalDelinquentUnit",
    "PeriodDelinquency",
    "PortfolioReport",
]
