# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Tabular views of a PortfolioReport.

Reports only reshape already-computed results into DataFrames for export and
display; they never recompute analytics.
"""

from __future__ import annotations

from typing import List

import pandas as pd

from ..analysis.results import PortfolioReport

GROUP_SUMMARY_COLUMNS = [
    "group_name",
    "unit_count",
    "occupied_count",
    "occupancy_rate",
    "rental_period",
    "expected",
    "collected",
    "overdue",
    "delinquency_rate",
    "severity",
    "delinquent_units",
    "historical_delinquents",
    "total_historical_overdue",
    "ytd_collected",
    "error",
]

DELINQUENT_UNIT_COLUMNS = [
    "group_name",
    "rental_period",
    "unit_number",
    "tenant_name",
    "lease_rent_amount",
    "amount_paid",
    "amount_due",
    "lease_end",
]

HISTORICAL_COLUMNS = [
    "group_name",
    "unit_number",
    "tenant_name",
    "lease_rent_amount",
    "period",
    "amount_due",
    "total_overdue_amount",
]


def group_summary_frame(report: PortfolioReport) -> pd.DataFrame:
    """One row per group, indexed by group name."""
    rows: List[dict] = []
    for group in report.groups:
        period = group.period
        rows.append(
            {
                "group_name": group.group_name,
                "unit_count": group.unit_count,
                "occupied_count": group.occupied_count,
                "occupancy_rate": group.occupancy_rate,
                "rental_period": group.rental_period,
                "expected": period.expected if period else None,
                "collected": period.collected if period else None,
                "overdue": period.overdue_amount if period else None,
                "delinquency_rate": period.delinquency_rate if period else None,
                "severity": period.severity.value if period else None,
                "delinquent_units": len(group.delinquent_units),
                "historical_delinquents": len(group.historical_delinquents),
                "total_historical_overdue": group.total_historical_overdue,
                "ytd_collected": group.ytd_collected,
                "error": group.error,
            }
        )
    return pd.DataFrame(rows, columns=GROUP_SUMMARY_COLUMNS).set_index("group_name")


def delinquent_units_frame(report: PortfolioReport) -> pd.DataFrame:
    """One row per lease under-paid for the report's rental period."""
    rows = [
        {
            "group_name": group.group_name,
            "rental_period": group.rental_period,
            "unit_number": unit.unit_number,
            "tenant_name": unit.tenant_name,
            "lease_rent_amount": unit.lease_rent_amount,
            "amount_paid": unit.amount_paid,
            "amount_due": unit.amount_due,
            "lease_end": unit.lease_end,
        }
        for group in report.groups
        for unit in group.delinquent_units
    ]
    return pd.DataFrame(rows, columns=DELINQUENT_UNIT_COLUMNS)


def historical_delinquency_frame(report: PortfolioReport) -> pd.DataFrame:
    """Long-form arrears ledger: one row per lease per delinquent period."""
    rows = [
        {
            "group_name": group.group_name,
            "unit_number": record.unit_number,
            "tenant_name": record.tenant_name,
            "lease_rent_amount": record.lease_rent_amount,
            "period": entry.period,
            "amount_due": entry.amount_due,
            "total_overdue_amount": record.total_overdue_amount,
        }
        for group in report.groups
        for record in group.historical_delinquents
        for entry in record.delinquent_periods
    ]
    return pd.DataFrame(rows, columns=HISTORICAL_COLUMNS)
