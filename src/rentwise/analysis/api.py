# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Analytics API

Public entry point for a reporting request. The caller fetches the ledger
from its store beforehand; ``run`` only computes.
"""

from __future__ import annotations

from typing import Iterable, Optional, Union

from ..core.primitives import AnalyticsSettings, MonthLike
from ..core.records import Lease, Payment, PropertyGroup, Unit
from ..core.snapshot import PortfolioSnapshot
from .results import PortfolioReport
from .rollup import build_portfolio_report


def run(
    snapshot: PortfolioSnapshot,
    target_month: MonthLike,
    settings: Optional[Union[AnalyticsSettings, dict]] = None,
) -> PortfolioReport:
    """
    Produce the per-group report for a reporting month.

    Workflow:
      1) Derive the rental period (target month - arrears offset) and fiscal year start
      2) Report each group: occupancy, period delinquency, arrears history, fiscal YTD
      3) Attach any group failure to that group's report and continue

    Args:
        snapshot: Groups, units, leases and payments to report on.
        target_month: Reporting month, "YYYY-MM" or any month-like value.
        settings: AnalyticsSettings (or a dict of them); defaults when omitted.

    Returns:
        PortfolioReport with one GroupReport per group, default group included.

    Example:
        ```python
        from rentwise import PortfolioSnapshot, run

        snapshot = PortfolioSnapshot.build(groups, units, leases, payments)
        report = run(snapshot, "2025-06")
        tower = report.get_group("Tower A")
        print(tower.period.delinquency_rate, tower.ytd_collected)
        ```
    """
    if settings is None:
        settings = AnalyticsSettings()
    elif isinstance(settings, dict):
        settings = AnalyticsSettings(**settings)
    return build_portfolio_report(snapshot, target_month, settings)


def run_records(
    target_month: MonthLike,
    units: Iterable[Unit],
    leases: Iterable[Lease],
    payments: Iterable[Payment],
    groups: Iterable[PropertyGroup] = (),
    settings: Optional[Union[AnalyticsSettings, dict]] = None,
) -> PortfolioReport:
    """Convenience wrapper building the snapshot from plain collections."""
    snapshot = PortfolioSnapshot.build(
        groups=groups, units=units, leases=leases, payments=payments
    )
    return run(snapshot, target_month, settings)
