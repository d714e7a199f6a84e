# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Property-group rollup.

Composes occupancy, the single-period scan, the historical scan and the fiscal
YTD total into one ``GroupReport`` per group. Groups share nothing mutable, so
they may be computed in any order or on a thread pool. A failure inside one
group is captured on that group's report and never aborts its siblings.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from decimal import Decimal
from typing import List, Optional

from ..core.primitives import (
    AnalyticsSettings,
    MonthLike,
    fiscal_year_start,
    rental_period_for_target,
    to_month,
)
from ..core.snapshot import PortfolioSnapshot
from .activity import active_at_month_end, leases_for_units
from .delinquency import scan_history, scan_period
from .results import GroupReport, PortfolioReport
from .ytd import fiscal_ytd_collected

logger = logging.getLogger(__name__)

HUNDRED = Decimal("100")


def occupancy_rate(
    occupied: int, unit_count: int, places: int = 2
) -> Optional[Decimal]:
    """Occupied leases per unit as a percentage; None for a group without units."""
    if unit_count == 0:
        return None
    rate = Decimal(occupied) / Decimal(unit_count) * HUNDRED
    return rate.quantize(Decimal(1).scaleb(-places))


def build_group_report(
    group_name: str,
    target_month: MonthLike,
    snapshot: PortfolioSnapshot,
    settings: Optional[AnalyticsSettings] = None,
) -> GroupReport:
    """
    Compute one group's report. Exceptions propagate to the caller.

    Args:
        group_name: Group to report on
        target_month: Reporting month ("YYYY-MM" or any month-like value)
        snapshot: Inbound ledger snapshot
        settings: Analytics settings

    Returns:
        GroupReport for the group
    """
    settings = settings or AnalyticsSettings()
    target_month = to_month(target_month)
    rental_period = rental_period_for_target(
        target_month, settings.fiscal.arrears_offset_months
    )
    ledger = snapshot.payment_ledger

    units = snapshot.units_in_group(group_name, settings.reporting.default_group_name)
    group_leases = leases_for_units(snapshot.leases, {unit.uid for unit in units})
    occupied = sum(1 for lease in group_leases if active_at_month_end(lease, target_month))

    period = scan_period(
        rental_period, units, group_leases, ledger, target_month, settings
    )
    historical = scan_history(rental_period, units, group_leases, ledger, settings)
    ytd = fiscal_ytd_collected(target_month, units, group_leases, ledger, settings)

    logger.debug(
        f"Group '{group_name}' {target_month}: {len(units)} units, {occupied} occupied, "
        f"{len(period.delinquent_units)} delinquent, {len(historical)} in arrears"
    )
    return GroupReport(
        group_name=group_name,
        target_month=target_month,
        rental_period=rental_period,
        unit_count=len(units),
        occupied_count=occupied,
        occupancy_rate=occupancy_rate(
            occupied, len(units), settings.reporting.percent_places
        ),
        period=period,
        historical_delinquents=historical,
        ytd_collected=ytd,
    )


def _isolated_group_report(
    group_name: str,
    target_month,
    snapshot: PortfolioSnapshot,
    settings: AnalyticsSettings,
) -> GroupReport:
    try:
        return build_group_report(group_name, target_month, snapshot, settings)
    except Exception as e:
        logger.exception(f"Group '{group_name}' failed for {target_month}")
        return GroupReport(
            group_name=group_name,
            target_month=target_month,
            rental_period=rental_period_for_target(
                target_month, settings.fiscal.arrears_offset_months
            ),
            error=f"{type(e).__name__}: {e}",
        )


def build_portfolio_report(
    snapshot: PortfolioSnapshot,
    target_month: MonthLike,
    settings: Optional[AnalyticsSettings] = None,
) -> PortfolioReport:
    """
    Report every property group (explicit groups plus the default group).

    Group failures are attached to the failing group's report; the returned
    report always contains one entry per group, in ``group_names`` order.
    """
    settings = settings or AnalyticsSettings()
    target_month = to_month(target_month)
    default_name = settings.reporting.default_group_name

    orphaned_payments = snapshot.orphaned_payments
    if orphaned_payments:
        logger.warning(
            f"{len(orphaned_payments)} payments reference unknown leases; they are ignored"
        )
    orphaned_leases = snapshot.orphaned_leases
    if orphaned_leases:
        logger.warning(
            f"{len(orphaned_leases)} leases reference unknown units; they are ignored"
        )

    names = snapshot.group_names(default_name)
    # Build the shared ledger before any worker touches it
    _ = snapshot.payment_ledger

    if settings.max_workers > 1 and len(names) > 1:
        with ThreadPoolExecutor(max_workers=settings.max_workers) as pool:
            groups: List[GroupReport] = list(
                pool.map(
                    lambda name: _isolated_group_report(
                        name, target_month, snapshot, settings
                    ),
                    names,
                )
            )
    else:
        groups = [
            _isolated_group_report(name, target_month, snapshot, settings)
            for name in names
        ]

    report = PortfolioReport(
        target_month=target_month,
        rental_period=rental_period_for_target(
            target_month, settings.fiscal.arrears_offset_months
        ),
        fiscal_year_start=fiscal_year_start(
            target_month, settings.fiscal.fiscal_year_start_month
        ),
        groups=groups,
    )
    if report.failed_groups:
        logger.warning(
            f"Report {target_month}: {len(report.failed_groups)} of {len(groups)} groups failed"
        )
    return report
