# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Portfolio summary for scheduled (biweekly, monthly, quarterly) reports.

Unlike the group rollup, the summary is keyed on recording dates: it answers
"what came in, what started and what ended during this window".
"""

from __future__ import annotations

from datetime import date, timedelta
from decimal import Decimal
from typing import Optional, Tuple, Union

from ..core.primitives import (
    AnalyticsSettings,
    Model,
    ReportCadenceEnum,
    first_day,
    last_day,
)
from ..core.snapshot import PortfolioSnapshot
from .activity import active_on
from .payments import sum_paid
from .rollup import occupancy_rate


class SummaryReport(Model):
    """Headline figures for a reporting window."""

    start: date
    end: date
    total_rent_collected: Decimal
    new_leases: int
    ended_leases: int
    unit_count: int
    occupancy_rate: Optional[Decimal] = None

    @property
    def period(self) -> str:
        return f"{self.start.isoformat()} to {self.end.isoformat()}"


def summary_window(
    cadence: Union[ReportCadenceEnum, str], today: date
) -> Tuple[date, date]:
    """
    Window covered by a scheduled report sent on ``today``.

    BIWEEKLY is the 14 days ending today, MONTHLY the calendar month containing
    today and QUARTERLY the calendar quarter containing today.
    """
    cadence = ReportCadenceEnum(cadence)
    if cadence is ReportCadenceEnum.BIWEEKLY:
        return today - timedelta(days=13), today
    if cadence is ReportCadenceEnum.MONTHLY:
        return first_day(today), last_day(today)
    quarter_start = date(today.year, 3 * ((today.month - 1) // 3) + 1, 1)
    quarter_end = last_day(date(today.year, quarter_start.month + 2, 1))
    return quarter_start, quarter_end


def build_summary(
    snapshot: PortfolioSnapshot,
    start: date,
    end: date,
    settings: Optional[AnalyticsSettings] = None,
) -> SummaryReport:
    """
    Summarize activity recorded between ``start`` and ``end`` (inclusive).

    - rent collected: rent-typed payments recorded in the window, whatever their period
    - new leases: leases entered in the window (``created_at``, else ``lease_start``)
    - ended leases: leases whose ``lease_end`` falls in the window
    - occupancy: leases occupying their unit on ``end`` over all units
    """
    settings = settings or AnalyticsSettings()
    if start > end:
        raise ValueError(f"Summary window starts after it ends: {start} > {end}")

    def in_window(day: date) -> bool:
        return start <= day <= end

    collected = sum_paid(
        p for p in snapshot.payments if p.is_rent and in_window(p.payment_date)
    )
    new_leases = sum(
        1 for lease in snapshot.leases if in_window(lease.created_at or lease.lease_start)
    )
    ended_leases = sum(1 for lease in snapshot.leases if in_window(lease.lease_end))
    known_leases = [
        lease for lease in snapshot.leases if lease.unit_id in snapshot.units_by_id
    ]
    occupied = sum(1 for lease in known_leases if active_on(lease, end))
    unit_count = len(snapshot.units)

    return SummaryReport(
        start=start,
        end=end,
        total_rent_collected=collected,
        new_leases=new_leases,
        ended_leases=ended_leases,
        unit_count=unit_count,
        occupancy_rate=occupancy_rate(
            occupied, unit_count, settings.reporting.percent_places
        ),
    )


def build_cadence_summary(
    snapshot: PortfolioSnapshot,
    cadence: Union[ReportCadenceEnum, str],
    today: date,
    settings: Optional[AnalyticsSettings] = None,
) -> SummaryReport:
    """``build_summary`` over ``summary_window(cadence, today)``."""
    start, end = summary_window(cadence, today)
    return build_summary(snapshot, start, end, settings)
