# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Fiscal year-to-date rent collected per property group."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Iterable, List, Optional, Sequence

import pandas as pd

from ..core.primitives import (
    AnalyticsSettings,
    MonthLike,
    fiscal_year_start,
    month_range,
    rental_period_for_target,
    to_month,
)
from ..core.records import Lease, Unit
from .activity import leases_for_units
from .payments import PaymentLedger

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


def ytd_periods(
    target_month: MonthLike, settings: Optional[AnalyticsSettings] = None
) -> List[pd.Period]:
    """
    Rental periods counted towards the fiscal YTD of ``target_month``.

    From the rental period of the fiscal year's first month through the rental
    period of the target month, both inclusive.
    """
    settings = settings or AnalyticsSettings()
    offset = settings.fiscal.arrears_offset_months
    start = fiscal_year_start(target_month, settings.fiscal.fiscal_year_start_month)
    return month_range(
        rental_period_for_target(start, offset),
        rental_period_for_target(target_month, offset),
    )


def fiscal_ytd_collected(
    target_month: MonthLike,
    units: Sequence[Unit],
    leases: Iterable[Lease],
    ledger: PaymentLedger,
    settings: Optional[AnalyticsSettings] = None,
) -> Decimal:
    """
    Rent collected for the fiscal year to date across every lease ever on ``units``.

    Payments count whenever they were recorded; only their rental-period tag
    decides whether they fall inside the fiscal window.
    """
    settings = settings or AnalyticsSettings()
    unit_ids = {unit.uid for unit in units}
    lease_ids = [lease.uid for lease in leases_for_units(leases, unit_ids)]
    if not lease_ids:
        return ZERO

    total = ZERO
    periods = ytd_periods(target_month, settings)
    for period in periods:
        total += ledger.total(lease_ids, period)
    logger.debug(
        f"Fiscal YTD for {to_month(target_month)} over {periods[0]}..{periods[-1]}: {total}"
    )
    return total
