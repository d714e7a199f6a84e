# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Single-period and historical delinquency scanners.

Both scanners share one definition of what a lease owes for a rental period:

    due = max(0, rent_amount - paid)

where ``paid`` is the lease's rent-typed payments tagged with the period and
recorded in the period's reporting month (period + arrears offset). Rent is
flat: a lease overlapping any part of a period owes the full monthly amount.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Dict, Iterable, List, Optional, Sequence

import pandas as pd

from ..core.primitives import (
    AnalyticsSettings,
    DelinquencySeverityEnum,
    MonthLike,
    month_range,
    rental_period_for_target,
    reporting_month_for_period,
    to_month,
)
from ..core.records import Lease, Unit
from .activity import active_during_period, leases_for_units
from .payments import PaymentLedger
from .results import (
    DelinquentPeriod,
    DelinquentUnit,
    HistoricalDelinquentUnit,
    PeriodDelinquency,
)

logger = logging.getLogger(__name__)

ZERO = Decimal("0")
HUNDRED = Decimal("100")
UNKNOWN_UNIT_NUMBER = "N/A"


def amount_due(rent_amount: Decimal, paid: Decimal) -> Decimal:
    """Unpaid rent, clamped at zero (overpayment is never negative debt)."""
    return max(ZERO, rent_amount - paid)


def delinquency_rate(
    expected: Decimal, collected: Decimal, places: int = 2
) -> Optional[Decimal]:
    """(expected - collected) / expected as a percentage; None when nothing was expected."""
    if expected <= 0:
        return None
    rate = (expected - collected) / expected * HUNDRED
    return rate.quantize(Decimal(1).scaleb(-places))


def grade_delinquency(
    rate: Optional[Decimal], settings: Optional[AnalyticsSettings] = None
) -> DelinquencySeverityEnum:
    """Map a delinquency rate onto the configured severity bands."""
    settings = settings or AnalyticsSettings()
    if rate is None:
        return DelinquencySeverityEnum.NOT_APPLICABLE
    if rate > settings.delinquency.critical_rate:
        return DelinquencySeverityEnum.CRITICAL
    if rate > settings.delinquency.warning_rate:
        return DelinquencySeverityEnum.WARNING
    return DelinquencySeverityEnum.NONE


def _unit_numbers(units: Iterable[Unit]) -> Dict[str, str]:
    return {unit.uid: unit.unit_number for unit in units}


def scan_period(
    period: MonthLike,
    units: Sequence[Unit],
    leases: Iterable[Lease],
    ledger: PaymentLedger,
    reporting_month: MonthLike,
    settings: Optional[AnalyticsSettings] = None,
) -> PeriodDelinquency:
    """
    Compute expected rent, collected rent and under-paid leases for one period.

    Args:
        period: Rental period evaluated
        units: The group's units; leases on other units are ignored
        leases: All leases (any superset of the group's leases)
        ledger: Payment ledger to select from
        reporting_month: Only payments recorded in this month are counted
        settings: Analytics settings (tolerance, rounding, severity bands)

    Returns:
        PeriodDelinquency for the group and period
    """
    settings = settings or AnalyticsSettings()
    period = to_month(period)
    reporting_month = to_month(reporting_month)
    unit_numbers = _unit_numbers(units)
    tolerance = settings.delinquency.tolerance

    active = [
        lease
        for lease in leases_for_units(leases, unit_numbers)
        if active_during_period(lease, period)
    ]
    paid_by_lease = ledger.paid_by_lease(
        [lease.uid for lease in active], period, reporting_month
    )

    expected = ZERO
    collected = ZERO
    delinquent_units: List[DelinquentUnit] = []
    for lease in active:
        paid = paid_by_lease[lease.uid]
        expected += lease.rent_amount
        collected += paid
        due = amount_due(lease.rent_amount, paid)
        if due > tolerance:
            delinquent_units.append(
                DelinquentUnit(
                    unit_id=lease.unit_id,
                    unit_number=unit_numbers.get(lease.unit_id, UNKNOWN_UNIT_NUMBER),
                    lease_id=lease.uid,
                    tenant_name=lease.tenant_name,
                    lease_rent_amount=lease.rent_amount,
                    amount_paid=paid,
                    amount_due=due,
                    lease_end=lease.lease_end,
                )
            )

    rate = delinquency_rate(expected, collected, settings.reporting.percent_places)
    logger.debug(
        f"Period {period} (recorded {reporting_month}): {len(active)} active leases, "
        f"expected {expected}, collected {collected}, {len(delinquent_units)} delinquent"
    )
    return PeriodDelinquency(
        rental_period=period,
        reporting_month=reporting_month,
        expected=expected,
        collected=collected,
        delinquency_rate=rate,
        severity=grade_delinquency(rate, settings),
        delinquent_units=delinquent_units,
    )


def lease_history_periods(
    lease: Lease,
    target_period: MonthLike,
    settings: Optional[AnalyticsSettings] = None,
) -> List[pd.Period]:
    """
    Rental periods the historical scan walks for one lease.

    From the rental period of the lease's start month through the target
    period, stopping at the lease's end month and starting no earlier than
    the configured history floor. Empty when the lease starts after the
    target period, or ends before the walk would start (a lease ended before
    the floor, or one dated end-before-start).
    """
    settings = settings or AnalyticsSettings()
    target_period = to_month(target_period)
    first = rental_period_for_target(
        lease.lease_start, settings.fiscal.arrears_offset_months
    )
    floor = settings.delinquency.history_floor
    if floor is not None and floor > first:
        first = floor
    last = min(target_period, to_month(lease.lease_end))
    if first > last:
        return []
    return month_range(first, last)


def scan_lease_history(
    lease: Lease,
    target_period: MonthLike,
    ledger: PaymentLedger,
    unit_number: str = UNKNOWN_UNIT_NUMBER,
    settings: Optional[AnalyticsSettings] = None,
) -> Optional[HistoricalDelinquentUnit]:
    """Arrears ledger of a single lease; None when it was never under-paid."""
    settings = settings or AnalyticsSettings()
    offset = settings.fiscal.arrears_offset_months
    tolerance = settings.delinquency.tolerance

    delinquent_periods: List[DelinquentPeriod] = []
    for period in lease_history_periods(lease, target_period, settings):
        if not active_during_period(lease, period):
            continue
        paid = ledger.total(
            [lease.uid], period, reporting_month_for_period(period, offset)
        )
        due = amount_due(lease.rent_amount, paid)
        if due > tolerance:
            delinquent_periods.append(DelinquentPeriod(period=period, amount_due=due))

    if not delinquent_periods:
        return None
    return HistoricalDelinquentUnit(
        unit_id=lease.unit_id,
        unit_number=unit_number,
        lease_id=lease.uid,
        tenant_name=lease.tenant_name,
        lease_rent_amount=lease.rent_amount,
        lease_end=lease.lease_end,
        delinquent_periods=delinquent_periods,
        total_overdue_amount=sum((p.amount_due for p in delinquent_periods), ZERO),
    )


def scan_history(
    target_period: MonthLike,
    units: Sequence[Unit],
    leases: Iterable[Lease],
    ledger: PaymentLedger,
    settings: Optional[AnalyticsSettings] = None,
) -> List[HistoricalDelinquentUnit]:
    """
    Walk every lease ever attached to the group's units and collect all under-paid periods.

    Returns one record per lease with at least one delinquent period, in lease
    order; periods within a record are chronological.
    """
    settings = settings or AnalyticsSettings()
    unit_numbers = _unit_numbers(units)
    records: List[HistoricalDelinquentUnit] = []
    seen = set()
    for lease in leases_for_units(leases, unit_numbers):
        if lease.uid in seen:
            continue
        seen.add(lease.uid)
        record = scan_lease_history(
            lease,
            target_period,
            ledger,
            unit_number=unit_numbers.get(lease.unit_id, UNKNOWN_UNIT_NUMBER),
            settings=settings,
        )
        if record is not None:
            records.append(record)
    logger.debug(
        f"History through {to_month(target_period)}: {len(records)} leases in arrears"
    )
    return records
