# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Outbound report models.

Derived, non-persisted records handed to the presentation layer. Currency is
exact ``Decimal``; ratios with a zero denominator are ``None`` ("not
applicable") rather than zero or NaN. Collections are tuples, so a finished
report cannot be altered in place.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import List, Optional, Tuple

from ..core.primitives import DelinquencySeverityEnum, Model, MonthPeriod

ZERO = Decimal("0")


class DelinquentUnit(Model):
    """A lease under-paid for the evaluated rental period."""

    unit_id: str
    unit_number: str
    lease_id: str
    tenant_name: str
    lease_rent_amount: Decimal
    amount_paid: Decimal
    amount_due: Decimal
    lease_end: date


class DelinquentPeriod(Model):
    """One under-paid rental period of a lease."""

    period: MonthPeriod
    amount_due: Decimal


class HistoricalDelinquentUnit(Model):
    """Full arrears ledger of a lease: every under-paid period up to the target period."""

    unit_id: str
    unit_number: str
    lease_id: str
    tenant_name: str
    lease_rent_amount: Decimal
    lease_end: date
    delinquent_periods: Tuple[DelinquentPeriod, ...]
    total_overdue_amount: Decimal

    @property
    def delinquent_month_count(self) -> int:
        return len(self.delinquent_periods)

    def includes(self, period: MonthPeriod) -> bool:
        return any(p.period == period for p in self.delinquent_periods)


class PeriodDelinquency(Model):
    """
    Expected vs. collected rent of one group for one rental period.

    Attributes:
        rental_period: Period evaluated
        reporting_month: Month whose recordings were counted
        expected: Sum of rent over leases active during the period
        collected: Rent-typed payments for the period recorded in the reporting month
        delinquency_rate: (expected - collected) / expected * 100, None when nothing is expected
        severity: Grade of ``delinquency_rate`` against the configured thresholds
        delinquent_units: Leases with a positive amount due
    """

    rental_period: MonthPeriod
    reporting_month: MonthPeriod
    expected: Decimal
    collected: Decimal
    delinquency_rate: Optional[Decimal] = None
    severity: DelinquencySeverityEnum = DelinquencySeverityEnum.NOT_APPLICABLE
    delinquent_units: Tuple[DelinquentUnit, ...] = ()

    @property
    def overdue_amount(self) -> Decimal:
        """Shortfall of collected against expected, never negative."""
        return max(ZERO, self.expected - self.collected)


class GroupReport(Model):
    """
    One property group's report for a reporting month.

    When the group's computation failed, ``error`` carries the failure and the
    analytic fields are left empty; sibling groups are unaffected.
    """

    group_name: str
    target_month: MonthPeriod
    rental_period: MonthPeriod
    unit_count: int = 0
    occupied_count: int = 0
    occupancy_rate: Optional[Decimal] = None
    period: Optional[PeriodDelinquency] = None
    historical_delinquents: Tuple[HistoricalDelinquentUnit, ...] = ()
    ytd_collected: Decimal = ZERO
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def delinquent_units(self) -> Tuple[DelinquentUnit, ...]:
        return self.period.delinquent_units if self.period is not None else ()

    @property
    def total_historical_overdue(self) -> Decimal:
        return sum((u.total_overdue_amount for u in self.historical_delinquents), ZERO)


class PortfolioReport(Model):
    """All group reports of one analytics request."""

    target_month: MonthPeriod
    rental_period: MonthPeriod
    fiscal_year_start: MonthPeriod
    groups: Tuple[GroupReport, ...] = ()

    def get_group(self, group_name: str) -> GroupReport:
        for group in self.groups:
            if group.group_name == group_name:
                return group
        raise KeyError(f"No report for group '{group_name}'")

    @property
    def group_names(self) -> List[str]:
        return [g.group_name for g in self.groups]

    @property
    def failed_groups(self) -> List[GroupReport]:
        return [g for g in self.groups if not g.ok]

    @property
    def total_expected(self) -> Decimal:
        return sum((g.period.expected for g in self.groups if g.period), ZERO)

    @property
    def total_collected(self) -> Decimal:
        return sum((g.period.collected for g in self.groups if g.period), ZERO)

    @property
    def total_ytd_collected(self) -> Decimal:
        return sum((g.ytd_collected for g in self.groups), ZERO)
