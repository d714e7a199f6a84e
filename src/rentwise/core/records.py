# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Inbound records for the analytics engine.

Units, leases, payments and property groups are created by data-entry forms
and spreadsheet import elsewhere and arrive here already deserialized. The
engine only reads them: dates are calendar dates, money is exact ``Decimal``
and rental periods are monthly ``pd.Period`` values.
"""

from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import Field, field_validator

from .primitives import Model, MonthPeriod, NonNegativeDecimal, PaymentTypeEnum


class PropertyGroup(Model):
    """
    A user-defined label partitioning units for reporting.

    Names are stripped of surrounding whitespace, matching how units resolve
    their group in ``Unit.effective_group``.
    """

    group_name: str = Field(min_length=1)
    uid: Optional[str] = None

    @field_validator("group_name", mode="before")
    @classmethod
    def _strip_group_name(cls, value):
        if isinstance(value, str):
            return value.strip()
        return value


class Unit(Model):
    """
    A rental inventory item.

    Attributes:
        uid: Unit identifier referenced by leases
        unit_number: Display number of the unit
        group_name: Property group label; blank means the implicit default group
    """

    uid: str
    unit_number: str
    group_name: Optional[str] = None

    def effective_group(self, default_name: str = "Default") -> str:
        """Group the unit reports under, falling back to ``default_name``."""
        if self.group_name is None or not self.group_name.strip():
            return default_name
        return self.group_name.strip()


class Lease(Model):
    """
    A tenancy of one unit.

    ``is_active`` is maintained by staff and may diverge from the dates, e.g.
    a month-to-month holdover kept open past ``lease_end``.

    Attributes:
        uid: Lease identifier referenced by payments
        unit_id: Unit the lease belongs to
        tenant_name: Tenant display name
        rent_amount: Monthly rent (flat, never pro-rated)
        lease_start: First day of the lease
        lease_end: Last day of the lease
        is_active: Manual "still active" flag
        created_at: Date the lease record was entered, if known
    """

    uid: str
    unit_id: str
    tenant_name: str
    rent_amount: NonNegativeDecimal
    lease_start: date
    lease_end: date
    is_active: bool = False
    created_at: Optional[date] = None


class Payment(Model):
    """
    A recorded payment.

    Attributes:
        uid: Payment identifier
        lease_id: Lease the payment is for
        actual_rent_paid: Amount actually received
        payment_date: Calendar date the payment was recorded
        rental_period: Month the payment is credited against
        payment_type: Optional label; untyped entries count as rent
    """

    uid: str
    lease_id: str
    actual_rent_paid: NonNegativeDecimal
    payment_date: date
    rental_period: MonthPeriod
    payment_type: Optional[str] = None

    @field_validator("payment_type", mode="before")
    @classmethod
    def normalize_payment_type(cls, v: Optional[str]) -> Optional[str]:
        if isinstance(v, PaymentTypeEnum):
            return v.value
        return v

    @property
    def is_rent(self) -> bool:
        """True when the payment counts towards rent collected."""
        return PaymentTypeEnum.is_rent(self.payment_type)
