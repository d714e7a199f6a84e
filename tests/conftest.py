# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Test utilities and fixtures for rentwise testing.

Factory fixtures build records with sensible defaults so each test only
spells out the fields it is about: a 10,000/month lease running through
calendar 2025, paid on the 5th of the month after its rental period.
"""

from __future__ import annotations

import itertools
from datetime import date
from decimal import Decimal
from typing import Optional

import pytest

from rentwise.core import Lease, Payment, PortfolioSnapshot, PropertyGroup, Unit

RENT = Decimal("10000")


@pytest.fixture
def make_unit():
    def _make_unit(
        uid: str = "u1", unit_number: Optional[str] = None, group_name: Optional[str] = "Tower A"
    ) -> Unit:
        return Unit(uid=uid, unit_number=unit_number or uid.upper(), group_name=group_name)

    return _make_unit


@pytest.fixture
def make_lease():
    def _make_lease(
        uid: str = "l1",
        unit_id: str = "u1",
        rent="10000",
        start: date = date(2025, 1, 1),
        end: date = date(2025, 12, 31),
        is_active: bool = False,
        tenant_name: Optional[str] = None,
        created_at: Optional[date] = None,
    ) -> Lease:
        return Lease(
            uid=uid,
            unit_id=unit_id,
            tenant_name=tenant_name or f"Tenant {uid}",
            rent_amount=rent,
            lease_start=start,
            lease_end=end,
            is_active=is_active,
            created_at=created_at,
        )

    return _make_lease


@pytest.fixture
def make_payment():
    counter = itertools.count(1)

    def _make_payment(
        lease_id: str = "l1",
        amount="10000",
        paid_on: date = date(2025, 6, 5),
        period: str = "2025-05",
        payment_type: Optional[str] = None,
        uid: Optional[str] = None,
    ) -> Payment:
        return Payment(
            uid=uid or f"p{next(counter)}",
            lease_id=lease_id,
            actual_rent_paid=amount,
            payment_date=paid_on,
            rental_period=period,
            payment_type=payment_type,
        )

    return _make_payment


@pytest.fixture
def tower_a_snapshot(make_unit, make_lease, make_payment) -> PortfolioSnapshot:
    """Two units of 10,000 each; only unit 1 paid May rent (recorded in June)."""
    return PortfolioSnapshot.build(
        groups=[PropertyGroup(group_name="Tower A")],
        units=[make_unit("u1"), make_unit("u2")],
        leases=[make_lease("l1", "u1"), make_lease("l2", "u2")],
        payments=[make_payment("l1", "10000", date(2025, 6, 5), "2025-05")],
    )
