# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Lease activity predicates.

Two deliberately separate questions:

- ``active_at_month_end``: is the unit occupied when the month closes? Staff
  can keep a lease open past its nominal end (``is_active``), so the flag
  counts here.
- ``active_during_period``: does the lease owe rent for a rental period? Any
  overlap between the lease dates and the month makes it liable for the full
  monthly rent, whatever its current flag says.
"""

from __future__ import annotations

from datetime import date
from typing import Collection, Iterable, List, Set

from ..core.primitives import MonthLike, first_day, last_day
from ..core.records import Lease


def active_on(lease: Lease, day: date) -> bool:
    """Occupancy test on a single day: started, and not yet ended or kept open by staff."""
    return lease.lease_start <= day and (lease.lease_end >= day or lease.is_active)


def active_at_month_end(lease: Lease, month: MonthLike) -> bool:
    """True if the lease occupies its unit on the last day of ``month``."""
    return active_on(lease, last_day(month))


def active_during_period(lease: Lease, period: MonthLike) -> bool:
    """True if [lease_start, lease_end] overlaps the rental period (both ends inclusive)."""
    return lease.lease_start <= last_day(period) and lease.lease_end >= first_day(period)


def leases_for_units(leases: Iterable[Lease], unit_ids: Collection[str]) -> List[Lease]:
    """Leases attached to any of ``unit_ids``, preserving input order."""
    return [lease for lease in leases if lease.unit_id in unit_ids]


def occupied_unit_ids(leases: Iterable[Lease], month: MonthLike) -> Set[str]:
    """Units with at least one lease active at the end of ``month``."""
    return {lease.unit_id for lease in leases if active_at_month_end(lease, month)}
