# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Immutable, in-memory snapshot of a landlord's ledger.

The store-access layer fetches property groups, units, leases and payments
before a report is requested; the snapshot freezes them for the duration of
that request and builds the lookups every analytics component shares.

Linkage is tolerant: a payment whose lease is not in the snapshot, or a lease
whose unit is not in the inventory, contributes nothing to any group. Such
records are counted (``orphaned_payments`` / ``orphaned_leases``) but never
rejected.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property
from typing import TYPE_CHECKING, Dict, Iterable, List, Tuple

from .records import Lease, Payment, PropertyGroup, Unit

if TYPE_CHECKING:
    from rentwise.analysis.payments import PaymentLedger


@dataclass(frozen=True)
class PortfolioSnapshot:
    """
    Read-only bundle of the four inbound collections.

    Attributes:
        groups: Explicit property groups (the implicit default group need not be listed)
        units: Rental inventory
        leases: All leases, current and historical
        payments: The full payment ledger
    """

    groups: Tuple[PropertyGroup, ...] = field(default_factory=tuple)
    units: Tuple[Unit, ...] = field(default_factory=tuple)
    leases: Tuple[Lease, ...] = field(default_factory=tuple)
    payments: Tuple[Payment, ...] = field(default_factory=tuple)

    @classmethod
    def build(
        cls,
        groups: Iterable[PropertyGroup] = (),
        units: Iterable[Unit] = (),
        leases: Iterable[Lease] = (),
        payments: Iterable[Payment] = (),
    ) -> "PortfolioSnapshot":
        """Create a snapshot from any iterables (lists, generators, query results)."""
        return cls(
            groups=tuple(groups),
            units=tuple(units),
            leases=tuple(leases),
            payments=tuple(payments),
        )

    @cached_property
    def units_by_id(self) -> Dict[str, Unit]:
        return {unit.uid: unit for unit in self.units}

    @cached_property
    def leases_by_id(self) -> Dict[str, Lease]:
        return {lease.uid: lease for lease in self.leases}

    @cached_property
    def payment_ledger(self) -> "PaymentLedger":
        """Column-oriented payment view shared by every group of a report."""
        from rentwise.analysis.payments import PaymentLedger

        return PaymentLedger(self.payments)

    def units_in_group(self, group_name: str, default_name: str = "Default") -> List[Unit]:
        """Units reporting under ``group_name``, in inventory order."""
        return [
            unit for unit in self.units if unit.effective_group(default_name) == group_name
        ]

    def group_names(self, default_name: str = "Default") -> List[str]:
        """
        Every group a report covers.

        Explicit groups first (declaration order), then labels used only by
        units (inventory order), then the implicit default group. Each name
        appears once.
        """
        names: List[str] = []
        for group in self.groups:
            if group.group_name not in names:
                names.append(group.group_name)
        for unit in self.units:
            name = unit.effective_group(default_name)
            if name not in names and name != default_name:
                names.append(name)
        if default_name not in names:
            names.append(default_name)
        return names

    @property
    def orphaned_payments(self) -> List[Payment]:
        """Payments referencing a lease that is not in the snapshot."""
        return [p for p in self.payments if p.lease_id not in self.leases_by_id]

    @property
    def orphaned_leases(self) -> List[Lease]:
        """Leases referencing a unit that is not in the inventory."""
        return [lease for lease in self.leases if lease.unit_id not in self.units_by_id]
