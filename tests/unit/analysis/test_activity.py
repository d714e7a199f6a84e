# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from datetime import date

import pytest

from rentwise.analysis import (
    active_at_month_end,
    active_during_period,
    active_on,
    leases_for_units,
    occupied_unit_ids,
)


class TestActiveAtMonthEnd:
    def test_lease_ending_on_month_end_is_active(self, make_lease):
        lease = make_lease(start=date(2025, 1, 15), end=date(2025, 5, 31))
        assert active_at_month_end(lease, "2025-05")
        assert not active_at_month_end(lease, "2025-06")

    def test_lease_ending_mid_month_is_not_active_at_month_end(self, make_lease):
        lease = make_lease(start=date(2025, 1, 1), end=date(2025, 5, 15))
        assert not active_at_month_end(lease, "2025-05")

    def test_manual_flag_keeps_holdover_lease_active(self, make_lease):
        """Test that staff-flagged leases count past their nominal end date."""
        lease = make_lease(start=date(2024, 1, 1), end=date(2024, 12, 31), is_active=True)
        assert active_at_month_end(lease, "2025-06")

    def test_manual_flag_does_not_predate_lease_start(self, make_lease):
        lease = make_lease(start=date(2025, 7, 1), end=date(2026, 6, 30), is_active=True)
        assert not active_at_month_end(lease, "2025-06")

    def test_lease_starting_on_last_day_counts(self, make_lease):
        lease = make_lease(start=date(2025, 6, 30), end=date(2026, 6, 29))
        assert active_at_month_end(lease, "2025-06")

    def test_active_on_single_day(self, make_lease):
        lease = make_lease(start=date(2025, 1, 1), end=date(2025, 3, 31))
        assert active_on(lease, date(2025, 3, 31))
        assert not active_on(lease, date(2025, 4, 1))
        assert not active_on(lease, date(2024, 12, 31))


class TestActiveDuringPeriod:
    @pytest.mark.parametrize(
        "start,end,expected",
        [
            (date(2025, 1, 1), date(2025, 12, 31), True),  # covers the month
            (date(2025, 3, 31), date(2026, 3, 30), True),  # starts on the last day
            (date(2024, 3, 1), date(2025, 3, 1), True),  # ends on the first day
            (date(2025, 3, 10), date(2025, 3, 20), True),  # inside the month
            (date(2024, 3, 1), date(2025, 2, 28), False),  # ended before
            (date(2025, 4, 1), date(2026, 3, 31), False),  # starts after
        ],
    )
    def test_overlap_is_inclusive(self, make_lease, start, end, expected):
        lease = make_lease(start=start, end=end)
        assert active_during_period(lease, "2025-03") is expected

    def test_manual_flag_is_ignored(self, make_lease):
        """Test that liability follows the dates, whatever the current flag says."""
        lease = make_lease(start=date(2024, 3, 1), end=date(2025, 2, 28), is_active=True)
        assert not active_during_period(lease, "2025-03")


def test_predicates_are_not_interchangeable(make_lease):
    """A lease ending mid-month owes that month's rent but no longer occupies the unit."""
    lease = make_lease(start=date(2025, 1, 1), end=date(2025, 5, 15))
    assert active_during_period(lease, "2025-05")
    assert not active_at_month_end(lease, "2025-05")


def test_leases_for_units_preserves_order(make_lease):
    leases = [make_lease("l1", "u2"), make_lease("l2", "u9"), make_lease("l3", "u1")]
    assert [lease.uid for lease in leases_for_units(leases, {"u1", "u2"})] == ["l1", "l3"]
    assert leases_for_units(leases, set()) == []


def test_occupied_unit_ids(make_lease):
    leases = [
        make_lease("l1", "u1"),
        make_lease("l2", "u2", end=date(2025, 4, 30)),
        make_lease("l3", "u3", end=date(2025, 4, 30), is_active=True),
    ]
    assert occupied_unit_ids(leases, "2025-05") == {"u1", "u3"}
