# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from decimal import Decimal

import pandas as pd

from rentwise import run
from rentwise.analysis import rollup
from rentwise.core import PortfolioSnapshot, PropertyGroup
from rentwise.reporting import (
    delinquent_units_frame,
    group_summary_frame,
    historical_delinquency_frame,
)
from rentwise.reporting.frames import (
    DELINQUENT_UNIT_COLUMNS,
    GROUP_SUMMARY_COLUMNS,
    HISTORICAL_COLUMNS,
)


def test_group_summary_frame(tower_a_snapshot):
    frame = group_summary_frame(run(tower_a_snapshot, "2025-06"))

    assert list(frame.index) == ["Tower A", "Default"]
    assert list(frame.columns) == GROUP_SUMMARY_COLUMNS[1:]
    tower = frame.loc["Tower A"]
    assert tower["expected"] == Decimal("20000")
    assert tower["overdue"] == Decimal("10000")
    assert tower["severity"] == "Critical"
    assert tower["delinquent_units"] == 1
    assert tower["historical_delinquents"] == 2
    assert frame.loc["Default", "severity"] == "N/A"
    assert pd.isna(frame.loc["Default", "delinquency_rate"])


def test_group_summary_frame_marks_failed_groups(monkeypatch, make_unit, make_lease):
    def explode(*args, **kwargs):
        raise ValueError("corrupt ledger")

    monkeypatch.setattr(rollup, "scan_history", explode)
    snapshot = PortfolioSnapshot.build(
        groups=[PropertyGroup(group_name="Broken")],
        units=[make_unit("b1", group_name="Broken")],
        leases=[make_lease("l1", "b1")],
    )
    frame = group_summary_frame(run(snapshot, "2025-07"))
    assert frame.loc["Broken", "error"] == "ValueError: corrupt ledger"
    assert pd.isna(frame.loc["Broken", "expected"])


def test_delinquent_units_frame(tower_a_snapshot):
    frame = delinquent_units_frame(run(tower_a_snapshot, "2025-06"))
    assert list(frame.columns) == DELINQUENT_UNIT_COLUMNS
    assert frame["unit_number"].tolist() == ["U2"]
    assert frame["amount_due"].tolist() == [Decimal("10000")]


def test_historical_delinquency_frame(tower_a_snapshot):
    frame = historical_delinquency_frame(run(tower_a_snapshot, "2025-06"))
    assert list(frame.columns) == HISTORICAL_COLUMNS
    counts = frame.groupby("unit_number").size().to_dict()
    assert counts == {"U1": 4, "U2": 5}
    assert set(frame.loc[frame["unit_number"] == "U2", "total_overdue_amount"]) == {
        Decimal("50000")
    }


def test_frames_of_empty_report():
    report = run(PortfolioSnapshot.build(), "2025-06")
    assert delinquent_units_frame(report).empty
    assert historical_delinquency_frame(report).empty
    assert list(group_summary_frame(report).index) == ["Default"]
