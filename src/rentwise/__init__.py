# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
rentwise - Rental-Period Reconciliation & Delinquency Analytics

Derives, for any reporting month and per property group, occupancy, expected
vs. collected rent, single-period and historical delinquency, and fiscal
year-to-date collections from an in-memory ledger of units, leases and
payments.

Key Entry Points:
- rentwise.run() - Per-group portfolio report for a reporting month
- rentwise.core.* - Records, snapshot, period calculus and settings
- rentwise.analysis.* - Activity predicates, payment filter, scanners, rollup
- rentwise.reporting.* - Formatting and DataFrame views

Example Usage:
    ```python
    from rentwise import PortfolioSnapshot, run
    from rentwise.reporting import group_summary_frame

    snapshot = PortfolioSnapshot.build(groups, units, leases, payments)
    report = run(snapshot, "2025-06")
    print(group_summary_frame(report))
    ```
"""

import importlib
import logging

# Libraries leave handler configuration to the application
logging.getLogger(__name__).addHandler(logging.NullHandler())

from .core import (  # noqa: E402
    AnalyticsSettings,
    InvalidRangeError,
    Lease,
    Payment,
    PortfolioSnapshot,
    PropertyGroup,
    Unit,
)
from .analysis import PortfolioReport, run  # noqa: E402

__version__ = "0.1.0"

__all__ = [  # noqa: F822 - lazy loading
    "AnalyticsSettings",
    "InvalidRangeError",
    "Lease",
    "Payment",
    "PortfolioReport",
    "PortfolioSnapshot",
    "PropertyGroup",
    "Unit",
    "run",
    "analysis",
    "core",
    "reporting",
]


_LAZY_MODULES = {
    "analysis": "rentwise.analysis",
    "core": "rentwise.core",
    "reporting": "rentwise.reporting",
}


def __getattr__(name: str):
    module_path = _LAZY_MODULES.get(name)
    if module_path is None:
        raise AttributeError(f"module 'rentwise' has no attribute '{name}'")
    module = importlib.import_module(module_path)
    globals()[name] = module
    return module
