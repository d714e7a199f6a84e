# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
rentwise Core

Inbound records, the portfolio snapshot and the shared primitives
(period calculus, settings, enums) used by the analytics engine.
"""

from .primitives import (
    AnalyticsSettings,
    DelinquencySettings,
    FiscalSettings,
    InvalidRangeError,
    Model,
    ReportingSettings,
)
from .records import Lease, Payment, PropertyGroup, Unit
from .snapshot import PortfolioSnapshot

__all__ = [
    "AnalyticsSettings",
    "DelinquencySettings",
    "FiscalSettings",
    "InvalidRangeError",
    "Lease",
    "Model",
    "Payment",
    "PortfolioSnapshot",
    "PropertyGroup",
    "ReportingSettings",
    "Unit",
]
