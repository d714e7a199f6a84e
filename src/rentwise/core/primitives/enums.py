# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from enum import Enum
from typing import Optional


class PaymentTypeEnum(str, Enum):
    """
    Payment type labels recorded by data-entry staff.

    Only rent payments count towards rent-collected aggregates. Older ledger
    entries carry no type at all and are treated as rent.
    """

    RENT = "Rent Payment"
    DEPOSIT = "Security Deposit"
    FEE = "Fee"
    OTHER = "Other"

    @classmethod
    def is_rent(cls, payment_type: Optional[str]) -> bool:
        """True for untyped (None or blank) and "Rent Payment" entries."""
        if payment_type is None or not str(payment_type).strip():
            return True
        return payment_type == cls.RENT.value


class DelinquencySeverityEnum(str, Enum):
    """
    Severity band of a group's single-period delinquency rate.

    Attributes:
        NOT_APPLICABLE: No rent was expected for the period.
        NONE: Rate at or below the warning threshold.
        WARNING: Rate above the warning threshold.
        CRITICAL: Rate above the critical threshold.
    """

    NOT_APPLICABLE = "N/A"
    NONE = "None"
    WARNING = "Warning"
    CRITICAL = "Critical"


class ReportCadenceEnum(str, Enum):
    """Cadences of the scheduled portfolio summary."""

    BIWEEKLY = "biweekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
