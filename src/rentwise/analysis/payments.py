# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Payment filter: the single selection primitive behind every rent-collected figure.

A payment counts for a lease set, rental period and (optionally) recording
month when:

- its lease is in the set,
- its rental-period tag equals the period,
- it is a rent payment (untyped or "Rent Payment"),
- it was recorded during the recording month, when one is given.

Single-period scans, historical scans and fiscal YTD totals all select through
``PaymentLedger`` so the semantics cannot drift between them.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Collection, Dict, Iterable, List, Optional, Tuple, Union

import numpy as np
import pandas as pd

from ..core.primitives import MonthLike, to_month
from ..core.records import Payment

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


class PaymentLedger:
    """
    Column-oriented, read-only view over a payment list.

    The payments are laid out in a DataFrame once; each selection is a boolean
    mask over its columns, and the matching ``Payment`` objects are returned
    by position. Amounts stay ``Decimal`` (object column) so totals are exact.
    """

    def __init__(self, payments: Iterable[Payment]):
        self._payments: Tuple[Payment, ...] = tuple(payments)
        self._frame = self._build_frame(self._payments)
        # Pre-compute the rent mask; every selection starts from it
        self._rent_mask = self._frame["is_rent"]
        logger.debug(
            f"PaymentLedger built: {len(self._payments)} payments, "
            f"{int(self._rent_mask.sum())} rent-typed"
        )

    @staticmethod
    def _build_frame(payments: Tuple[Payment, ...]) -> pd.DataFrame:
        return pd.DataFrame(
            {
                "lease_id": pd.Series([p.lease_id for p in payments], dtype=object),
                "amount": pd.Series([p.actual_rent_paid for p in payments], dtype=object),
                "recorded_month": pd.Series(
                    [pd.Period(p.payment_date, freq="M") for p in payments],
                    dtype="period[M]",
                ),
                "rental_period": pd.Series(
                    [p.rental_period for p in payments], dtype="period[M]"
                ),
                "is_rent": pd.Series([p.is_rent for p in payments], dtype=bool),
            }
        )

    def __len__(self) -> int:
        return len(self._payments)

    @property
    def payments(self) -> Tuple[Payment, ...]:
        return self._payments

    def to_frame(self) -> pd.DataFrame:
        """Copy of the underlying columns (lease_id, amount, recorded_month, rental_period, is_rent)."""
        return self._frame.copy()

    def _mask(
        self,
        lease_ids: Collection[str],
        rental_period: MonthLike,
        recording_month: Optional[MonthLike] = None,
    ) -> pd.Series:
        if isinstance(lease_ids, str):
            lease_ids = [lease_ids]
        frame = self._frame
        mask = (
            self._rent_mask
            & frame["lease_id"].isin(list(lease_ids))
            & (frame["rental_period"] == to_month(rental_period))
        )
        if recording_month is not None:
            mask &= frame["recorded_month"] == to_month(recording_month)
        return mask

    def select(
        self,
        lease_ids: Collection[str],
        rental_period: MonthLike,
        recording_month: Optional[MonthLike] = None,
    ) -> List[Payment]:
        """
        Payments for ``lease_ids`` credited to ``rental_period``.

        Args:
            lease_ids: Leases to include
            rental_period: Rental-period tag to match
            recording_month: When given, only payments recorded in this month

        Returns:
            Matching payments in ledger order (possibly empty)
        """
        positions = np.flatnonzero(
            self._mask(lease_ids, rental_period, recording_month).to_numpy()
        )
        return [self._payments[i] for i in positions]

    def total(
        self,
        lease_ids: Collection[str],
        rental_period: MonthLike,
        recording_month: Optional[MonthLike] = None,
    ) -> Decimal:
        """Exact sum of ``actual_rent_paid`` over ``select(...)``."""
        return sum_paid(self.select(lease_ids, rental_period, recording_month))

    def paid_by_lease(
        self,
        lease_ids: Collection[str],
        rental_period: MonthLike,
        recording_month: Optional[MonthLike] = None,
    ) -> Dict[str, Decimal]:
        """Per-lease totals for the same selection; every requested lease gets an entry."""
        if isinstance(lease_ids, str):
            lease_ids = [lease_ids]
        paid: Dict[str, Decimal] = {lease_id: ZERO for lease_id in lease_ids}
        for payment in self.select(lease_ids, rental_period, recording_month):
            paid[payment.lease_id] += payment.actual_rent_paid
        return paid


def sum_paid(payments: Iterable[Payment]) -> Decimal:
    """Exact total of ``actual_rent_paid``; zero for no payments."""
    return sum((p.actual_rent_paid for p in payments), ZERO)


def filter_payments(
    payments: Union[PaymentLedger, Iterable[Payment]],
    lease_ids: Collection[str],
    rental_period: MonthLike,
    recording_month: Optional[MonthLike] = None,
) -> List[Payment]:
    """
    Functional form of ``PaymentLedger.select``.

    Accepts either a prepared ``PaymentLedger`` or any iterable of payments.
    """
    ledger = payments if isinstance(payments, PaymentLedger) else PaymentLedger(payments)
    return ledger.select(lease_ids, rental_period, recording_month)
