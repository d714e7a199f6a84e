# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from decimal import Decimal
from typing import Annotated, Any

import pandas as pd
from pydantic import BeforeValidator, Field

from .periods import to_month


def to_decimal(value: Any) -> Any:
    """Route floats through str() so 0.1 becomes Decimal('0.1'), not its binary expansion."""
    if isinstance(value, float):
        return Decimal(str(value))
    return value


# constrained types
PositiveInt = Annotated[int, Field(strict=True, ge=0)]
NonNegativeDecimal = Annotated[Decimal, BeforeValidator(to_decimal), Field(ge=0)]
PercentDecimal = Annotated[Decimal, BeforeValidator(to_decimal), Field(ge=0, le=100)]
MonthPeriod = Annotated[pd.Period, BeforeValidator(to_month)]
