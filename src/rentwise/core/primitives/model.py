# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Base Pydantic model with common configuration.

    Immutable models: inbound records and outbound reports are snapshots that
    live for the duration of one analytics request and are never mutated.
    """

    model_config = ConfigDict(
        arbitrary_types_allowed=True,  # pd.Period fields
        frozen=True,
        extra="forbid",  # Catches typos and missing field definitions immediately
    )
