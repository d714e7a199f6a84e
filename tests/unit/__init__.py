# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Unit tests for rentwise components.

Isolated tests of the period calculus, records, scanners, rollup and
reporting helpers, built from in-memory records.
"""
