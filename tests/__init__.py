# rentwise Test Suite
# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
rentwise test suite.

This package contains tests for the rentwise components, organized into unit
and end-to-end test categories.
"""
