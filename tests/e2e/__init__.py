# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
End-to-end tests for rentwise.

Whole-portfolio scenarios run through the public ``run`` entry point.
"""
