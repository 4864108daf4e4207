# SPDX-License-Identifier: MIT
"""Gating of classified passwords."""
