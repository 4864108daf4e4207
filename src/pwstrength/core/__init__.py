# SPDX-License-Identifier: MIT
"""Shared primitives: exceptions and redaction."""
