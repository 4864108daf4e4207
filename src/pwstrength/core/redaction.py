# SPDX-License-Identifier: MIT
"""
Central redaction utilities for pwstrength.

Every output path (text, JSON, logs) goes through these helpers so that
no plaintext password is ever echoed back.
"""

from __future__ import annotations

from typing import Dict, Any, List


def redact_password(password: Any) -> str:
    """
    Redact a password showing first 2 + last 2 characters.

    For passwords <= 10 characters (or non-strings), shows only ****.
    For longer passwords, shows first2****last2.

    Args:
        password: The password to redact

    Returns:
        Redacted string
    """
    if not isinstance(password, str) or len(password) <= 10:
        return "****"
    return password[:2] + "****" + password[-2:]


def redact_result(result: Dict[str, Any]) -> Dict[str, Any]:
    """
    Redact the password in a single result dictionary.

    Args:
        result: Result dictionary that may contain a plaintext password

    Returns:
        Copy of the result with the password redacted
    """
    redacted = result.copy()
    if "password" in redacted:
        redacted["password"] = redact_password(redacted["password"])
    return redacted


def redact_results(results: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Redact passwords in a list of result dictionaries."""
    return [redact_result(result) for result in results]
