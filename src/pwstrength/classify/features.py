# SPDX-License-Identifier: MIT
"""
Character-class features derived from a password.

Only ASCII letters, ASCII digits and a fixed punctuation set are recognised.
Anything else (whitespace, accented letters, ``~``, backtick) counts toward
the length but toward no class.
"""
from __future__ import annotations

import string
from dataclasses import dataclass, asdict
from typing import Dict, Any

LETTERS = frozenset(string.ascii_letters)
DIGITS = frozenset(string.digits)
SYMBOLS = frozenset("!@#$%^&*()_+-=[]{};':\"\\|,.<>/?")


@dataclass(frozen=True)
class PasswordFeatures:
    """Length and character-class composition of a single password."""

    length: int
    has_letters: bool
    has_digits: bool
    has_symbols: bool

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def extract_features(text: str) -> PasswordFeatures:
    """
    Compute the features of a password.

    Args:
        text: The password to inspect

    Returns:
        PasswordFeatures for the given text
    """
    chars = set(text)
    return PasswordFeatures(
        length=len(text),
        has_letters=not chars.isdisjoint(LETTERS),
        has_digits=not chars.isdisjoint(DIGITS),
        has_symbols=not chars.isdisjoint(SYMBOLS),
    )
