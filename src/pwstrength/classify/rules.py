# SPDX-License-Identifier: MIT
"""
Classification rules for password strength.

Implements an ordered rule table that categorizes a password as
Weak, Medium or Strong. The first matching rule wins.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Tuple

from .features import PasswordFeatures, extract_features

MIN_LENGTH = 6
MEDIUM_MAX_LENGTH = 10


class Category(Enum):
    """Password strength categories."""

    WEAK = "Weak"
    MEDIUM = "Medium"
    STRONG = "Strong"

    @property
    def rank(self) -> int:
        return _RANKS[self]


_RANKS = {Category.WEAK: 0, Category.MEDIUM: 1, Category.STRONG: 2}


@dataclass(frozen=True)
class Rule:
    """A named predicate over password features and the category it yields."""

    name: str
    predicate: Callable[[PasswordFeatures], bool]
    category: Category


@dataclass(frozen=True)
class Classification:
    """Outcome of classifying one value."""

    category: Category
    rule: str
    features: Optional[PasswordFeatures] = None


def _alphanumeric(f: PasswordFeatures) -> bool:
    return f.has_letters and f.has_digits and not f.has_symbols


RULES: Tuple[Rule, ...] = (
    Rule("too_short", lambda f: f.length < MIN_LENGTH, Category.WEAK),
    Rule(
        "letters_only",
        lambda f: f.has_letters and not f.has_digits and not f.has_symbols,
        Category.WEAK,
    ),
    Rule(
        "digits_only",
        lambda f: not f.has_letters and f.has_digits and not f.has_symbols,
        Category.WEAK,
    ),
    Rule(
        "medium_band",
        lambda f: MIN_LENGTH <= f.length <= MEDIUM_MAX_LENGTH and _alphanumeric(f),
        Category.MEDIUM,
    ),
    Rule(
        "strong_band",
        lambda f: f.length > MEDIUM_MAX_LENGTH
        and f.has_letters
        and f.has_digits
        and f.has_symbols,
        Category.STRONG,
    ),
    Rule(
        "long_alphanumeric",
        lambda f: f.length > MEDIUM_MAX_LENGTH and _alphanumeric(f),
        Category.MEDIUM,
    ),
    # Symbols present but the composition falls short of strong_band
    Rule(
        "long_with_symbols",
        lambda f: f.has_symbols and f.length > MEDIUM_MAX_LENGTH,
        Category.MEDIUM,
    ),
    Rule("short_with_symbols", lambda f: f.has_symbols, Category.WEAK),
    Rule("fallback", lambda f: True, Category.WEAK),
)

INVALID_INPUT = "invalid_input"


def explain(value: object) -> Classification:
    """
    Classify a value and report which rule decided the outcome.

    Args:
        value: Anything; only non-empty strings are inspected

    Returns:
        Classification with the category, rule name and features
    """
    if not isinstance(value, str) or not value:
        return Classification(Category.WEAK, INVALID_INPUT)

    features = extract_features(value)
    for rule in RULES:
        if rule.predicate(features):
            return Classification(rule.category, rule.name, features)

    # The fallback rule always matches
    return Classification(Category.WEAK, "fallback", features)


def classify(value: object) -> Category:
    """
    Classify a password into Weak, Medium or Strong.

    Never raises: non-string, empty and missing values are Weak.
    """
    return explain(value).category
