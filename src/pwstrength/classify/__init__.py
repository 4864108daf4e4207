# SPDX-License-Identifier: MIT
"""
Password strength classification.

Provides classification of passwords into:
- Weak: too short, single character class, or otherwise incomplete
- Medium: letters and digits, or long with symbols
- Strong: longer than 10 characters with letters, digits and symbols
"""

from .features import PasswordFeatures, extract_features
from .rules import RULES, Category, Classification, Rule, classify, explain

__all__ = [
    "classify",
    "explain",
    "extract_features",
    "Category",
    "Classification",
    "PasswordFeatures",
    "Rule",
    "RULES",
]
