# SPDX-License-Identifier: MIT
"""
Display labels for strength categories.
"""
from __future__ import annotations

from typing import Dict, Optional

from .rules import Category

LABELS: Dict[str, Dict[Category, str]] = {
    "en": {
        Category.WEAK: "Weak",
        Category.MEDIUM: "Medium",
        Category.STRONG: "Strong",
    },
    "pt": {
        Category.WEAK: "Fraca",
        Category.MEDIUM: "Média",
        Category.STRONG: "Forte",
    },
}

DEFAULT_LOCALE = "en"


def label_for(
    category: Category,
    locale: str = DEFAULT_LOCALE,
    overrides: Optional[Dict[str, str]] = None,
) -> str:
    """
    Get the display label for a category.

    Args:
        category: The category to label
        locale: Built-in label set to use (unknown locales fall back to English)
        overrides: Optional mapping of lowercase category name to label

    Returns:
        The label string
    """
    if overrides:
        override = overrides.get(category.name.lower())
        if override:
            return override
    return LABELS.get(locale, LABELS[DEFAULT_LOCALE])[category]
