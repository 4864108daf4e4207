# SPDX-License-Identifier: MIT
"""
Minimum-category gate for batches of classified passwords.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Any, List, Sequence

from pwstrength.classify.rules import Category


@dataclass
class GateResult:
    """Result of gating a batch against a minimum category."""

    passed: bool
    minimum: Category
    failures: List[int]
    summary: Dict[str, Any]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "minimum": self.minimum.value,
            "passed": self.passed,
            "failures": list(self.failures),
            "summary": dict(self.summary),
        }


def parse_category(name: str) -> Category:
    """
    Look up a category by case-insensitive name.

    Raises:
        ValueError: If the name is not a known category
    """
    try:
        return Category[str(name).upper()]
    except KeyError:
        raise ValueError(f"Unknown category: {name}") from None


def enforce_minimum(categories: Sequence[Category], minimum: Category) -> GateResult:
    """
    Check every category against a minimum.

    Args:
        categories: Classified categories, in input order
        minimum: The lowest acceptable category

    Returns:
        GateResult listing the indexes of results below the minimum
    """
    failures = [i for i, category in enumerate(categories) if category.rank < minimum.rank]

    counts = {category.value: 0 for category in Category}
    for category in categories:
        counts[category.value] += 1

    summary = {
        "total": len(categories),
        "failed": len(failures),
        "counts": counts,
    }

    return GateResult(
        passed=not failures,
        minimum=minimum,
        failures=failures,
        summary=summary,
    )
