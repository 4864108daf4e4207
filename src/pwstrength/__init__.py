# SPDX-License-Identifier: MIT
"""pwstrength package metadata and public API."""
from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("pwstrength")
except PackageNotFoundError:
    __version__ = "0.1.0"

from .classify import Category, Classification, PasswordFeatures, classify, explain

__all__ = [
    "__version__",
    "classify",
    "explain",
    "Category",
    "Classification",
    "PasswordFeatures",
]
