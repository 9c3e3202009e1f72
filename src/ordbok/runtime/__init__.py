"""Runtime helpers for lookup: plural selection, interpolation, and locking.

Python 3.13+. Zero external dependencies.
"""

from .interpolation import interpolate
from .plural_rules import is_count, is_plural_node, select_plural_category, select_plural_variant
from .rwlock import RWLock

__all__ = [
    "RWLock",
    "interpolate",
    "is_count",
    "is_plural_node",
    "select_plural_category",
    "select_plural_variant",
]
