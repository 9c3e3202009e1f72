"""Plural variant selection for zero/one/other nodes.

Supports the English-like pattern only: a dedicated phrase for zero (even in
languages where zero is grammatically plural, "You have no new messages"
reads better than "You have 0 new messages"), one for exactly one, and other
for everything else. Languages with further CLDR categories (two, few, many)
are not modeled.

Reference: https://www.unicode.org/cldr/charts/latest/supplemental/language_plural_rules.html

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal
from numbers import Real
from typing import TypeIs

from ordbok.enums import PluralCategory

__all__ = [
    "Count",
    "is_count",
    "is_plural_node",
    "select_plural_category",
    "select_plural_variant",
]

_PLURAL_KEYS = frozenset(category.value for category in PluralCategory)

# Decimal is not registered as numbers.Real.
type Count = Real | Decimal


def is_count(value: object) -> TypeIs[Count]:
    """Check whether value can drive plural selection.

    Booleans are excluded even though bool subclasses int.
    """
    return isinstance(value, (Real, Decimal)) and not isinstance(value, bool)


def is_plural_node(node: object) -> TypeIs[Mapping[str, object]]:
    """Check whether node is a pluralization node.

    A pluralization node is a mapping whose keys are drawn from
    {zero, one, other} and which always has an "other" entry.

    Example:
        >>> is_plural_node({"one": "%{count} item", "other": "%{count} items"})
        True
        >>> is_plural_node({"one": "%{count} item"})
        False
    """
    return (
        isinstance(node, Mapping)
        and PluralCategory.OTHER in node
        and _PLURAL_KEYS.issuperset(node)
    )


def select_plural_category(count: Count, node: Mapping[str, object]) -> PluralCategory:
    """Select which child of a plural node applies to count.

    ``zero`` wins for a count equal to zero and ``one`` for a count equal to
    one, each only when the node defines it. Everything else is ``other``.

    Examples:
        >>> select_plural_category(0, {"zero": "none", "other": "%{count}"})
        <PluralCategory.ZERO: 'zero'>
        >>> select_plural_category(0, {"one": "one", "other": "%{count}"})
        <PluralCategory.OTHER: 'other'>
        >>> select_plural_category(1.0, {"one": "one", "other": "%{count}"})
        <PluralCategory.ONE: 'one'>
    """
    if count == 0 and node.get(PluralCategory.ZERO) is not None:
        return PluralCategory.ZERO
    if count == 1 and node.get(PluralCategory.ONE) is not None:
        return PluralCategory.ONE
    return PluralCategory.OTHER


def select_plural_variant(node: Mapping[str, object], count: Count) -> object:
    """Return the child of a plural node selected by count."""
    return node[select_plural_category(count, node)]
