"""Resolve a CSS property/value pair to a Tailwind utility class."""

import re
from dataclasses import dataclass
from typing import Union

from .properties import PropertyTable

WHITESPACE_RE = re.compile(r'\s+')


@dataclass(frozen=True)
class ResolvedClass:
    """The table has a utility for the exact value."""
    class_name: str


@dataclass(frozen=True)
class ArbitraryClass:
    """No exact utility; an arbitrary-value class was built instead."""
    class_name: str


@dataclass(frozen=True)
class Unsupported:
    """Neither an exact nor an arbitrary-value class is available."""
    pass


Resolution = Union[ResolvedClass, ArbitraryClass, Unsupported]

UNSUPPORTED = Unsupported()


def normalize_value(value: str) -> str:
    """Collapse whitespace runs to one space and strip the ends."""
    return WHITESPACE_RE.sub(' ', value).strip()


def arbitrary_value(value: str) -> str:
    """Replace whitespace runs with ``_`` so the value fits in one class token."""
    return WHITESPACE_RE.sub('_', value.strip())


class ValueResolver:
    """Look up utilities for declarations against a PropertyTable."""

    def __init__(self, table: PropertyTable):
        self.table = table

    def resolve(self, property_name: str, value: str) -> Resolution:
        """Resolve one declaration.

        Exact table values take precedence over arbitrary-value classes.

        Args:
            property_name: CSS property name
            value: CSS value as written

        Returns:
            ResolvedClass, ArbitraryClass or Unsupported
        """
        entry = self.table.lookup(property_name)
        if entry is None:
            return UNSUPPORTED

        literal = normalize_value(value)
        utility = entry.find(literal)
        if utility is not None:
            return ResolvedClass(utility.class_name)

        if not literal or not entry.abbreviation:
            return UNSUPPORTED
        return ArbitraryClass(f"{entry.abbreviation}-[{arbitrary_value(literal)}]")

# Exported names
__all__ = [
    'ResolvedClass',
    'ArbitraryClass',
    'Unsupported',
    'Resolution',
    'ValueResolver',
    'normalize_value',
    'arbitrary_value',
]
