"""CSS property to Tailwind utility class table."""

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from ..utils.error import ConfigurationError
from .colors import palette_values

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UtilityValue:
    """One utility class and the CSS value it stands for."""
    class_name: str
    value: str
    category: Optional[str] = None


@dataclass(frozen=True)
class PropertyEntry:
    """Known utilities for one CSS property.

    ``values`` is ordered; on lookup the first pair whose value matches wins.
    ``abbreviation`` is the prefix used to build arbitrary-value classes
    (``m`` for ``margin``); properties without one never get them.
    """
    property: str
    category: str
    values: Tuple[UtilityValue, ...] = field(default_factory=tuple)
    abbreviation: Optional[str] = None

    def find(self, value: str) -> Optional[UtilityValue]:
        for utility in self.values:
            if utility.value == value:
                return utility
        return None

    def category_of(self, utility: UtilityValue) -> str:
        return utility.category or self.category


class PropertyTable:
    """Read-only mapping from CSS property name to PropertyEntry.

    Built once and shared by every conversion; use ``extend`` to get a new
    table with more entries rather than changing this one.
    """

    def __init__(self, entries: Iterable[PropertyEntry] = ()):
        """Initialize property table.

        Args:
            entries: Property entries, one per CSS property

        Raises:
            ConfigurationError: If a property or a value within a property
                is listed twice
        """
        table: Dict[str, PropertyEntry] = {}
        for entry in entries:
            if entry.property in table:
                raise ConfigurationError(f"Duplicate property in table: {entry.property}")
            seen = set()
            for utility in entry.values:
                if utility.value in seen:
                    raise ConfigurationError(
                        f"Duplicate value for {entry.property}: {utility.value!r}"
                    )
                seen.add(utility.value)
            table[entry.property] = entry
        self._entries = MappingProxyType(table)

    @property
    def entries(self) -> Mapping[str, PropertyEntry]:
        return self._entries

    def lookup(self, property_name: str) -> Optional[PropertyEntry]:
        """Get the entry for a CSS property, or None if the property is unknown."""
        return self._entries.get(property_name)

    def abbreviation_for(self, property_name: str) -> Optional[str]:
        """Get the arbitrary-value prefix for a CSS property, if it has one."""
        entry = self._entries.get(property_name)
        return entry.abbreviation if entry else None

    def categories(self) -> List[str]:
        """List the categories in the table in first-seen order."""
        seen: Dict[str, None] = {}
        for entry in self._entries.values():
            for utility in entry.values:
                seen.setdefault(entry.category_of(utility), None)
        return list(seen)

    def extend(self, mapping: Mapping[str, Mapping[str, Any]]) -> 'PropertyTable':
        """Return a new table with extra mappings merged in.

        Args:
            mapping: ``{property: {"values": {value: class}, "abbreviation": str,
                "category": str}}``; values already known for a property keep
                their class, new ones are appended after them

        Returns:
            New PropertyTable; this one is left untouched
        """
        merged: Dict[str, PropertyEntry] = dict(self._entries)
        for property_name, overrides in mapping.items():
            current = merged.get(property_name)
            known = {utility.value for utility in current.values} if current else set()
            added = []
            for value, class_name in overrides.get('values', {}).items():
                if value in known:
                    logger.debug(f"Keeping existing class for {property_name}: {value}")
                    continue
                known.add(value)
                added.append(UtilityValue(class_name, value))

            if current:
                merged[property_name] = PropertyEntry(
                    property=property_name,
                    category=overrides.get('category', current.category),
                    values=current.values + tuple(added),
                    abbreviation=overrides.get('abbreviation', current.abbreviation),
                )
            else:
                merged[property_name] = PropertyEntry(
                    property=property_name,
                    category=overrides.get('category', 'custom'),
                    values=tuple(added),
                    abbreviation=overrides.get('abbreviation'),
                )
        return PropertyTable(merged.values())

    def __contains__(self, property_name: object) -> bool:
        return property_name in self._entries

    def __iter__(self) -> Iterator[PropertyEntry]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)


# Spacing scale shared by margin, padding, gap, width and height
SPACING_SCALE = [
    ('0', '0'),
    ('px', '1px'),
    ('0.5', '0.125rem'),
    ('1', '0.25rem'),
    ('1.5', '0.375rem'),
    ('2', '0.5rem'),
    ('2.5', '0.625rem'),
    ('3', '0.75rem'),
    ('4', '1rem'),
    ('5', '1.25rem'),
    ('6', '1.5rem'),
    ('8', '2rem'),
    ('10', '2.5rem'),
    ('12', '3rem'),
    ('16', '4rem'),
    ('20', '5rem'),
    ('24', '6rem'),
]

SIDES = [('top', 't'), ('right', 'r'), ('bottom', 'b'), ('left', 'l')]


def _pairs(pairs: Iterable[Tuple[str, str]], category: Optional[str] = None) -> Tuple[UtilityValue, ...]:
    return tuple(UtilityValue(class_name, value, category) for class_name, value in pairs)


def _scale(prefix: str, extra: Iterable[Tuple[str, str]] = ()) -> Tuple[UtilityValue, ...]:
    pairs = [(f"{prefix}-{step}", value) for step, value in SPACING_SCALE]
    pairs.extend(extra)
    return _pairs(pairs)


def _entry(property_name: str, category: str, values: Tuple[UtilityValue, ...],
           abbreviation: Optional[str] = None) -> PropertyEntry:
    return PropertyEntry(property_name, category, values, abbreviation)


def _spacing_entries() -> List[PropertyEntry]:
    entries = [
        _entry('margin', 'spacing', _scale('m', [('m-auto', 'auto')]), 'm'),
        _entry('padding', 'spacing', _scale('p'), 'p'),
    ]
    for side, letter in SIDES:
        entries.append(_entry(f"margin-{side}", 'spacing',
                              _scale(f"m{letter}", [(f"m{letter}-auto", 'auto')]), f"m{letter}"))
    for side, letter in SIDES:
        entries.append(_entry(f"padding-{side}", 'spacing', _scale(f"p{letter}"), f"p{letter}"))
    entries.append(_entry('gap', 'spacing', _scale('gap'), 'gap'))
    return entries


def _sizing_entries() -> List[PropertyEntry]:
    width_extra = [
        ('w-auto', 'auto'),
        ('w-full', '100%'),
        ('w-1/2', '50%'),
        ('w-1/3', '33.333333%'),
        ('w-2/3', '66.666667%'),
        ('w-1/4', '25%'),
        ('w-3/4', '75%'),
        ('w-screen', '100vw'),
        ('w-min', 'min-content'),
        ('w-max', 'max-content'),
        ('w-fit', 'fit-content'),
    ]
    height_extra = [
        ('h-auto', 'auto'),
        ('h-full', '100%'),
        ('h-1/2', '50%'),
        ('h-screen', '100vh'),
        ('h-min', 'min-content'),
        ('h-max', 'max-content'),
        ('h-fit', 'fit-content'),
    ]
    return [
        _entry('width', 'sizing', _scale('w', width_extra), 'w'),
        _entry('height', 'sizing', _scale('h', height_extra), 'h'),
    ]


def _layout_entries() -> List[PropertyEntry]:
    display = (
        _pairs([
            ('block', 'block'),
            ('inline-block', 'inline-block'),
            ('inline', 'inline'),
        ])
        + _pairs([('flex', 'flex'), ('inline-flex', 'inline-flex')], 'flexbox')
        + _pairs([('grid', 'grid'), ('inline-grid', 'inline-grid')], 'grid')
        + _pairs([
            ('table', 'table'),
            ('contents', 'contents'),
            ('hidden', 'none'),
        ])
    )
    position = _pairs([(value, value) for value in ('static', 'relative', 'absolute', 'fixed', 'sticky')])
    entries = [
        _entry('display', 'layout', display),
        _entry('position', 'layout', position),
    ]
    for side, _ in SIDES:
        entries.append(_entry(side, 'layout', _pairs([
            (f"{side}-0", '0'),
            (f"{side}-auto", 'auto'),
            (f"{side}-1/2", '50%'),
            (f"{side}-full", '100%'),
            (f"{side}-4", '1rem'),
        ]), side))
    return entries


def _flexbox_entries() -> List[PropertyEntry]:
    return [
        _entry('flex-direction', 'flexbox', _pairs([
            ('flex-row', 'row'),
            ('flex-row-reverse', 'row-reverse'),
            ('flex-col', 'column'),
            ('flex-col-reverse', 'column-reverse'),
        ])),
        _entry('flex-wrap', 'flexbox', _pairs([
            ('flex-wrap', 'wrap'),
            ('flex-wrap-reverse', 'wrap-reverse'),
            ('flex-nowrap', 'nowrap'),
        ])),
        _entry('flex-grow', 'flexbox', _pairs([
            ('flex-grow', '1'),
            ('flex-grow-0', '0'),
        ])),
        _entry('flex-shrink', 'flexbox', _pairs([
            ('flex-shrink', '1'),
            ('flex-shrink-0', '0'),
        ])),
        _entry('justify-content', 'flexbox', _pairs([
            ('justify-start', 'flex-start'),
            ('justify-end', 'flex-end'),
            ('justify-center', 'center'),
            ('justify-between', 'space-between'),
            ('justify-around', 'space-around'),
            ('justify-evenly', 'space-evenly'),
        ])),
        _entry('align-items', 'flexbox', _pairs([
            ('items-start', 'flex-start'),
            ('items-end', 'flex-end'),
            ('items-center', 'center'),
            ('items-baseline', 'baseline'),
            ('items-stretch', 'stretch'),
        ])),
    ]


def _grid_entries() -> List[PropertyEntry]:
    columns = [(f"grid-cols-{n}", f"repeat({n}, minmax(0, 1fr))") for n in (1, 2, 3, 4, 6, 12)]
    columns.append(('grid-cols-none', 'none'))
    return [_entry('grid-template-columns', 'grid', _pairs(columns), 'grid-cols')]


def _typography_entries() -> List[PropertyEntry]:
    return [
        _entry('font-size', 'typography', _pairs([
            ('text-xs', '0.75rem'),
            ('text-sm', '0.875rem'),
            ('text-base', '1rem'),
            ('text-lg', '1.125rem'),
            ('text-xl', '1.25rem'),
            ('text-2xl', '1.5rem'),
            ('text-3xl', '1.875rem'),
            ('text-4xl', '2.25rem'),
        ]), 'text'),
        _entry('font-weight', 'typography', _pairs([
            ('font-thin', '100'),
            ('font-extralight', '200'),
            ('font-light', '300'),
            ('font-normal', '400'),
            ('font-normal', 'normal'),
            ('font-medium', '500'),
            ('font-semibold', '600'),
            ('font-bold', '700'),
            ('font-bold', 'bold'),
            ('font-extrabold', '800'),
            ('font-black', '900'),
        ]), 'font'),
        _entry('text-align', 'typography', _pairs([
            (f"text-{value}", value) for value in ('left', 'center', 'right', 'justify', 'start', 'end')
        ])),
        _entry('line-height', 'typography', _pairs([
            ('leading-none', '1'),
            ('leading-tight', '1.25'),
            ('leading-snug', '1.375'),
            ('leading-normal', '1.5'),
            ('leading-relaxed', '1.625'),
            ('leading-loose', '2'),
        ]), 'leading'),
    ]


def _color_entry(property_name: str, prefix: str) -> PropertyEntry:
    pairs = [
        (f"{prefix}-inherit", 'inherit'),
        (f"{prefix}-current", 'currentColor'),
        (f"{prefix}-transparent", 'transparent'),
        (f"{prefix}-black", '#000'),
        (f"{prefix}-white", '#fff'),
    ]
    pairs.extend((class_name, hex_value) for hex_value, class_name in palette_values(prefix).items())
    return _entry(property_name, 'colors', _pairs(pairs), prefix)


def _color_entries() -> List[PropertyEntry]:
    return [
        _color_entry('color', 'text'),
        _color_entry('background-color', 'bg'),
        _color_entry('border-color', 'border'),
    ]


def build_default_table() -> PropertyTable:
    """Build the default property table.

    Returns:
        PropertyTable covering spacing, sizing, layout, flexbox, grid,
        typography and colors
    """
    entries = (
        _spacing_entries()
        + _sizing_entries()
        + _layout_entries()
        + _flexbox_entries()
        + _grid_entries()
        + _typography_entries()
        + _color_entries()
    )
    table = PropertyTable(entries)
    logger.debug(f"Built property table with {len(table)} properties")
    return table

# Exported names
__all__ = [
    'UtilityValue',
    'PropertyEntry',
    'PropertyTable',
    'SPACING_SCALE',
    'build_default_table',
]
