"""Utility lookup service for Tailwind Mapper."""

from typing import Any, Dict, List, Mapping, Optional
from typing_extensions import TypedDict

from ..core.colors import DEFAULT_PALETTE, color_usage
from ..core.properties import PropertyTable
from ..core.resolver import arbitrary_value, normalize_value
from ..core.service import ConversionResult, ConversionService, default_table
from ..utils.config import DEFAULT_OUTPUT_MODE, PROPERTY_TABLE_FILE
from ..utils.error import ServiceError, TailwindMapperError
from ..utils.loader import load_property_mapping
from .base import BaseService


class UtilityValueInfo(TypedDict):
    cssValue: str
    className: str


class UtilityExample(TypedDict):
    title: str
    code: str
    description: str


class UtilityModifier(TypedDict):
    type: str
    prefix: str
    description: str


class UtilityInfo(TypedDict):
    id: str
    name: str
    category: str
    cssProperty: str
    values: List[UtilityValueInfo]
    modifiers: List[UtilityModifier]
    examples: List[UtilityExample]
    documentation: str


class ColorInfo(TypedDict):
    name: str
    shades: Dict[str, str]
    usage: List[str]


DEFAULT_MODIFIERS: List[UtilityModifier] = [
    {'type': 'responsive', 'prefix': 'sm:', 'description': 'Apply on small screens and up'},
    {'type': 'responsive', 'prefix': 'md:', 'description': 'Apply on medium screens and up'},
    {'type': 'responsive', 'prefix': 'lg:', 'description': 'Apply on large screens and up'},
    {'type': 'state', 'prefix': 'hover:', 'description': 'Apply on hover'},
    {'type': 'state', 'prefix': 'focus:', 'description': 'Apply when focused'},
    {'type': 'dark', 'prefix': 'dark:', 'description': 'Apply in dark mode'},
]


def _copy_utility(utility: UtilityInfo) -> UtilityInfo:
    """Copy of an indexed utility that callers may change freely."""
    copied = dict(utility)
    copied['values'] = [dict(value) for value in utility['values']]
    copied['modifiers'] = [dict(modifier) for modifier in utility['modifiers']]
    copied['examples'] = [dict(example) for example in utility['examples']]
    return copied


def _copy_color(color: ColorInfo) -> ColorInfo:
    return {'name': color['name'], 'shades': dict(color['shades']), 'usage': list(color['usage'])}


class UtilityMapperService(BaseService):
    """Answer utility, color and conversion queries from one property table."""

    def __init__(self, mapping_file: Optional[str] = PROPERTY_TABLE_FILE,
                 palette: Mapping[str, Mapping[str, str]] = DEFAULT_PALETTE):
        """Initialize utility mapper.

        Args:
            mapping_file: Optional JSON file with extra property mappings
            palette: Color palette, ``{name: {shade: hex}}``
        """
        super().__init__()
        self.mapping_file = mapping_file
        self.palette = palette
        self.table: Optional[PropertyTable] = None
        self.conversion: Optional[ConversionService] = None
        self._utilities: Dict[str, UtilityInfo] = {}
        self._by_property: Dict[str, List[str]] = {}
        self._colors: Dict[str, ColorInfo] = {}
        self.conversion_count = 0

    async def initialize(self) -> None:
        """Build the property table and the utility and color indexes.

        Raises:
            ConfigurationError: If the mapping file is missing or malformed
            ServiceError: On any other failure
        """
        try:
            table = default_table()
            if self.mapping_file:
                mapping = await load_property_mapping(self.mapping_file)
                table = table.extend(mapping)

            self.table = table
            self.conversion = ConversionService(table)
            self._index_utilities(table)
            self._index_colors()
            self.initialized = True
            self.log_info(
                f"UtilityMapperService initialized with {len(self._utilities)} utilities "
                f"and {len(self._colors)} colors"
            )
        except TailwindMapperError:
            raise
        except Exception as e:
            self.handle_error(e, 'initialize', 'Failed to load utility mappings')

    def cleanup(self) -> None:
        """Drop the indexes built by ``initialize``."""
        self._utilities.clear()
        self._by_property.clear()
        self._colors.clear()
        self.conversion = None
        self.table = None
        super().cleanup()

    def get_stats(self) -> Dict[str, Any]:
        return {
            'initialized': self.initialized,
            'properties': len(self.table) if self.table is not None else 0,
            'utilities': len(self._utilities),
            'colors': len(self._colors),
            'conversions': self.conversion_count,
        }

    def convert_css_to_tailwind(self, css: str, mode: str = DEFAULT_OUTPUT_MODE,
                                version: Optional[str] = None) -> ConversionResult:
        """Convert CSS to Tailwind utility classes.

        Raises:
            CssSyntaxError: If the CSS cannot be parsed
            ServiceError: If the service is not initialized
        """
        conversion = self._require('convert_css_to_tailwind', self.conversion)
        result = conversion.convert(css, mode=mode, version=version)
        self.conversion_count += 1
        return result

    def get_utilities(self, category: Optional[str] = None, property: Optional[str] = None,
                      search: Optional[str] = None) -> List[UtilityInfo]:
        """Get utilities by category, CSS property or search query.

        The first filter given wins; with none, every utility is returned.
        Every call returns fresh records.
        """
        if category:
            return self.get_utilities_by_category(category)
        if property:
            return self.get_utilities_by_property(property)
        if search:
            return self.search_utilities(search)
        return [_copy_utility(utility) for utility in self._utilities.values()]

    def get_utilities_by_category(self, category: str) -> List[UtilityInfo]:
        return [_copy_utility(utility) for utility in self._utilities.values() if utility['category'] == category]

    def get_utilities_by_property(self, property_name: str) -> List[UtilityInfo]:
        return [_copy_utility(self._utilities[utility_id]) for utility_id in self._by_property.get(property_name, [])]

    def search_utilities(self, query: str) -> List[UtilityInfo]:
        """Search utilities by name, documentation or category.

        Exact name matches come first, the rest is sorted by name.
        """
        lowered = query.lower()
        matches = [
            utility for utility in self._utilities.values()
            if lowered in utility['name'].lower()
            or lowered in utility['documentation'].lower()
            or lowered in utility['category'].lower()
        ]
        matches.sort(key=lambda utility: (utility['name'].lower() != lowered, utility['name']))
        return [_copy_utility(utility) for utility in matches]

    def get_colors(self, color_name: Optional[str] = None, include_shades: bool = True) -> List[ColorInfo]:
        """Get palette colors.

        Args:
            color_name: Only this color; all colors when omitted
            include_shades: When False the shades mapping is left empty

        Returns:
            List of color records (empty for an unknown color)
        """
        colors = self.get_color_info(color_name)
        if include_shades:
            return colors
        return [{'name': color['name'], 'shades': {}, 'usage': color['usage']} for color in colors]

    def get_color_info(self, color_name: Optional[str] = None) -> List[ColorInfo]:
        if color_name:
            color = self._colors.get(color_name)
            return [_copy_color(color)] if color else []
        return [_copy_color(color) for color in self._colors.values()]

    def generate_arbitrary_utility(self, property_name: str, value: str) -> Optional[str]:
        """Build an arbitrary-value class, or None if the property has no prefix."""
        table = self._require('generate_arbitrary_utility', self.table)
        abbreviation = table.abbreviation_for(property_name)
        literal = normalize_value(value)
        if not abbreviation or not literal:
            return None
        return f"{abbreviation}-[{arbitrary_value(literal)}]"

    def _require(self, operation: str, dependency: Any) -> Any:
        if dependency is None:
            raise ServiceError(
                f"{self.__class__.__name__} is not initialized",
                self.__class__.__name__,
                operation,
            )
        return dependency

    def _index_utilities(self, table: PropertyTable) -> None:
        self._utilities.clear()
        self._by_property.clear()
        for entry in table:
            ids = self._by_property.setdefault(entry.property, [])
            for utility in entry.values:
                value: UtilityValueInfo = {'cssValue': utility.value, 'className': utility.class_name}
                existing = self._utilities.get(utility.class_name)
                if existing is not None and existing['cssProperty'] == entry.property:
                    existing['values'].append(value)
                    continue
                if existing is not None:
                    self.log_debug(
                        f"{utility.class_name} already mapped for {existing['cssProperty']}, "
                        f"skipping {entry.property}"
                    )
                    continue
                self._utilities[utility.class_name] = {
                    'id': utility.class_name,
                    'name': utility.class_name,
                    'category': entry.category_of(utility),
                    'cssProperty': entry.property,
                    'values': [value],
                    'modifiers': list(DEFAULT_MODIFIERS),
                    'examples': [{
                        'title': f"Using {utility.class_name}",
                        'code': f'<div class="{utility.class_name}">Content</div>',
                        'description': f"Applies {entry.property}: {utility.value}",
                    }],
                    'documentation': f"Sets {entry.property} to {utility.value}",
                }
                ids.append(utility.class_name)

    def _index_colors(self) -> None:
        self._colors.clear()
        for name, shades in self.palette.items():
            self._colors[name] = {
                'name': name,
                'shades': dict(shades),
                'usage': color_usage(name, shades),
            }

# Exported names
__all__ = ['UtilityMapperService', 'UtilityInfo', 'ColorInfo', 'DEFAULT_MODIFIERS']
