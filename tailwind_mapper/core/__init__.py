"""Core CSS to Tailwind conversion functionality."""

from .parser import Declaration, parse_declarations
from .properties import PropertyEntry, PropertyTable, UtilityValue, build_default_table
from .resolver import ArbitraryClass, ResolvedClass, Unsupported, ValueResolver
from .converter import ConversionOutcome, DeclarationConverter
from .formatter import OUTPUT_MODES, format_classes
from .service import ConversionResult, ConversionService, ConvertCSSParams, default_table
from .version import DEFAULT_VERSION, SUPPORTED_VERSIONS, get_version_config

__all__ = [
    'Declaration',
    'parse_declarations',
    'PropertyEntry',
    'PropertyTable',
    'UtilityValue',
    'build_default_table',
    'ArbitraryClass',
    'ResolvedClass',
    'Unsupported',
    'ValueResolver',
    'ConversionOutcome',
    'DeclarationConverter',
    'OUTPUT_MODES',
    'format_classes',
    'ConversionResult',
    'ConversionService',
    'ConvertCSSParams',
    'default_table',
    'DEFAULT_VERSION',
    'SUPPORTED_VERSIONS',
    'get_version_config',
]
