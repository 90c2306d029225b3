"""CSS to Tailwind conversion entry point."""

import logging
from functools import lru_cache
from typing import Callable, List, Optional
from typing_extensions import NotRequired, TypedDict

from ..utils.config import DEFAULT_OUTPUT_MODE
from ..utils.error import CssParseError, CssSyntaxError
from .converter import DeclarationConverter
from .formatter import format_classes
from .parser import Declaration, parse_declarations
from .properties import PropertyTable, build_default_table
from .resolver import ValueResolver
from .version import get_version_config

logger = logging.getLogger(__name__)

EMPTY_INPUT_SUGGESTION = 'Provide some CSS to convert'
EMPTY_COMPONENT_SUGGESTION = 'No declaration mapped to a Tailwind class, so the @apply list is empty'


class ConvertCSSParams(TypedDict):
    css: str
    mode: NotRequired[str]
    version: NotRequired[str]


class ConversionResult(TypedDict):
    tailwindClasses: str
    unsupportedStyles: NotRequired[List[str]]
    suggestions: NotRequired[List[str]]
    version: NotRequired[str]


@lru_cache(maxsize=None)
def default_table() -> PropertyTable:
    """Process-wide default property table, built on first use."""
    return build_default_table()


class ConversionService:
    """Convert CSS text into Tailwind utility classes.

    Holds no per-request state: the table is read-only and every call builds
    its own outcome, so one instance can serve concurrent callers.
    """

    def __init__(self, table: Optional[PropertyTable] = None,
                 parser: Callable[[str], List[Declaration]] = parse_declarations):
        self.table = table if table is not None else default_table()
        self.parser = parser
        self.converter = DeclarationConverter(ValueResolver(self.table))

    def convert_css(self, params: ConvertCSSParams) -> ConversionResult:
        """Convert CSS from a parameter mapping (``css``, ``mode``, ``version``)."""
        return self.convert(
            params['css'],
            mode=params.get('mode') or DEFAULT_OUTPUT_MODE,
            version=params.get('version'),
        )

    def convert(self, css: str, mode: str = DEFAULT_OUTPUT_MODE,
                version: Optional[str] = None) -> ConversionResult:
        """Convert CSS text.

        Args:
            css: Stylesheet text
            mode: Output mode, see ``format_classes``
            version: Target Tailwind version, ``None`` for the default

        Returns:
            ConversionResult; ``unsupportedStyles`` and ``suggestions`` are
            only present when non-empty

        Raises:
            CssSyntaxError: If the CSS cannot be parsed
            ValidationError: If the version is not supported
        """
        if not css or not css.strip():
            return {
                'tailwindClasses': '',
                'suggestions': [EMPTY_INPUT_SUGGESTION],
            }

        config = get_version_config(version)

        try:
            declarations = self.parser(css)
        except CssParseError as e:
            logger.warning(f"Rejected CSS input: {e}")
            raise CssSyntaxError(f"Invalid CSS syntax: {e}", cause=e) from e

        outcome = self.converter.convert(declarations)
        classes = [config.rename(class_name) for class_name in outcome.matched_classes]
        suggestions = list(outcome.suggestions)
        if mode == 'component':
            if not classes:
                suggestions.append(EMPTY_COMPONENT_SUGGESTION)
            if config.component_note:
                suggestions.append(config.component_note)

        result: ConversionResult = {
            'tailwindClasses': format_classes(classes, mode),
            'version': config.version,
        }
        if outcome.unsupported:
            result['unsupportedStyles'] = outcome.unsupported
        if suggestions:
            result['suggestions'] = suggestions
        return result

# Exported names
__all__ = [
    'ConvertCSSParams',
    'ConversionResult',
    'ConversionService',
    'EMPTY_COMPONENT_SUGGESTION',
    'EMPTY_INPUT_SUGGESTION',
    'default_table',
]
