"""Tool definitions and dispatch for Tailwind Mapper.

Each tool takes a JSON-shaped argument object and answers with a text
content block holding the JSON result. Framing and transport are left to
the caller.
"""

import logging
from typing import Any, Callable, Dict, List, Mapping, Optional

import orjson

from .core.formatter import OUTPUT_MODES
from .core.service import ConvertCSSParams
from .core.version import SUPPORTED_VERSIONS
from .services.installation_service import FRAMEWORKS, PACKAGE_MANAGERS, InstallationService, InstallTailwindParams
from .services.registry import ServiceRegistry
from .services.utility_mapper import UtilityMapperService
from .utils.config import DEFAULT_OUTPUT_MODE, MAX_CSS_SIZE
from .utils.error import CssSyntaxError, TailwindMapperError, ToolError, ValidationError

logger = logging.getLogger(__name__)

INVALID_CSS_MESSAGE = 'Invalid CSS syntax.'

TOOLS: List[Dict[str, Any]] = [
    {
        'name': 'convert_css_to_tailwind',
        'description': 'Convert CSS declarations into TailwindCSS utility classes',
        'inputSchema': {
            'type': 'object',
            'properties': {
                'css': {
                    'type': 'string',
                    'description': 'CSS to convert, one or more rules',
                },
                'mode': {
                    'type': 'string',
                    'enum': OUTPUT_MODES,
                    'description': 'Output format (default: classes)',
                },
                'version': {
                    'type': 'string',
                    'enum': SUPPORTED_VERSIONS,
                    'description': 'Target TailwindCSS version (default: v4)',
                },
            },
            'required': ['css'],
        },
    },
    {
        'name': 'install_tailwind',
        'description': 'Generate TailwindCSS installation commands and configuration files for a framework',
        'inputSchema': {
            'type': 'object',
            'properties': {
                'framework': {
                    'type': 'string',
                    'enum': list(FRAMEWORKS),
                    'description': 'Target framework',
                },
                'packageManager': {
                    'type': 'string',
                    'enum': PACKAGE_MANAGERS,
                    'description': 'Package manager (default: npm)',
                },
                'includeTypescript': {
                    'type': 'boolean',
                    'description': 'Include TypeScript configuration (default: false)',
                },
                'version': {
                    'type': 'string',
                    'enum': SUPPORTED_VERSIONS,
                    'description': 'Target TailwindCSS version (default: v4)',
                },
            },
            'required': ['framework'],
        },
    },
    {
        'name': 'get_tailwind_utilities',
        'description': 'Look up TailwindCSS utilities by category, CSS property or search query',
        'inputSchema': {
            'type': 'object',
            'properties': {
                'category': {
                    'type': 'string',
                    'description': 'Utility category (e.g., "spacing", "flexbox")',
                },
                'property': {
                    'type': 'string',
                    'description': 'CSS property (e.g., "margin", "display")',
                },
                'search': {
                    'type': 'string',
                    'description': 'Search term matched against names and documentation',
                },
            },
            'required': [],
        },
    },
    {
        'name': 'get_tailwind_colors',
        'description': 'Get the TailwindCSS color palette',
        'inputSchema': {
            'type': 'object',
            'properties': {
                'colorName': {
                    'type': 'string',
                    'description': 'Color name (e.g., "blue", "slate")',
                },
                'includeShades': {
                    'type': 'boolean',
                    'description': 'Include the shade values (default: true)',
                },
            },
            'required': [],
        },
    },
]


def _optional_string(args: Mapping[str, Any], key: str) -> Optional[str]:
    value = args.get(key)
    if value is not None and not isinstance(value, str):
        raise ValidationError(f"'{key}' must be a string")
    return value


def validate_convert_params(args: Mapping[str, Any]) -> ConvertCSSParams:
    """Validate arguments of ``convert_css_to_tailwind``.

    An unknown ``mode`` string is passed through; the formatter treats it as
    ``classes``.

    Raises:
        ValidationError: If ``css`` is missing, not a string or too large, or
            ``version`` is not supported
    """
    css = args.get('css')
    if not isinstance(css, str):
        raise ValidationError("'css' is required and must be a string")
    if len(css.encode('utf-8')) > MAX_CSS_SIZE:
        raise ValidationError(f"CSS input too large (max {MAX_CSS_SIZE} bytes)")

    params: ConvertCSSParams = {'css': css}
    mode = _optional_string(args, 'mode')
    if mode is not None:
        params['mode'] = mode
    version = _optional_string(args, 'version')
    if version is not None:
        if version not in SUPPORTED_VERSIONS:
            raise ValidationError(
                f"Unsupported version {version!r} (expected one of {', '.join(SUPPORTED_VERSIONS)})"
            )
        params['version'] = version
    return params


def validate_install_params(args: Mapping[str, Any]) -> InstallTailwindParams:
    """Validate arguments of ``install_tailwind``.

    Raises:
        ValidationError: If ``framework`` is missing or unknown, or another
            argument has the wrong type or an unsupported value
    """
    framework = args.get('framework')
    if not isinstance(framework, str) or not framework:
        raise ValidationError("'framework' is required and must be a string")
    if framework.lower() not in FRAMEWORKS:
        raise ValidationError(
            f"Unsupported framework {framework!r} (expected one of {', '.join(FRAMEWORKS)})"
        )

    params: InstallTailwindParams = {'framework': framework}
    package_manager = _optional_string(args, 'packageManager')
    if package_manager is not None:
        if package_manager not in PACKAGE_MANAGERS:
            raise ValidationError(
                f"Unsupported package manager {package_manager!r} (expected one of {', '.join(PACKAGE_MANAGERS)})"
            )
        params['packageManager'] = package_manager
    include_typescript = args.get('includeTypescript')
    if include_typescript is not None:
        if not isinstance(include_typescript, bool):
            raise ValidationError("'includeTypescript' must be a boolean")
        params['includeTypescript'] = include_typescript
    version = _optional_string(args, 'version')
    if version is not None:
        if version not in SUPPORTED_VERSIONS:
            raise ValidationError(
                f"Unsupported version {version!r} (expected one of {', '.join(SUPPORTED_VERSIONS)})"
            )
        params['version'] = version
    return params


def create_success_response(data: Any) -> Dict[str, Any]:
    """Wrap a result as a text content block holding indented JSON."""
    return {
        'content': [
            {
                'type': 'text',
                'text': orjson.dumps(data, option=orjson.OPT_INDENT_2).decode('utf-8'),
            },
        ],
    }


class ToolDispatcher:
    """Route tool calls to the services of a registry."""

    def __init__(self, registry: ServiceRegistry):
        self.registry = registry
        self._handlers: Dict[str, Callable[[Mapping[str, Any]], Any]] = {
            'convert_css_to_tailwind': self._convert_css,
            'install_tailwind': self._install_tailwind,
            'get_tailwind_utilities': self._get_utilities,
            'get_tailwind_colors': self._get_colors,
        }

    @property
    def utility_mapper(self) -> UtilityMapperService:
        return self.registry.create_utility_mapper()

    @property
    def installation_service(self) -> InstallationService:
        return self.registry.create_installation_service()

    def list_tools(self) -> List[Dict[str, Any]]:
        return [tool for tool in TOOLS if tool['name'] in self._handlers]

    def call_tool(self, name: str, arguments: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """Run a tool.

        Args:
            name: Tool name
            arguments: Tool arguments

        Returns:
            Success response with the JSON result

        Raises:
            ToolError: METHOD_NOT_FOUND for an unknown tool, INVALID_PARAMS for
                bad arguments or unparsable CSS, INTERNAL_ERROR otherwise
        """
        handler = self._handlers.get(name)
        if handler is None:
            raise ToolError(ToolError.METHOD_NOT_FOUND, f"Unknown tool: {name}")

        if arguments is None:
            arguments = {}
        if not isinstance(arguments, Mapping):
            raise ToolError(ToolError.INVALID_PARAMS, 'Tool arguments must be an object')

        try:
            return create_success_response(handler(arguments))
        except ValidationError as e:
            raise ToolError(ToolError.INVALID_PARAMS, str(e)) from e
        except CssSyntaxError as e:
            logger.info(f"{name}: {e}")
            raise ToolError(ToolError.INVALID_PARAMS, INVALID_CSS_MESSAGE) from e
        except TailwindMapperError as e:
            logger.error(f"Tool {name} failed: {e}")
            raise ToolError(ToolError.INTERNAL_ERROR, str(e)) from e

    def _convert_css(self, args: Mapping[str, Any]) -> Any:
        params = validate_convert_params(args)
        return self.utility_mapper.convert_css_to_tailwind(
            params['css'],
            mode=params.get('mode', DEFAULT_OUTPUT_MODE),
            version=params.get('version'),
        )

    def _install_tailwind(self, args: Mapping[str, Any]) -> Any:
        params = validate_install_params(args)
        return self.installation_service.generate_installation_guide(
            params['framework'],
            package_manager=params.get('packageManager', 'npm'),
            include_typescript=params.get('includeTypescript', False),
            version=params.get('version'),
        )

    def _get_utilities(self, args: Mapping[str, Any]) -> Any:
        return self.utility_mapper.get_utilities(
            category=_optional_string(args, 'category'),
            property=_optional_string(args, 'property'),
            search=_optional_string(args, 'search'),
        )

    def _get_colors(self, args: Mapping[str, Any]) -> Any:
        include_shades = args.get('includeShades', True)
        if not isinstance(include_shades, bool):
            raise ValidationError("'includeShades' must be a boolean")
        return self.utility_mapper.get_colors(
            color_name=_optional_string(args, 'colorName'),
            include_shades=include_shades,
        )

# Exported names
__all__ = [
    'TOOLS',
    'INVALID_CSS_MESSAGE',
    'ToolDispatcher',
    'create_success_response',
    'validate_convert_params',
    'validate_install_params',
]
