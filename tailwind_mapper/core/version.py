"""Tailwind version configuration.

Everything that differs between Tailwind v3 and v4 and matters to the
converter lives here, so that callers can pick a version per request.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple
from typing_extensions import Literal

from ..utils.config import DEFAULT_TAILWIND_VERSION
from ..utils.error import ValidationError

TailwindVersion = Literal['v3', 'v4']

SUPPORTED_VERSIONS: List[str] = ['v3', 'v4']
DEFAULT_VERSION: str = DEFAULT_TAILWIND_VERSION if DEFAULT_TAILWIND_VERSION in SUPPORTED_VERSIONS else 'v4'

V4_COMPONENT_NOTE = (
    'TailwindCSS v4 encourages CSS-first configuration. Consider using @theme '
    'and CSS custom properties instead of @apply for complex components.'
)


@dataclass(frozen=True)
class VersionConfig:
    """Per-version settings.

    The install fields drive the installation guide: packages to add, the
    init command, the CSS entry file, the PostCSS plugins and whether a
    ``tailwind.config`` file is needed at all.
    """
    version: str
    docs_base_url: str
    renamed_utilities: Mapping[str, str] = field(default_factory=dict)
    component_note: Optional[str] = None
    core_dependencies: Tuple[str, ...] = ()
    init_command: Optional[str] = None
    css_entry_content: str = ''
    postcss_plugins: Tuple[str, ...] = ()
    config_file_required: bool = False

    def rename(self, class_name: str) -> str:
        """Return the name a utility class carries in this version."""
        important = class_name.startswith('!')
        bare = class_name[1:] if important else class_name
        renamed = self.renamed_utilities.get(bare, bare)
        return f"!{renamed}" if important else renamed


_V3 = VersionConfig(
    version='v3',
    docs_base_url='https://v3.tailwindcss.com',
    renamed_utilities=MappingProxyType({}),
    core_dependencies=('tailwindcss', 'autoprefixer', 'postcss'),
    init_command='npx tailwindcss init -p',
    css_entry_content='@tailwind base;\n@tailwind components;\n@tailwind utilities;',
    postcss_plugins=('tailwindcss', 'autoprefixer'),
    config_file_required=True,
)

_V4 = VersionConfig(
    version='v4',
    docs_base_url='https://tailwindcss.com',
    renamed_utilities=MappingProxyType({
        'decoration-slice': 'box-decoration-slice',
        'decoration-clone': 'box-decoration-clone',
        'overflow-ellipsis': 'text-ellipsis',
        'flex-shrink': 'shrink',
        'flex-shrink-0': 'shrink-0',
        'flex-grow': 'grow',
        'flex-grow-0': 'grow-0',
    }),
    component_note=V4_COMPONENT_NOTE,
    core_dependencies=('tailwindcss', '@tailwindcss/postcss'),
    css_entry_content='@import "tailwindcss";',
    postcss_plugins=('@tailwindcss/postcss',),
)

_CONFIGS = {'v3': _V3, 'v4': _V4}


def get_version_config(version: Optional[str] = None) -> VersionConfig:
    """Look up the configuration for a Tailwind version.

    Args:
        version: ``"v3"`` or ``"v4"``; ``None`` selects the default

    Returns:
        VersionConfig for the version

    Raises:
        ValidationError: If the version is not supported
    """
    key = version or DEFAULT_VERSION
    try:
        return _CONFIGS[key]
    except KeyError:
        raise ValidationError(
            f"Unsupported Tailwind version: {version} "
            f"(expected one of {', '.join(SUPPORTED_VERSIONS)})"
        )

# Exported names
__all__ = [
    'TailwindVersion',
    'SUPPORTED_VERSIONS',
    'DEFAULT_VERSION',
    'V4_COMPONENT_NOTE',
    'VersionConfig',
    'get_version_config',
]
