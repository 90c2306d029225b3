"""Installation guide service for Tailwind Mapper."""

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Tuple
from typing_extensions import NotRequired, TypedDict

import orjson

from ..core.version import VersionConfig, get_version_config
from ..utils.error import ServiceError, TailwindMapperError, ValidationError
from .base import BaseService

PACKAGE_MANAGERS: List[str] = ['npm', 'yarn', 'pnpm', 'bun']

INSTALL_COMMANDS = {
    'npm': 'npm install -D',
    'yarn': 'yarn add -D',
    'pnpm': 'pnpm add -D',
    'bun': 'bun add -D',
}

TYPESCRIPT_DEPENDENCY = '@types/node'

TAILWIND_CONFIG_BODY = """{
  content: [
    %s
  ],
  theme: {
    extend: {},
  },
  plugins: [],
}"""

JS_CONFIG = """/** @type {import('tailwindcss').Config} */
module.exports = %s
"""

TS_CONFIG = """import type { Config } from "tailwindcss";

const config: Config = %s;

export default config;
"""

POSTCSS_CONFIG = """module.exports = {
  plugins: {
%s
  },
}
"""

FINAL_STEPS = [
    'Start your development server',
    'Start using TailwindCSS classes',
    'Test TailwindCSS by adding utility classes to your components',
]


class InstallTailwindParams(TypedDict):
    framework: str
    packageManager: NotRequired[str]
    includeTypescript: NotRequired[bool]
    version: NotRequired[str]


class ConfigFile(TypedDict):
    filename: str
    content: str


class InstallationGuide(TypedDict):
    commands: List[str]
    configFiles: List[ConfigFile]
    nextSteps: List[str]
    version: str


@dataclass(frozen=True)
class FrameworkConfig:
    """How Tailwind is wired into one framework."""
    name: str
    content_paths: Tuple[str, ...]
    has_postcss: bool
    setup_instructions: Tuple[str, ...]
    # Shown right after the configuration step
    extra_step: Optional[str] = None


FRAMEWORKS: Dict[str, FrameworkConfig] = {
    'react': FrameworkConfig(
        name='React',
        content_paths=('./src/**/*.{js,jsx,ts,tsx}',),
        has_postcss=True,
        setup_instructions=(
            'Import your CSS file in your main component (usually src/index.js or src/App.js)',
            'Start using TailwindCSS classes in your React components',
        ),
    ),
    'nextjs': FrameworkConfig(
        name='Next.js',
        content_paths=(
            './pages/**/*.{js,ts,jsx,tsx,mdx}',
            './components/**/*.{js,ts,jsx,tsx,mdx}',
            './app/**/*.{js,ts,jsx,tsx,mdx}',
        ),
        has_postcss=True,
        setup_instructions=(
            'Import your CSS file in pages/_app.js or app/layout.js',
            'Start using TailwindCSS classes in your Next.js components',
        ),
        extra_step='If using the app directory, make sure to import CSS in app/layout.js',
    ),
    'vue': FrameworkConfig(
        name='Vue.js',
        content_paths=('./index.html', './src/**/*.{vue,js,ts,jsx,tsx}'),
        has_postcss=True,
        setup_instructions=(
            'Import your CSS file in src/main.js',
            'Start using TailwindCSS classes in your Vue components',
        ),
    ),
    'vite': FrameworkConfig(
        name='Vite',
        content_paths=('./index.html', './src/**/*.{js,ts,jsx,tsx}'),
        has_postcss=True,
        setup_instructions=(
            'Import your CSS file in src/main.js',
            'Start using TailwindCSS classes in your components',
        ),
    ),
    'laravel': FrameworkConfig(
        name='Laravel',
        content_paths=(
            './resources/**/*.blade.php',
            './resources/**/*.js',
            './resources/**/*.vue',
        ),
        has_postcss=True,
        setup_instructions=(
            'Add the Tailwind directives to your resources/css/app.css file',
            'Build your assets using Laravel Mix or Vite',
            'Start using TailwindCSS classes in your Blade templates',
        ),
        extra_step='Make sure your build process includes the CSS compilation step',
    ),
    'angular': FrameworkConfig(
        name='Angular',
        content_paths=('./src/**/*.{html,ts}',),
        has_postcss=False,
        setup_instructions=(
            'Add the Tailwind directives to your src/styles.css file',
            'Start using TailwindCSS classes in your Angular components',
        ),
    ),
    'svelte': FrameworkConfig(
        name='Svelte',
        content_paths=('./src/**/*.{html,js,svelte,ts}',),
        has_postcss=True,
        setup_instructions=(
            'Import your CSS file in src/app.html or src/main.js',
            'Start using TailwindCSS classes in your Svelte components',
        ),
    ),
}


def _js_string(value: str) -> str:
    return orjson.dumps(value).decode('utf-8')


def render_tailwind_config(content_paths: Tuple[str, ...], include_typescript: bool = False) -> str:
    """Render a ``tailwind.config.js`` (or ``.ts``) scanning the given paths."""
    body = TAILWIND_CONFIG_BODY % ',\n    '.join(_js_string(path) for path in content_paths)
    template = TS_CONFIG if include_typescript else JS_CONFIG
    return template % body


def render_postcss_config(plugins: Tuple[str, ...]) -> str:
    """Render a ``postcss.config.js`` enabling the given plugins."""
    return POSTCSS_CONFIG % '\n'.join(f"    {_js_string(plugin)}: {{}}," for plugin in plugins)


class InstallationService(BaseService):
    """Generate TailwindCSS installation guides per framework."""

    def __init__(self, frameworks: Mapping[str, FrameworkConfig] = FRAMEWORKS):
        """Initialize installation service.

        Args:
            frameworks: Framework configurations keyed by lower-case name
        """
        super().__init__()
        self._available = frameworks
        self.frameworks: Dict[str, FrameworkConfig] = {}
        self.guide_count = 0

    async def initialize(self) -> None:
        """Load the framework configurations."""
        self.frameworks = {name.lower(): config for name, config in self._available.items()}
        self.initialized = True
        self.log_info(f"InstallationService initialized with {len(self.frameworks)} frameworks")

    def cleanup(self) -> None:
        self.frameworks.clear()
        super().cleanup()

    def get_stats(self) -> Dict[str, Any]:
        return {
            'initialized': self.initialized,
            'frameworks': len(self.frameworks),
            'guides': self.guide_count,
        }

    def get_supported_frameworks(self) -> List[str]:
        """Names accepted by ``generate_installation_guide``, lower-case."""
        return list(self.frameworks)

    def generate_installation_guide(self, framework: str, package_manager: str = 'npm',
                                    include_typescript: bool = False,
                                    version: Optional[str] = None) -> InstallationGuide:
        """Generate the install commands, config files and next steps for a framework.

        Args:
            framework: Framework name, case-insensitive (``react``, ``nextjs`` ...)
            package_manager: ``npm``, ``yarn``, ``pnpm`` or ``bun``
            include_typescript: Add ``@types/node`` and write a ``.ts`` config
            version: Target Tailwind version, ``None`` for the default

        Returns:
            InstallationGuide

        Raises:
            ServiceError: If the framework is not supported or the service is
                not initialized
            ValidationError: If the package manager or version is not supported
        """
        if not self.initialized:
            raise ServiceError(
                f"{self.__class__.__name__} is not initialized",
                self.__class__.__name__,
                'generate_installation_guide',
            )

        config = self.frameworks.get(framework.lower())
        if config is None:
            raise ServiceError(
                f"Unsupported framework: {framework}",
                self.__class__.__name__,
                'generate_installation_guide',
            )
        if package_manager not in INSTALL_COMMANDS:
            raise ValidationError(
                f"Unsupported package manager: {package_manager} "
                f"(expected one of {', '.join(PACKAGE_MANAGERS)})"
            )
        version_config = get_version_config(version)

        try:
            guide: InstallationGuide = {
                'commands': self._commands(package_manager, include_typescript, version_config),
                'configFiles': self._config_files(config, include_typescript, version_config),
                'nextSteps': self._next_steps(config, include_typescript, version_config),
                'version': version_config.version,
            }
        except TailwindMapperError:
            raise
        except Exception as e:
            self.handle_error(e, 'generate_installation_guide', 'Failed to generate installation guide')

        self.guide_count += 1
        self.log_debug(f"Generated {version_config.version} installation guide for {config.name}")
        return guide

    def _commands(self, package_manager: str, include_typescript: bool,
                  version_config: VersionConfig) -> List[str]:
        dependencies = list(version_config.core_dependencies)
        if include_typescript and TYPESCRIPT_DEPENDENCY not in dependencies:
            dependencies.append(TYPESCRIPT_DEPENDENCY)

        commands = [f"{INSTALL_COMMANDS[package_manager]} {' '.join(dependencies)}"]
        if version_config.init_command:
            commands.append(version_config.init_command)
        return commands

    def _config_files(self, config: FrameworkConfig, include_typescript: bool,
                      version_config: VersionConfig) -> List[ConfigFile]:
        files: List[ConfigFile] = []
        # v4 is configured from the CSS entry file
        if version_config.config_file_required:
            extension = 'ts' if include_typescript else 'js'
            files.append({
                'filename': f"tailwind.config.{extension}",
                'content': render_tailwind_config(config.content_paths, include_typescript),
            })
        if config.has_postcss:
            files.append({
                'filename': 'postcss.config.js',
                'content': render_postcss_config(version_config.postcss_plugins),
            })
        files.append({'filename': 'src/index.css', 'content': version_config.css_entry_content})
        return files

    def _next_steps(self, config: FrameworkConfig, include_typescript: bool,
                    version_config: VersionConfig) -> List[str]:
        if version_config.config_file_required:
            extension = 'ts' if include_typescript else 'js'
            steps = [f"Update your tailwind.config.{extension} content paths to match your project structure"]
        else:
            steps = ['Customize your design tokens using @theme in your CSS file']
        if config.extra_step:
            steps.append(config.extra_step)
        steps.extend(config.setup_instructions)
        steps.extend(FINAL_STEPS)
        return steps

# Exported names
__all__ = [
    'InstallationService',
    'InstallationGuide',
    'InstallTailwindParams',
    'FrameworkConfig',
    'FRAMEWORKS',
    'PACKAGE_MANAGERS',
    'render_tailwind_config',
    'render_postcss_config',
]
