"""Tailwind Mapper: convert CSS to TailwindCSS utility classes."""

from .utils.config import VERSION
from .core.service import ConversionService
from .services import InstallationService, ServiceRegistry, UtilityMapperService
from .tools import ToolDispatcher

__version__ = VERSION

__all__ = [
    'ConversionService',
    'InstallationService',
    'ServiceRegistry',
    'UtilityMapperService',
    'ToolDispatcher',
    '__version__',
]
