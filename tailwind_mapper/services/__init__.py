"""Long-lived services for Tailwind Mapper."""

from .base import BaseService
from .installation_service import InstallationService
from .utility_mapper import UtilityMapperService
from .registry import ServiceRegistry

# Exported classes
__all__ = [
    'BaseService',
    'InstallationService',
    'UtilityMapperService',
    'ServiceRegistry',
]
