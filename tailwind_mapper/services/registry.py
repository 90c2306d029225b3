"""Service registry for Tailwind Mapper."""

import asyncio
import logging
from typing import Dict, Any, Optional
from .base import BaseService
from .installation_service import InstallationService
from .utility_mapper import UtilityMapperService


class ServiceRegistry:
    """Create, register and manage the lifecycle of services."""

    def __init__(self):
        """Initialize service registry."""
        self.logger = logging.getLogger(self.__class__.__name__)
        self._services: Dict[str, BaseService] = {}

    def register(self, name: str, service: BaseService) -> BaseService:
        """Register a service under a name.

        Args:
            name: Service name
            service: Service instance

        Returns:
            BaseService: The registered service
        """
        if name in self._services:
            self.logger.warning(f"Replacing registered service: {name}")
        self._services[name] = service
        return service

    def create_utility_mapper(self, mapping_file: Optional[str] = None) -> UtilityMapperService:
        """Create utility mapper.

        Args:
            mapping_file: Optional JSON file with extra property mappings

        Returns:
            UtilityMapperService: Utility mapper instance
        """
        if 'utility_mapper' not in self._services:
            kwargs = {'mapping_file': mapping_file} if mapping_file else {}
            self._services['utility_mapper'] = UtilityMapperService(**kwargs)
        return self._services['utility_mapper']

    def create_installation_service(self) -> InstallationService:
        """Create installation service.

        Returns:
            InstallationService: Installation service instance
        """
        if 'installation' not in self._services:
            self._services['installation'] = InstallationService()
        return self._services['installation']

    def get(self, name: str) -> Optional[BaseService]:
        """Get service by name.

        Args:
            name: Service name

        Returns:
            Optional[BaseService]: Service instance if found
        """
        return self._services.get(name)

    def get_all_services(self) -> Dict[str, BaseService]:
        """Get all services.

        Returns:
            Dict[str, BaseService]: Dictionary of all services
        """
        return self._services.copy()

    async def initialize_all(self) -> None:
        """Initialize all services concurrently.

        Raises:
            Exception: The first initialization failure, after it is logged
        """
        async def initialize(name: str, service: BaseService) -> None:
            try:
                await service.initialize()
            except Exception as e:
                self.logger.error(f"Failed to initialize {name} service: {e}")
                raise

        await asyncio.gather(*(initialize(name, service) for name, service in self._services.items()))

    def get_all_stats(self) -> Dict[str, Dict[str, Any]]:
        """Get statistics for all services.

        Returns:
            Dict[str, Dict[str, Any]]: Dictionary of statistics for each service
        """
        return {name: service.get_stats() for name, service in self._services.items()}

    def cleanup_all(self) -> None:
        """Clean up all services, continuing past failures."""
        for name, service in self._services.items():
            try:
                service.cleanup()
            except Exception as e:
                self.logger.error(f"Failed to cleanup {name} service: {e}")

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.cleanup_all()

# Exported class
__all__ = ['ServiceRegistry']
