"""Base service class for Tailwind Mapper."""

import logging
from typing import Dict, Any, Optional
from abc import ABC, abstractmethod
from ..utils.error import ServiceError


class BaseService(ABC):
    """Base class for all long-lived services."""

    def __init__(self):
        """Initialize base service."""
        self.logger = logging.getLogger(self.__class__.__name__)
        self.initialized = False

    @abstractmethod
    async def initialize(self) -> None:
        """Load whatever the service needs before it can answer requests."""
        pass

    @abstractmethod
    def get_stats(self) -> Dict[str, Any]:
        """Get service statistics."""
        pass

    def log_error(self, message: str, error: Optional[BaseException] = None) -> None:
        """Log error message.

        Args:
            message: Error message
            error: Optional exception
        """
        if error:
            self.logger.error(f"{message}: {error}")
        else:
            self.logger.error(message)

    def log_warning(self, message: str) -> None:
        """Log warning message.

        Args:
            message: Warning message
        """
        self.logger.warning(message)

    def log_info(self, message: str) -> None:
        """Log info message.

        Args:
            message: Info message
        """
        self.logger.info(message)

    def log_debug(self, message: str) -> None:
        """Log debug message.

        Args:
            message: Debug message
        """
        self.logger.debug(message)

    def handle_error(self, error: BaseException, operation: str, message: str) -> None:
        """Log an unexpected failure and raise it as a ServiceError.

        Args:
            error: Exception to handle
            operation: Name of the failing operation
            message: Error message

        Raises:
            ServiceError: Always, chained to ``error``
        """
        self.log_error(message, error)
        raise ServiceError(message, self.__class__.__name__, operation, error) from error

    def cleanup(self) -> None:
        """Release whatever ``initialize`` loaded."""
        self.initialized = False

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.cleanup()

# Exported class
__all__ = ['BaseService']
