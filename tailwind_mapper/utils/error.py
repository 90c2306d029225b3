"""Error utility for Tailwind Mapper."""

from typing import Optional


class TailwindMapperError(Exception):
    """Base exception for Tailwind Mapper."""
    pass


class CssParseError(TailwindMapperError):
    """Raised by the CSS parser when the input is not valid CSS."""

    def __init__(self, reason: str, line: int = 0, column: int = 0):
        self.reason = reason
        self.line = line
        self.column = column
        if line:
            super().__init__(f"{reason} at line {line}, column {column}")
        else:
            super().__init__(reason)


class CssSyntaxError(TailwindMapperError):
    """Raised when CSS handed to the converter cannot be parsed.

    The parser failure that caused it is kept on ``cause`` and chained as
    ``__cause__``.
    """

    def __init__(self, message: str, cause: Optional[CssParseError] = None):
        super().__init__(message)
        self.cause = cause


class ValidationError(TailwindMapperError):
    """Raised when validation fails."""
    pass


class ConfigurationError(TailwindMapperError):
    """Raised when configuration is invalid."""
    pass


class ServiceError(TailwindMapperError):
    """Raised when a service operation fails."""

    def __init__(self, message: str, service: str, operation: str,
                 original_error: Optional[BaseException] = None):
        super().__init__(message)
        self.service = service
        self.operation = operation
        self.original_error = original_error


class ToolError(TailwindMapperError):
    """Raised by the tool dispatcher; ``code`` is a JSON-RPC error code."""

    METHOD_NOT_FOUND = -32601
    INVALID_PARAMS = -32602
    INTERNAL_ERROR = -32603

    def __init__(self, code: int, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


# Exported exceptions
__all__ = [
    'TailwindMapperError',
    'CssParseError',
    'CssSyntaxError',
    'ValidationError',
    'ConfigurationError',
    'ServiceError',
    'ToolError',
]
