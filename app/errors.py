"""
Custom Application Exceptions

Defines structured exception hierarchy for consistent error handling.
The extraction core itself only raises ScheduleParseError, and only
when a document cannot be turned into a markup tree at all.
"""

from typing import Any, Optional


class AppError(Exception):
    """Base application exception"""

    def __init__(
        self,
        message: str,
        code: str = "APP_ERROR",
        details: Any = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details

    def to_dict(self) -> dict:
        """Convert exception to dictionary for API responses"""
        return {
            'error': True,
            'code': self.code,
            'message': self.message,
            'details': self.details
        }


class ValidationError(AppError):
    """Input validation failed"""

    def __init__(self, message: str, field: Optional[str] = None, details: Any = None):
        super().__init__(
            message=message,
            code="VALIDATION_ERROR",
            details={'field': field, **({'info': details} if details else {})}
        )
        self.field = field


class NotFoundError(AppError):
    """Resource not found"""

    def __init__(self, resource: str, identifier: Any = None):
        super().__init__(
            message=f"{resource} not found",
            code="NOT_FOUND",
            details={'resource': resource, 'identifier': identifier}
        )


class ScheduleParseError(AppError):
    """Schedule document could not be parsed into a markup tree"""

    def __init__(self, reason: str, parser: Optional[str] = None):
        super().__init__(
            message=f"Failed to parse schedule: {reason}",
            code="SCHEDULE_PARSE_ERROR",
            details={'parser': parser, 'reason': reason}
        )
        self.reason = reason


class ConfigurationError(AppError):
    """Application configuration error"""

    def __init__(self, setting: str, reason: Optional[str] = None):
        super().__init__(
            message=f"Configuration error: {setting}",
            code="CONFIG_ERROR",
            details={'setting': setting, 'reason': reason}
        )
