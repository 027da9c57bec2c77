"""
API Middleware Package - JSON error envelope and request logging
"""

from api.middleware.error_handler import (
    ERROR_STATUS,
    status_for,
    setup_error_handlers,
    setup_request_logging,
    safe_endpoint
)

__all__ = [
    'ERROR_STATUS',
    'status_for',
    'setup_error_handlers',
    'setup_request_logging',
    'safe_endpoint'
]
