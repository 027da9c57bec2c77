"""
Centralized Error Handling Middleware for Flask

Every failure leaves the API as the same JSON envelope:

    {"error": true, "code": "...", "message": "...", "details": ...}

Application errors carry their own code; HTTP-level failures raised by
Flask/Werkzeug (unknown route, wrong method, oversized document) are
translated to a code here.
"""

from flask import Flask, g, jsonify, request
from functools import wraps
import logging
import time
import traceback
from typing import Callable, Dict, Tuple

from werkzeug.exceptions import HTTPException

from app.errors import (
    AppError,
    ConfigurationError,
    NotFoundError,
    ScheduleParseError,
    ValidationError
)

logger = logging.getLogger(__name__)

# Most specific class first
ERROR_STATUS = (
    (ValidationError, 400),
    (NotFoundError, 404),
    (ScheduleParseError, 422),
    (ConfigurationError, 500),
)

HTTP_ERROR_CODES = {
    404: 'ENDPOINT_NOT_FOUND',
    405: 'METHOD_NOT_ALLOWED',
    413: 'PAYLOAD_TOO_LARGE',
}


def status_for(error: AppError) -> int:
    """HTTP status for an application error (500 when unmapped)"""
    for error_class, status in ERROR_STATUS:
        if isinstance(error, error_class):
            return status
    return 500


def _envelope(code: str, message: str, details=None) -> Dict:
    return {'error': True, 'code': code, 'message': message, 'details': details}


def _http_message(error: HTTPException) -> str:
    if error.code == 404:
        return f"Endpoint not found: {request.path}"
    if error.code == 405:
        return f"Method {request.method} not allowed for {request.path}"
    if error.code == 413:
        limit = request.max_content_length
        return f"Schedule document too large. Maximum size is {limit} bytes."
    return error.description or error.name


def setup_error_handlers(app: Flask):
    """
    Register error handlers with Flask app

    Usage:
        app = Flask(__name__)
        setup_error_handlers(app)
    """

    @app.errorhandler(AppError)
    def handle_app_error(error: AppError) -> Tuple[Dict, int]:
        status = status_for(error)
        if status >= 500:
            logger.error(f"{error.code}: {error.message}")
        elif isinstance(error, ScheduleParseError):
            logger.warning(f"{error.code}: {error.reason} (parser: {error.details.get('parser')})")
        else:
            logger.info(f"{error.code}: {error.message}")
        return jsonify(error.to_dict()), status

    @app.errorhandler(HTTPException)
    def handle_http_error(error: HTTPException) -> Tuple[Dict, int]:
        code = HTTP_ERROR_CODES.get(error.code, error.name.upper().replace(' ', '_'))
        details = {'method': request.method, 'path': request.path} if error.code == 404 else None
        return jsonify(_envelope(code, _http_message(error), details)), error.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(error) -> Tuple[Dict, int]:
        logger.error(f"Unhandled {type(error).__name__} on {request.method} {request.path}: {error}")
        logger.error(traceback.format_exc())
        details = {'type': type(error).__name__} if app.debug else None
        return jsonify(_envelope('UNEXPECTED_ERROR', 'An unexpected error occurred', details)), 500


def safe_endpoint(func: Callable) -> Callable:
    """
    Wrap a view so stray exceptions surface as ENDPOINT_ERROR

    Application and HTTP errors pass through to their handlers.
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except (AppError, HTTPException):
            raise
        except Exception as e:
            logger.error(f"Endpoint {func.__name__} failed: {e}")
            logger.error(traceback.format_exc())
            raise AppError(message=f"Operation failed: {e}", code="ENDPOINT_ERROR")
    return wrapper


def setup_request_logging(app: Flask):
    """Log method, path, status and elapsed time of each request at DEBUG"""

    @app.before_request
    def start_timer():
        g.request_started = time.perf_counter()
        if request.content_length:
            logger.debug(f"{request.method} {request.path} ({request.content_length} bytes)")

    @app.after_request
    def log_response(response):
        started = g.get('request_started')
        elapsed = f" in {(time.perf_counter() - started) * 1000:.1f}ms" if started else ''
        logger.debug(f"{request.method} {request.path} -> {response.status_code}{elapsed}")
        return response
