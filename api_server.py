"""
Flask Server for the Crew Schedule Parser
Accepts schedule detail pages and returns the parsed monthly schedule as JSON.
Features: health check, HTML parse endpoint, bundled demo schedule, centralized error middleware
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from flask import Flask, request, jsonify

from api.middleware.error_handler import setup_error_handlers, setup_request_logging, safe_endpoint
from app.config import AppConfig, get_config
from app.errors import AppError, ConfigurationError, NotFoundError, ScheduleParseError, ValidationError
from services.base_service import ServiceResult
from services.schedule_service import ScheduleService

logger = logging.getLogger(__name__)


def _raise_for_result(result: ServiceResult):
    """Turn a failed ServiceResult into the matching application error"""
    metadata = result.metadata or {}
    code = metadata.get('code')
    if code == 'VALIDATION_ERROR':
        raise ValidationError(result.error, field='body')
    if code == 'NOT_FOUND':
        raise NotFoundError('Demo schedule', metadata.get('path'))
    if code == 'SCHEDULE_PARSE_ERROR':
        details = metadata.get('details') or {}
        raise ScheduleParseError(details.get('reason', result.error), parser=details.get('parser'))
    raise AppError(result.error or 'Schedule service failed', code='SERVICE_ERROR')


def create_app(config: Optional[AppConfig] = None, service: Optional[ScheduleService] = None) -> Flask:
    """
    Build the Flask application

    Raises:
        ConfigurationError: The configured HTML parser is not supported
    """
    config = config or get_config()
    if not config.parser.is_valid():
        raise ConfigurationError('SCHEDULE_HTML_PARSER', f"unsupported parser {config.parser.html_parser!r}")

    service = service or ScheduleService(config)

    app = Flask(__name__)
    app.config['MAX_CONTENT_LENGTH'] = config.api.max_content_length

    setup_error_handlers(app)
    if config.api.debug:
        setup_request_logging(app)

    @app.after_request
    def add_cors_headers(response):
        # CORS for local dev
        response.headers['Access-Control-Allow-Origin'] = '*'
        response.headers['Access-Control-Allow-Headers'] = 'Content-Type'
        response.headers['Access-Control-Allow-Methods'] = 'GET, POST, OPTIONS'
        return response

    @app.route('/api/health', methods=['GET'])
    def health():
        """Health check"""
        return jsonify({
            'status': 'ok',
            'timestamp': datetime.now(timezone.utc).isoformat()
        })

    @app.route('/api/schedule/parse', methods=['POST'])
    @safe_endpoint
    def parse_schedule():
        """Parse a schedule detail page posted as the request body (text/html)"""
        result = service.parse_document(request.get_data())
        if not result.success:
            _raise_for_result(result)
        return jsonify(result.data.to_dict())

    @app.route('/api/schedule/demo', methods=['GET'])
    @safe_endpoint
    def demo_schedule():
        """Parse and return the bundled demonstration schedule"""
        result = service.load_demo()
        if not result.success:
            _raise_for_result(result)
        return jsonify(result.data.to_dict())

    return app


if __name__ == '__main__':
    config = get_config()
    logging.basicConfig(
        level=config.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    app = create_app(config)
    logger.info(f"Server running on http://{config.api.host}:{config.api.port}")
    app.run(host=config.api.host, port=config.api.port, debug=config.api.debug)
