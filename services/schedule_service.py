"""
Schedule Service

Wraps the schedule detail parser for callers that hand over raw
documents (the HTTP API, the browser automation bridge). Fetching,
session handling and caching are done by those callers.

Usage:
    from services import get_schedule_service

    service = get_schedule_service()
    result = service.parse_document(html)
    if result.success:
        schedule = result.data
"""

import logging
import time
from typing import Optional, Union

from app.config import AppConfig, get_config
from app.errors import ScheduleParseError
from models.schedule import MonthlySchedule
from parsers.header import Clock
from parsers.schedule import parse_schedule_detail
from services.base_service import IScheduleService, ServiceResult
from utils.validators import ScheduleDocumentValidator

logger = logging.getLogger(__name__)


class ScheduleService(IScheduleService):
    """Parses schedule detail documents into MonthlySchedule records"""

    def __init__(self, config: Optional[AppConfig] = None, clock: Optional[Clock] = None):
        self.config = config or get_config()
        self.clock = clock

    @property
    def html_parser(self) -> str:
        return self.config.parser.html_parser

    def is_available(self) -> bool:
        return self.config.parser.is_valid()

    def parse_document(self, html: Union[str, bytes]) -> ServiceResult[MonthlySchedule]:
        is_valid, error = ScheduleDocumentValidator.validate(html)
        if not is_valid:
            return ServiceResult.fail(error, {'code': 'VALIDATION_ERROR'})

        text = ScheduleDocumentValidator.decode_content(html)
        started = time.perf_counter()
        try:
            schedule = parse_schedule_detail(text, parser=self.html_parser, clock=self.clock)
        except ScheduleParseError as e:
            logger.error(f"Schedule parse failed: {e.message}")
            return ServiceResult.fail(e.message, {'code': e.code, 'details': e.details})

        elapsed_ms = round((time.perf_counter() - started) * 1000, 1)
        logger.info(f"Schedule {schedule.block_date or '?'} parsed in {elapsed_ms}ms ({self.html_parser})")
        return ServiceResult.ok(schedule, {
            'parser': self.html_parser,
            'elapsed_ms': elapsed_ms,
            'block_date': schedule.block_date
        })

    def load_demo(self) -> ServiceResult[MonthlySchedule]:
        path = self.config.parser.demo_schedule_path
        if not path.exists():
            logger.warning(f"Demo schedule missing: {path}")
            return ServiceResult.fail("Demo schedule not found", {'code': 'NOT_FOUND', 'path': str(path)})

        return self.parse_document(path.read_text(encoding='utf-8'))


# ==================== Singleton Instance ====================

_schedule_service: Optional[ScheduleService] = None


def get_schedule_service() -> ScheduleService:
    """Get or create schedule service singleton"""
    global _schedule_service
    if _schedule_service is None:
        _schedule_service = ScheduleService()
    return _schedule_service


def reset_schedule_service():
    """Reset singleton (for testing)"""
    global _schedule_service
    _schedule_service = None
