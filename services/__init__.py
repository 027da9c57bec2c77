"""
Services Package - Business Logic Layer
"""

from services.base_service import IScheduleService, ServiceResult
from services.schedule_service import ScheduleService, get_schedule_service, reset_schedule_service

__all__ = [
    'IScheduleService',
    'ServiceResult',
    'ScheduleService',
    'get_schedule_service',
    'reset_schedule_service'
]
