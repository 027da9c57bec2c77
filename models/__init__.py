"""
Models Package - Schedule Data Models
"""

from models.schedule import (
    FlightLeg,
    Layover,
    DutyPeriod,
    CrewMember,
    TripTotals,
    Trip,
    Activity,
    ScheduleItemType,
    ScheduleItem,
    CalendarDay,
    ScheduleSummary,
    MonthlySchedule
)

__all__ = [
    'FlightLeg',
    'Layover',
    'DutyPeriod',
    'CrewMember',
    'TripTotals',
    'Trip',
    'Activity',
    'ScheduleItemType',
    'ScheduleItem',
    'CalendarDay',
    'ScheduleSummary',
    'MonthlySchedule'
]
