"""
Schedule Data Models

Defines the normalized monthly schedule record produced by the
schedule detail parser. Every entity is immutable once built and
serializes to the camelCase JSON contract shared with the cache
and UI layers.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple, Dict, Any, Union
from enum import Enum

from utils.date_utils import month_number_from_name, to_block_date


@dataclass(frozen=True)
class FlightLeg:
    """Single flight segment within a duty period"""
    day_of_week: str             # SU, MO, TU ...
    day_of_month: int
    is_deadhead: bool
    position_code: str           # "*" marks a captain leg
    flight_number: str
    origin: str
    destination: str
    departure_local: str         # HHMM, airline-local
    arrival_local: str           # HHMM, airline-local
    block_time: str              # HHMM
    ground_time: str             # HHMM

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'FlightLeg':
        """Create from dictionary"""
        return cls(
            day_of_week=data.get('dayOfWeek', ''),
            day_of_month=int(data.get('dayOfMonth') or 0),
            is_deadhead=bool(data.get('isDeadhead', False)),
            position_code=data.get('positionCode', ''),
            flight_number=data.get('flightNumber', ''),
            origin=data.get('origin', ''),
            destination=data.get('destination', ''),
            departure_local=data.get('departureLocal', ''),
            arrival_local=data.get('arrivalLocal', ''),
            block_time=data.get('blockTime', ''),
            ground_time=data.get('groundTime', '')
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            'dayOfWeek': self.day_of_week,
            'dayOfMonth': self.day_of_month,
            'isDeadhead': self.is_deadhead,
            'positionCode': self.position_code,
            'flightNumber': self.flight_number,
            'origin': self.origin,
            'destination': self.destination,
            'departureLocal': self.departure_local,
            'arrivalLocal': self.arrival_local,
            'blockTime': self.block_time,
            'groundTime': self.ground_time
        }


@dataclass(frozen=True)
class Layover:
    """Rest period away from base between two duty periods"""
    airport: str
    rest_time: str
    hotel_name: str = ''
    hotel_phone: str = ''
    duty_end_local: str = ''
    report_local: str = ''

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Layover':
        """Create from dictionary"""
        return cls(
            airport=data.get('airport', ''),
            rest_time=data.get('restTime', ''),
            hotel_name=data.get('hotelName', ''),
            hotel_phone=data.get('hotelPhone', ''),
            duty_end_local=data.get('dutyEndLocal', ''),
            report_local=data.get('reportLocal', '')
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            'airport': self.airport,
            'restTime': self.rest_time,
            'hotelName': self.hotel_name,
            'hotelPhone': self.hotel_phone,
            'dutyEndLocal': self.duty_end_local,
            'reportLocal': self.report_local
        }


@dataclass(frozen=True)
class DutyPeriod:
    """
    One continuous stretch of flying between rest periods.

    Only the last duty period of a trip carries totals; earlier ones
    carry the layover that follows them instead.
    """
    legs: Tuple[FlightLeg, ...]
    total_block: str = ''
    total_deadhead: str = ''
    total_credit: str = ''
    total_duty_fdp: str = ''     # e.g. "0942/0912"
    layover: Optional[Layover] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'DutyPeriod':
        """Create from dictionary"""
        layover = data.get('layover')
        return cls(
            legs=tuple(FlightLeg.from_dict(leg) for leg in data.get('legs', [])),
            total_block=data.get('totalBlock', ''),
            total_deadhead=data.get('totalDeadhead', ''),
            total_credit=data.get('totalCredit', ''),
            total_duty_fdp=data.get('totalDutyFdp', ''),
            layover=Layover.from_dict(layover) if layover else None
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            'legs': [leg.to_dict() for leg in self.legs],
            'totalBlock': self.total_block,
            'totalDeadhead': self.total_deadhead,
            'totalCredit': self.total_credit,
            'totalDutyFdp': self.total_duty_fdp,
            'layover': self.layover.to_dict() if self.layover else None
        }


@dataclass(frozen=True)
class CrewMember:
    """Crew member assigned to a trip"""
    position: str                # CA or FO
    employee_number: str
    name: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CrewMember':
        """Create from dictionary"""
        return cls(
            position=data.get('position', ''),
            employee_number=str(data.get('employeeNumber', '')),
            name=data.get('name', '')
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            'position': self.position,
            'employeeNumber': self.employee_number,
            'name': self.name
        }


@dataclass(frozen=True)
class TripTotals:
    """Aggregate totals for a whole trip"""
    block: str = ''
    deadhead: str = ''
    credit: str = ''
    duty_fdp: str = ''

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'TripTotals':
        """Create from dictionary"""
        return cls(
            block=data.get('block', ''),
            deadhead=data.get('deadhead', ''),
            credit=data.get('credit', ''),
            duty_fdp=data.get('dutyFdp', '')
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            'block': self.block,
            'deadhead': self.deadhead,
            'credit': self.credit,
            'dutyFdp': self.duty_fdp
        }


@dataclass(frozen=True)
class Trip:
    """A trip (pairing) instance operated under one trip number"""
    trip_number: str             # e.g. O4031
    date_str: str                # raw token, e.g. 01FEB
    date: str                    # YYYY-MM-DD
    frequency: str = ''
    base_report_time: str = ''
    operating_dates: str = ''
    base: str = ''
    equipment: str = ''
    crew_composition: str = ''
    exceptions: str = ''
    duty_periods: Tuple[DutyPeriod, ...] = field(default_factory=tuple)
    tafb: str = ''
    trip_rig: str = ''
    totals: TripTotals = field(default_factory=TripTotals)
    crew: Tuple[CrewMember, ...] = field(default_factory=tuple)

    @property
    def legs(self) -> Tuple[FlightLeg, ...]:
        """All legs of the trip in flying order"""
        return tuple(leg for dp in self.duty_periods for leg in dp.legs)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Trip':
        """Create from dictionary"""
        return cls(
            trip_number=data.get('tripNumber', ''),
            date_str=data.get('dateStr', ''),
            date=data.get('date', ''),
            frequency=data.get('frequency', ''),
            base_report_time=data.get('baseReportTime', ''),
            operating_dates=data.get('operatingDates', ''),
            base=data.get('base', ''),
            equipment=data.get('equipment', ''),
            crew_composition=data.get('crewComposition', ''),
            exceptions=data.get('exceptions', ''),
            duty_periods=tuple(DutyPeriod.from_dict(dp) for dp in data.get('dutyPeriods', [])),
            tafb=data.get('tafb', ''),
            trip_rig=data.get('tripRig', ''),
            totals=TripTotals.from_dict(data.get('totals') or {}),
            crew=tuple(CrewMember.from_dict(c) for c in data.get('crew', []))
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            'tripNumber': self.trip_number,
            'dateStr': self.date_str,
            'date': self.date,
            'frequency': self.frequency,
            'baseReportTime': self.base_report_time,
            'operatingDates': self.operating_dates,
            'base': self.base,
            'equipment': self.equipment,
            'crewComposition': self.crew_composition,
            'exceptions': self.exceptions,
            'dutyPeriods': [dp.to_dict() for dp in self.duty_periods],
            'tafb': self.tafb,
            'tripRig': self.trip_rig,
            'totals': self.totals.to_dict(),
            'crew': [member.to_dict() for member in self.crew]
        }


@dataclass(frozen=True)
class Activity:
    """Non-flying scheduled event (SIC, SIM, REO, VAC ...)"""
    type: str
    date_str: str
    start_date: str = ''
    start_time: str = ''         # HH:MM
    end_date: str = ''
    end_time: str = ''           # HH:MM
    credit: str = ''             # HHMM

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Activity':
        """Create from dictionary"""
        return cls(
            type=data.get('type', ''),
            date_str=data.get('dateStr', ''),
            start_date=data.get('startDate', ''),
            start_time=data.get('startTime', ''),
            end_date=data.get('endDate', ''),
            end_time=data.get('endTime', ''),
            credit=data.get('credit', '')
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            'type': self.type,
            'dateStr': self.date_str,
            'startDate': self.start_date,
            'startTime': self.start_time,
            'endDate': self.end_date,
            'endTime': self.end_time,
            'credit': self.credit
        }


class ScheduleItemType(Enum):
    """Kind of entry in the schedule content panel"""
    TRIP = "trip"
    ACTIVITY = "activity"

    @classmethod
    def from_string(cls, value: str) -> 'ScheduleItemType':
        """Parse item type from string"""
        try:
            return cls(value.lower())
        except (ValueError, AttributeError):
            raise ValueError(f"Unknown schedule item type: {value!r}")


@dataclass(frozen=True)
class ScheduleItem:
    """Tagged union of a Trip or an Activity"""
    type: ScheduleItemType
    data: Union[Trip, Activity]

    @classmethod
    def of_trip(cls, trip: Trip) -> 'ScheduleItem':
        return cls(type=ScheduleItemType.TRIP, data=trip)

    @classmethod
    def of_activity(cls, activity: Activity) -> 'ScheduleItem':
        return cls(type=ScheduleItemType.ACTIVITY, data=activity)

    @property
    def is_trip(self) -> bool:
        return self.type is ScheduleItemType.TRIP

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ScheduleItem':
        """Create from dictionary"""
        item_type = ScheduleItemType.from_string(data.get('type', ''))
        payload = data.get('data') or {}
        if item_type is ScheduleItemType.TRIP:
            return cls.of_trip(Trip.from_dict(payload))
        return cls.of_activity(Activity.from_dict(payload))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            'type': self.type.value,
            'data': self.data.to_dict()
        }


@dataclass(frozen=True)
class CalendarDay:
    """One row of the calendar sidebar"""
    day_of_week: str
    day_of_month: int
    activity: str                # '' = off, O#### = trip, else activity code
    layover_airport: str
    is_weekend: bool

    @property
    def is_off(self) -> bool:
        return not self.activity

    @property
    def is_trip(self) -> bool:
        return self.activity.startswith('O')

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CalendarDay':
        """Create from dictionary"""
        return cls(
            day_of_week=data.get('dayOfWeek', ''),
            day_of_month=int(data.get('dayOfMonth') or 0),
            activity=data.get('activity', ''),
            layover_airport=data.get('layoverAirport', ''),
            is_weekend=bool(data.get('isWeekend', False))
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            'dayOfWeek': self.day_of_week,
            'dayOfMonth': self.day_of_month,
            'activity': self.activity,
            'layoverAirport': self.layover_airport,
            'isWeekend': self.is_weekend
        }


@dataclass(frozen=True)
class ScheduleSummary:
    """Monthly totals from the calendar sidebar"""
    block: float = 0.0
    credit: float = 0.0
    ytd: float = 0.0
    days_off: float = 0.0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ScheduleSummary':
        """Create from dictionary"""
        return cls(
            block=float(data.get('block', 0)),
            credit=float(data.get('credit', 0)),
            ytd=float(data.get('ytd', 0)),
            days_off=float(data.get('daysOff', 0))
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            'block': self.block,
            'credit': self.credit,
            'ytd': self.ytd,
            'daysOff': self.days_off
        }


@dataclass(frozen=True)
class MonthlySchedule:
    """
    Complete parsed schedule for one month.

    Aggregate root of the extraction. Identity (month, year) is
    assigned by the caller; block_date gives the MMYY key the
    portal uses to request the same month.
    """
    month: str
    year: int
    crew_member_name: str
    employee_number: str
    last_updated: str
    calendar: Tuple[CalendarDay, ...] = field(default_factory=tuple)
    items: Tuple[ScheduleItem, ...] = field(default_factory=tuple)
    summary: ScheduleSummary = field(default_factory=ScheduleSummary)

    @property
    def month_number(self) -> Optional[int]:
        return month_number_from_name(self.month)

    @property
    def block_date(self) -> Optional[str]:
        month_number = self.month_number
        if month_number is None:
            return None
        return to_block_date(month_number, self.year)

    @property
    def trips(self) -> Tuple[Trip, ...]:
        return tuple(item.data for item in self.items if item.is_trip)

    @property
    def activities(self) -> Tuple[Activity, ...]:
        return tuple(item.data for item in self.items if not item.is_trip)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'MonthlySchedule':
        """Create from dictionary (e.g. a cached record)"""
        return cls(
            month=data.get('month', ''),
            year=int(data.get('year') or 0),
            crew_member_name=data.get('crewMemberName', ''),
            employee_number=str(data.get('employeeNumber', '')),
            last_updated=data.get('lastUpdated', ''),
            calendar=tuple(CalendarDay.from_dict(d) for d in data.get('calendar', [])),
            items=tuple(ScheduleItem.from_dict(i) for i in data.get('items', [])),
            summary=ScheduleSummary.from_dict(data.get('summary') or {})
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the JSON-compatible schedule contract"""
        return {
            'month': self.month,
            'year': self.year,
            'crewMemberName': self.crew_member_name,
            'employeeNumber': self.employee_number,
            'lastUpdated': self.last_updated,
            'calendar': [day.to_dict() for day in self.calendar],
            'items': [item.to_dict() for item in self.items],
            'summary': self.summary.to_dict()
        }
