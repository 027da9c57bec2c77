"""
Duty Period Parser

Row-by-row state machine over a trip's flight table. Leg rows are
collected into the open duty period; a leg on a new day closes the
period only when a layover is open, so flying that continues past
midnight without a rest stays in one period. The layover's hotel and
report details arrive on a later row and are filled into the open
layover before it is frozen.

Row kinds (first match wins):
    tr.main   column header, ignored
    tr.bold   totals row, recorded as pending totals
    tr.nowrap flight leg
    other     D-END / hotel detail for the open layover, else ignored
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from bs4 import Tag

from models.schedule import DutyPeriod, FlightLeg, Layover
from utils.date_utils import parse_leading_int
from utils.html_utils import cell_text, element_text, has_class, row_cells
from utils.patterns import patterns

logger = logging.getLogger(__name__)

MIN_LEG_CELLS = 10
NBSP = '\u00a0'


@dataclass
class Totals:
    """Block / deadhead / credit / duty-FDP read from a totals row"""
    block: str = ''
    deadhead: str = ''
    credit: str = ''
    duty_fdp: str = ''


@dataclass
class OpenLayover:
    """Layover still collecting its hotel detail"""
    airport: str
    rest_time: str
    hotel_name: str = ''
    hotel_phone: str = ''
    duty_end_local: str = ''
    report_local: str = ''

    def freeze(self) -> Layover:
        return Layover(
            airport=self.airport,
            rest_time=self.rest_time,
            hotel_name=self.hotel_name,
            hotel_phone=self.hotel_phone,
            duty_end_local=self.duty_end_local,
            report_local=self.report_local
        )


@dataclass
class DutyPeriodScanState:
    """Mutable state threaded through the row scan"""
    open_legs: List[FlightLeg] = field(default_factory=list)
    open_layover: Optional[OpenLayover] = None
    last_day_of_month: Optional[int] = None
    pending_totals: Totals = field(default_factory=Totals)


def read_totals(cells: Sequence[Tag]) -> Optional[Totals]:
    """
    Read totals following the 'Total:' label cell

    The four values sit at offsets +1, +2, +4 and +5; the cell at +3
    is a layout column with no meaning.
    """
    for index in range(len(cells)):
        if cell_text(cells, index) == patterns.TOTAL_LABEL:
            return Totals(
                block=cell_text(cells, index + 1),
                deadhead=cell_text(cells, index + 2),
                credit=cell_text(cells, index + 4),
                duty_fdp=cell_text(cells, index + 5)
            )
    return None


def find_flight_table(trip_table: Tag) -> Optional[Tag]:
    """First nested table that has a 'main' header row"""
    for table in trip_table.find_all('table'):
        if any(has_class(row, 'main') for row in table.find_all('tr')):
            return table
    return None


def _close_period(state: DutyPeriodScanState) -> DutyPeriod:
    period = DutyPeriod(
        legs=tuple(state.open_legs),
        layover=state.open_layover.freeze() if state.open_layover else None
    )
    state.open_legs = []
    state.open_layover = None
    return period


def _scan_leg_row(state: DutyPeriodScanState, cells: Sequence[Tag]) -> Optional[DutyPeriod]:
    day_of_month = parse_leading_int(cell_text(cells, 1)) or 0
    deadhead_text = cell_text(cells, 2)
    route = cell_text(cells, 5).split('-')

    closed = None
    if (state.open_legs
            and day_of_month != state.last_day_of_month
            and state.open_layover is not None):
        closed = _close_period(state)

    state.last_day_of_month = day_of_month
    state.open_legs.append(FlightLeg(
        day_of_week=cell_text(cells, 0),
        day_of_month=day_of_month,
        is_deadhead=deadhead_text != '' and deadhead_text != NBSP,
        position_code=cell_text(cells, 3),
        flight_number=cell_text(cells, 4),
        origin=route[0],
        destination=route[1] if len(route) > 1 else '',
        departure_local=cell_text(cells, 6),
        arrival_local=cell_text(cells, 7),
        block_time=cell_text(cells, 8),
        ground_time=cell_text(cells, 9)
    ))

    layover = patterns.LAYOVER_CELL.match(cell_text(cells, len(cells) - 1))
    if layover:
        state.open_layover = OpenLayover(airport=layover['airport'], rest_time=layover['rest_time'])

    return closed


def _has_detail_label(value: str) -> bool:
    return any(label in value for label in patterns.LAYOVER_DETAIL_LABELS)


def _scan_detail_row(state: DutyPeriodScanState, row: Tag) -> None:
    text = element_text(row)
    duty_end = patterns.DUTY_END.match(text)
    if not duty_end or state.open_layover is None:
        return

    layover = state.open_layover
    report = patterns.REPORT.match(text)
    layover.duty_end_local = duty_end['time']
    layover.report_local = report['time'] if report else ''

    # Labels and the times they carry may sit in cells of their own
    consumed = {layover.duty_end_local, layover.report_local} - {''}
    cells = row_cells(row)
    for index in range(2, len(cells)):
        value = cell_text(cells, index)
        if not value or value in consumed or _has_detail_label(value):
            continue
        if value.startswith('('):
            if not layover.hotel_phone:
                layover.hotel_phone = value
        elif not layover.hotel_name:
            layover.hotel_name = value


def scan_row(state: DutyPeriodScanState, row: Tag) -> Optional[DutyPeriod]:
    """
    Feed one flight-table row through the state machine

    Args:
        state: Scan state, updated in place
        row: Next row of the flight table

    Returns:
        The duty period this row closed, if any
    """
    if has_class(row, 'main'):
        return None

    if has_class(row, 'bold'):
        totals = read_totals(row_cells(row))
        if totals is not None:
            state.pending_totals = totals
        return None

    if has_class(row, 'nowrap'):
        cells = row_cells(row)
        if len(cells) < MIN_LEG_CELLS:
            logger.debug(f"Leg row with {len(cells)} cells ignored")
            return None
        return _scan_leg_row(state, cells)

    _scan_detail_row(state, row)
    return None


def finish(state: DutyPeriodScanState) -> Optional[DutyPeriod]:
    """Close the last duty period; it carries the pending totals and no layover"""
    if not state.open_legs:
        return None
    totals = state.pending_totals
    period = DutyPeriod(
        legs=tuple(state.open_legs),
        total_block=totals.block,
        total_deadhead=totals.deadhead,
        total_credit=totals.credit,
        total_duty_fdp=totals.duty_fdp,
        layover=None
    )
    state.open_legs = []
    state.open_layover = None
    return period


def parse_duty_periods(rows: Sequence[Tag]) -> List[DutyPeriod]:
    state = DutyPeriodScanState()
    duty_periods = []
    for row in rows:
        closed = scan_row(state, row)
        if closed is not None:
            duty_periods.append(closed)

    last = finish(state)
    if last is not None:
        duty_periods.append(last)
    return duty_periods
