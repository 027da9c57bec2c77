"""
Trip Parser

Builds a Trip from one trip block of the content panel:

    row 1   O4031 : 01FEB | EVERY DAY | BSE REPT: 0515L | Operates: Feb 1-Feb 9
    row 2   Base/Equip: MCO/321 | CA01FO01 | EXCEPT ON ...
    nested  flight table (tr.main header, tr.nowrap legs, tr.bold totals)
    nested  crew table ("Crew:" followed by CA/FO columns)

Only the trip header is mandatory; every other field defaults to ''.
"""

import logging
from typing import List, Optional

from bs4 import Tag

from models.schedule import CrewMember, Trip, TripTotals
from parsers.duty_periods import find_flight_table, parse_duty_periods, read_totals
from utils.date_utils import resolve_trip_date
from utils.html_utils import cell_text, direct_rows, element_text, has_class, row_cells
from utils.patterns import patterns

logger = logging.getLogger(__name__)


def parse_trip(table: Tag, year: int, month_number: Optional[int]) -> Optional[Trip]:
    """
    Parse a trip block

    Args:
        table: Trip block table from the content panel
        year: Schedule year from the page heading
        month_number: Schedule month, used for year rollover

    Returns:
        Trip, or None when the header pattern does not match or no
        flight legs were found
    """
    rows = direct_rows(table)
    header_cells = row_cells(rows[0]) if rows else []
    detail_cells = row_cells(rows[1]) if len(rows) > 1 else []

    header = patterns.TRIP_HEADER.match(cell_text(header_cells, 0))
    if not header:
        logger.debug("Trip block without a recognizable header skipped")
        return None

    trip_number = header['trip_number']
    date_str = header['date_str']

    report = patterns.BASE_REPORT.match(cell_text(header_cells, 2))
    operates = patterns.OPERATES.match(cell_text(header_cells, 3))
    base_equip = patterns.BASE_EQUIP.match(cell_text(detail_cells, 0))
    exceptions = patterns.EXCEPT_PREFIX.pattern.sub('', cell_text(detail_cells, 2), count=1)

    flight_table = find_flight_table(table)
    duty_periods = parse_duty_periods(flight_table.find_all('tr')) if flight_table is not None else []
    if not duty_periods:
        logger.warning(f"Trip {trip_number} {date_str} has no flight legs, skipped")
        return None

    tafb, trip_rig = _parse_emphasis(table)

    return Trip(
        trip_number=trip_number,
        date_str=date_str,
        date=resolve_trip_date(date_str, year, month_number),
        frequency=cell_text(header_cells, 1),
        base_report_time=report['time'] if report else '',
        operating_dates=operates['dates'] if operates else '',
        base=base_equip['base'] if base_equip else '',
        equipment=base_equip['equipment'] if base_equip else '',
        crew_composition=cell_text(detail_cells, 1),
        exceptions=exceptions,
        duty_periods=tuple(duty_periods),
        tafb=tafb,
        trip_rig=trip_rig,
        totals=parse_trip_totals(table),
        crew=tuple(parse_crew(table))
    )


def _parse_emphasis(table: Tag):
    """First T.A.F.B. and first TRIP RIG value among strong elements"""
    tafb = ''
    trip_rig = ''
    for strong in table.find_all('strong'):
        text = element_text(strong)
        if not tafb:
            match = patterns.TAFB.match(text)
            if match:
                tafb = match['tafb']
        if not trip_rig:
            match = patterns.TRIP_RIG.match(text)
            if match:
                trip_rig = match['trip_rig']
    return tafb, trip_rig


def parse_trip_totals(table: Tag) -> TripTotals:
    """Totals from the last bold row of the trip block"""
    bold_rows = [row for row in table.find_all('tr') if has_class(row, 'bold')]
    if not bold_rows:
        return TripTotals()

    totals = read_totals(row_cells(bold_rows[-1]))
    if totals is None:
        return TripTotals()
    return TripTotals(
        block=totals.block,
        deadhead=totals.deadhead,
        credit=totals.credit,
        duty_fdp=totals.duty_fdp
    )


def parse_crew(table: Tag) -> List[CrewMember]:
    """
    Crew members from the first nested table marked "Crew:"

    A row can hold the captain and first officer side by side, so the
    whole row is scanned for position / employee number / name triples.
    """
    crew = []
    crew_table = None
    for nested in table.find_all('table'):
        marker_text = ''.join(strong.get_text() for strong in nested.find_all('strong'))
        if patterns.CREW_MARKER in marker_text:
            crew_table = nested
            break

    if crew_table is None:
        return crew

    for row in crew_table.find_all('tr'):
        cells = row_cells(row)
        for index in range(len(cells) - 2):
            position = cell_text(cells, index)
            if position not in patterns.CREW_POSITIONS:
                continue
            employee_number = cell_text(cells, index + 1)
            name = cell_text(cells, index + 2)
            if employee_number and name:
                crew.append(CrewMember(position=position, employee_number=employee_number, name=name))

    return crew
