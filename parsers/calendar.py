"""
Calendar Extractor

One CalendarDay per sidebar row, in document order. The sidebar
also carries the monthly totals rows, which are recognized and
skipped here because their day-of-month cell is not a number.
"""

import logging
from typing import List, Optional

from bs4 import Tag

from models.schedule import CalendarDay
from utils.date_utils import parse_leading_int
from utils.html_utils import attribute, cell_text, row_cells
from utils.patterns import patterns

logger = logging.getLogger(__name__)


def find_calendar_table(document: Tag) -> Optional[Tag]:
    """Locate the sidebar table by its name attribute, then by id"""
    table = document.find('table', attrs={'name': patterns.CALENDAR_TABLE})
    if table is None:
        table = document.find('table', id=patterns.CALENDAR_TABLE)
    return table


def parse_calendar(document: Tag) -> List[CalendarDay]:
    calendar = []
    table = find_calendar_table(document)
    if table is None:
        logger.warning("Calendar sidebar table not found")
        return calendar

    for row in table.find_all('tr'):
        cells = row_cells(row)
        if len(cells) < 4:
            continue

        day_of_week = cell_text(cells, 0)
        day_of_month_text = cell_text(cells, 1)
        day_of_month = parse_leading_int(day_of_month_text)
        if not day_of_week or not day_of_month_text or day_of_month is None:
            continue

        calendar.append(CalendarDay(
            day_of_week=day_of_week,
            day_of_month=day_of_month,
            activity=cell_text(cells, 2),
            layover_airport=cell_text(cells, 3),
            # Row styling is the only weekend signal
            is_weekend=attribute(row, 'bgcolor').lower() == patterns.WEEKEND_BGCOLOR
        ))

    return calendar
