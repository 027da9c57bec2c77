"""
Activity Parser

Non-flying events such as sick leave (SIC), simulator (SIM) or
reserve (REO). The block header "SIC : 06FEB" identifies the event;
the detail row starting with the same code supplies its times.
"""

import logging
from typing import Optional

from bs4 import Tag

from models.schedule import Activity
from utils.html_utils import cell_text, element_text, row_cells
from utils.patterns import patterns

logger = logging.getLogger(__name__)


def find_activity_header(table: Tag) -> Optional[Tag]:
    """First font element whose text reads '<CODE> : <DDMMM>'"""
    for font in table.find_all('font'):
        if patterns.ACTIVITY_HEADER.matches(element_text(font)):
            return font
    return None


def parse_activity(table: Tag) -> Optional[Activity]:
    header_element = find_activity_header(table)
    if header_element is None:
        return None

    header = patterns.ACTIVITY_HEADER.match(element_text(header_element))
    activity_type = header['type']

    for row in table.find_all('tr'):
        cells = row_cells(row)
        if cell_text(cells, 0) != activity_type:
            continue
        return Activity(
            type=activity_type,
            date_str=header['date_str'],
            start_date=cell_text(cells, 1),
            start_time=cell_text(cells, 2),
            end_date=cell_text(cells, 3),
            end_time=cell_text(cells, 4),
            credit=cell_text(cells, 5)
        )

    logger.debug(f"Activity {activity_type} {header['date_str']} has no detail row")
    return Activity(type=activity_type, date_str=header['date_str'])
