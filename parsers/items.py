"""
Item Extractor

Walks the content panel's sibling tables once, in document order,
and turns trip blocks and activity blocks into ScheduleItems. The
portal lays items out chronologically, so document order is the
schedule order.
"""

import logging
from enum import Enum
from typing import List, Optional

from bs4 import Tag

from models.schedule import ScheduleItem
from parsers.activity import find_activity_header, parse_activity
from parsers.trip import parse_trip
from utils.html_utils import attribute, direct_rows, element_text, normalized_style
from utils.patterns import patterns

logger = logging.getLogger(__name__)


class BlockKind(Enum):
    """Classification of a content panel table"""
    SEPARATOR = "separator"
    TRIP = "trip"
    ACTIVITY = "activity"
    OTHER = "other"


def find_content_tables(document: Tag) -> List[Tag]:
    """Direct child tables of the content panel's main cell"""
    panel = document.find('table', attrs={'name': patterns.CONTENT_TABLE})
    if panel is None:
        logger.warning("Content panel table not found")
        return []

    main_cell = None
    for row in direct_rows(panel):
        main_cell = row.find('td', recursive=False)
        if main_cell is not None:
            break
    if main_cell is None:
        return []

    return main_cell.find_all('table', recursive=False)


def _is_trip_header_cell(cell: Tag) -> bool:
    return (patterns.TRIP_HEADER_COLOR in normalized_style(cell)
            and patterns.TRIP_HEADER.matches(element_text(cell)))


def classify_block(table: Tag) -> BlockKind:
    if attribute(table, 'name') == patterns.SEPARATOR_NAME or table.find('hr') is not None:
        return BlockKind.SEPARATOR
    if any(_is_trip_header_cell(cell) for cell in table.find_all('td')):
        return BlockKind.TRIP
    if find_activity_header(table) is not None:
        return BlockKind.ACTIVITY
    return BlockKind.OTHER


def parse_schedule_items(document: Tag, year: int, month_number: Optional[int]) -> List[ScheduleItem]:
    """
    Extract trips and activities in content panel order

    Args:
        document: Parsed schedule page
        year: Schedule year from the page heading
        month_number: Schedule month number (None if unresolved)

    Returns:
        Ordered list of ScheduleItems
    """
    items = []
    for index, table in enumerate(find_content_tables(document)):
        kind = classify_block(table)

        if kind is BlockKind.TRIP:
            trip = parse_trip(table, year, month_number)
            if trip is not None:
                items.append(ScheduleItem.of_trip(trip))
        elif kind is BlockKind.ACTIVITY:
            activity = parse_activity(table)
            if activity is not None:
                items.append(ScheduleItem.of_activity(activity))
        else:
            logger.debug(f"Content table {index} skipped ({kind.value})")

    return items
