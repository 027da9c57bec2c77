"""
Schedule Detail Parser

Entry point of the extraction: builds the markup tree, runs the
header, calendar, item and summary extractors and assembles the
MonthlySchedule.

Two tree builders are supported and must produce identical records:
    lxml         C-accelerated builder for the server
    html5lib     pure-Python builder for constrained environments; builds
                 the tree the way a browser does, so pages that leave out
                 optional </td> and </tr> end tags still nest correctly
"""

import logging
from typing import List, Optional, Union

from bs4 import BeautifulSoup

from app.errors import ScheduleParseError
from models.schedule import CalendarDay, MonthlySchedule, ScheduleItem, ScheduleSummary
from parsers.calendar import parse_calendar
from parsers.header import Clock, HeaderInfo, parse_header
from parsers.items import parse_schedule_items
from parsers.summary import parse_summary

logger = logging.getLogger(__name__)

SUPPORTED_PARSERS = ('lxml', 'html5lib')
DEFAULT_PARSER = 'lxml'


def load_document(html: Union[str, bytes], parser: str = DEFAULT_PARSER) -> BeautifulSoup:
    """
    Build the markup tree

    Raises:
        ScheduleParseError: The tree could not be constructed
    """
    if parser not in SUPPORTED_PARSERS:
        raise ScheduleParseError(f"Unsupported HTML parser: {parser}", parser=parser)
    if not isinstance(html, (str, bytes)):
        raise ScheduleParseError(
            f"Schedule document must be text, got {type(html).__name__}", parser=parser
        )

    try:
        return BeautifulSoup(html, parser)
    except Exception as e:
        raise ScheduleParseError(str(e), parser=parser) from e


def assemble_schedule(
    header: HeaderInfo,
    calendar: List[CalendarDay],
    items: List[ScheduleItem],
    summary: ScheduleSummary
) -> MonthlySchedule:
    return MonthlySchedule(
        month=header.month,
        year=header.year,
        crew_member_name=header.crew_member_name,
        employee_number=header.employee_number,
        last_updated=header.last_updated,
        calendar=tuple(calendar),
        items=tuple(items),
        summary=summary
    )


def parse_schedule_detail(
    html: Union[str, bytes],
    parser: str = DEFAULT_PARSER,
    clock: Optional[Clock] = None
) -> MonthlySchedule:
    """
    Parse a schedule detail page into a MonthlySchedule

    Missing or malformed parts of the page degrade to empty fields;
    only a failure to build the markup tree is raised.

    Args:
        html: Raw schedule detail page
        parser: Tree builder, one of SUPPORTED_PARSERS
        clock: Returns today's date; used only when the page carries no year

    Returns:
        The assembled MonthlySchedule

    Raises:
        ScheduleParseError: The document could not be parsed at all
    """
    document = load_document(html, parser)

    header = parse_header(document, clock=clock)
    calendar = parse_calendar(document)
    items = parse_schedule_items(document, header.year, header.month_number)
    summary = parse_summary(document)

    schedule = assemble_schedule(header, calendar, items, summary)
    logger.info(
        f"Parsed {schedule.month or '?'} {schedule.year} schedule: "
        f"{len(schedule.calendar)} days, {len(schedule.trips)} trips, "
        f"{len(schedule.activities)} activities"
    )
    return schedule
