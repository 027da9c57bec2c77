"""
Header Extractor

Reads the page heading, e.g.

    February Schedule Brian Wendt (76148)
    Last Updated Thu Feb 12, 2026 14:32 EST

Every field defaults independently; a missing heading is not an error.
"""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Callable, Optional

from bs4 import Tag

from utils.date_utils import month_number_from_name
from utils.patterns import patterns

logger = logging.getLogger(__name__)

Clock = Callable[[], date]


@dataclass(frozen=True)
class HeaderInfo:
    """Fields recovered from the page heading"""
    month: str
    month_number: Optional[int]
    year: int
    crew_member_name: str
    employee_number: str
    last_updated: str


def parse_header(document: Tag, clock: Optional[Clock] = None) -> HeaderInfo:
    """
    Extract month, crew member and last-updated stamp from the first h3

    Args:
        document: Parsed schedule page
        clock: Returns today's date; consulted only when the
            last-updated text carries no year

    Returns:
        HeaderInfo with '' / None defaults for anything not found
    """
    heading = document.find('h3')
    text = heading.get_text() if heading is not None else ''
    if heading is None:
        logger.warning("Schedule heading not found")

    month_match = patterns.HEADER_MONTH.match(text)
    month = month_match['month'] if month_match else ''

    crew_match = patterns.HEADER_CREW.match(text)
    crew_member_name = crew_match['name'].strip() if crew_match else ''
    employee_number = crew_match['employee_number'] if crew_match else ''

    updated_match = patterns.HEADER_UPDATED.match(text)
    last_updated = updated_match['last_updated'].strip() if updated_match else ''

    year_match = patterns.YEAR.match(last_updated)
    if year_match:
        year = int(year_match['year'])
    else:
        year = (clock or date.today)().year
        logger.warning(f"No year in last-updated text {last_updated!r}, defaulting to {year}")

    return HeaderInfo(
        month=month,
        month_number=month_number_from_name(month),
        year=year,
        crew_member_name=crew_member_name,
        employee_number=employee_number,
        last_updated=last_updated
    )
