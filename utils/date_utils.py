"""
Date Parsing and Manipulation Utilities

Month tables and the partial-date handling used by the schedule
parser. Schedule pages only ever print a two-digit day and a
three-letter month ("01FEB"), so the year has to be reconstructed
from the month the page describes.
"""

from typing import Optional
import re


# Index 0 is unused so that the index equals the month number
MONTH_NAMES = [
    '', 'January', 'February', 'March', 'April', 'May', 'June',
    'July', 'August', 'September', 'October', 'November', 'December',
]

MONTH_ABBREVIATIONS = {
    'JAN': 1, 'FEB': 2, 'MAR': 3, 'APR': 4, 'MAY': 5, 'JUN': 6,
    'JUL': 7, 'AUG': 8, 'SEP': 9, 'OCT': 10, 'NOV': 11, 'DEC': 12,
}

_LEADING_INT = re.compile(r'^[+-]?\d+')
_LEADING_FLOAT = re.compile(r'^[+-]?(?:\d+\.?\d*|\.\d+)')


def month_number_from_name(name: str) -> Optional[int]:
    """
    Look up a full month name ("February") in the month table

    Args:
        name: Month name exactly as printed in the page heading

    Returns:
        1-based month number or None if the name is not recognized
    """
    if not name or name not in MONTH_NAMES:
        return None
    return MONTH_NAMES.index(name)


def month_number_from_abbreviation(abbreviation: str) -> Optional[int]:
    """Look up a three-letter month abbreviation ("FEB")"""
    return MONTH_ABBREVIATIONS.get(abbreviation)


def resolve_trip_date(
    date_token: str,
    reference_year: int,
    reference_month: Optional[int]
) -> str:
    """
    Rebuild an ISO date from a DDMMM trip token

    The month abbreviation falls back to the reference month when it
    is not recognized. A month earlier than the reference month means
    the trip instance falls in the following year (a January trip
    printed on a December schedule).

    Examples:
    - ("01MAR", 2026, 2) -> "2026-03-01"
    - ("03JAN", 2025, 12) -> "2026-01-03"

    Args:
        date_token: Raw token, two-digit day followed by month abbreviation
        reference_year: Year of the schedule page
        reference_month: Month number of the schedule page (None if unknown)

    Returns:
        Date string in YYYY-MM-DD format (day kept verbatim from the token)
    """
    reference = reference_month or 0
    day = date_token[:2]
    month = month_number_from_abbreviation(date_token[2:]) or reference
    year = reference_year + 1 if month < reference else reference_year
    return f"{year}-{month:02d}-{day}"


def to_block_date(month: int, year: int) -> str:
    """
    Build the MMYY BlockDate key used to request a month's schedule

    Examples:
    - (2, 2026) -> "0226"
    - (12, 2025) -> "1225"
    """
    return f"{month:02d}{str(year)[-2:]}"


def parse_leading_int(text: str) -> Optional[int]:
    """
    Parse the integer at the start of a string ("01" -> 1, "43.18" -> 43)

    Returns:
        Parsed integer or None when the text does not start with digits
    """
    match = _LEADING_INT.match((text or '').strip())
    if not match:
        return None
    return int(match.group(0))


def parse_leading_float(text: str) -> Optional[float]:
    """
    Parse the decimal number at the start of a string ("65.50" -> 65.5)

    Returns:
        Parsed float or None when the text does not start with a number
    """
    match = _LEADING_FLOAT.match((text or '').strip())
    if not match:
        return None
    return float(match.group(0))
