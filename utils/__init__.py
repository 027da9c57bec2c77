"""
Utility Functions Package
"""

from utils.validators import ScheduleDocumentValidator
from utils.date_utils import (
    MONTH_NAMES,
    MONTH_ABBREVIATIONS,
    month_number_from_name,
    month_number_from_abbreviation,
    resolve_trip_date,
    to_block_date,
    parse_leading_int,
    parse_leading_float
)
from utils.patterns import patterns, GrammarRule

__all__ = [
    'ScheduleDocumentValidator',
    'MONTH_NAMES',
    'MONTH_ABBREVIATIONS',
    'month_number_from_name',
    'month_number_from_abbreviation',
    'resolve_trip_date',
    'to_block_date',
    'parse_leading_int',
    'parse_leading_float',
    'patterns',
    'GrammarRule'
]
