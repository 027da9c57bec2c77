"""
Parsers Package - Schedule Detail Extraction
"""

from parsers.schedule import (
    SUPPORTED_PARSERS,
    DEFAULT_PARSER,
    load_document,
    assemble_schedule,
    parse_schedule_detail
)

__all__ = [
    'SUPPORTED_PARSERS',
    'DEFAULT_PARSER',
    'load_document',
    'assemble_schedule',
    'parse_schedule_detail'
]
