# patterns.py
"""
Extraction grammar for the schedule detail page.

Every free-text rule the parser applies lives here as a named rule:
where it is applied, the compiled pattern, and the names of its
capture groups. Parsers never inline pattern literals.
"""

import re
from typing import Dict, NamedTuple, Optional, Tuple


class GrammarRule(NamedTuple):
    name: str
    context: str
    pattern: re.Pattern
    captures: Tuple[str, ...]
    search: bool = True

    def match(self, text: str) -> Optional[Dict[str, str]]:
        """Apply the rule and return its named captures, or None"""
        finder = self.pattern.search if self.search else self.pattern.match
        m = finder(text or '')
        if not m:
            return None
        return dict(zip(self.captures, m.groups()))

    def matches(self, text: str) -> bool:
        return self.match(text) is not None


def _rule(name, context, pattern, captures=(), flags=0, search=True):
    return GrammarRule(name, context, re.compile(pattern, flags), tuple(captures), search)


class Patterns:
    # Heading
    HEADER_MONTH = _rule(
        'header_month', 'heading', r'(\w+)\s+Schedule', ('month',))
    HEADER_CREW = _rule(
        'header_crew', 'heading', r'Schedule\s+([\w\s,]+?)\s*\((\d+)\)',
        ('name', 'employee_number'))
    HEADER_UPDATED = _rule(
        'header_updated', 'heading', r'Last Updated\s+(.+?)$', ('last_updated',),
        flags=re.MULTILINE)
    YEAR = _rule('year', 'last updated text', r'(\d{4})', ('year',))

    # Content panel classification
    TRIP_HEADER = _rule(
        'trip_header', 'trip header cell', r'^(O\d+)\s*:\s*(\d{2}[A-Z]{3})',
        ('trip_number', 'date_str'), search=False)
    ACTIVITY_HEADER = _rule(
        'activity_header', 'activity font element', r'^([A-Z]{2,4})\s*:\s*(\d{2}[A-Z]{3})',
        ('type', 'date_str'), search=False)

    # Trip header / detail rows
    BASE_REPORT = _rule(
        'base_report', 'trip header cell 3', r'BSE REPT:\s*(\d{4}L?)', ('time',))
    OPERATES = _rule(
        'operates', 'trip header cell 4', r'Operates:\s*(.+)', ('dates',))
    BASE_EQUIP = _rule(
        'base_equip', 'trip detail cell 1', r'Base/Equip:\s*(\w+)/(\w+)',
        ('base', 'equipment'))
    EXCEPT_PREFIX = _rule(
        'except_prefix', 'trip detail cell 3', r'^EXCEPT ON\s*', flags=re.IGNORECASE,
        search=False)

    # Trip emphasis elements
    TAFB = _rule('tafb', 'strong element', r'T\.A\.F\.B\.:\s*(\d+)', ('tafb',))
    TRIP_RIG = _rule('trip_rig', 'strong element', r'TRIP RIG:\s*(\d+)', ('trip_rig',))
    CREW_MARKER = 'Crew:'
    TOTAL_LABEL = 'Total:'
    CREW_POSITIONS = ('CA', 'FO')

    # Flight table rows
    LAYOVER_CELL = _rule(
        'layover_cell', 'leg row last cell', r'^([A-Z]{3})\s+(\d{4})$',
        ('airport', 'rest_time'), search=False)
    DUTY_END = _rule('duty_end', 'layover detail row', r'D-END:\s*(\d{4}L?)', ('time',))
    REPORT = _rule('report', 'layover detail row', r'REPT:\s*(\d{4}L?)', ('time',))
    LAYOVER_DETAIL_LABELS = ('D-END', 'REPT:', 'T.A.F.B.')

    # Markup markers
    SEPARATOR_NAME = 'headertable'
    CALENDAR_TABLE = 'table2'
    CONTENT_TABLE = 'table4'
    TRIP_HEADER_COLOR = 'color:#0000ff'
    WEEKEND_BGCOLOR = 'lightsteelblue'


patterns = Patterns()
