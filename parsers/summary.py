"""
Summary Extractor

Reads the labeled monthly totals (Block, Credit, YTD, Days Off)
from the calendar sidebar.
"""

import logging

from bs4 import Tag

from models.schedule import ScheduleSummary
from parsers.calendar import find_calendar_table
from utils.date_utils import parse_leading_float
from utils.html_utils import cell_text, row_cells

logger = logging.getLogger(__name__)


def parse_summary(document: Tag) -> ScheduleSummary:
    """
    Collect the four monthly totals

    Labels are matched case-insensitively; the last matching row wins
    and unparseable values leave the total at its previous value.
    """
    totals = {'block': 0.0, 'credit': 0.0, 'ytd': 0.0, 'days_off': 0.0}
    table = find_calendar_table(document)
    if table is None:
        return ScheduleSummary(**totals)

    for row in table.find_all('tr'):
        cells = row_cells(row)
        if len(cells) < 2:
            continue

        label = cell_text(cells, 0).lower()
        value = parse_leading_float(cell_text(cells, 1))
        if value is None:
            continue

        if label == 'block':
            totals['block'] = value
        elif label == 'credit':
            totals['credit'] = value
        elif label == 'ytd':
            totals['ytd'] = value
        elif 'days off' in label:
            totals['days_off'] = value

    logger.debug(f"Summary totals: {totals}")
    return ScheduleSummary(**totals)
