"""
Markup Access Helpers

Tolerant accessors over BeautifulSoup elements. The schedule page is
a nest of layout tables; cells are addressed by position and any
position may be missing, so reads past the end yield an empty string
instead of raising.
"""

from typing import List, Optional, Sequence

from bs4 import Tag

_ROW_GROUPS = ('thead', 'tbody', 'tfoot')


def element_text(element: Optional[Tag]) -> str:
    """Concatenated, trimmed text of an element ('' for None)"""
    if element is None:
        return ''
    return element.get_text().strip()


def cell_text(cells: Sequence[Tag], index: int) -> str:
    """
    Trimmed text of the cell at index

    Args:
        cells: Cells of one row, in document order
        index: Position to read; negative or out-of-range yields ''

    Returns:
        Cell text or '' when the position does not exist
    """
    if index < 0 or index >= len(cells):
        return ''
    return element_text(cells[index])


def row_cells(row: Tag) -> List[Tag]:
    """All td cells inside a row"""
    return row.find_all('td')


def has_class(element: Tag, class_name: str) -> bool:
    return class_name in (element.get('class') or [])


def direct_rows(table: Tag) -> List[Tag]:
    """
    Rows that belong to this table rather than to a nested one

    Covers rows placed directly under the table as well as rows
    under an (implicit or explicit) tbody/thead/tfoot.
    """
    rows = []
    for child in table.find_all(True, recursive=False):
        if child.name == 'tr':
            rows.append(child)
        elif child.name in _ROW_GROUPS:
            rows.extend(child.find_all('tr', recursive=False))
    return rows


def normalized_style(element: Tag) -> str:
    """Inline style lower-cased with all whitespace removed"""
    return ''.join((element.get('style') or '').split()).lower()


def attribute(element: Optional[Tag], name: str) -> str:
    """Attribute value as a string ('' when absent)"""
    if element is None:
        return ''
    value = element.get(name)
    if value is None:
        return ''
    if isinstance(value, list):
        return ' '.join(value)
    return str(value)
