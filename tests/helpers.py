"""
Helpers shared by the schedule parser tests.
"""

from datetime import date

from bs4 import BeautifulSoup


def fixed_clock(year=2030, month=6, day=15):
    return lambda: date(year, month, day)


def make_soup(html, builder='lxml'):
    return BeautifulSoup(html, builder)
