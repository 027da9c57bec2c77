"""
Shared fixtures for the schedule parser tests.
"""

import re

import pytest

from app.config import DEFAULT_DEMO_SCHEDULE
from parsers.schedule import SUPPORTED_PARSERS, parse_schedule_detail
from tests.helpers import fixed_clock

FEB_2026_PATH = DEFAULT_DEMO_SCHEDULE


@pytest.fixture(scope='session')
def feb_2026_path():
    return FEB_2026_PATH


@pytest.fixture(scope='session')
def feb_2026_html():
    return FEB_2026_PATH.read_text(encoding='utf-8')


@pytest.fixture(scope='session')
def feb_2026_html_without_end_tags(feb_2026_html):
    """Same page with the optional </td> and </tr> end tags left out"""
    return re.sub(r'</t[dr]>', '', feb_2026_html, flags=re.IGNORECASE)


@pytest.fixture(params=SUPPORTED_PARSERS)
def builder(request):
    """Run a test once per supported tree builder"""
    return request.param


@pytest.fixture(scope='session')
def feb_2026_schedule(feb_2026_html):
    return parse_schedule_detail(feb_2026_html, clock=fixed_clock())


@pytest.fixture
def trip_by_key(feb_2026_schedule):
    """Look up a trip by (trip number, date token)"""
    trips = {(trip.trip_number, trip.date_str): trip for trip in feb_2026_schedule.trips}
    return lambda trip_number, date_str: trips[(trip_number, date_str)]
