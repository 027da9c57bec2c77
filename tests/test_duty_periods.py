"""
Duty period state machine over synthetic flight tables.
"""

import pytest

from parsers.duty_periods import (
    DutyPeriodScanState,
    find_flight_table,
    finish,
    parse_duty_periods,
    read_totals,
    scan_row,
)
from tests.helpers import make_soup


# ── Helpers ──────────────────────────────────────────────────────────────

def leg(dow, dom, flight, route, layover='&nbsp;', deadhead='&nbsp;'):
    return (
        f'<tr class="nowrap"><td>{dow}</td><td>{dom}</td><td>{deadhead}</td><td>&nbsp;</td>'
        f'<td>{flight}</td><td>{route}</td><td>0700</td><td>0900</td><td>0200</td>'
        f'<td>&nbsp;</td><td>{layover}</td></tr>'
    )


def totals(block, deadhead, credit, duty):
    return (
        f'<tr class="bold"><td colspan="5">&nbsp;</td><td>Total:</td><td>{block}</td>'
        f'<td>{deadhead}</td><td>&nbsp;</td><td>{credit}</td><td>{duty}</td></tr>'
    )


def detail(*cells):
    return '<tr><td>&nbsp;</td><td>&nbsp;</td>' + ''.join(f'<td>{c}</td>' for c in cells) + '</tr>'


def flight_rows(builder, *rows):
    html = '<table><tr class="main"><td>DY</td></tr>' + ''.join(rows) + '</table>'
    return make_soup(html, builder).find('table').find_all('tr')


# ── Tests ────────────────────────────────────────────────────────────────

class TestPeriodBoundaries:

    def test_single_day_single_period(self, builder):
        rows = flight_rows(builder, leg('MO', '02', '1', 'MCO-ATL'), leg('MO', '02', '2', 'ATL-MCO'),
                           totals('0400', '0000', '0500', '0600'))
        periods = parse_duty_periods(rows)

        assert len(periods) == 1
        assert [item.flight_number for item in periods[0].legs] == ['1', '2']
        assert periods[0].layover is None
        assert periods[0].total_block == '0400'

    def test_layover_then_new_day_closes_period(self, builder):
        rows = flight_rows(
            builder,
            leg('MO', '02', '1', 'MCO-BOS', layover='BOS 1200'),
            detail('D-END: 1000L REPT: 2200L', 'Hotel One', '(555)000-0000'),
            leg('TU', '03', '2', 'BOS-MCO'),
            totals('0400', '0000', '0500', '0600'),
        )
        first, last = parse_duty_periods(rows)

        assert first.layover.airport == 'BOS'
        assert first.layover.rest_time == '1200'
        assert first.layover.duty_end_local == '1000L'
        assert first.layover.report_local == '2200L'
        assert first.total_block == ''
        assert last.layover is None
        assert last.total_duty_fdp == '0600'

    def test_day_change_without_layover_stays_in_period(self, builder):
        # Flying past midnight with no rest stays in one duty period
        rows = flight_rows(builder, leg('MO', '02', '1', 'MCO-LAS'), leg('TU', '03', '2', 'LAS-MCO'))
        periods = parse_duty_periods(rows)

        assert len(periods) == 1
        assert [item.day_of_month for item in periods[0].legs] == [2, 3]

    def test_layover_on_same_day_does_not_close(self, builder):
        rows = flight_rows(builder, leg('MO', '02', '1', 'MCO-BOS', layover='BOS 0900'),
                           leg('MO', '02', '2', 'BOS-JFK'))
        periods = parse_duty_periods(rows)

        assert len(periods) == 1
        assert periods[0].layover is None

    def test_final_period_never_has_layover(self, builder):
        rows = flight_rows(builder, leg('MO', '02', '1', 'MCO-BOS', layover='BOS 1200'),
                           detail('D-END: 1000L REPT: 2200L', 'Hotel One'))
        periods = parse_duty_periods(rows)

        assert len(periods) == 1
        assert periods[0].layover is None

    def test_three_day_trip(self, builder):
        rows = flight_rows(
            builder,
            leg('MO', '02', '1', 'MCO-BOS', layover='BOS 1200'),
            leg('TU', '03', '2', 'BOS-ORD', layover='ORD 1300'),
            leg('WE', '04', '3', 'ORD-MCO'),
        )
        periods = parse_duty_periods(rows)

        assert [p.layover.airport if p.layover else None for p in periods] == ['BOS', 'ORD', None]

    def test_no_legs(self, builder):
        rows = flight_rows(builder, totals('0400', '0000', '0500', '0600'))

        assert parse_duty_periods(rows) == []


class TestLegRows:

    def test_short_rows_ignored(self, builder):
        rows = flight_rows(builder, '<tr class="nowrap"><td>MO</td><td>02</td><td>x</td></tr>',
                           leg('MO', '02', '1', 'MCO-ATL'))
        periods = parse_duty_periods(rows)

        assert len(periods[0].legs) == 1

    @pytest.mark.parametrize('cell,expected', [
        ('&nbsp;', False),
        ('', False),
        ('DH', True),
        ('*', True),
    ])
    def test_deadhead_flag(self, builder, cell, expected):
        rows = flight_rows(builder, leg('MO', '02', '1', 'MCO-ATL', deadhead=cell))

        assert parse_duty_periods(rows)[0].legs[0].is_deadhead is expected

    def test_unparseable_day_becomes_zero(self, builder):
        rows = flight_rows(builder, leg('MO', '--', '1', 'MCO-ATL'))

        assert parse_duty_periods(rows)[0].legs[0].day_of_month == 0

    def test_layover_cell_must_match_exactly(self, builder):
        rows = flight_rows(builder, leg('MO', '02', '1', 'MCO-BOS', layover='BOS 12:00'),
                           leg('TU', '03', '2', 'BOS-MCO'))

        assert len(parse_duty_periods(rows)) == 1


class TestLayoverDetail:

    def test_hotel_name_and_phone(self, builder):
        rows = flight_rows(
            builder,
            leg('MO', '02', '1', 'MCO-BOS', layover='BOS 1200'),
            detail('D-END: 1000L', 'REPT: 2200L', 'Hotel One', '(555)000-0000', 'Hotel Two', '(555)111-1111'),
            leg('TU', '03', '2', 'BOS-MCO'),
        )
        layover = parse_duty_periods(rows)[0].layover

        assert layover.hotel_name == 'Hotel One'
        assert layover.hotel_phone == '(555)000-0000'
        assert layover.report_local == '2200L'

    def test_tafb_cell_is_not_a_hotel(self, builder):
        rows = flight_rows(
            builder,
            leg('MO', '02', '1', 'MCO-BOS', layover='BOS 1200'),
            detail('D-END: 1000L', '<strong>T.A.F.B.: 2909</strong>', 'Hotel One'),
            leg('TU', '03', '2', 'BOS-MCO'),
        )
        layover = parse_duty_periods(rows)[0].layover

        assert layover.hotel_name == 'Hotel One'
        assert layover.report_local == ''

    def test_labels_in_separate_cells(self, builder):
        rows = flight_rows(
            builder,
            leg('SU', '01', '3012', 'SJU-BOS', layover='BOS 1727'),
            detail('D-END:', '1533L', 'REPT:', '0900L', 'Hilton Boston Logan Airport', '(617)568-6700'),
            leg('MO', '02', '271', 'BOS-MCO'),
        )
        layover = parse_duty_periods(rows)[0].layover

        assert layover.duty_end_local == '1533L'
        assert layover.report_local == '0900L'
        assert layover.hotel_name == 'Hilton Boston Logan Airport'
        assert layover.hotel_phone == '(617)568-6700'

    @pytest.mark.parametrize('label_cell', ['D-END:', 'T.A.F.B.:', 'REPT:'])
    def test_label_only_cell_is_not_a_hotel(self, builder, label_cell):
        rows = flight_rows(
            builder,
            leg('MO', '02', '1', 'MCO-BOS', layover='BOS 1200'),
            detail('D-END: 1000L', label_cell, 'Hotel One'),
            leg('TU', '03', '2', 'BOS-MCO'),
        )

        assert parse_duty_periods(rows)[0].layover.hotel_name == 'Hotel One'

    def test_detail_without_open_layover_ignored(self, builder):
        rows = flight_rows(builder, detail('D-END: 1000L', 'Hotel One'), leg('MO', '02', '1', 'MCO-ATL'))
        periods = parse_duty_periods(rows)

        assert len(periods) == 1
        assert periods[0].layover is None


class TestScanState:

    def test_scan_row_returns_closed_period(self, builder):
        rows = flight_rows(builder, leg('MO', '02', '1', 'MCO-BOS', layover='BOS 1200'),
                           leg('TU', '03', '2', 'BOS-MCO'))
        state = DutyPeriodScanState()

        assert scan_row(state, rows[0]) is None
        assert scan_row(state, rows[1]) is None
        closed = scan_row(state, rows[2])
        assert closed.layover.airport == 'BOS'
        assert state.last_day_of_month == 3
        assert finish(state).legs[0].flight_number == '2'
        assert finish(state) is None

    def test_read_totals_offsets(self, builder):
        row = flight_rows(builder, totals('1', '2', '4', '5'))[1]
        result = read_totals(row.find_all('td'))

        assert (result.block, result.deadhead, result.credit, result.duty_fdp) == ('1', '2', '4', '5')

    def test_read_totals_without_label(self, builder):
        row = flight_rows(builder, '<tr class="bold"><td>Sum</td><td>1</td></tr>')[1]

        assert read_totals(row.find_all('td')) is None

    def test_find_flight_table(self, builder):
        html = ('<table><tr><td><table><tr><td>Crew:</td></tr></table>'
                '<table><tr class="main"><td>DY</td></tr></table></td></tr></table>')
        trip_table = make_soup(html, builder).find('table')

        flight_table = find_flight_table(trip_table)
        assert flight_table is not None
        assert flight_table.find('tr')['class'] == ['main']
