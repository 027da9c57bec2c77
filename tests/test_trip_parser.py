"""
Trip blocks: header fields, legs, layovers, totals and crew.
"""

from parsers.trip import parse_crew, parse_trip, parse_trip_totals
from tests.helpers import make_soup


class TestFixtureTrips:

    def test_trip_count(self, feb_2026_schedule):
        keys = [(t.trip_number, t.date_str) for t in feb_2026_schedule.trips]
        assert keys == [
            ('O4031', '01FEB'),
            ('O4019', '08FEB'),
            ('O4050', '13FEB'),
            ('O4001', '15FEB'),
            ('O4035', '19FEB'),
            ('O4001', '01MAR'),
        ]

    def test_header_fields(self, trip_by_key):
        trip = trip_by_key('O4031', '01FEB')

        assert trip.date == '2026-02-01'
        assert trip.frequency == 'EVERY DAY'
        assert trip.base_report_time == '0515L'
        assert trip.operating_dates == 'Feb 1-Feb 9'
        assert trip.base == 'MCO'
        assert trip.equipment == '321'
        assert trip.crew_composition == 'CA01FO01'
        assert trip.exceptions == ''

    def test_legs(self, trip_by_key):
        legs = trip_by_key('O4031', '01FEB').legs

        assert [(leg.flight_number, leg.origin, leg.destination) for leg in legs] == [
            ('460', 'MCO', 'SJU'),
            ('3012', 'SJU', 'BOS'),
            ('271', 'BOS', 'MCO'),
        ]
        first = legs[0]
        assert first.departure_local == '0559'
        assert first.arrival_local == '0940'
        assert first.block_time == '0241'
        assert first.ground_time == '0110'
        assert first.day_of_week == 'SU'
        assert first.day_of_month == 1
        assert first.is_deadhead is False
        assert legs[2].day_of_month == 2

    def test_duty_periods_split_at_layover(self, trip_by_key):
        duty_periods = trip_by_key('O4031', '01FEB').duty_periods

        assert len(duty_periods) == 2
        first, last = duty_periods
        assert [leg.flight_number for leg in first.legs] == ['460', '3012']
        assert first.layover.airport == 'BOS'
        assert first.layover.rest_time == '1727'
        assert first.layover.hotel_name == 'Hilton Boston Logan Airport'
        assert first.layover.hotel_phone == '(617)568-6700'
        assert first.layover.duty_end_local == '1533L'
        assert first.layover.report_local == '0900L'
        assert (first.total_block, first.total_credit) == ('', '')

        assert last.layover is None
        assert last.total_block == '0301'
        assert last.total_deadhead == '0000'
        assert last.total_credit == '0500'
        assert last.total_duty_fdp == '0431/0401'

    def test_tafb_and_totals(self, trip_by_key):
        trip = trip_by_key('O4031', '01FEB')

        assert trip.tafb == '2909'
        assert trip.trip_rig == ''
        assert trip.totals.to_dict() == {
            'block': '0955', 'deadhead': '0000', 'credit': '1154', 'dutyFdp': '1449'
        }

    def test_crew(self, trip_by_key):
        crew = trip_by_key('O4031', '01FEB').crew

        assert [(c.position, c.employee_number, c.name) for c in crew] == [
            ('CA', '67948', 'Price, Gregory'),
            ('FO', '76148', 'Wendt, Brian'),
        ]

    def test_multi_leg_first_day(self, trip_by_key):
        trip = trip_by_key('O4050', '13FEB')

        assert [(leg.origin, leg.destination) for leg in trip.legs] == [
            ('MCO', 'DTW'), ('DTW', 'LGA'), ('LGA', 'MCO')
        ]
        assert trip.duty_periods[0].layover.airport == 'LGA'
        assert trip.duty_periods[0].layover.hotel_name == 'Marriott LaGuardia'

    def test_deadhead_and_exceptions(self, trip_by_key):
        trip = trip_by_key('O4019', '08FEB')

        assert len(trip.duty_periods) == 1
        assert trip.duty_periods[0].layover is None
        assert [leg.is_deadhead for leg in trip.legs] == [True, False]
        assert trip.exceptions == 'Feb 10 Feb 11'
        assert trip.frequency == 'SU'
        assert trip.equipment == '320'

    def test_trip_rig(self, trip_by_key):
        trip = trip_by_key('O4001', '15FEB')

        assert trip.tafb == '3010'
        assert trip.trip_rig == '0215'

    def test_next_month_trip_date(self, trip_by_key):
        assert trip_by_key('O4001', '01MAR').date == '2026-03-01'
        assert trip_by_key('O4001', '15FEB').date == '2026-02-15'


def _trip_table(header_cell, legs='', extra=''):
    default_legs = (
        '<tr class="nowrap"><td>MO</td><td>02</td><td>&nbsp;</td><td>*</td><td>10</td>'
        '<td>MCO-ATL</td><td>0700</td><td>0850</td><td>0150</td><td>&nbsp;</td><td>&nbsp;</td></tr>'
    )
    return f"""
    <table>
      <tr>{header_cell}<td>MO</td><td>BSE REPT: 0600</td><td>Operates: Feb 2-Feb 2</td></tr>
      <tr><td>Base/Equip: MCO/321</td><td>CA01FO01</td><td>except on Feb 3</td></tr>
      <tr><td><table>
        <tr class="main"><td>DY</td></tr>
        {legs or default_legs}
      </table></td></tr>
      {extra}
    </table>
    """


def _first_table(html, builder):
    return make_soup(html, builder).find('table')


class TestTripBlockEdgeCases:

    def test_header_mismatch_returns_none(self, builder):
        table = _first_table(_trip_table('<td style="color:#0000ff">X4031 : 02FEB</td>'), builder)

        assert parse_trip(table, 2026, 2) is None

    def test_trip_without_legs_is_skipped(self, builder, caplog):
        html = _trip_table('<td style="color:#0000ff">O1 : 02FEB</td>',
                           legs='<tr class="nowrap"><td>MO</td><td>02</td></tr>')
        table = _first_table(html, builder)

        assert parse_trip(table, 2026, 2) is None
        assert 'no flight legs' in caplog.text

    def test_optional_fields_default_to_empty(self, builder):
        html = """
        <table>
          <tr><td style="color:#0000ff">O77 : 02FEB</td></tr>
          <tr><td><table>
            <tr class="main"><td>DY</td></tr>
            <tr class="nowrap"><td>MO</td><td>02</td><td></td><td></td><td>10</td>
              <td>MCO</td><td>0700</td><td>0850</td><td>0150</td><td></td></tr>
          </table></td></tr>
        </table>
        """
        trip = parse_trip(_first_table(html, builder), 2026, 2)

        assert trip.trip_number == 'O77'
        assert trip.frequency == ''
        assert trip.base_report_time == ''
        assert trip.operating_dates == ''
        assert trip.base == ''
        assert trip.equipment == ''
        assert trip.crew == ()
        assert trip.tafb == ''
        assert trip.totals.to_dict() == {'block': '', 'deadhead': '', 'credit': '', 'dutyFdp': ''}
        leg = trip.legs[0]
        assert (leg.origin, leg.destination) == ('MCO', '')

    def test_exceptions_prefix_is_case_insensitive(self, builder):
        table = _first_table(_trip_table('<td style="color:#0000ff">O1 : 02FEB</td>'), builder)
        trip = parse_trip(table, 2026, 2)

        assert trip.exceptions == 'Feb 3'
        assert trip.base_report_time == '0600'
        assert trip.legs[0].position_code == '*'

    def test_year_rollover(self, builder):
        table = _first_table(_trip_table('<td style="color:#0000ff">O1 : 03JAN</td>'), builder)
        trip = parse_trip(table, 2025, 12)

        assert trip.date == '2026-01-03'

    def test_first_tafb_wins(self, builder):
        extra = ('<tr><td><strong>T.A.F.B.: 1111</strong><strong>T.A.F.B.: 2222</strong>'
                 '<strong>TRIP RIG: 0100</strong><strong>TRIP RIG: 0200</strong></td></tr>')
        table = _first_table(_trip_table('<td style="color:#0000ff">O1 : 02FEB</td>', extra=extra),
                             builder)
        trip = parse_trip(table, 2026, 2)

        assert trip.tafb == '1111'
        assert trip.trip_rig == '0100'


class TestTotalsAndCrew:

    def test_last_bold_row_supplies_totals(self, builder):
        html = """
        <table>
          <tr class="bold"><td>Total:</td><td>1</td><td>2</td><td></td><td>3</td><td>4</td></tr>
          <tr class="bold"><td></td><td>Total:</td><td>0955</td><td>0000</td><td>x</td><td>1154</td><td>1449</td></tr>
        </table>
        """
        totals = parse_trip_totals(_first_table(html, builder))

        assert totals.block == '0955'
        assert totals.deadhead == '0000'
        assert totals.credit == '1154'
        assert totals.duty_fdp == '1449'

    def test_last_bold_row_without_label(self, builder):
        html = """
        <table>
          <tr class="bold"><td>Total:</td><td>1</td><td>2</td><td></td><td>3</td><td>4</td></tr>
          <tr class="bold"><td>no label here</td></tr>
        </table>
        """
        totals = parse_trip_totals(_first_table(html, builder))

        assert totals.block == ''

    def test_crew_requires_marker_table(self, builder):
        html = """
        <table>
          <tr><td><table><tr><td>CA</td><td>1</td><td>Nobody, A</td></tr></table></td></tr>
        </table>
        """
        assert parse_crew(_first_table(html, builder)) == []

    def test_crew_rows_need_number_and_name(self, builder):
        html = """
        <table>
          <tr><td><table>
            <tr><td><strong>Crew:</strong></td></tr>
            <tr><td>CA</td><td></td><td>Blank, Number</td><td>FO</td><td>222</td><td>Second, Officer</td></tr>
            <tr><td>FA</td><td>333</td><td>Cabin, Crew</td></tr>
            <tr><td>CA</td><td>444</td></tr>
          </table></td></tr>
        </table>
        """
        crew = parse_crew(_first_table(html, builder))

        assert [(c.position, c.employee_number, c.name) for c in crew] == [('FO', '222', 'Second, Officer')]
