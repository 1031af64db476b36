import pytest

from opensky_rest.models.bounding_box import BoundingBox
from opensky_rest.models.credentials import Credentials
from opensky_rest.models.flight import Flight, parse_flights
from opensky_rest.models.results import RATE_LIMITED, Admitted
from opensky_rest.models.state_vector import OpenSkyStates, PositionSource, StateVector

from conftest import SAMPLE_FLIGHT, SAMPLE_STATE


class TestStateVector:

    def test_from_array_maps_fields(self):
        sv = StateVector.from_array(list(SAMPLE_STATE))
        assert sv.icao24 == '3c6444'
        assert sv.callsign == 'DLH9LF  '
        assert sv.latitude == 50.1964
        assert sv.longitude == 6.1546
        assert sv.on_ground is False
        assert sv.sensors is None
        assert sv.category is None
        assert sv.has_position()
        assert sv.position_source_type is PositionSource.ADSB

    def test_recognized_fields_survive_reserialization(self):
        raw = list(SAMPLE_STATE)
        raw[12] = [1, 5, 9]
        raw.append(4)
        sv = StateVector.from_array(raw)
        assert sv.to_array() == raw

    @pytest.mark.parametrize('raw', [
        None,
        'not an array',
        [],
        SAMPLE_STATE[:16],
        [None] + SAMPLE_STATE[1:],
        SAMPLE_STATE[:6] + ['50.19'] + SAMPLE_STATE[7:],
        SAMPLE_STATE[:12] + ['sensor'] + SAMPLE_STATE[13:],
        SAMPLE_STATE[:8] + ['false'] + SAMPLE_STATE[9:],
        SAMPLE_STATE[:8] + [0] + SAMPLE_STATE[9:],
        SAMPLE_STATE[:15] + [None] + SAMPLE_STATE[16:],
    ])
    def test_malformed_array_is_none(self, raw):
        assert StateVector.from_array(raw) is None

    def test_missing_position(self):
        raw = list(SAMPLE_STATE)
        raw[5] = None
        raw[6] = None
        sv = StateVector.from_array(raw)
        assert sv is not None
        assert not sv.has_position()


class TestOpenSkyStates:

    def test_bad_entries_kept_as_none_in_place(self):
        data = {'time': 1458564121, 'states': [list(SAMPLE_STATE), ['bad'], list(SAMPLE_STATE)]}
        states = OpenSkyStates.from_json(data)
        assert states.time == 1458564121
        assert len(states.states) == 3
        assert states.states[1] is None
        assert len(states.valid_states()) == 2

    @pytest.mark.parametrize('data', [
        {'time': 1458564121, 'states': None},
        {'time': 1458564121},
    ])
    def test_null_states_is_empty(self, data):
        states = OpenSkyStates.from_json(data)
        assert states.time == 1458564121
        assert states.states == []

    def test_non_object_body(self):
        assert OpenSkyStates.from_json(None) == OpenSkyStates(time=None, states=[])


class TestFlight:

    def test_from_dict(self):
        flight = Flight.from_dict(SAMPLE_FLIGHT)
        assert flight.icao24 == '3c675a'
        assert flight.est_departure_airport == 'EDDF'
        assert flight.est_arrival_airport == 'EDDT'
        assert flight.arrival_airport_candidates_count == 2
        assert flight.first_seen_datetime.year == 2018

    def test_unknown_airports_are_none(self):
        data = dict(SAMPLE_FLIGHT, estArrivalAirport=None)
        del data['estDepartureAirport']
        flight = Flight.from_dict(data)
        assert flight.est_arrival_airport is None
        assert flight.est_departure_airport is None

    def test_parse_flights_drops_malformed_records(self):
        data = [SAMPLE_FLIGHT, {'icao24': 'abc'}, 'junk', dict(SAMPLE_FLIGHT, icao24='4b1814')]
        flights = parse_flights(data)
        assert [f.icao24 for f in flights] == ['3c675a', '4b1814']

    @pytest.mark.parametrize('data', [None, {}, 'text', 42])
    def test_non_array_body_is_no_flights(self, data):
        assert parse_flights(data) == []


class TestBoundingBox:

    @pytest.mark.parametrize('bounds', [
        (-91, 0, 0, 1),
        (0, 91, 0, 1),
        (0, 1, -181, 0),
        (0, 1, 0, 181),
        (2, 1, 0, 1),
        (0, 1, 5, 4),
        (float('nan'), 1, 0, 1),
        (0, 1, 0, float('nan')),
    ])
    def test_invalid_bounds_rejected(self, bounds):
        with pytest.raises(ValueError):
            BoundingBox(*bounds)

    def test_from_center_radius(self):
        bbox = BoundingBox.from_center_radius(0.0, 0.0, 111.0)
        assert bbox.min_latitude == pytest.approx(-1.0)
        assert bbox.max_latitude == pytest.approx(1.0)
        assert bbox.min_longitude == pytest.approx(-1.0)
        assert bbox.max_longitude == pytest.approx(1.0)

    def test_from_center_radius_clamps(self):
        bbox = BoundingBox.from_center_radius(89.5, 179.5, 500.0)
        assert bbox.max_latitude == 90.0
        assert bbox.max_longitude == 180.0


def test_credentials_repr_hides_password():
    creds = Credentials('pilot', 's3cret')
    assert 's3cret' not in repr(creds)
    assert creds.as_auth() == ('pilot', 's3cret')
    assert not Credentials('pilot', '').is_complete


def test_results_are_distinguishable():
    empty = Admitted(OpenSkyStates(time=1, states=[]))
    assert not empty.rate_limited
    assert RATE_LIMITED.rate_limited
    assert empty != RATE_LIMITED


def test_flags_round_trip():
    raw = list(SAMPLE_STATE)
    raw[8] = True
    raw[15] = True
    sv = StateVector.from_array(raw)
    assert sv.on_ground is True and sv.spi is True
    assert sv.to_array() == raw
