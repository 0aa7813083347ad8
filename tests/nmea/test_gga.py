"""Tests for GGA sentence decoding."""

import pytest

from navparse.nmea.gga import decode_gga
from navparse.nmea.symbols import FixQuality, Talker

PAYLOAD = "123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,"


class TestDecodeGGA:
    """Tests for decode_gga function."""

    def test_valid_gga_with_fix(self):
        result = decode_gga(PAYLOAD, Talker.GP)
        assert result is not None
        assert result.time == 45319000
        assert result.latitude == pytest.approx(48.1173, rel=1e-6)
        assert result.longitude == pytest.approx(11.5166667, rel=1e-6)
        assert result.altitude == pytest.approx(498.5)
        assert result.quality is FixQuality.GPS
        assert result.satellites == 8
        assert result.hdop == pytest.approx(0.9)
        assert result.differential_age is None
        assert result.station_id is None
        assert result.is_gn is False

    def test_gga_no_fix(self):
        result = decode_gga("123519.00,,,,,0,00,,,,,,,", Talker.GN)
        assert result is not None
        assert result.time == 45319000
        assert result.latitude is None
        assert result.longitude is None
        assert result.altitude is None
        assert result.quality is FixQuality.INVALID
        assert result.satellites == 0
        assert result.hdop is None
        assert result.is_gn is True

    def test_gga_all_empty(self):
        result = decode_gga(",,,,,,,,,,,,,", Talker.GP)
        assert result is not None
        assert result.time is None
        assert result.quality is None
        assert result.satellites is None

    def test_altitude_needs_separation(self):
        payload = "123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,,M,,"
        result = decode_gga(payload, Talker.GP)
        assert result is not None
        assert result.altitude is None

    def test_altitude_needs_altitude(self):
        payload = "123519,4807.038,N,01131.000,E,1,08,0.9,,M,46.9,M,,"
        result = decode_gga(payload, Talker.GP)
        assert result is not None
        assert result.altitude is None

    def test_negative_separation(self):
        payload = "081836.00,3723.46587,N,12202.26957,W,4,12,0.7,10.5,M,-30.0,M,1.0,0000"
        result = decode_gga(payload, Talker.GN)
        assert result is not None
        assert result.altitude == pytest.approx(40.5)
        assert result.quality is FixQuality.RTK
        assert result.longitude == pytest.approx(-122.0378262, rel=1e-6)
        assert result.differential_age == pytest.approx(1.0)
        assert result.station_id == 0

    def test_southern_hemisphere(self):
        payload = "123519.00,3356.123,S,15112.456,W,2,10,0.8,100.0,M,20.0,M,,"
        result = decode_gga(payload, Talker.GP)
        assert result is not None
        assert result.latitude == pytest.approx(-33.93538333, rel=1e-6)
        assert result.longitude == pytest.approx(-151.2076, rel=1e-6)
        assert result.quality is FixQuality.DGPS

    def test_missing_station_field(self):
        result = decode_gga(PAYLOAD[:-1], Talker.GP)
        assert result is not None
        assert result.station_id is None

    def test_high_precision_coordinates(self):
        payload = "123519.00,4807.03812345,N,01131.00098765,E,4,12,0.5,545.4,M,47.0,M,,"
        result = decode_gga(payload, Talker.GN)
        assert result is not None
        assert result.latitude == pytest.approx(48.11730208, rel=1e-6)
        assert result.longitude == pytest.approx(11.51668313, rel=1e-6)

    def test_wrong_units_is_unrecognized(self):
        payload = "123519,4807.038,N,01131.000,E,1,08,0.9,545.4,F,46.9,M,,"
        assert decode_gga(payload, Talker.GP) is None

    def test_single_digit_satellite_count_is_unrecognized(self):
        payload = "123519,4807.038,N,01131.000,E,1,8,0.9,545.4,M,46.9,M,,"
        assert decode_gga(payload, Talker.GP) is None

    def test_too_few_fields(self):
        assert decode_gga("123519,4807.038,N", Talker.GP) is None

    def test_quality_out_of_range_raises(self):
        payload = "123519,4807.038,N,01131.000,E,9,08,0.9,545.4,M,46.9,M,,"
        with pytest.raises(ValueError):
            decode_gga(payload, Talker.GP)
