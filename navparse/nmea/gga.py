"""GGA sentence grammar and decoder.

GGA (Global Positioning System Fix Data) is one of the most important NMEA
sentences, providing position fix information including coordinates, altitude,
fix quality, and satellite/accuracy metrics.

GGA Sentence Format:
    $GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*47
           |      |        | |         | | |  |   |     | |    |
           |      |        | |         | | |  |   |     | +----+-- Geoid separation (M=meters)
           |      |        | |         | | |  |   +-----+-- Altitude (M=meters)
           |      |        | |         | | |  +-- HDOP (horizontal dilution)
           |      |        | |         | | +-- Number of satellites
           |      |        | |         | +-- Fix quality (0-8)
           |      |        | +---------+-- Longitude + E/W
           |      +--------+-- Latitude + N/S
           +-- UTC time (HHMMSS.ss)

The two trailing fields (differential age, reference station id) are
usually empty unless the fix is differential.

Fix Quality Values:
    0 = Invalid (no fix)
    1 = GPS fix (SPS - Standard Positioning Service)
    2 = DGPS fix (Differential GPS)
    3 = PPS fix
    4 = RTK Fixed (Real-Time Kinematic, cm-level accuracy)
    5 = RTK Float (RTK converging, dm-level accuracy)
    6 = Estimated (dead reckoning)
    7 = Manual input
    8 = Simulation
"""

from navparse.nmea.fields import (
    LATITUDE_DEGREE_DIGITS,
    LONGITUDE_DEGREE_DIGITS,
    FieldCursor,
    Grammar,
    coordinate_token,
    digits,
    float_token,
    literal,
    one_of,
    parse_coordinate,
    parse_time_of_day,
    signed_coordinate,
    signed_float_token,
    time_token,
)
from navparse.nmea.symbols import (
    FixQuality,
    LatitudeHemisphere,
    LongitudeHemisphere,
    Talker,
)
from navparse.nmea.types import GGAEvent

# GGA has 14 standard fields; some receivers omit the reference station id
_MINIMUM_FIELD_COUNT = 13

# Altitude and geoid separation are always in meters
_METERS = "M"

GGA = Grammar(
    "GGA",
    [
        time_token(),
        coordinate_token("latitude", LATITUDE_DEGREE_DIGITS),
        one_of("latitude-hemisphere", LatitudeHemisphere),
        coordinate_token("longitude", LONGITUDE_DEGREE_DIGITS),
        one_of("longitude-hemisphere", LongitudeHemisphere),
        digits("quality", 1),
        digits("satellites", 2),
        float_token("hdop"),
        signed_float_token("altitude"),
        literal("altitude-units", _METERS),
        signed_float_token("separation"),
        literal("separation-units", _METERS),
        float_token("differential-age"),
        digits("station-id", 4),
    ],
    min_fields=_MINIMUM_FIELD_COUNT,
)


def _altitude_above_geoid(
    altitude: float | None,
    separation: float | None,
) -> float | None:
    """Combine altitude and geoid separation; None unless both are present."""
    if altitude is None or separation is None:
        return None
    return altitude - separation


def _build_gga_event(cursor: FieldCursor, talker: Talker) -> GGAEvent:
    """Construct a GGAEvent from matched fields.

    Maps NMEA field positions to GGAEvent attributes:
        1  -> time (HHMMSS.ss format)
        2  -> latitude (DDMM.MMMM format)
        3  -> latitude direction (N/S)
        4  -> longitude (DDDMM.MMMM format)
        5  -> longitude direction (E/W)
        6  -> quality (0-8)
        7  -> satellites
        8  -> HDOP
        9  -> altitude (combined with 11)
        11 -> geoid separation
        13 -> differential age
        14 -> reference station id
    """
    time = parse_time_of_day(cursor.next_string())
    latitude = parse_coordinate(cursor.next_string(), LATITUDE_DEGREE_DIGITS)
    latitude_hemisphere = cursor.next_symbol(LatitudeHemisphere)
    longitude = parse_coordinate(cursor.next_string(), LONGITUDE_DEGREE_DIGITS)
    longitude_hemisphere = cursor.next_symbol(LongitudeHemisphere)
    quality = cursor.next_indexed(FixQuality)
    satellites = cursor.next_int()
    hdop = cursor.next_float()
    altitude = cursor.next_float()
    cursor.skip()  # altitude units
    separation = cursor.next_float()
    cursor.skip()  # separation units
    differential_age = cursor.next_float()
    station_id = cursor.next_int()

    return GGAEvent(
        talker=talker,
        time=time,
        latitude=signed_coordinate(latitude, latitude_hemisphere),
        longitude=signed_coordinate(longitude, longitude_hemisphere),
        altitude=_altitude_above_geoid(altitude, separation),
        quality=quality,
        satellites=satellites,
        hdop=hdop,
        differential_age=differential_age,
        station_id=station_id,
    )


def decode_gga(payload: str, talker: Talker) -> GGAEvent | None:
    """Decode the payload of a GGA sentence.

    Args:
        payload: Fields after the sentence code, without checksum.
        talker: Talker variant the sentence was received with.

    Returns:
        GGAEvent, or None if the payload does not fit the GGA grammar.

    Raises:
        ValueError: If a matched field cannot be converted, e.g. a fix
            quality of 9.
    """
    cursor = GGA.match(payload)
    if cursor is None:
        return None
    return _build_gga_event(cursor, talker)
