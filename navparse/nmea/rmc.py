"""RMC sentence grammar and decoder.

RMC (Recommended Minimum Navigation Information) carries time, date,
position, speed and course in one sentence.

RMC Sentence Format:
    $GPRMC,123519,A,4807.038,N,01131.000,E,022.4,084.4,230394,003.1,W,A*6A
           |      | |        | |         | |     |     |      |     | |
           |      | |        | |         | |     |     |      |     | +-- Mode indicator (optional)
           |      | |        | |         | |     |     |      +-----+-- Magnetic variation + E/W
           |      | |        | |         | |     |     +-- Date (DDMMYY)
           |      | |        | |         | |     +-- Course over ground (degrees true)
           |      | |        | |         | +-- Speed over ground (knots)
           |      | |        | +---------+-- Longitude + E/W
           |      | +--------+-- Latitude + N/S
           |      +-- Status (A = valid, V = void)
           +-- UTC time (HHMMSS.ss)

NMEA 4.1 receivers append a navigational status letter after the mode
indicator; it is accepted but not reported.
"""

from navparse.nmea.fields import (
    LATITUDE_DEGREE_DIGITS,
    LONGITUDE_DEGREE_DIGITS,
    FieldCursor,
    Grammar,
    coordinate_token,
    digits,
    float_token,
    knots_to_meters_per_second,
    one_of,
    optional,
    parse_coordinate,
    parse_date,
    parse_time_of_day,
    signed_coordinate,
    time_token,
)
from navparse.nmea.symbols import (
    LatitudeHemisphere,
    LongitudeHemisphere,
    ModeIndicator,
    Status,
    Talker,
)
from navparse.nmea.types import RMCEvent

# 11 fields up to the variation direction; mode and navigational status follow
_MINIMUM_FIELD_COUNT = 11

RMC = Grammar(
    "RMC",
    [
        time_token(),
        one_of("status", Status, is_optional=False),
        coordinate_token("latitude", LATITUDE_DEGREE_DIGITS),
        one_of("latitude-hemisphere", LatitudeHemisphere),
        coordinate_token("longitude", LONGITUDE_DEGREE_DIGITS),
        one_of("longitude-hemisphere", LongitudeHemisphere),
        float_token("speed"),
        float_token("course"),
        digits("date", 6),
        float_token("magnetic-variation"),
        one_of("magnetic-variation-direction", LongitudeHemisphere),
        one_of("mode", ModeIndicator),
        optional("navigational-status", r"[A-Z]+"),
    ],
    min_fields=_MINIMUM_FIELD_COUNT,
)


def _build_rmc_event(cursor: FieldCursor, talker: Talker) -> RMCEvent:
    time = parse_time_of_day(cursor.next_string())
    status = cursor.next_symbol(Status)

    if status is not Status.VALID:
        # A void fix reports status and time only
        return RMCEvent(
            talker=talker,
            date=None,
            time=time,
            status=status,
            latitude=None,
            longitude=None,
            speed=None,
            course=None,
            magnetic_variation=None,
            magnetic_variation_direction=None,
            mode=None,
        )

    latitude = parse_coordinate(cursor.next_string(), LATITUDE_DEGREE_DIGITS)
    latitude_hemisphere = cursor.next_symbol(LatitudeHemisphere)
    longitude = parse_coordinate(cursor.next_string(), LONGITUDE_DEGREE_DIGITS)
    longitude_hemisphere = cursor.next_symbol(LongitudeHemisphere)
    speed = knots_to_meters_per_second(cursor.next_float())
    course = cursor.next_float(default=0.0)
    date = parse_date(cursor.next_string())
    magnetic_variation = cursor.next_float()
    magnetic_variation_direction = cursor.next_symbol(LongitudeHemisphere)
    mode = cursor.next_symbol(ModeIndicator)

    return RMCEvent(
        talker=talker,
        date=date,
        time=time,
        status=status,
        latitude=signed_coordinate(latitude, latitude_hemisphere),
        longitude=signed_coordinate(longitude, longitude_hemisphere),
        speed=speed,
        course=course,
        magnetic_variation=magnetic_variation,
        magnetic_variation_direction=magnetic_variation_direction,
        mode=mode,
    )


def decode_rmc(payload: str, talker: Talker) -> RMCEvent | None:
    """Decode the payload of an RMC sentence.

    Args:
        payload: Fields after the sentence code, without checksum.
        talker: Talker variant the sentence was received with.

    Returns:
        RMCEvent, or None if the payload does not fit the RMC grammar.

    Raises:
        ValueError: If a matched field cannot be converted (e.g. a time of
            day of 256000 or a date of 320394).
    """
    cursor = RMC.match(payload)
    if cursor is None:
        return None
    return _build_rmc_event(cursor, talker)
