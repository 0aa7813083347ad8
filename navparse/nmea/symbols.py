"""Closed symbol sets used inline by the sentence grammars.

Several NMEA fields may only carry one of a handful of letters (fix status,
hemisphere, selection mode) or a small positional digit (fix quality, fix
type). Grammar tokens check the extracted field against these tables by
membership; a value outside the set makes the whole sentence unrecognized.

Integer enums are looked up by value while decoding, so an out-of-range digit
raises ``ValueError`` and is reported as a field-decode failure.
"""

from enum import Enum, IntEnum


class Status(str, Enum):
    """RMC receiver status."""

    VALID = "A"
    VOID = "V"


class LatitudeHemisphere(str, Enum):
    NORTH = "N"
    SOUTH = "S"


class LongitudeHemisphere(str, Enum):
    """East/West indicator, also used for RMC magnetic variation."""

    EAST = "E"
    WEST = "W"


class SelectionMode(str, Enum):
    """GSA 2D/3D selection mode.

    A = Automatic, allowed to switch between 2D and 3D
    M = Manual, forced to operate in 2D or 3D
    """

    AUTOMATIC = "A"
    MANUAL = "M"


class ModeIndicator(str, Enum):
    """Positioning system mode indicator (NMEA 2.3+)."""

    AUTONOMOUS = "A"
    DIFFERENTIAL = "D"
    ESTIMATED = "E"
    MANUAL = "M"
    SIMULATOR = "S"
    NOT_VALID = "N"


class FixQuality(IntEnum):
    """GGA fix quality, indexed by the wire digit (0-8)."""

    INVALID = 0
    GPS = 1
    DGPS = 2
    PPS = 3
    RTK = 4
    FLOAT_RTK = 5
    ESTIMATED = 6
    MANUAL = 7
    SIMULATION = 8


class FixType(IntEnum):
    """GSA fix type, indexed by the wire digit.

    Receivers report 1 for no fix, 2 for a 2D fix and 3 for a 3D fix;
    0 is kept so that every single digit below 4 has a member.
    """

    INVALID = 0
    NONE = 1
    FIX_2D = 2
    FIX_3D = 3


class Talker(str, Enum):
    """Talker variant of a recognized sentence.

    GP = GPS only
    GN = combined multi-constellation solution
    """

    GP = "GP"
    GN = "GN"


def symbols(enum: type[Enum]) -> frozenset[str]:
    """Return the wire values of a symbol set, e.g. ``{"A", "V"}``."""
    return frozenset(str(member.value) for member in enum)
