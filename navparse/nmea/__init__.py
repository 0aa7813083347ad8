"""NMEA 0183 sentence layer: envelope, grammars and events for RMC, GGA, GSV and GSA."""

from navparse.nmea.checksum import (
    RawSentence,
    calculate_checksum,
    split_envelope,
    strip_whitespace,
    validate_checksum,
)
from navparse.nmea.gga import decode_gga
from navparse.nmea.gsa import decode_gsa
from navparse.nmea.gsv import decode_gsv
from navparse.nmea.handler import EventRecorder, NMEAHandler
from navparse.nmea.rmc import decode_rmc
from navparse.nmea.symbols import (
    FixQuality,
    FixType,
    LatitudeHemisphere,
    LongitudeHemisphere,
    ModeIndicator,
    SelectionMode,
    Status,
    Talker,
)
from navparse.nmea.types import GGAEvent, GSAEvent, GSVEvent, NMEAEvent, RMCEvent

__all__ = [
    "EventRecorder",
    "FixQuality",
    "FixType",
    "GGAEvent",
    "GSAEvent",
    "GSVEvent",
    "LatitudeHemisphere",
    "LongitudeHemisphere",
    "ModeIndicator",
    "NMEAEvent",
    "NMEAHandler",
    "RMCEvent",
    "RawSentence",
    "SelectionMode",
    "Status",
    "Talker",
    "calculate_checksum",
    "decode_gga",
    "decode_gsa",
    "decode_gsv",
    "decode_rmc",
    "split_envelope",
    "strip_whitespace",
    "validate_checksum",
]
