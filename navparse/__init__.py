"""Decoder for NMEA 0183 sentences from GPS/GNSS receivers."""

from navparse.nmea import (
    EventRecorder,
    FixQuality,
    FixType,
    GGAEvent,
    GSAEvent,
    GSVEvent,
    NMEAHandler,
    RMCEvent,
    Talker,
    validate_checksum,
)
from navparse.nmea_parser import SENTENCE_TYPES, NMEAParser, SentenceType

__all__ = [
    "SENTENCE_TYPES",
    "EventRecorder",
    "FixQuality",
    "FixType",
    "GGAEvent",
    "GSAEvent",
    "GSVEvent",
    "NMEAHandler",
    "NMEAParser",
    "RMCEvent",
    "SentenceType",
    "Talker",
    "validate_checksum",
]
