"""Event types delivered to an ``NMEAHandler``.

Design Decisions:
    1. Optional fields (float | None): NMEA fields may be empty, indicated by
       consecutive commas. Using None distinguishes "no data received" from
       "measured zero". The only documented defaults are RMC course and GSV
       SNR, which decode to 0.0 when absent.

    2. Times are integers in milliseconds. ``time`` is the UTC time of day on
       the 1970-01-01 baseline; RMC ``date`` is midnight UTC of the reported
       day, so ``date + time`` is the full epoch timestamp.

    3. Events are frozen: parsing the same line twice yields equal events.
"""

from dataclasses import dataclass

from navparse.nmea.symbols import (
    FixQuality,
    FixType,
    LongitudeHemisphere,
    ModeIndicator,
    SelectionMode,
    Status,
    Talker,
)


@dataclass(frozen=True)
class _TalkerEvent:
    talker: Talker

    @property
    def is_gn(self) -> bool:
        """True for the combined multi-constellation (GN) variant."""
        return self.talker is Talker.GN


@dataclass(frozen=True)
class RMCEvent(_TalkerEvent):
    """Recommended minimum navigation data.

    When ``status`` is ``Status.VOID`` only ``time`` and ``status`` are set;
    every other attribute is None regardless of the wire content.

    Attributes:
        date: Epoch milliseconds of the reported day (00:00 UTC).
        time: UTC time of day in milliseconds.
        status: Receiver status, A = valid, V = void.
        latitude: Decimal degrees, positive = North.
        longitude: Decimal degrees, positive = East.
        speed: Speed over ground in m/s (converted from knots).
        course: Course over ground in degrees; 0.0 when not reported.
        magnetic_variation: Magnetic variation in degrees.
        magnetic_variation_direction: E or W.
        mode: Positioning system mode indicator (NMEA 2.3+).
    """

    date: int | None
    time: int | None
    status: Status
    latitude: float | None
    longitude: float | None
    speed: float | None
    course: float | None
    magnetic_variation: float | None
    magnetic_variation_direction: LongitudeHemisphere | None
    mode: ModeIndicator | None


@dataclass(frozen=True)
class GGAEvent(_TalkerEvent):
    """Global Positioning System fix data.

    Attributes:
        time: UTC time of day in milliseconds.
        latitude: Decimal degrees, positive = North.
        longitude: Decimal degrees, positive = East.
        altitude: Reported altitude minus geoid separation, in meters.
            None unless both values are present.
        quality: Fix quality indicator.
        satellites: Number of satellites used in the fix.
        hdop: Horizontal dilution of precision.
        differential_age: Age of differential corrections in seconds.
        station_id: Differential reference station id.
    """

    time: int | None
    latitude: float | None
    longitude: float | None
    altitude: float | None
    quality: FixQuality | None
    satellites: int | None
    hdop: float | None
    differential_age: float | None
    station_id: int | None


@dataclass(frozen=True)
class GSVEvent(_TalkerEvent):
    """One satellite in view.

    Attributes:
        satellites_in_view: Total satellites in view across the sentence group.
        index: Zero-based slot of this satellite within the group,
            ``(sentence_index - 1) * 4 + offset_in_line``.
        prn: Satellite PRN number.
        elevation: Elevation in degrees (90 maximum).
        azimuth: Azimuth in degrees from true north.
        snr: Signal-to-noise ratio in dB; 0.0 when not tracking.
    """

    satellites_in_view: int | None
    index: int | None
    prn: int
    elevation: float | None
    azimuth: float | None
    snr: float


@dataclass(frozen=True)
class GSAEvent(_TalkerEvent):
    """DOP and active satellites.

    Attributes:
        mode: 2D/3D selection mode.
        fix_type: No fix, 2D or 3D.
        prns: PRNs of the satellites used in the solution (up to 12).
        pdop: Position dilution of precision.
        hdop: Horizontal dilution of precision.
        vdop: Vertical dilution of precision.
        system_id: GNSS system id from the extended layout, None for the
            legacy layout.
    """

    mode: SelectionMode
    fix_type: FixType
    prns: frozenset[int]
    pdop: float | None
    hdop: float | None
    vdop: float | None
    system_id: int | None = None


NMEAEvent = RMCEvent | GGAEvent | GSVEvent | GSAEvent
